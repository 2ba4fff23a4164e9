"""
Cart Rule Engine
Structural (header, row length) and per-cell checks against a cart Schema.
Each check returns a ValidationError on failure, otherwise None.
"""

from __future__ import annotations

from typing import List, Optional

from . import cart_config as cfg
from .models import Column, ErrorType, Schema, ValidationError


def split_cells(line: str, delimiter: Optional[str] = None) -> List[str]:
    """Split a raw line into trimmed cells."""
    return [cell.strip() for cell in line.split(delimiter or cfg.CSV_DELIMITER)]


class CartRuleEngine:
    """Apply header, row and cell rules from a Schema."""

    def __init__(self, schema: Schema, delimiter: Optional[str] = None) -> None:
        self.schema = schema
        self.delimiter = delimiter or cfg.CSV_DELIMITER

    # ------------------------------------------------------------------
    # Structural checks
    # ------------------------------------------------------------------

    def check_header(self, raw_header_line: str) -> Optional[ValidationError]:
        """Compare header cells with the schema column names.

        Only positions present in both are compared; the first name
        mismatch is reported. A differing header length is not an error.
        """
        header_cells = split_cells(raw_header_line, self.delimiter)

        for idx, (actual, column) in enumerate(zip(header_cells, self.schema.columns)):
            if actual != column.name:
                return ValidationError(
                    type=ErrorType.HEADER,
                    row=0,
                    column=idx,
                    message=(
                        f'Expected header to be named "{column.name}" '
                        f"but received {actual}."
                    ),
                )
        return None

    def check_row(self, cells: List[str], row_index: int) -> Optional[ValidationError]:
        """Report a row whose cell count differs from the column count."""
        expected = len(self.schema.columns)
        if len(cells) != expected:
            return ValidationError(
                type=ErrorType.ROW,
                row=row_index,
                column=-1,
                message=f"Expected row to have {expected} cells but received {len(cells)}.",
            )
        return None

    # ------------------------------------------------------------------
    # Cell checks
    # ------------------------------------------------------------------

    def check_cell(
        self,
        raw_value: str,
        column: Column,
        row_index: int,
        column_index: int,
    ) -> Optional[ValidationError]:
        """Run the column's rules in order; the first failure wins."""
        for rule in column.validate:
            if not rule.passes(raw_value):
                return ValidationError(
                    type=ErrorType.CELL,
                    row=row_index,
                    column=column_index,
                    message=rule.format_message(raw_value),
                )
        return None
