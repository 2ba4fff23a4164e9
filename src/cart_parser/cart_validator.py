"""
Cart Validator
Walks raw cart text against the Schema and collects every header, row and
cell error with its zero-based row/column position.
"""

from __future__ import annotations

from typing import List, Optional

from .models import Schema, ValidationError
from .rule_engine import CartRuleEngine, split_cells


def split_lines(contents: str) -> List[str]:
    """Return the non-blank lines of *contents*, trimmed.

    Blank lines are dropped before indexing, so index 0 is the header.
    """
    return [line.strip() for line in contents.splitlines() if line.strip()]


class CartValidator:
    """Validate cart file contents against a Schema."""

    def __init__(
        self,
        schema: Schema,
        rule_engine: Optional[CartRuleEngine] = None,
    ) -> None:
        self.schema = schema
        self.rules = rule_engine or CartRuleEngine(schema)

    def validate(self, contents: str) -> List[ValidationError]:
        """Return all errors in header, row, column order (empty when valid)."""
        errors: List[ValidationError] = []
        lines = split_lines(contents)
        if not lines:
            return errors

        header_error = self.rules.check_header(lines[0])
        if header_error:
            errors.append(header_error)

        for row_index in range(1, len(lines)):
            cells = split_cells(lines[row_index], self.rules.delimiter)

            # A malformed row gets no cell-level checks
            row_error = self.rules.check_row(cells, row_index)
            if row_error:
                errors.append(row_error)
                continue

            for column_index, column in enumerate(self.schema.columns):
                cell_error = self.rules.check_cell(
                    cells[column_index], column, row_index, column_index
                )
                if cell_error:
                    errors.append(cell_error)

        return errors
