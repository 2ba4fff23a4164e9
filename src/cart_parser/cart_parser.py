"""
Cart Parser
Reads a cart file, validates it (fail fast), parses every data row and
computes the cart total.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from . import cart_config as cfg
from .cart_calculation import CartCalculation
from .cart_loader_service import CartLoaderService, new_id
from .cart_logger import CartLogger
from .cart_schema import default_schema
from .cart_validator import CartValidator, split_lines
from .models import (
    CartItem,
    CartResult,
    CartValidationError,
    ErrorType,
    Schema,
    ValidationError,
)


def read_text(path: str) -> str:
    """Read the whole file at *path*; OSError propagates to the caller."""
    with open(path, "r", encoding=cfg.FILE_ENCODING) as fh:
        return fh.read()


class CartParser:
    """Validate and parse cart CSV files into CartResult objects."""

    ErrorType = ErrorType

    def __init__(
        self,
        schema: Optional[Schema] = None,
        reader: Optional[Callable[[str], str]] = None,
        id_generator: Optional[Callable[[], str]] = None,
        logger: Optional[CartLogger] = None,
    ) -> None:
        self.schema = schema or default_schema()
        self._check_schema(self.schema)
        self.reader = reader or read_text
        self.validator = CartValidator(self.schema)
        self.loader = CartLoaderService(id_generator=id_generator or new_id)
        self.calculation = CartCalculation()
        self.logger = logger or CartLogger()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def parse(self, source_path: str) -> CartResult:
        """Parse the cart file at *source_path*.

        Raises:
            CartValidationError: the file has header, row or cell errors.
            OSError: the file cannot be read.
        """
        self.logger.log_parse_start(source_path)
        contents = self.reader(source_path)

        errors = self.validate(contents)
        if errors:
            self.logger.log_validation_errors(source_path, errors)
            raise CartValidationError(errors)

        data_lines = split_lines(contents)[1:]
        items = self.loader.load(data_lines)
        result = CartResult(items=tuple(items), total=self.calc_total(items))

        self.logger.log_parse_complete(source_path, result)
        return result

    def validate(self, contents: str) -> List[ValidationError]:
        return self.validator.validate(contents)

    def parse_line(
        self,
        csv_line: str,
        id_generator: Optional[Callable[[], str]] = None,
    ) -> CartItem:
        return self.loader.parse_line(csv_line, id_generator)

    def calc_total(self, items: Iterable[CartItem]) -> float:
        return self.calculation.calc_total(items)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _check_schema(schema: Schema) -> None:
        """Reject schemas whose rows cannot become CartItems.

        Rows are read as name, price, quantity, so the schema needs
        exactly those three columns with numeric price and quantity.
        """
        if len(schema.columns) != 3:
            raise ValueError(
                f"Cart schema must have 3 columns (name, price, quantity), "
                f"got {len(schema.columns)}"
            )
        for column in schema.columns[1:]:
            if column.type != "number":
                raise ValueError(
                    f"Cart schema column '{column.name}' must be of type number, "
                    f"got {column.type}"
                )
