"""
Cart Loader Service
Turns validated cart lines into CartItem objects.
"""

from __future__ import annotations

import uuid
from typing import Callable, List, Optional

from .models import CartItem
from .rule_engine import split_cells


def new_id() -> str:
    """Return a fresh unique id for a cart item."""
    return str(uuid.uuid4())


class CartLoaderService:
    """Parse already-validated cart lines into CartItems."""

    def __init__(
        self,
        id_generator: Optional[Callable[[], str]] = None,
        delimiter: Optional[str] = None,
    ) -> None:
        self.id_generator = id_generator or new_id
        self.delimiter = delimiter

    def parse_line(
        self,
        raw_line: str,
        id_generator: Optional[Callable[[], str]] = None,
    ) -> CartItem:
        """Build a CartItem from one data line.

        The line must already have passed validation; numbers are not
        re-checked here.
        """
        cells = split_cells(raw_line, self.delimiter)
        make_id = id_generator or self.id_generator
        return CartItem(
            id=make_id(),
            name=cells[0],
            price=float(cells[1]),
            quantity=float(cells[2]),
        )

    def load(self, data_lines: List[str]) -> List[CartItem]:
        """Parse every data line in order."""
        return [self.parse_line(line) for line in data_lines]
