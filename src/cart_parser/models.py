"""
Cart Parser Data Models
Dataclasses for structured data passing between Cart Parser components.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Schema models
# ---------------------------------------------------------------------------

class ErrorType(str, Enum):
    """Kinds of validation error reported for a cart file."""
    HEADER = "header"
    ROW = "row"
    CELL = "cell"


@dataclass(frozen=True)
class CellRule:
    """A predicate over one cell's raw text plus the message used on failure.

    ``message_template`` may contain ``{value}``, replaced by the raw cell text.
    """
    rule_id: str
    predicate: Callable[[str], bool]
    message_template: str

    def passes(self, value: str) -> bool:
        return self.predicate(value)

    def format_message(self, value: str) -> str:
        return self.message_template.format(value=value)


@dataclass(frozen=True)
class Column:
    """An expected column: header name, value type and per-cell rules."""
    name: str
    type: str = "string"  # string or number
    validate: Tuple[CellRule, ...] = ()


@dataclass(frozen=True)
class Schema:
    """Ordered column definitions; order fixes header and cell positions."""
    columns: Tuple[Column, ...] = ()

    @property
    def column_names(self) -> List[str]:
        return [c.name for c in self.columns]

    def __len__(self) -> int:
        return len(self.columns)


# ---------------------------------------------------------------------------
# Validation models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValidationError:
    """A single header, row or cell problem found in the cart file.

    ``row`` and ``column`` are zero-based; ``column`` is -1 for row errors.
    """
    type: ErrorType
    row: int
    column: int
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "row": self.row,
            "column": self.column,
            "message": self.message,
        }


class CartValidationError(ValueError):
    """Raised by CartParser.parse when the cart file fails validation."""

    def __init__(
        self,
        errors: List[ValidationError],
        message: str = "Validation failed!",
    ) -> None:
        super().__init__(message)
        self.errors = list(errors)

    def to_dict_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.errors]


# ---------------------------------------------------------------------------
# Cart models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CartItem:
    """One parsed cart line."""
    id: str
    name: str
    price: float
    quantity: float

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class CartResult:
    """Parsed cart items together with their total."""
    items: Tuple[CartItem, ...] = field(default_factory=tuple)
    total: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "total": self.total,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
