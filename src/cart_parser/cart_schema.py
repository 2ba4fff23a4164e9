"""
Cart Schema
Cell predicates, the built-in cell rules, and the default cart column list.
"""

from __future__ import annotations

import re

from .models import CellRule, Column, Schema


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------

def _is_nonempty_string(value: str) -> bool:
    return bool(value and value.strip())


_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def _parse_number(value: str) -> float:
    """Parse a plain decimal cell; raises ValueError for anything else."""
    text = value.strip()
    if not _NUMBER_RE.match(text):
        raise ValueError(f"not a number: {value}")
    return float(text)


def _is_positive_number(value: str) -> bool:
    try:
        return _parse_number(value) > 0
    except (ValueError, AttributeError):
        return False


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

NONEMPTY_STRING = CellRule(
    rule_id="nonempty",
    predicate=_is_nonempty_string,
    message_template='Expected cell to be a nonempty string but received "{value}".',
)

POSITIVE_NUMBER = CellRule(
    rule_id="positive-number",
    predicate=_is_positive_number,
    message_template='Expected cell to be a positive number but received "{value}".',
)


# ---------------------------------------------------------------------------
# Default cart columns (in order)
# ---------------------------------------------------------------------------

DEFAULT_COLUMNS = (
    Column(name="Product name", type="string", validate=(NONEMPTY_STRING,)),
    Column(name="Price",        type="number", validate=(POSITIVE_NUMBER,)),
    Column(name="Quantity",     type="number", validate=(POSITIVE_NUMBER,)),
)


def default_schema() -> Schema:
    """Return the stock cart schema: Product name, Price, Quantity."""
    return Schema(columns=DEFAULT_COLUMNS)
