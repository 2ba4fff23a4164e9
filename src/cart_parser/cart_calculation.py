"""
Cart Calculation
Cart total and tolerance-based total comparison.
"""

from __future__ import annotations

from typing import Iterable, Optional

from . import cart_config as cfg
from .models import CartItem


class CartCalculation:
    """Cart total utilities."""

    def __init__(self, tolerance: Optional[float] = None) -> None:
        self.tolerance = cfg.TOTAL_TOLERANCE if tolerance is None else tolerance

    @staticmethod
    def calc_total(items: Iterable[CartItem]) -> float:
        """Sum price * quantity over all items, without rounding."""
        total = 0.0
        for item in items:
            total += item.price * item.quantity
        return total

    def totals_match(self, actual: float, expected: float) -> bool:
        """Return True when two totals differ by no more than the tolerance."""
        return abs(actual - expected) <= self.tolerance
