"""In-memory cart of order lines."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Iterator

from app.config import PRICE_DECIMALS, QUANTITY_MAX, QUANTITY_MIN
from app.debug_log import log_debug
from app.models import MenuItem, OrderLine

_TOTAL_QUANT = Decimal(1).scaleb(-PRICE_DECIMALS)


class CartResult(str, Enum):
    """Outcome of a cart operation. Rule violations are reported, never raised."""

    ADDED = "added"
    DUPLICATE = "duplicate"
    UPDATED = "updated"
    AT_LIMIT = "at_limit"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    ORDER_PLACED = "order_placed"
    EMPTY = "empty"


class Cart:
    """Ordered order lines for one kiosk session.

    At most one line exists per item name. Adding an item that is already in
    the cart leaves the cart untouched rather than bumping the quantity.
    Quantities stay within [QUANTITY_MIN, QUANTITY_MAX].
    """

    def __init__(self) -> None:
        self._lines: list[OrderLine] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[OrderLine]:
        return iter(tuple(self._lines))

    @property
    def lines(self) -> tuple[OrderLine, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def contains_item(self, item: MenuItem) -> bool:
        return any(line.item.name == item.name for line in self._lines)

    def find_line(self, line_id: str) -> OrderLine | None:
        for line in self._lines:
            if line.line_id == line_id:
                return line
        return None

    def add_item(self, item: MenuItem) -> CartResult:
        if self.contains_item(item):
            log_debug(f"cart_add_duplicate name={item.name!r}")
            return CartResult.DUPLICATE
        self._lines.append(OrderLine(item=item, quantity=QUANTITY_MIN))
        return CartResult.ADDED

    def increment_quantity(self, line_id: str) -> CartResult:
        line = self.find_line(line_id)
        if line is None:
            log_debug(f"cart_increment_not_found line_id={line_id!r}")
            return CartResult.NOT_FOUND
        if line.quantity >= QUANTITY_MAX:
            return CartResult.AT_LIMIT
        line.quantity += 1
        return CartResult.UPDATED

    def decrement_quantity(self, line_id: str) -> CartResult:
        line = self.find_line(line_id)
        if line is None:
            log_debug(f"cart_decrement_not_found line_id={line_id!r}")
            return CartResult.NOT_FOUND
        if line.quantity <= QUANTITY_MIN:
            return CartResult.AT_LIMIT
        line.quantity -= 1
        return CartResult.UPDATED

    def remove_line(self, line_id: str) -> CartResult:
        for idx, line in enumerate(self._lines):
            if line.line_id == line_id:
                del self._lines[idx]
                return CartResult.REMOVED
        log_debug(f"cart_remove_not_found line_id={line_id!r}")
        return CartResult.NOT_FOUND

    def total_price(self) -> Decimal:
        """Sum of line totals, rounded half away from zero to cents."""
        total = sum((line.line_total for line in self._lines), Decimal(0))
        return total.quantize(_TOTAL_QUANT, rounding=ROUND_HALF_UP)

    def place_order(self) -> CartResult:
        if not self._lines:
            log_debug("place_order_blocked reason=empty_cart")
            return CartResult.EMPTY
        log_debug(f"place_order_accepted lines={len(self._lines)} total={self.total_price()}")
        self._lines.clear()
        return CartResult.ORDER_PLACED
