"""Domain models for the kiosk."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from uuid import uuid4

from app.config import QUANTITY_MAX, QUANTITY_MIN
from app.constant import CATEGORY_FILTER_ORDER


def _new_id() -> str:
    return uuid4().hex


class MenuCategory(str, Enum):
    """Menu category. ALL only ever appears as a filter value."""

    ALL = "All"
    MAIN = "Main"
    SIDE = "Side"
    DESSERT = "Dessert"

    @classmethod
    def filters(cls) -> list[MenuCategory]:
        """Categories in filter-bar order."""
        return [cls(value) for value in CATEGORY_FILTER_ORDER]


@dataclass(frozen=True)
class MenuItem:
    """A catalog entry available for ordering."""

    name: str
    price: Decimal
    category: MenuCategory
    image_name: str = ""
    item_id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            try:
                object.__setattr__(self, "price", Decimal(str(self.price)))
            except InvalidOperation as exc:
                raise ValueError(f"price is not a number: {self.price!r}") from exc
        if not isinstance(self.category, MenuCategory):
            object.__setattr__(self, "category", MenuCategory(self.category))
        if not self.price.is_finite():
            raise ValueError(f"price must be finite, got {self.price}")
        if self.price < 0:
            raise ValueError(f"price must be >= 0, got {self.price}")
        if self.category is MenuCategory.ALL:
            raise ValueError("'All' is a filter, not an item category")

    def whole_price(self) -> int:
        """Dollar part of the price, truncated."""
        return int(self.price)


@dataclass
class OrderLine:
    """One cart row: a menu item and how many of it."""

    item: MenuItem
    quantity: int = 1
    line_id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not (QUANTITY_MIN <= self.quantity <= QUANTITY_MAX):
            raise ValueError(f"quantity must be between {QUANTITY_MIN} and {QUANTITY_MAX}, got {self.quantity}")

    @property
    def line_total(self) -> Decimal:
        return self.item.price * self.quantity
