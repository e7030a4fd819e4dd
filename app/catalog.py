"""Menu catalog and category queries."""

from __future__ import annotations

from typing import Iterable

from app.data import build_menu_items
from app.models import MenuCategory, MenuItem


class Catalog:
    """Read-only list of menu items available for ordering."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        self._items: tuple[MenuItem, ...] = tuple(items)

    @classmethod
    def sample(cls) -> Catalog:
        """Catalog built from the static sample menu."""
        return cls(build_menu_items())

    @property
    def items(self) -> tuple[MenuItem, ...]:
        return self._items

    def filter_by_category(self, category: MenuCategory | str) -> list[MenuItem]:
        """Items in the given category, in catalog order. ALL returns everything."""
        category = MenuCategory(category)
        if category is MenuCategory.ALL:
            return list(self._items)
        return [item for item in self._items if item.category is category]
