"""Static menu data."""

from __future__ import annotations

from decimal import Decimal

from app.constant import MENU_ITEMS_RAW
from app.models import MenuCategory, MenuItem


def build_menu_items() -> list[MenuItem]:
    """Wrap raw menu rows into fresh MenuItem instances."""
    return [
        MenuItem(
            name=row["name"],
            price=Decimal(row["price"]),
            category=MenuCategory(row["category"]),
            image_name=row["image_name"],
        )
        for row in MENU_ITEMS_RAW
    ]
