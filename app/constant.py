"""Editable static menu configuration."""

from __future__ import annotations

# Display order of the category filter bar. "All" is a filter, never an item category.
CATEGORY_FILTER_ORDER: list[str] = ["All", "Main", "Side", "Dessert"]

# Canonical menu values consumed by app.data (which wraps these into MenuItem instances).
MENU_ITEMS_RAW: list[dict[str, str]] = [
    {"image_name": "steak", "name": "Steak", "price": "39.00", "category": "Main"},
    {"image_name": "frenchfries", "name": "French Fries", "price": "9.99", "category": "Side"},
    {"image_name": "chococake", "name": "Chocolate Cake", "price": "4.99", "category": "Dessert"},
    {"image_name": "pizza", "name": "Pizza(1pc.)", "price": "1.99", "category": "Main"},
    {"image_name": "salad", "name": "Salad", "price": "8.99", "category": "Side"},
    {"image_name": "icecream", "name": "Ice Cream", "price": "1.30", "category": "Dessert"},
]

CATEGORY_BADGE_STYLES: dict[str, str] = {
    "Main": "bold #ffffff on #b23a48",
    "Side": "bold #ffffff on #2f6db5",
    "Dessert": "bold #0b1f0f on #5fbf72",
}

LINE_TOTAL_STYLE = "bold #ffffff on #2f6db5"

EMPTY_CART_MESSAGE = "Add Items to Order"
EMPTY_CART_BUTTON_LABEL = "Your Cart is Empty"
