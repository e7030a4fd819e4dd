"""Formatting helpers for prices, cart lines and category tags."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from app.cart import Cart
from app.config import CURRENCY_SYMBOL, PRICE_DECIMALS
from app.constant import CATEGORY_BADGE_STYLES, EMPTY_CART_BUTTON_LABEL, LINE_TOTAL_STYLE
from app.models import MenuCategory, MenuItem, OrderLine


def format_price(price: Decimal) -> str:
    """Menu-card price with trailing zeros dropped ($39, $1.3, $9.99)."""
    return f"{CURRENCY_SYMBOL}{price.normalize():,f}"


def format_currency(amount: Decimal) -> str:
    """Currency amount with a fixed number of decimals ($24.97)."""
    return f"{CURRENCY_SYMBOL}{amount:,.{PRICE_DECIMALS}f}"


def place_order_label(cart: Cart) -> str:
    """Label of the place-order action for the current cart."""
    if cart.is_empty:
        return EMPTY_CART_BUTTON_LABEL
    return f"Place Order (Total: {format_price(cart.total_price())})"


def category_badge_style(category: MenuCategory) -> str:
    """Return a consistent badge style for category tags."""
    return CATEGORY_BADGE_STYLES.get(MenuCategory(category).value, "bold")


def format_category_tag(category: MenuCategory) -> Text:
    return Text(f" {MenuCategory(category).value} ", style=category_badge_style(category))


def format_menu_item(item: MenuItem) -> Text:
    """Render a menu row: name, price and category tag."""
    text = Text()
    text.append(item.name, style="bold")
    text.append(f"  {format_price(item.price)}  ")
    text.append_text(format_category_tag(item.category))
    return text


def format_line_label(line: OrderLine) -> Text:
    """Render a cart row: name, category tag, line total and quantity."""
    text = Text()
    text.append(line.item.name, style="bold")
    text.append(" ")
    text.append_text(format_category_tag(line.item.category))
    text.append(" ")
    text.append(format_currency(line.line_total), style=LINE_TOTAL_STYLE)
    text.append(f"  x{line.quantity}")
    return text


def format_category_bar(active: MenuCategory) -> Text:
    """Render the segmented category filter with the active one highlighted."""
    text = Text()
    for idx, category in enumerate(MenuCategory.filters()):
        if idx > 0:
            text.append(" ")
        label = f" {idx + 1}:{category.value} "
        if category is active:
            text.append(label, style="bold reverse")
        else:
            text.append(label, style="dim")
    return text
