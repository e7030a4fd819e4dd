"""Main Textual app class."""

from __future__ import annotations

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from app.cart import CartResult
from app.constant import EMPTY_CART_MESSAGE
from app.debug_log import log_debug
from app.models import MenuCategory, MenuItem, OrderLine
from app.rendering import format_category_bar, format_line_label, format_menu_item, place_order_label
from app.session import KioskSession

_RESULT_MESSAGES: dict[CartResult, str] = {
    CartResult.ADDED: "Added to cart",
    CartResult.DUPLICATE: "Menu already in cart",
    CartResult.UPDATED: "Quantity updated",
    CartResult.AT_LIMIT: "Quantity limit reached",
    CartResult.REMOVED: "Removed from cart",
    CartResult.NOT_FOUND: "Line no longer in cart",
    CartResult.ORDER_PLACED: "Order placed",
    CartResult.EMPTY: "The cart is empty",
}


class KioskApp(App):
    """A Textual kiosk for browsing the menu and placing an order."""

    TITLE = "Kiosk"
    SUB_TITLE = "Main / Side / Dessert"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #cart-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #category-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 3;
    }

    #menu-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #order-bar {
        border: heavy $primary;
        padding: 0 1;
        height: 4;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    category = reactive(MenuCategory.ALL)
    menu_index = reactive(0)
    cart_index = reactive(None)

    BINDINGS = [
        ("left", "cycle_category(-1)", "Previous category"),
        ("right", "cycle_category(1)", "Next category"),
        ("up", "move_menu(-1)", "Previous item"),
        ("down", "move_menu(1)", "Next item"),
        ("enter", "add_selected", "Add to cart"),
        Binding("ctrl+s", "place_order", "Place order", priority=True),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: KioskSession | None = None) -> None:
        super().__init__()
        self.session = session if session is not None else KioskSession.new()
        self.system_status = ""
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static(id="category-bar")
                yield Static(id="menu-list")
            with Vertical(id="cart-pane"):
                yield Static("Cart", classes="pane-title")
                yield Static(EMPTY_CART_MESSAGE, id="cart-list")
        yield Static(id="order-bar")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        log_debug(f"on_key key={event.key!r} char={event.character!r} printable={event.is_printable}")

        key = event.key.lower()
        if key in {"1", "2", "3", "4"}:
            self._select_category(MenuCategory.filters()[int(key) - 1])
        elif key == "a":
            self.action_add_selected()
        elif key == "j":
            self._move_cart_selection(1)
        elif key == "k":
            self._move_cart_selection(-1)
        elif key in {"plus", "equals_sign"}:
            self._change_selected_quantity(1)
        elif key == "minus":
            self._change_selected_quantity(-1)
        elif key == "d":
            self._remove_selected_line()
        else:
            return
        event.stop()

    def action_cycle_category(self, delta: int) -> None:
        filters = MenuCategory.filters()
        idx = filters.index(self.category)
        self._select_category(filters[(idx + delta) % len(filters)])

    def action_move_menu(self, delta: int) -> None:
        items = self._visible_menu()
        if not items:
            self.menu_index = 0
            self._refresh_menu()
            return
        self.menu_index = (self.menu_index + delta) % len(items)
        self._refresh_menu()

    def action_add_selected(self) -> None:
        items = self._visible_menu()
        if not items:
            return
        item = items[min(self.menu_index, len(items) - 1)]
        result = self.session.cart.add_item(item)
        log_debug(f"add_item name={item.name!r} result={result.value}")
        if result is CartResult.ADDED:
            self.cart_index = len(self.session.cart) - 1
        self._report(result)

    def action_place_order(self) -> None:
        log_debug(f"place_order_enter lines={len(self.session.cart)}")
        result = self.session.cart.place_order()
        if result is CartResult.ORDER_PLACED:
            self.cart_index = None
        self._report(result)

    def selected_line(self) -> OrderLine | None:
        lines = self.session.cart.lines
        if self.cart_index is None or not (0 <= self.cart_index < len(lines)):
            return None
        return lines[self.cart_index]

    def _visible_menu(self) -> list[MenuItem]:
        return self.session.catalog.filter_by_category(self.category)

    def _select_category(self, category: MenuCategory) -> None:
        self.category = category
        self.menu_index = 0
        self._refresh_category_bar()
        self._refresh_menu()

    def _move_cart_selection(self, delta: int) -> None:
        count = len(self.session.cart)
        if not count:
            return

        if self.cart_index is None:
            self.cart_index = 0 if delta > 0 else count - 1
        else:
            self.cart_index = (self.cart_index + delta) % count
        self._refresh_cart()

    def _change_selected_quantity(self, delta: int) -> None:
        line = self.selected_line()
        if line is None:
            return
        if delta > 0:
            result = self.session.cart.increment_quantity(line.line_id)
        else:
            result = self.session.cart.decrement_quantity(line.line_id)
        self._report(result)

    def _remove_selected_line(self) -> None:
        line = self.selected_line()
        if line is None:
            return

        idx = self.cart_index
        result = self.session.cart.remove_line(line.line_id)
        count = len(self.session.cart)
        if not count:
            self.cart_index = None
        else:
            self.cart_index = min(idx, count - 1)
        self._report(result)

    def _report(self, result: CartResult) -> None:
        self.system_status = _RESULT_MESSAGES[result]
        self._refresh_cart()
        self._refresh_order_bar()

    def _refresh_all(self) -> None:
        self._refresh_category_bar()
        self._refresh_menu()
        self._refresh_cart()
        self._refresh_order_bar()

    def _visible_rows(self, widget: Static) -> int:
        height = widget.size.height
        if height <= 0:
            return 8
        return max(1, height)

    def _window_bounds(self, total: int, rows: int, selected: int | None) -> tuple[int, int]:
        if total <= 0:
            return (0, 0)

        rows = max(1, rows)
        if total <= rows:
            return (0, total)

        if selected is None:
            start = 0
        else:
            start = max(0, selected - rows // 2)
            start = min(start, total - rows)

        return (start, start + rows)

    def _refresh_category_bar(self) -> None:
        try:
            bar = self.query_one("#category-bar", Static)
        except NoMatches:
            return
        bar.update(format_category_bar(self.category))

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        items = self._visible_menu()
        if not items:
            menu_widget.update("No items")
            return

        if self.menu_index >= len(items):
            self.menu_index = 0

        start, end = self._window_bounds(len(items), self._visible_rows(menu_widget), self.menu_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.menu_index else "  "
            lines.append(pointer)
            lines.append_text(format_menu_item(items[idx]))

        if end < len(items):
            lines.append("\n⋮", style="dim")

        menu_widget.update(lines)

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
        except NoMatches:
            return
        cart_lines = self.session.cart.lines
        if not cart_lines:
            self.cart_index = None
            cart_widget.update(EMPTY_CART_MESSAGE)
            return

        if self.cart_index is not None and self.cart_index >= len(cart_lines):
            self.cart_index = len(cart_lines) - 1

        start, end = self._window_bounds(len(cart_lines), self._visible_rows(cart_widget), self.cart_index)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")

        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            pointer = "➤ " if idx == self.cart_index else "  "
            lines.append(pointer)
            lines.append(f"{idx + 1}. ")
            lines.append_text(format_line_label(cart_lines[idx]))

        if end < len(cart_lines):
            lines.append("\n⋮", style="dim")

        cart_widget.update(lines)

    def _refresh_order_bar(self) -> None:
        try:
            bar = self.query_one("#order-bar", Static)
        except NoMatches:
            return
        text = Text()
        label_style = "dim" if self.session.cart.is_empty else "bold"
        text.append(place_order_label(self.session.cart), style=label_style)
        text.append("  (Ctrl+S)", style="dim")
        text.append(f"\n{self.system_status or 'Ready'}")
        bar.update(text)
