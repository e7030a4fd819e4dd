"""Shared fixtures for kiosk tests."""

from decimal import Decimal

import pytest

from app import config
from app.cart import Cart
from app.catalog import Catalog
from app.models import MenuCategory, MenuItem
from app.session import KioskSession


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Send the debug log to a per-test file."""
    path = tmp_path / "kiosk-debug.log"
    monkeypatch.setattr(config, "DEBUG_LOG_PATH", str(path))
    return path


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.sample()


@pytest.fixture
def cart() -> Cart:
    return Cart()


@pytest.fixture
def session(catalog: Catalog) -> KioskSession:
    return KioskSession(catalog=catalog)


@pytest.fixture
def fries() -> MenuItem:
    return MenuItem(name="French Fries", price=Decimal("9.99"), category=MenuCategory.SIDE)


@pytest.fixture
def cake() -> MenuItem:
    return MenuItem(name="Chocolate Cake", price=Decimal("4.99"), category=MenuCategory.DESSERT)
