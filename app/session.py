"""Session context owning one catalog and one cart."""

from __future__ import annotations

from dataclasses import dataclass, field

from app.cart import Cart
from app.catalog import Catalog


@dataclass
class KioskSession:
    """Everything one kiosk screen mutates, passed in explicitly."""

    catalog: Catalog
    cart: Cart = field(default_factory=Cart)

    @classmethod
    def new(cls) -> KioskSession:
        """Fresh empty cart over the sample catalog."""
        return cls(catalog=Catalog.sample())
