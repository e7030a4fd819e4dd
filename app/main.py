"""Entry point for the kiosk Textual app."""

from __future__ import annotations

from app.kiosk_app import KioskApp
from app.session import KioskSession


def main() -> None:
    """Run the Textual application."""
    KioskApp(KioskSession.new()).run()


if __name__ == "__main__":
    main()
