"""Append-only debug log shared by the model and the screen."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from app import config


def log_debug(message: str) -> None:
    """Append a timestamped line to the debug log, if one is configured."""
    if not config.DEBUG_LOG_PATH:
        return
    try:
        ts = datetime.now(timezone.utc).isoformat()
        path = Path(config.DEBUG_LOG_PATH)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with app flow.
        return
