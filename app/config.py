"""Runtime configuration defaults for the kiosk."""

from __future__ import annotations

import os

QUANTITY_MIN = 1
QUANTITY_MAX = 100

CURRENCY_SYMBOL = "$"
PRICE_DECIMALS = 2

_DEBUG_LOG_ENV = "KIOSK_DEBUG_LOG_PATH"
# Empty string disables the debug log.
DEBUG_LOG_PATH = os.environ.get(_DEBUG_LOG_ENV, "/tmp/kiosk-debug.log")
