"""
Logging setup for the storefront core.

Importing this module configures the root logger once from LOG_LEVEL and
STOREFRONT_ENV. Modules then take their logger with get_logger(__name__).
"""

import logging
import os
import re
import sys
from functools import cache

_FORMATS = {
    "production": "%(levelname)s %(name)s: %(message)s",
    "development": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
}

# Cart line keys are 32-char hex hashes; the prefix is enough to correlate
_ITEM_KEY = re.compile(r"^[0-9a-f]{32}$")
_ITEM_KEY_PREFIX = 8

_CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _setup() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    env = os.environ.get("STOREFRONT_ENV", "development")
    level = logging.getLevelName(os.environ.get("LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_FORMATS.get(env, _FORMATS["development"])))
    root.addHandler(handler)
    root.setLevel(level)

    # One log line per commerce request is too much at INFO
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)


_setup()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def loggable(value: str | int | None, max_length: int = 50) -> str:
    """
    Render a caller-supplied value (product id, cart item key, slug, search
    term) safe for a single log line.

    Control characters are escaped so a value cannot forge log entries. Cart
    item keys are shortened to their prefix; other text is cut at max_length.
    Missing values render as "-".
    """
    if value is None or value == "":
        return "-"
    text = str(value)
    if _ITEM_KEY.match(text):
        return text[:_ITEM_KEY_PREFIX]
    text = text.translate(_CONTROL_CHARS)
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


__all__ = ["get_logger", "loggable"]
