# core/settings.py
from __future__ import annotations
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Giá trị mặc định; ghi đè bằng biến môi trường PWTOOLS_<KEY>
DEFAULT_SETTINGS: Dict[str, Any] = {
    "page_title": "PwTools",
    "page_icon": "🔐",
    "log_level": "INFO",
    "min_length": 4,
    "max_length": 32,
    "default_length": 16,
    "default_upper": True,
    "default_lower": True,
    "default_number": True,
    "default_symbol": True,
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _coerce(raw: str, default: Any) -> Any:
    if isinstance(default, bool):
        v = raw.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
        raise ValueError(f"not a boolean: {raw!r}")
    if isinstance(default, int):
        return int(raw)
    return raw


def get_setting(key: str) -> Any:
    """
    Return setting `key`, letting env PWTOOLS_<KEY> override the default.
    A malformed override is logged and ignored.
    """
    if key not in DEFAULT_SETTINGS:
        raise KeyError(key)
    default = DEFAULT_SETTINGS[key]
    raw = os.getenv(f"PWTOOLS_{key.upper()}")
    if raw is None:
        return default
    try:
        return _coerce(raw, default)
    except ValueError as e:
        logger.warning("Ignoring PWTOOLS_%s override: %s", key.upper(), e)
        return default
