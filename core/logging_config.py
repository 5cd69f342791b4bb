# core/logging_config.py
from __future__ import annotations
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Streamlit chạy lại script mỗi lần tương tác -> chỉ gắn handler một lần
_HANDLER_NAME = "pwtools-console"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger for the app.

    Level comes from `level`, else env LOG_LEVEL, else INFO. Safe to call on
    every rerun: the console handler is added once and only the level is
    refreshed afterwards.
    """
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root
