# app.py
from pathlib import Path
import sys
import importlib
import logging
import streamlit as st

# ==== Paths & sys.path ====
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.logging_config import setup_logging
from core.settings import get_setting

setup_logging(get_setting("log_level"))
logger = logging.getLogger("app")

# ==== Streamlit ====
st.set_page_config(
    page_title=get_setting("page_title"),
    page_icon=get_setting("page_icon"),
    layout="wide",
)

# ==== Import các trang sau khi đã config ====
required_modules = {
    "mainwindow_page": "🏠 Home",
    "strength_page":   "🔑 Strength Checker",
    "generator_page":  "🎲 Generator",
}

PAGES = {}
errors = []

for mod_name, label in required_modules.items():
    try:
        mod = importlib.import_module(f"ui.{mod_name}")
        render_fn = getattr(mod, "render", None)
        if callable(render_fn):
            PAGES[label] = render_fn
        else:
            errors.append(f"Module 'ui.{mod_name}' thiếu hàm render().")
    except Exception as e:
        logger.exception("Failed to import ui.%s", mod_name)
        errors.append(f"Lỗi import 'ui.{mod_name}': {e}")

# Nếu có lỗi, hiển thị nhưng vẫn cho chạy các trang còn lại
for msg in errors:
    st.error(msg)
if not PAGES:
    st.stop()

# ==== Sidebar điều hướng ====
choice = st.sidebar.radio(" ", list(PAGES.keys()))
PAGES[choice]()
