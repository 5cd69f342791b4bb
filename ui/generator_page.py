# ui/generator_page.py
from __future__ import annotations
import logging
import streamlit as st

from core.generator_utils import (
    GenerationError,
    GeneratorConfig,
    build_pool,
    entropy_bits,
    entropy_label,
    generate,
)
from core.settings import get_setting
from core.strength_utils import evaluate, strength_view
from ui.strength_page import copy_widget, render_strength_panel

logger = logging.getLogger(__name__)


def render() -> None:
    st.subheader("🎲 Password Generator")

    colL, colR = st.columns([3, 2])
    with colL:
        length = st.slider(
            "Password length",
            get_setting("min_length"),
            get_setting("max_length"),
            get_setting("default_length"),
            1,
            key="gen_length",
        )
    with colR:
        st.markdown("**Character sets**")
        use_upper  = st.checkbox("A–Z", value=get_setting("default_upper"), key="gen_upper")
        use_lower  = st.checkbox("a–z", value=get_setting("default_lower"), key="gen_lower")
        use_number = st.checkbox("0–9", value=get_setting("default_number"), key="gen_number")
        use_symbol = st.checkbox("Symbols", value=get_setting("default_symbol"), key="gen_symbol")

    config = GeneratorConfig(
        length=int(length),
        include_upper=use_upper,
        include_lower=use_lower,
        include_number=use_number,
        include_symbol=use_symbol,
    )

    if st.button("🎲 Generate", type="primary", key="gen_btn"):
        try:
            st.session_state["generated_pw"] = generate(config)
            st.session_state["generated_config"] = config
        except GenerationError as e:
            # Giữ mật khẩu cũ, chỉ báo lỗi
            logger.info("generation rejected: %s", e)
            st.warning(str(e))

    password = st.session_state.get("generated_pw")
    if not password:
        st.caption("Pick a length and character sets, then press Generate.")
        return

    st.code(password, language=None)
    copy_widget(password)

    used = st.session_state["generated_config"]
    bits = entropy_bits(used)
    st.caption(
        f"Estimated entropy: **{bits:.1f} bits**, {entropy_label(bits)} "
        f"(alphabet ~{len(build_pool(used)[1])} chars)"
    )

    render_strength_panel(strength_view(evaluate(password)))
