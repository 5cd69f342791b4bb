# ui/strength_page.py
from __future__ import annotations
import json
import streamlit as st

from core.strength_utils import evaluate, strength_view


def render() -> None:
    st.subheader("🔑 Password Strength Checker")

    show_plain = st.checkbox("Show password", value=False, key="pw_show")
    password = st.text_input(
        "Password (local only, not stored)",
        key="pw_input",
        type="default" if show_plain else "password",
        placeholder="Type a password…",
    )

    # Ô trống -> trạng thái reset, không chấm điểm
    result = evaluate(password) if password else None
    render_strength_panel(strength_view(result))

    if password:
        copy_widget(password)


def render_strength_panel(view: dict) -> None:
    """Draw score, bar, label and criteria checklist from a strength view."""
    colL, colR = st.columns([1, 3])
    with colL:
        st.metric("Score", view["score"])
    with colR:
        color = view["color"] or "transparent"
        st.markdown(
            f"""
<div style="background:#e5e7eb;border-radius:6px;height:12px;margin-top:18px;">
  <div class="{view['css_class']}"
       style="width:{view['width']}%;height:12px;border-radius:6px;background:{color};"></div>
</div>
<div style="margin-top:6px;font-weight:600;">{view['label']}</div>
            """,
            unsafe_allow_html=True,
        )

    st.markdown("**Suggestions**")
    lines = [f"{'✅' if met else '❌'} {text}" for text, met in view["checks"]]
    st.markdown("  \n".join(lines))


def js_string(text: str) -> str:
    """JSON string literal safe inside <script>: every `<` becomes \\u003c."""
    return json.dumps(text).replace("<", "\\u003c")


def copy_widget_html(text: str) -> str:
    """Copy button with execCommand fallback for sandboxed iframes."""
    return f"""
<style>
  button.cpy {{
    background:#2563eb; border:none; color:#fff; padding:6px 10px; border-radius:6px; cursor:pointer;
  }}
  #msg {{ margin-left:8px; color:#6b7280; font-family: system-ui, sans-serif; }}
</style>
<button class="cpy" id="cpy">Copy</button><span id="msg"></span>
<script>
const pw = {js_string(text)};
const msg = document.getElementById("msg");

function copyText(text) {{
  if (navigator.clipboard && window.isSecureContext) {{
    return navigator.clipboard.writeText(text);
  }} else {{
    const ta = document.createElement('textarea');
    ta.value = text;
    ta.style.position = 'fixed';
    ta.style.opacity = '0';
    document.body.appendChild(ta);
    ta.focus();
    ta.select();
    try {{ document.execCommand('copy'); }}
    finally {{ document.body.removeChild(ta); }}
    return Promise.resolve();
  }}
}}

document.getElementById("cpy").addEventListener("click", () => {{
  copyText(pw).then(() => {{
    msg.textContent = "Password copied to clipboard!";
  }}).catch(() => {{
    msg.textContent = "Failed to copy password.";
  }}).finally(() => {{
    setTimeout(() => msg.textContent = "", 2500);
  }});
}});
</script>
"""


def copy_widget(text: str) -> None:
    st.iframe(copy_widget_html(text), height=48)
