import streamlit as st

def render():
    st.markdown(
        """
        <style>
          .pw-title{
            font-size: 44px;
            line-height: 1.1;
            margin: .2em 0 .1em 0;
            letter-spacing: .5px;
          }
          /* Thu nhỏ trên màn hình nhỏ */
          @media (max-width: 768px){
            .pw-title{ font-size: 32px; }
          }
          @media (prefers-color-scheme: dark){
            .pw-title{ color: #f3f4f6; }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown('<div class="pw-title">Password Tools 🔐</div>', unsafe_allow_html=True)

    st.markdown(
        "Check how strong a password is, or generate a new one from the character sets you pick."
    )
    st.caption("Everything runs locally. Passwords are never stored, sent, or logged.")

    st.info("Chọn mục ở thanh **sidebar** để bắt đầu.")
