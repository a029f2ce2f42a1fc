"""Screen navigation and the shared mobile layout."""
import streamlit as st
from utils.constants import SCREENS, DEFAULT_SCREEN


def get_active_screen() -> str:
    """Get active screen from query parameters."""
    screen = st.query_params.get("screen", DEFAULT_SCREEN)
    if screen not in SCREENS:
        screen = DEFAULT_SCREEN
    return screen


def navigate(screen: str) -> None:
    """Switch to another screen and rerun the app."""
    if screen not in SCREENS:
        raise ValueError(f"Unknown screen: {screen!r}")
    st.query_params["screen"] = screen
    st.rerun()


def navigate_home() -> None:
    navigate("home")


def render_header(title: str, subtitle: str, gradient: str) -> None:
    """Render a gradient title card."""
    st.markdown(f"""
    <div style="
        background: {gradient};
        padding: 20px;
        border-radius: 16px;
        margin-bottom: 20px;
        box-shadow: 0 8px 24px rgba(30,144,255,0.25);
    ">
        <h1 style="
            color: white;
            margin: 0;
            font-size: 28px;
            font-weight: 600;
            text-shadow: 0 2px 4px rgba(0,0,0,0.1);
        ">{title}</h1>
        <p style="
            color: rgba(255,255,255,0.9);
            margin: 4px 0 0 0;
            font-size: 14px;
        ">{subtitle}</p>
    </div>
    """, unsafe_allow_html=True)


def apply_mobile_layout() -> None:
    """Narrow the page to a phone-sized column and hide Streamlit chrome."""
    st.markdown(
        """
<style>
main .block-container {
  padding-top: 16px;
  padding-bottom: 32px;
  max-width: 520px;
}

#MainMenu { visibility: hidden; }
footer { visibility: hidden; }
header { visibility: hidden; }

div[role="radiogroup"] {
  justify-content: space-around;
}
</style>
        """,
        unsafe_allow_html=True,
    )
