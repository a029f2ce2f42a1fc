"""ExpensePal - Mobile-first expense tracking application.

This is the main entry point that routes between the app's screens.
"""
import streamlit as st
from models.settings import get_settings
from utils.logging_setup import configure_logging
from views import (
    render_home,
    render_login,
    render_signup,
    render_expense,
    apply_mobile_layout,
    get_active_screen,
)

configure_logging(get_settings()["log_level"])

st.set_page_config(
    page_title="ExpensePal",
    page_icon="💸",
    layout="centered"
)


def main():
    """Main application entry point."""
    apply_mobile_layout()
    active_screen = get_active_screen()

    if active_screen == "home":
        render_home()
    elif active_screen == "login":
        render_login()
    elif active_screen == "signup":
        render_signup()
    elif active_screen == "expense":
        render_expense()


if __name__ == "__main__":
    main()
