"""Login view."""
import streamlit as st
from .navigation import navigate, navigate_home, render_header


def render_login():
    """Render login screen.

    There is no account backend; filled-in credentials simply open the
    expense screen.
    """
    if st.button("← Back", key="login_back"):
        navigate_home()

    render_header(
        "Welcome back",
        "Log in to continue tracking",
        "linear-gradient(135deg, #4facfe 0%, #00f2fe 100%)",
    )

    with st.form("login"):
        email = st.text_input("Email", placeholder="you@example.com")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        if not email.strip() or not password:
            st.error("Please enter your email and password.")
        else:
            navigate("expense")

    st.caption("Don't have an account?")
    if st.button("Sign up", key="login_to_signup"):
        navigate("signup")
