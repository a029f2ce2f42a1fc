"""Signup view."""
import streamlit as st
from .navigation import navigate, navigate_home, render_header


def render_signup():
    """Render signup screen."""
    if st.button("← Back", key="signup_back"):
        navigate_home()

    render_header(
        "Create account",
        "Start tracking in under a minute",
        "linear-gradient(135deg, #f093fb 0%, #f5576c 100%)",
    )

    with st.form("signup"):
        name = st.text_input("Name")
        email = st.text_input("Email", placeholder="you@example.com")
        password = st.text_input("Password", type="password")
        confirm = st.text_input("Confirm password", type="password")
        submitted = st.form_submit_button("Sign up")

    if submitted:
        if not name.strip() or not email.strip() or not password:
            st.error("Please fill out all fields.")
        elif password != confirm:
            st.error("Passwords do not match.")
        else:
            navigate("expense")

    st.caption("Already have an account?")
    if st.button("Login", key="signup_to_login"):
        navigate("login")
