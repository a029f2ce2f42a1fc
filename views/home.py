"""Home view."""
import streamlit as st
from .navigation import navigate, render_header


def render_home():
    """Render home screen."""
    render_header(
        "ExpensePal",
        "Daily, weekly and monthly spending at a glance",
        "linear-gradient(135deg, #1e90ff 0%, #7a5eb7 100%)",
    )

    st.write("Keep an eye on where your money goes, one period at a time.")

    c1, c2 = st.columns([1, 1])
    with c1:
        if st.button("Login", key="home_login"):
            navigate("login")
    with c2:
        if st.button("Sign up", key="home_signup"):
            navigate("signup")

    if st.button("Open expenses", key="home_expense", type="primary"):
        navigate("expense")
