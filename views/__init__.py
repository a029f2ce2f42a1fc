"""Views package for UI components."""
from .home import render_home
from .login import render_login
from .signup import render_signup
from .expense import render_expense
from .navigation import apply_mobile_layout, get_active_screen, navigate, navigate_home

__all__ = [
    "render_home",
    "render_login",
    "render_signup",
    "render_expense",
    "apply_mobile_layout",
    "get_active_screen",
    "navigate",
    "navigate_home",
]
