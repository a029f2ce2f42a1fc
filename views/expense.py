"""Expense view."""
import streamlit as st
import plotly.graph_objects as go
from models.ledger import TransactionValidationError
from models.totals import Totals
from utils.constants import CATEGORIES
from utils.helpers import category_label, format_amount, format_total, local_date_iso
from .navigation import navigate_home, render_header
from .session import add_transaction, get_ledger, remove_transaction, render_notification_alerts


def totals_figure(totals: Totals) -> go.Figure:
    """Donut of income against expenses with the balance in the middle."""
    fig = go.Figure(
        data=[
            go.Pie(
                values=[totals.income, abs(totals.expense)],
                labels=["Income", "Expenses"],
                hole=0.75,
                sort=False,
                direction="clockwise",
                rotation=90,
                marker={
                    "colors": ["#34d399", "#f87171"],
                    "line": {"color": "rgba(255,255,255,0.8)", "width": 3},
                },
                textinfo="none",
                hovertemplate="<b>%{label}</b><br>$%{value:,.2f}<extra></extra>",
            )
        ]
    )
    fig.update_layout(
        margin=dict(l=0, r=0, t=0, b=0),
        height=240,
        showlegend=False,
        paper_bgcolor="rgba(0,0,0,0)",
        annotations=[
            dict(
                text=f"<b style='font-size:24px'>{format_total(totals.balance)}</b><br><span style='font-size:12px; opacity:0.8'>balance</span>",
                x=0.5,
                y=0.5,
                showarrow=False,
                align="center",
            )
        ],
    )
    return fig


def _on_category_change() -> None:
    get_ledger().select_category(st.session_state["expense_category"])


def _reset_add_form() -> None:
    st.session_state["new_description"] = ""
    st.session_state["new_amount"] = ""
    st.session_state["new_date"] = local_date_iso()


def _render_totals(totals: Totals) -> None:
    st.markdown(f"""
    <div style="
        background: #dcfce7;
        padding: 16px 20px;
        border-radius: 12px;
        margin-bottom: 12px;
    ">
        <div style="font-size: 18px; color: #333; margin-bottom: 5px;">Balance: {format_total(totals.balance)}</div>
        <div style="font-size: 18px; color: #333; margin-bottom: 5px;">Income: {format_total(totals.income)}</div>
        <div style="font-size: 18px; color: #333;">Expenses: {format_total(totals.expense)}</div>
    </div>
    """, unsafe_allow_html=True)

    if totals.income or totals.expense:
        st.plotly_chart(totals_figure(totals), config={"displayModeBar": False})


def _render_transactions(category: str) -> None:
    ledger = get_ledger()
    rows = ledger.transactions(category)
    if not rows:
        st.caption("No transactions.")
        return

    for index, t in enumerate(rows):
        color = "#16a34a" if t.amount > 0 else "#dc2626"
        c1, c2, c3 = st.columns([2.4, 1.2, 0.8])
        with c1:
            st.write(f"**{t.description}**")
            st.caption(t.date)
        with c2:
            st.markdown(
                f"<span style='color:{color}; font-weight:600'>{format_amount(t.amount)}</span>",
                unsafe_allow_html=True,
            )
        with c3:
            delete_clicked = st.button("Delete", key=f"delete_{category}_{index}_{t.id}")

        if delete_clicked:
            remove_transaction(category, t.id)
            st.rerun()


def _render_add_form(category: str) -> None:
    if "new_date" not in st.session_state or st.session_state.pop("_reset_add_form", False):
        _reset_add_form()

    with st.form("add_transaction"):
        st.text_input("Description", key="new_description", placeholder="Description")
        st.text_input("Amount", key="new_amount", placeholder="Amount (e.g., -50 or 100)")
        st.text_input("Date", key="new_date", placeholder="Date (YYYY-MM-DD)")
        submitted = st.form_submit_button("Add")

    if submitted:
        try:
            add_transaction(
                category,
                st.session_state["new_description"],
                st.session_state["new_amount"],
                st.session_state["new_date"],
            )
        except TransactionValidationError as exc:
            st.error(str(exc))
            return
        st.session_state["_reset_add_form"] = True
        st.rerun()


def render_expense():
    """Render expense tracker screen."""
    ledger = get_ledger()

    if st.button("← Home", key="expense_back"):
        navigate_home()

    render_header(
        "Expense App",
        "Track income and spending by period",
        "linear-gradient(135deg, #1e90ff 0%, #7a5eb7 100%)",
    )

    render_notification_alerts()

    if "expense_category" not in st.session_state:
        st.session_state["expense_category"] = ledger.active_category
    st.radio(
        "Period",
        CATEGORIES,
        key="expense_category",
        horizontal=True,
        format_func=category_label,
        label_visibility="collapsed",
        on_change=_on_category_change,
    )

    category = ledger.active_category
    _render_totals(ledger.totals())
    _render_transactions(category)

    st.markdown("---")
    _render_add_form(category)
