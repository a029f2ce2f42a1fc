"""Session-scoped ledger and notification bookkeeping."""
import streamlit as st
from models.ledger import Ledger, Transaction, seed_ledger
from models.notifications import CalendarNotifier, NotificationAction, NotificationResult
from models.settings import get_settings
from utils.logging_setup import get_logger

logger = get_logger("expensepal.session")

_LEDGER_KEY = "ledger"
_PENDING_KEY = "_pending_notifications"


@st.cache_resource
def get_notifier() -> CalendarNotifier:
    """Get the process-wide calendar notifier."""
    settings = get_settings()
    if not settings["calendar_token"]:
        logger.info("EXPENSEPAL_CALENDAR_TOKEN is not set, calendar notifications are disabled")
    return CalendarNotifier(
        url=settings["calendar_url"],
        access_token=settings["calendar_token"],
        timeout=settings["calendar_timeout_s"],
        max_workers=settings["notify_workers"],
    )


def get_ledger() -> Ledger:
    """Get this session's ledger, seeding it on first use."""
    if _LEDGER_KEY not in st.session_state:
        st.session_state[_LEDGER_KEY] = seed_ledger()
    return st.session_state[_LEDGER_KEY]


def notify_change(transaction: Transaction, action: NotificationAction) -> None:
    """Dispatch a calendar notification and remember its future for later reporting."""
    notifier = get_notifier()
    if not notifier.enabled:
        return
    future = notifier.dispatch(transaction, action)
    st.session_state.setdefault(_PENDING_KEY, []).append(future)


def add_transaction(category: str, description, amount, date) -> Transaction:
    """Add to the session ledger, then notify. Validation errors propagate untouched."""
    transaction = get_ledger().add_transaction(category, description, amount, date)
    notify_change(transaction, NotificationAction.ADDED)
    return transaction


def remove_transaction(category: str, transaction_id: int) -> Transaction | None:
    """Remove from the session ledger; only an actual removal is notified."""
    removed = get_ledger().remove_transaction(category, transaction_id)
    if removed is not None:
        notify_change(removed, NotificationAction.DELETED)
    return removed


def pop_finished_notifications() -> list[NotificationResult]:
    """Take the results of notifications that have completed, leaving the rest pending."""
    pending = st.session_state.get(_PENDING_KEY, [])
    finished = [f for f in pending if f.done()]
    st.session_state[_PENDING_KEY] = [f for f in pending if f not in finished]

    results = []
    for future in finished:
        exc = future.exception()
        if exc is not None:
            logger.error("Calendar notification crashed: %s", exc)
            continue
        results.append(future.result())
    return results


@st.fragment(run_every=1)
def _poll_pending_notifications() -> None:
    if any(f.done() for f in st.session_state.get(_PENDING_KEY, [])):
        st.rerun()


def render_notification_alerts() -> None:
    """Show finished notification outcomes as non-fatal alerts.

    While notifications are still in flight, a polling fragment reruns the
    app as soon as one finishes so its outcome shows without user input.
    """
    for result in pop_finished_notifications():
        if result.ok:
            st.toast(f"{result.action.value} transaction logged to calendar.")
        elif result.failed:
            if result.status_code is not None:
                st.error("Calendar error: Failed to log transaction.")
            else:
                st.error("Calendar error: An error occurred while logging the transaction.")

    if st.session_state.get(_PENDING_KEY):
        _poll_pending_notifications()
