"""Calendar notifications for ledger changes.

Every add or delete posts an all-day event to a calendar-events endpoint.
The post runs on a worker thread and its outcome is only reported back to
the user; the ledger change it describes is never undone.
"""
import enum
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass

import httpx

from utils.helpers import format_signed_amount
from utils.logging_setup import get_logger
from .ledger import Transaction

logger = get_logger("expensepal.notifications")


class NotificationAction(str, enum.Enum):
    ADDED = "Added"
    DELETED = "Deleted"


@dataclass(frozen=True)
class NotificationResult:
    transaction_id: int
    action: NotificationAction
    ok: bool
    skipped: bool = False
    status_code: int | None = None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return not self.ok and not self.skipped


def build_event_payload(transaction: Transaction, action: NotificationAction) -> dict:
    """Build the JSON event body for a transaction change."""
    return {
        "summary": f"{action.value} Transaction: {transaction.description}",
        "description": f"Amount: {format_signed_amount(transaction.amount)}\nDate: {transaction.date}",
        "start": {"date": transaction.date},
        "end": {"date": transaction.date},
    }


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            return str(error.get("message") or error)
        if error:
            return str(error)
    return str(payload)


class CalendarNotifier:
    """Posts transaction changes to a calendar-events endpoint."""

    def __init__(
        self,
        *,
        url: str,
        access_token: str | None,
        timeout: float = 10.0,
        max_workers: int = 2,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._access_token = access_token
        self._timeout = timeout
        self._transport = transport
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="calendar-notify")

    @property
    def enabled(self) -> bool:
        return bool(self._access_token)

    def notify(self, transaction: Transaction, action: NotificationAction) -> NotificationResult:
        """Post one event synchronously. HTTP and network errors become a failed result."""
        if not self.enabled:
            logger.debug("Calendar token not configured, skipping %s for %s", action.value, transaction.id)
            return NotificationResult(transaction.id, action, ok=False, skipped=True)

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._access_token}",
        }
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(self._url, headers=headers, json=build_event_payload(transaction, action))
        except httpx.RequestError as exc:
            logger.error("Calendar request failed for %s %s: %s", action.value, transaction.id, exc)
            return NotificationResult(transaction.id, action, ok=False, error=str(exc))

        if response.is_success:
            logger.info("Logged %s transaction %s to calendar", action.value.lower(), transaction.id)
            return NotificationResult(transaction.id, action, ok=True, status_code=response.status_code)

        detail = _error_detail(response)
        logger.warning(
            "Calendar API rejected %s %s (%s): %s", action.value, transaction.id, response.status_code, detail
        )
        return NotificationResult(
            transaction.id, action, ok=False, status_code=response.status_code, error=detail
        )

    def dispatch(self, transaction: Transaction, action: NotificationAction) -> Future:
        """Run ``notify`` on a worker thread and return its future without waiting."""
        return self._executor.submit(self.notify, transaction, action)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
