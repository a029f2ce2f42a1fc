"""Models package for ledger state and business logic."""
from .ledger import (
    Ledger,
    Transaction,
    TransactionValidationError,
    UnknownCategoryError,
    seed_ledger,
)
from .totals import Totals, compute_totals
from .notifications import (
    CalendarNotifier,
    NotificationAction,
    NotificationResult,
    build_event_payload,
)
from .settings import get_settings

__all__ = [
    "Ledger",
    "Transaction",
    "TransactionValidationError",
    "UnknownCategoryError",
    "seed_ledger",
    "Totals",
    "compute_totals",
    "CalendarNotifier",
    "NotificationAction",
    "NotificationResult",
    "build_event_payload",
    "get_settings",
]
