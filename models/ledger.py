"""In-memory transaction ledger split into reporting categories."""
import time
from dataclasses import dataclass
from typing import Callable
from utils.constants import CATEGORIES, DEFAULT_CATEGORY, SEED_TRANSACTIONS
from utils.helpers import parse_amount
from utils.logging_setup import get_logger
from .totals import Totals, compute_totals

logger = get_logger("expensepal.ledger")

MISSING_FIELDS_MESSAGE = "Please fill out all fields, including the date."
INVALID_AMOUNT_MESSAGE = "Amount must be a valid number."


class TransactionValidationError(ValueError):
    """Raised when a new transaction is missing a field or has a bad amount."""


class UnknownCategoryError(ValueError):
    """Raised for a category outside daily, weekly and monthly."""


@dataclass(frozen=True)
class Transaction:
    id: int
    description: str
    amount: float
    date: str


class Ledger:
    """Per-category transaction lists plus the active category.

    ``add_transaction``, ``remove_transaction`` and ``select_category`` are
    the only ways to change a ledger. ``revision`` increases on every add or
    remove and keys the totals cache together with the active category.
    """

    def __init__(self, transactions: dict | None = None, *, active: str = DEFAULT_CATEGORY,
                 clock: Callable[[], float] = time.time) -> None:
        self._items: dict[str, list[Transaction]] = {c: [] for c in CATEGORIES}
        for category, rows in (transactions or {}).items():
            self._check_category(category)
            self._items[category] = [
                r if isinstance(r, Transaction) else Transaction(**r) for r in rows
            ]
        self._check_category(active)
        self._active = active
        self._clock = clock
        self.revision = 0
        self._totals_key: tuple[int, str] | None = None
        self._totals: Totals | None = None

    @staticmethod
    def _check_category(category: str) -> None:
        if category not in CATEGORIES:
            raise UnknownCategoryError(f"Unknown category: {category!r}")

    @property
    def active_category(self) -> str:
        return self._active

    def transactions(self, category: str | None = None) -> list[Transaction]:
        """Return a copy of a category's transactions (the active one by default)."""
        category = category or self._active
        self._check_category(category)
        return list(self._items[category])

    def _next_id(self, category: str) -> int:
        candidate = int(self._clock() * 1000)
        existing = [t.id for t in self._items[category]]
        if existing and candidate <= max(existing):
            candidate = max(existing) + 1
        return candidate

    def add_transaction(self, category: str, description, amount, date) -> Transaction:
        """Append a new transaction to ``category`` and return it.

        Raises TransactionValidationError without touching the ledger when a
        field is blank or the amount is not a finite number.
        """
        self._check_category(category)
        description = str(description or "").strip()
        date = str(date or "").strip()
        amount_text = "" if amount is None else str(amount).strip()
        if not description or not date or not amount_text:
            logger.info("Rejected transaction for %s: missing field", category)
            raise TransactionValidationError(MISSING_FIELDS_MESSAGE)

        parsed = parse_amount(amount)
        if parsed is None:
            logger.info("Rejected transaction for %s: invalid amount %r", category, amount)
            raise TransactionValidationError(INVALID_AMOUNT_MESSAGE)

        transaction = Transaction(
            id=self._next_id(category),
            description=description,
            amount=parsed,
            date=date,
        )
        self._items[category].append(transaction)
        self.revision += 1
        logger.info("Added transaction %s to %s (%s)", transaction.id, category, transaction.amount)
        return transaction

    def remove_transaction(self, category: str, transaction_id: int) -> Transaction | None:
        """Remove the first transaction with ``transaction_id``; None when absent."""
        self._check_category(category)
        items = self._items[category]
        for index, t in enumerate(items):
            if t.id == transaction_id:
                del items[index]
                self.revision += 1
                logger.info("Removed transaction %s from %s", transaction_id, category)
                return t
        logger.debug("No transaction %s in %s, nothing removed", transaction_id, category)
        return None

    def select_category(self, category: str) -> None:
        self._check_category(category)
        self._active = category

    def totals(self) -> Totals:
        """Totals for the active category, cached until the next mutation or switch."""
        key = (self.revision, self._active)
        if self._totals_key != key:
            self._totals = compute_totals(self._items[self._active])
            self._totals_key = key
        return self._totals


def seed_ledger(clock: Callable[[], float] = time.time) -> Ledger:
    """Get a new ledger loaded with the starter transactions."""
    return Ledger(
        {category: [dict(row) for row in rows] for category, rows in SEED_TRANSACTIONS.items()},
        clock=clock,
    )
