"""Totals for a sequence of transactions."""
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Totals:
    income: float = 0.0
    expense: float = 0.0
    balance: float = 0.0


def compute_totals(transactions: Iterable) -> Totals:
    """Sum positive amounts as income and negative amounts as expense."""
    income = 0.0
    expense = 0.0
    for t in transactions:
        if t.amount > 0:
            income += t.amount
        elif t.amount < 0:
            expense += t.amount
    return Totals(income=income, expense=expense, balance=income + expense)
