import pytest

from models.ledger import Transaction
from models.totals import Totals, compute_totals


def _rows(*amounts):
    return [Transaction(i, f"t{i}", amount, "2024-12-01") for i, amount in enumerate(amounts, start=1)]


@pytest.mark.parametrize(
    "amounts, income, expense",
    [
        ((), 0, 0),
        ((10, 20.5), 30.5, 0),
        ((-5, -12, -25), 0, -42),
        ((500, -100, -200), 500, -300),
        ((0, 0), 0, 0),
    ],
)
def test_compute_totals(amounts, income, expense):
    totals = compute_totals(_rows(*amounts))

    assert totals.income == pytest.approx(income)
    assert totals.expense == pytest.approx(expense)
    assert totals.balance == pytest.approx(totals.income + totals.expense)


def test_empty_totals_are_zero():
    assert compute_totals([]) == Totals(0.0, 0.0, 0.0)
