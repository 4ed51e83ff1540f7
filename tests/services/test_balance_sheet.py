"""
Tests for GroupBalanceSheet.

Covers:
- Matrix lists each non-zero pair once, creditor <- debtor
- Net positions include settled users at zero
- Per-user balances
- Full replay matches the incrementally maintained ledger
"""

from splitledger.models.settlement import BalanceEntry
from splitledger.models.split import EqualSplit, ExactSplit, PercentageSplit, SharesSplit
from splitledger.services.balance_sheet import GroupBalanceSheet


def test_matrix_for_two_expenses(service, trip_with_expenses):
    sheet = GroupBalanceSheet(trip_with_expenses.ledger)

    assert sheet.matrix() == [
        BalanceEntry(creditor_id="A", debtor_id="B", amount_cents=1000),
        BalanceEntry(creditor_id="A", debtor_id="C", amount_cents=3000),
        BalanceEntry(creditor_id="B", debtor_id="C", amount_cents=2000),
    ]


def test_net_positions(trip_with_expenses):
    sheet = GroupBalanceSheet(trip_with_expenses.ledger)

    assert sheet.net_positions() == {"A": 4000, "B": 1000, "C": -5000}


def test_settled_users_stay_at_zero(service, trip_with_expenses):
    service.record_payment(trip_with_expenses.id, "B", "A", 1000)
    service.record_payment(trip_with_expenses.id, "C", "A", 3000)
    service.record_payment(trip_with_expenses.id, "C", "B", 2000)

    sheet = GroupBalanceSheet(trip_with_expenses.ledger)

    assert sheet.matrix() == []
    assert sheet.net_positions() == {"A": 0, "B": 0, "C": 0}


def test_balances_for_user(trip_with_expenses):
    sheet = GroupBalanceSheet(trip_with_expenses.ledger)

    assert sheet.balances_for("C") == {"balances": {"A": -3000, "B": -2000}, "total_cents": -5000}
    assert sheet.balances_for("nobody") == {"balances": {}, "total_cents": 0}


def test_replay_matches_incremental_state(service, trip):
    service.submit_expense(trip.id, "Hotel", 30000, "C", ExactSplit(amounts={"A": 10000, "B": 10000, "C": 10000}),
                           ["A", "B", "C"])
    service.submit_expense(trip.id, "Fuel", 4550, "A", PercentageSplit(percentages=[50, 25, 25]), ["A", "B", "D"])
    service.submit_expense(trip.id, "Snacks", 1001, "D", SharesSplit(weights=[1, 2, 3]), ["B", "C", "D"])
    service.submit_expense(trip.id, "Museum", 2000, "B", EqualSplit(), ["A", "B", "C", "D"])
    service.record_payment(trip.id, "A", "C", 2500)
    service.record_payment(trip.id, "D", "B", 999)

    replayed = GroupBalanceSheet.replay(
        trip.id, service.list_expenses(trip.id), service.list_payments(trip.id)
    )
    live = GroupBalanceSheet(trip.ledger)

    assert replayed.matrix() == live.matrix()
    assert replayed.net_positions() == live.net_positions()
