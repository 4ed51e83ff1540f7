import pytest
from fastapi.testclient import TestClient

from splitledger.main import create_app
from splitledger.models.split import EqualSplit
from splitledger.repositories.balance_ledger import BalanceLedger
from splitledger.services.debt_simplifier import DebtSimplifier
from splitledger.services.ledger_service import LedgerService
from splitledger.services.split_calculator import SplitCalculator


@pytest.fixture
def calculator():
    """Calculator with the default one-cent tolerance."""
    return SplitCalculator(amount_tolerance_cents=1)


@pytest.fixture
def simplifier():
    return DebtSimplifier(tolerance_cents=1)


@pytest.fixture
def ledger():
    """Empty ledger that re-checks invariants after every write."""
    return BalanceLedger("g-test", tolerance_cents=1, check_invariants=True)


@pytest.fixture
def service():
    return LedgerService()


@pytest.fixture
def trip(service):
    """Group 'trip' with Alice, Bob and Charlie and no expenses yet."""
    return service.open_group(group_id="trip", name="Weekend Trip")


@pytest.fixture
def trip_with_expenses(service, trip):
    """
    Alice pays 90.00 split equally among A, B, C.
    Bob pays 60.00 split equally among A, B, C.
    Net: A=+40.00, B=+10.00, C=-50.00
    """
    service.submit_expense(trip.id, "Dinner", 9000, "A", EqualSplit(), ["A", "B", "C"])
    service.submit_expense(trip.id, "Cab", 6000, "B", EqualSplit(), ["A", "B", "C"])
    return trip


@pytest.fixture
def test_client():
    """FastAPI test client over a fresh in-memory service."""
    app = create_app(LedgerService())
    with TestClient(app) as client:
        yield client
