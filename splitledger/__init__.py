"""
SplitLedger - shared-expense ledger and settlement engine.

    from splitledger import LedgerService, EqualSplit

    service = LedgerService()
    group = service.open_group(name="Trip")
    service.submit_expense(group.id, "Dinner", 9000, "alice", EqualSplit(), ["alice", "bob", "carol"])
    service.get_settlement_plan(group.id)
"""

from splitledger.core.errors import (
    GroupNotFound,
    InvalidInput,
    LedgerError,
    StateError,
    ValidationError,
)
from splitledger.models.expense import Expense
from splitledger.models.group import Group
from splitledger.models.payment import Payment
from splitledger.models.settlement import BalanceEntry, SettlementTransaction
from splitledger.models.split import (
    EqualSplit,
    ExactSplit,
    PercentageSplit,
    SharesSplit,
    SplitKind,
)
from splitledger.repositories.balance_ledger import BalanceLedger
from splitledger.services.balance_sheet import GroupBalanceSheet
from splitledger.services.debt_simplifier import DebtSimplifier
from splitledger.services.ledger_service import LedgerService
from splitledger.services.payment_recorder import PaymentRecorder
from splitledger.services.split_calculator import SplitCalculator

__version__ = "0.1.0"

__all__ = [
    "BalanceEntry",
    "BalanceLedger",
    "DebtSimplifier",
    "EqualSplit",
    "ExactSplit",
    "Expense",
    "Group",
    "GroupBalanceSheet",
    "GroupNotFound",
    "InvalidInput",
    "LedgerError",
    "LedgerService",
    "Payment",
    "PaymentRecorder",
    "PercentageSplit",
    "SettlementTransaction",
    "SharesSplit",
    "SplitCalculator",
    "SplitKind",
    "StateError",
    "ValidationError",
]
