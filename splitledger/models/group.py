import threading
from datetime import datetime
from typing import List, Optional, Set

from splitledger.models.base import _utcnow, new_id
from splitledger.models.expense import Expense
from splitledger.models.payment import Payment
from splitledger.repositories.balance_ledger import BalanceLedger


class Group:
    """
    A group owns exactly one BalanceLedger plus the append-only history of
    what was applied to it. The group's lock is shared with its ledger and
    is the unit of mutual exclusion for every read and write.
    """

    def __init__(
        self,
        group_id: Optional[str] = None,
        name: str = "",
        ledger: Optional[BalanceLedger] = None,
    ):
        self.id = group_id or new_id()
        self.name = name
        self.created_at: datetime = _utcnow()
        self.lock = threading.RLock()
        if ledger is None:
            ledger = BalanceLedger(self.id, lock=self.lock)
        else:
            ledger.lock = self.lock
        self.ledger = ledger
        self.expenses: List[Expense] = []
        self.payments: List[Payment] = []
        self._expense_ids: Set[str] = set()
        self._payment_ids: Set[str] = set()

    def has_expense(self, expense_id: str) -> bool:
        return expense_id in self._expense_ids

    def has_payment(self, payment_id: str) -> bool:
        return payment_id in self._payment_ids

    def add_expense(self, expense: Expense) -> None:
        self.expenses.append(expense)
        self._expense_ids.add(expense.id)

    def add_payment(self, payment: Payment) -> None:
        self.payments.append(payment)
        self._payment_ids.add(payment.id)

    def __repr__(self):
        return f"Group(id={self.id!r}, name={self.name!r})"
