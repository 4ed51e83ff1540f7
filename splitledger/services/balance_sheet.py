"""
GroupBalanceSheet - read view over a group's BalanceLedger.

The ledger maintains balances and net positions incrementally, so every
read here is O(pairs) over a consistent snapshot. replay() rebuilds the
same state from history and is used to cross-check the incremental path.
"""

from typing import Dict, Iterable, List, Optional

from splitledger.models.expense import Expense
from splitledger.models.payment import Payment
from splitledger.models.settlement import BalanceEntry
from splitledger.repositories.balance_ledger import BalanceLedger
from splitledger.services.payment_recorder import PaymentRecorder


class GroupBalanceSheet:
    def __init__(self, ledger: BalanceLedger):
        self.ledger = ledger

    def matrix(self) -> List[BalanceEntry]:
        """
        Every non-zero pair once, as "debtor owes creditor amount".

        Ordered by creditor then debtor id.
        """
        pairs, _ = self.ledger.snapshot()
        entries = []
        for creditor, row in pairs.items():
            for debtor, amount in row.items():
                if amount > 0:
                    entries.append(
                        BalanceEntry(creditor_id=creditor, debtor_id=debtor, amount_cents=amount)
                    )
        entries.sort(key=lambda e: (e.creditor_id, e.debtor_id))
        return entries

    def net_positions(self) -> Dict[str, int]:
        """user -> net cents (positive = net creditor, negative = net debtor)."""
        _, net = self.ledger.snapshot()
        return net

    def balances_for(self, user_id: str) -> Dict[str, object]:
        """
        Per-user view: each counterparty's signed balance and the total.

        Returns:
        {
            "balances": {counterparty: cents},  # positive = counterparty owes user
            "total_cents": net position
        }
        """
        with self.ledger.lock:
            balances = self.ledger.counterparties(user_id)
            total = self.ledger.net_position(user_id)
        return {"balances": balances, "total_cents": total}

    @classmethod
    def replay(
        cls,
        group_id: str,
        expenses: Iterable[Expense],
        payments: Iterable[Payment],
        tolerance_cents: Optional[int] = None,
    ) -> "GroupBalanceSheet":
        """
        Rebuild a balance sheet from history (all expenses, then all payments).

        Balances are additive, so application order doesn't change the result.
        """
        ledger = BalanceLedger(group_id, tolerance_cents=tolerance_cents, check_invariants=False)
        for expense in expenses:
            ledger.apply_expense(expense)
        recorder = PaymentRecorder()
        for payment in payments:
            recorder.record(ledger, payment)
        return cls(ledger)
