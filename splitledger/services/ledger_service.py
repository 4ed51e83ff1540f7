"""
LedgerService - in-process surface of the engine.

Wires SplitCalculator -> BalanceLedger -> GroupBalanceSheet ->
DebtSimplifier, with PaymentRecorder for direct payments. Each service
instance owns its GroupRepository; there is no process-wide state.

Every write for a group runs under that group's lock: validation, ledger
update and history append either all happen or none do.
"""

import logging
from typing import Dict, List, Optional, Sequence

from splitledger.core.errors import InvalidInput
from splitledger.models.expense import Expense
from splitledger.models.group import Group
from splitledger.models.payment import Payment
from splitledger.models.settlement import BalanceEntry, SettlementTransaction
from splitledger.models.split import SplitKind, SplitRule
from splitledger.repositories.group_repo import GroupRepository
from splitledger.services.balance_sheet import GroupBalanceSheet
from splitledger.services.debt_simplifier import DebtSimplifier
from splitledger.services.payment_recorder import PaymentRecorder
from splitledger.services.split_calculator import SplitCalculator
from splitledger.utils.money import format_cents, require_positive_cents

logger = logging.getLogger(__name__)


class LedgerService:
    def __init__(
        self,
        groups: Optional[GroupRepository] = None,
        calculator: Optional[SplitCalculator] = None,
        simplifier: Optional[DebtSimplifier] = None,
        recorder: Optional[PaymentRecorder] = None,
    ):
        self.groups = groups or GroupRepository()
        self.calculator = calculator or SplitCalculator()
        self.simplifier = simplifier or DebtSimplifier()
        self.recorder = recorder or PaymentRecorder()

    # Groups

    def open_group(self, group_id: Optional[str] = None, name: str = "") -> Group:
        return self.groups.create_group(group_id=group_id, name=name)

    def get_group(self, group_id: str) -> Group:
        return self.groups.get_group(group_id)

    def list_groups(self) -> List[Group]:
        return self.groups.list_groups()

    # Writes

    def submit_expense(
        self,
        group_id: str,
        description: str,
        amount_cents: int,
        payer_id: str,
        split: SplitRule,
        participants: Sequence[str],
        category: Optional[str] = None,
        notes: str = "",
        expense_id: Optional[str] = None,
    ) -> Expense:
        """
        Split an expense and apply it to the group's ledger.

        Raises InvalidInput / ValidationError before any state changes.
        """
        group = self.groups.get_group(group_id)
        require_positive_cents(amount_cents)
        splits = self.calculator.compute(amount_cents, participants, split)

        fields = dict(
            group_id=group.id,
            description=description,
            amount_cents=amount_cents,
            payer_id=payer_id,
            split_kind=SplitKind(split.kind),
            splits=splits,
            category=category,
            notes=notes,
        )
        if expense_id is not None:
            fields["id"] = expense_id
        expense = Expense(**fields)

        with group.lock:
            if group.has_expense(expense.id):
                raise InvalidInput("Expense id already recorded", {"group_id": group.id, "expense_id": expense.id})
            group.ledger.apply_expense(expense)
            group.add_expense(expense)

        logger.info(
            "Group %s: expense '%s' %s paid by %s split %s",
            group.id, description, format_cents(amount_cents), payer_id, split.kind,
        )
        return expense

    def record_payment(
        self,
        group_id: str,
        from_id: str,
        to_id: str,
        amount_cents: int,
        related_expense_id: Optional[str] = None,
        notes: str = "",
        payment_id: Optional[str] = None,
    ) -> Payment:
        """Record a direct payment from from_id to to_id. Raises InvalidInput."""
        group = self.groups.get_group(group_id)
        require_positive_cents(amount_cents)

        fields = dict(
            group_id=group.id,
            payer_id=from_id,
            payee_id=to_id,
            amount_cents=amount_cents,
            related_expense_id=related_expense_id,
            notes=notes,
        )
        if payment_id is not None:
            fields["id"] = payment_id
        payment = Payment(**fields)

        with group.lock:
            if group.has_payment(payment.id):
                raise InvalidInput("Payment id already recorded", {"group_id": group.id, "payment_id": payment.id})
            self.recorder.record(group.ledger, payment)
            group.add_payment(payment)
        return payment

    def settle_up(self, group_id: str) -> List[Payment]:
        """
        Bring every pairwise balance in the group to zero.

        First records the settlement plan as payments, which zeroes every net
        position. Pairs can still hold a cycle such as A -> B -> C -> A
        that nets to zero for every user; each remaining pair is then
        closed with an offsetting payment so the matrix ends empty and a
        replay of the history reproduces the same state.

        Returns every payment recorded, plan payments first.
        """
        group = self.groups.get_group(group_id)
        with group.lock:
            payments = [
                self.record_payment(group_id, tx.from_user_id, tx.to_user_id, tx.amount_cents,
                                    notes="settle up")
                for tx in self.get_settlement_plan(group_id)
            ]
            plan_size = len(payments)
            for entry in self.get_balance_sheet(group_id):
                payments.append(
                    self.record_payment(group_id, entry.debtor_id, entry.creditor_id, entry.amount_cents,
                                        notes="cycle offset")
                )
        logger.info(
            "Group %s: settled up with %d payments (%d cycle offsets)",
            group_id, len(payments), len(payments) - plan_size,
        )
        return payments

    # Reads

    def get_balance_sheet(self, group_id: str) -> List[BalanceEntry]:
        return self._sheet(group_id).matrix()

    def get_net_positions(self, group_id: str) -> Dict[str, int]:
        return self._sheet(group_id).net_positions()

    def get_user_balances(self, group_id: str, user_id: str) -> Dict[str, object]:
        return self._sheet(group_id).balances_for(user_id)

    def get_settlement_plan(self, group_id: str) -> List[SettlementTransaction]:
        return self.simplifier.plan(self.get_net_positions(group_id))

    def list_expenses(self, group_id: str) -> List[Expense]:
        group = self.groups.get_group(group_id)
        with group.lock:
            return list(group.expenses)

    def list_payments(self, group_id: str) -> List[Payment]:
        group = self.groups.get_group(group_id)
        with group.lock:
            return list(group.payments)

    def _sheet(self, group_id: str) -> GroupBalanceSheet:
        return GroupBalanceSheet(self.groups.get_group(group_id).ledger)
