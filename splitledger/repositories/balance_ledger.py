"""
BalanceLedger - authoritative pairwise balances for one group.

Core rules:
1. balance(X, Y) is what Y currently owes X (signed, integer cents)
2. balance(X, Y) == -balance(Y, X) for every pair
3. Only non-zero pairs are stored
4. sum of all net positions is zero after every committed operation
5. Mutations validate first and commit all-or-nothing
"""

import logging
import threading
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from splitledger.core.config import settings
from splitledger.core.errors import InvalidInput, StateError, ValidationError
from splitledger.models.expense import Expense
from splitledger.models.payment import Payment
from splitledger.utils.money import format_cents

logger = logging.getLogger(__name__)


class BalanceLedger:
    """Repository for one group's pairwise balances (in memory)."""

    def __init__(
        self,
        group_id: str,
        lock: Optional[threading.RLock] = None,
        tolerance_cents: Optional[int] = None,
        check_invariants: Optional[bool] = None,
    ):
        self.group_id = group_id
        self.lock = lock or threading.RLock()
        self.tolerance_cents = (
            settings.AMOUNT_TOLERANCE_CENTS if tolerance_cents is None else tolerance_cents
        )
        self.check_invariants_on_write = (
            settings.CHECK_INVARIANTS if check_invariants is None else check_invariants
        )
        # _balances[x][y] = what y owes x
        self._balances: Dict[str, Dict[str, int]] = defaultdict(dict)
        self._net: Dict[str, int] = {}

    def apply_expense(self, expense: Expense) -> None:
        """
        Record an expense: every participant other than the payer now owes
        the payer their share.

        Validates the whole split map before touching any balance.
        Raises ValidationError / InvalidInput; on failure nothing changes.
        """
        self._validate_expense(expense)

        with self.lock:
            self._touch(expense.payer_id)
            for participant, owed in expense.splits.items():
                self._touch(participant)
                if participant == expense.payer_id or owed == 0:
                    continue
                self._shift(creditor=expense.payer_id, debtor=participant, cents=owed)
            self._after_write()

        logger.info(
            "Group %s: applied expense %s (%s paid by %s, %d participants)",
            self.group_id, expense.id, format_cents(expense.amount_cents),
            expense.payer_id, len(expense.splits),
        )

    def apply_payment(self, payment: Payment) -> None:
        """
        Record a direct payment: the payer's debt to the payee shrinks by
        amount. Overpayment flips the sign of the pair; nothing is clamped.
        """
        if payment.amount_cents <= 0:
            raise InvalidInput("Payment amount must be positive", {"amount_cents": payment.amount_cents})
        if payment.payer_id == payment.payee_id:
            raise InvalidInput("Payer and payee must differ", {"user_id": payment.payer_id})

        with self.lock:
            self._touch(payment.payer_id)
            self._touch(payment.payee_id)
            self._shift(creditor=payment.payee_id, debtor=payment.payer_id, cents=-payment.amount_cents)
            self._after_write()

        logger.info(
            "Group %s: applied payment %s (%s from %s to %s)",
            self.group_id, payment.id, format_cents(payment.amount_cents),
            payment.payer_id, payment.payee_id,
        )

    def query(self, user_a: str, user_b: str) -> int:
        """What user_b owes user_a (negative when user_a owes user_b)."""
        with self.lock:
            return self._balances.get(user_a, {}).get(user_b, 0)

    def net_position(self, user_id: str) -> int:
        """Sum of user's pairwise balances; positive = net creditor."""
        with self.lock:
            return self._net.get(user_id, 0)

    def counterparties(self, user_id: str) -> Dict[str, int]:
        """Non-zero balances of user_id against each counterparty."""
        with self.lock:
            return dict(self._balances.get(user_id, {}))

    def users(self) -> List[str]:
        """Every user seen by this ledger, in first-seen order."""
        with self.lock:
            return list(self._net)

    def snapshot(self) -> Tuple[Dict[str, Dict[str, int]], Dict[str, int]]:
        """Consistent copy of (pairwise balances, net positions)."""
        with self.lock:
            pairs = {user: dict(row) for user, row in self._balances.items() if row}
            return pairs, dict(self._net)

    def check_invariants(self) -> None:
        """Raise StateError if antisymmetry or conservation doesn't hold."""
        with self.lock:
            for x, row in self._balances.items():
                for y, amount in row.items():
                    mirror = self._balances.get(y, {}).get(x, 0)
                    if amount != -mirror:
                        logger.error("Group %s: antisymmetry broken for (%s, %s)", self.group_id, x, y)
                        raise StateError(
                            "Pairwise balance is not antisymmetric",
                            {"group_id": self.group_id, "pair": (x, y), "balance": amount, "mirror": mirror},
                        )

            total = sum(self._net.values())
            if total != 0:
                logger.error("Group %s: net positions sum to %d", self.group_id, total)
                raise StateError(
                    "Net positions don't sum to zero",
                    {"group_id": self.group_id, "sum_cents": total},
                )

            for user, net in self._net.items():
                derived = sum(self._balances.get(user, {}).values())
                if derived != net:
                    raise StateError(
                        "Net position drifted from pairwise balances",
                        {"group_id": self.group_id, "user_id": user, "net": net, "derived": derived},
                    )

    def _validate_expense(self, expense: Expense) -> None:
        if not expense.splits:
            raise InvalidInput("Expense has no participants", {"expense_id": expense.id})
        for participant, owed in expense.splits.items():
            if isinstance(owed, bool) or not isinstance(owed, int) or owed < 0:
                raise InvalidInput(
                    f"Owed amount for '{participant}' must be a non-negative integer of cents",
                    {"expense_id": expense.id, "user_id": participant},
                )
        total = sum(expense.splits.values())
        if abs(total - expense.amount_cents) >= self.tolerance_cents:
            raise ValidationError(
                f"Split total ({total}) doesn't match expense amount ({expense.amount_cents})",
                {"expense_id": expense.id, "sum_cents": total, "amount_cents": expense.amount_cents},
            )

    def _touch(self, user_id: str) -> None:
        self._net.setdefault(user_id, 0)

    def _shift(self, creditor: str, debtor: str, cents: int) -> None:
        """balance(creditor, debtor) += cents, mirrored on the inverse entry."""
        self._set(creditor, debtor, self._balances[creditor].get(debtor, 0) + cents)
        self._set(debtor, creditor, self._balances[debtor].get(creditor, 0) - cents)
        self._net[creditor] = self._net.get(creditor, 0) + cents
        self._net[debtor] = self._net.get(debtor, 0) - cents

    def _set(self, x: str, y: str, amount: int) -> None:
        if amount == 0:
            self._balances[x].pop(y, None)
        else:
            self._balances[x][y] = amount

    def _after_write(self) -> None:
        if self.check_invariants_on_write:
            self.check_invariants()
