"""
DebtSimplifier - turns net positions into a short list of settling payments.

Algorithm (greedy two-pointer):
1. Drop users whose net position is within tolerance of zero
2. Refuse to plan if the remaining positions don't sum to zero
3. Sort ascending by (net, user_id): biggest debtor first, biggest creditor last
4. Match the debtor at i with the creditor at j for min(|debt|, credit),
   advance whichever side reached zero, repeat while i < j

Every step zeroes at least one side, so the plan has at most n - 1
transactions for n non-zero users. This is a heuristic: it is not
guaranteed to find the minimum transaction count, which is a
subset-sum style problem.
"""

import logging
from typing import Dict, List, Mapping, Optional

from splitledger.core.config import settings
from splitledger.core.errors import StateError
from splitledger.models.settlement import SettlementTransaction
from splitledger.utils.money import is_zero

logger = logging.getLogger(__name__)


class DebtSimplifier:
    def __init__(self, tolerance_cents: Optional[int] = None):
        if tolerance_cents is None:
            tolerance_cents = settings.AMOUNT_TOLERANCE_CENTS
        self.tolerance_cents = tolerance_cents

    def plan(self, net_positions: Mapping[str, int]) -> List[SettlementTransaction]:
        """
        Ordered settlement plan for the given net positions.

        Raises StateError if the positions don't sum to zero; that means
        the ledger upstream is corrupt and nothing here tries to repair it.
        """
        positions = [
            [user_id, net]
            for user_id, net in net_positions.items()
            if not is_zero(net, self.tolerance_cents)
        ]

        total = sum(net for _, net in positions)
        if not is_zero(total, self.tolerance_cents):
            logger.error("Refusing to plan: net positions sum to %d", total)
            raise StateError(
                "Net positions don't sum to zero",
                {"sum_cents": total, "users": len(positions)},
            )

        positions.sort(key=lambda p: (p[1], p[0]))

        transactions: List[SettlementTransaction] = []
        i, j = 0, len(positions) - 1
        while i < j:
            debtor, creditor = positions[i], positions[j]
            amount = min(-debtor[1], creditor[1])
            if amount <= 0:
                raise StateError(
                    "Debtor/creditor sweep crossed over",
                    {"debtor": debtor[0], "creditor": creditor[0]},
                )

            transactions.append(
                SettlementTransaction(from_user_id=debtor[0], to_user_id=creditor[0], amount_cents=amount)
            )
            debtor[1] += amount
            creditor[1] -= amount

            if is_zero(debtor[1], self.tolerance_cents):
                i += 1
            if is_zero(creditor[1], self.tolerance_cents):
                j -= 1

        logger.debug("Planned %d settlement transactions for %d users", len(transactions), len(positions))
        return transactions

    @staticmethod
    def apply(net_positions: Mapping[str, int], plan: List[SettlementTransaction]) -> Dict[str, int]:
        """Net positions after every transaction in plan is paid."""
        result = dict(net_positions)
        for tx in plan:
            result[tx.from_user_id] = result.get(tx.from_user_id, 0) + tx.amount_cents
            result[tx.to_user_id] = result.get(tx.to_user_id, 0) - tx.amount_cents
        return result
