"""
SplitCalculator - turns an expense total and a split rule into a split map.

Pure and side-effect free: nothing here touches a ledger. Every operation
returns a dict participant -> owed cents whose values sum to the amount,
or raises before returning anything.

Remainder policy: when cents don't divide evenly,
- equal splits give one extra cent to the first participants in list order
- percentage / share splits use the largest-remainder method
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Optional, Sequence

from splitledger.core.config import settings
from splitledger.core.errors import InvalidInput, ValidationError
from splitledger.models.split import (
    EqualSplit,
    ExactSplit,
    PercentageSplit,
    SharesSplit,
    SplitRule,
)
from splitledger.utils.money import allocate_largest_remainder, require_positive_cents

logger = logging.getLogger(__name__)

HUNDRED = Decimal(100)


class SplitCalculator:
    def __init__(
        self,
        amount_tolerance_cents: Optional[int] = None,
        percentage_tolerance: Optional[Decimal] = None,
    ):
        if amount_tolerance_cents is None:
            amount_tolerance_cents = settings.AMOUNT_TOLERANCE_CENTS
        if percentage_tolerance is None:
            percentage_tolerance = settings.PERCENTAGE_TOLERANCE
        self.amount_tolerance_cents = amount_tolerance_cents
        self.percentage_tolerance = Decimal(percentage_tolerance)

    def compute(self, amount_cents: int, participants: Sequence[str], rule: SplitRule) -> Dict[str, int]:
        """Dispatch on the rule variant and return the validated split map."""
        logger.debug("Computing %s split of %s cents over %d participants",
                     getattr(rule, "kind", "?"), amount_cents, len(participants))
        if isinstance(rule, EqualSplit):
            return self.equal(amount_cents, participants)
        if isinstance(rule, ExactSplit):
            self._check_participants(participants)
            if len(rule.amounts) != len(participants) or set(rule.amounts) != set(participants):
                raise InvalidInput(
                    "Exact amounts must name exactly the participants",
                    {"participants": list(participants), "amounts": sorted(rule.amounts)},
                )
            ordered = {user_id: rule.amounts[user_id] for user_id in participants}
            return self.exact(amount_cents, ordered)
        if isinstance(rule, PercentageSplit):
            return self.percentage(amount_cents, participants, rule.percentages)
        if isinstance(rule, SharesSplit):
            return self.shares(amount_cents, participants, rule.weights)
        raise InvalidInput(f"Unknown split kind: {type(rule).__name__}")

    def equal(self, amount_cents: int, participants: Sequence[str]) -> Dict[str, int]:
        require_positive_cents(amount_cents)
        self._check_participants(participants)

        base, leftover = divmod(amount_cents, len(participants))
        return {
            user_id: base + (1 if index < leftover else 0)
            for index, user_id in enumerate(participants)
        }

    def exact(self, amount_cents: int, amounts: Dict[str, int]) -> Dict[str, int]:
        require_positive_cents(amount_cents)
        self._check_participants(list(amounts))

        for user_id, cents in amounts.items():
            if isinstance(cents, bool) or not isinstance(cents, int) or cents < 0:
                raise InvalidInput(
                    f"Exact amount for '{user_id}' must be a non-negative integer of cents",
                    {"user_id": user_id, "amount_cents": cents},
                )

        total = sum(amounts.values())
        if abs(total - amount_cents) >= self.amount_tolerance_cents:
            raise ValidationError(
                f"Sum of exact amounts ({total}) doesn't match expense amount ({amount_cents})",
                {"sum_cents": total, "amount_cents": amount_cents},
            )
        return dict(amounts)

    def percentage(
        self,
        amount_cents: int,
        participants: Sequence[str],
        percentages: Sequence[Decimal],
    ) -> Dict[str, int]:
        require_positive_cents(amount_cents)
        self._check_participants(participants)
        weights = self._check_weights(participants, percentages, "percentages")

        total = sum(weights, Decimal(0))
        if abs(total - HUNDRED) > self.percentage_tolerance:
            raise ValidationError(
                f"Total percentage ({total}%) doesn't equal 100%",
                {"total_percentage": str(total)},
            )
        return dict(zip(participants, allocate_largest_remainder(amount_cents, weights)))

    def shares(
        self,
        amount_cents: int,
        participants: Sequence[str],
        weights: Sequence[Decimal],
    ) -> Dict[str, int]:
        require_positive_cents(amount_cents)
        self._check_participants(participants)
        checked = self._check_weights(participants, weights, "weights")

        if sum(checked, Decimal(0)) <= 0:
            raise InvalidInput("Share weights must sum to a positive number")
        return dict(zip(participants, allocate_largest_remainder(amount_cents, checked)))

    @staticmethod
    def _check_participants(participants: Sequence[str]) -> None:
        if not participants:
            raise InvalidInput("At least one participant is required")
        if len(set(participants)) != len(participants):
            duplicates = sorted({p for p in participants if participants.count(p) > 1})
            raise InvalidInput("Duplicate participants", {"duplicates": duplicates})

    @staticmethod
    def _check_weights(
        participants: Sequence[str],
        values: Sequence[Decimal],
        field: str,
    ) -> List[Decimal]:
        if len(values) != len(participants):
            raise InvalidInput(
                f"Expected one entry in {field} per participant",
                {"participants": len(participants), field: len(values)},
            )
        checked = []
        for user_id, value in zip(participants, values):
            try:
                value = Decimal(value)
            except (InvalidOperation, TypeError, ValueError):
                raise InvalidInput(
                    f"Entry in {field} for '{user_id}' is not a number",
                    {"user_id": user_id, "value": repr(value)},
                )
            if not value.is_finite() or value < 0:
                raise InvalidInput(
                    f"Entry in {field} for '{user_id}' must be non-negative",
                    {"user_id": user_id, "value": str(value)},
                )
            checked.append(value)
        return checked
