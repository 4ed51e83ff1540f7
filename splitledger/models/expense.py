"""
Expense model - a purchase paid by one user and owed by its participants.

Design principles:
- All amounts in integer cents
- splits maps participant -> owed cents, summing to amount_cents
- Immutable once distributed; the ledger applies it exactly once
"""

from datetime import datetime
from typing import Dict, Optional

from pydantic import Field

from splitledger.models.base import FrozenModel, _utcnow, new_id
from splitledger.models.split import SplitKind


class Expense(FrozenModel):
    """
    Invariants:
    - amount_cents > 0
    - sum(splits.values()) == amount_cents (within tolerance)
    """
    id: str = Field(default_factory=new_id)
    group_id: str
    description: str = ""

    amount_cents: int = Field(gt=0)
    payer_id: str
    split_kind: SplitKind
    splits: Dict[str, int]

    category: Optional[str] = None
    notes: str = ""
    created_at: datetime = Field(default_factory=_utcnow)
