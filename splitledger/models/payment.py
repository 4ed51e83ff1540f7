from datetime import datetime
from typing import Optional

from pydantic import Field

from splitledger.models.base import FrozenModel, _utcnow, new_id


class Payment(FrozenModel):
    """Direct payment: payer hands amount_cents to payee. Not split."""
    id: str = Field(default_factory=new_id)
    group_id: str
    payer_id: str
    payee_id: str
    amount_cents: int
    related_expense_id: Optional[str] = None
    notes: str = ""
    created_at: datetime = Field(default_factory=_utcnow)
