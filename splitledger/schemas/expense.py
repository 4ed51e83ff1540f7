from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from splitledger.models.split import EqualSplit, SplitKind, SplitRule


class ExpenseCreate(BaseModel):
    """
    Submit an expense.

    split defaults to an equal split; for percentage / shares the lists
    are aligned with participants.
    """
    description: str = Field("", max_length=200)
    amount_cents: int  # Integer cents
    payer_id: str = Field(..., min_length=1)
    participants: List[str]
    split: SplitRule = Field(default_factory=EqualSplit)
    category: Optional[str] = None
    notes: str = ""
    expense_id: Optional[str] = None


class ExpenseResponse(BaseModel):
    id: str
    group_id: str
    description: str
    amount_cents: int
    payer_id: str
    split_kind: SplitKind
    splits: Dict[str, int]
    category: Optional[str] = None
    notes: str = ""
    created_at: datetime

    model_config = {"from_attributes": True}
