from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class PaymentCreate(BaseModel):
    from_user_id: str = Field(..., min_length=1)
    to_user_id: str = Field(..., min_length=1)
    amount_cents: int  # Integer cents
    related_expense_id: Optional[str] = None
    notes: str = ""
    payment_id: Optional[str] = None


class PaymentResponse(BaseModel):
    id: str
    group_id: str
    payer_id: str
    payee_id: str
    amount_cents: int
    related_expense_id: Optional[str] = None
    notes: str = ""
    created_at: datetime

    model_config = {"from_attributes": True}
