from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class GroupCreate(BaseModel):
    """Register a group. The id is generated when omitted."""
    group_id: Optional[str] = Field(None, min_length=1, max_length=100)
    name: str = Field("", max_length=100)


class GroupResponse(BaseModel):
    id: str
    name: str
    created_at: datetime
    expense_count: int = 0
    payment_count: int = 0

    model_config = {"from_attributes": True}
