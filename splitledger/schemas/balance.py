from typing import Dict, List

from pydantic import BaseModel


class BalanceEntryResponse(BaseModel):
    """debtor_id owes creditor_id amount_cents."""
    creditor_id: str
    debtor_id: str
    amount_cents: int

    model_config = {"from_attributes": True}


class BalanceSheetResponse(BaseModel):
    group_id: str
    entries: List[BalanceEntryResponse]


class NetPositionsResponse(BaseModel):
    """positive = net creditor, negative = net debtor."""
    group_id: str
    positions: Dict[str, int]


class UserBalanceResponse(BaseModel):
    group_id: str
    user_id: str
    balances: Dict[str, int]  # counterparty -> cents they owe user (negative: user owes them)
    total_cents: int
