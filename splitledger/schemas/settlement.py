from typing import List

from pydantic import BaseModel

from splitledger.schemas.payment import PaymentResponse


class SettlementTransactionResponse(BaseModel):
    from_user_id: str
    to_user_id: str
    amount_cents: int

    model_config = {"from_attributes": True}


class SettlementPlanResponse(BaseModel):
    group_id: str
    transactions: List[SettlementTransactionResponse]


class SettleUpResponse(BaseModel):
    group_id: str
    payments: List[PaymentResponse]
