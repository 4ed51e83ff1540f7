from fastapi import APIRouter, Depends

from splitledger.api.deps import get_ledger_service
from splitledger.schemas.payment import PaymentResponse
from splitledger.schemas.settlement import (
    SettlementPlanResponse,
    SettlementTransactionResponse,
    SettleUpResponse,
)
from splitledger.services.ledger_service import LedgerService

router = APIRouter()


@router.get("/{group_id}/settlements/plan", response_model=SettlementPlanResponse)
def get_settlement_plan(
    group_id: str,
    service: LedgerService = Depends(get_ledger_service)
):
    """Settling transactions that zero every balance (greedy, not guaranteed minimal)"""
    plan = service.get_settlement_plan(group_id)
    return SettlementPlanResponse(
        group_id=group_id,
        transactions=[SettlementTransactionResponse.model_validate(tx) for tx in plan],
    )


@router.post("/{group_id}/settlements/settle-up", response_model=SettleUpResponse)
def settle_up(
    group_id: str,
    service: LedgerService = Depends(get_ledger_service)
):
    """Record the current plan as payments, then offset any zero-net cycles"""
    payments = service.settle_up(group_id)
    return SettleUpResponse(
        group_id=group_id,
        payments=[PaymentResponse.model_validate(p) for p in payments],
    )
