from typing import List

from fastapi import APIRouter, Depends, status

from splitledger.api.deps import get_ledger_service
from splitledger.schemas.payment import PaymentCreate, PaymentResponse
from splitledger.services.ledger_service import LedgerService

router = APIRouter()


@router.post("/{group_id}/payments", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def record_payment(
    group_id: str,
    payment_in: PaymentCreate,
    service: LedgerService = Depends(get_ledger_service)
):
    """Record a direct payment between two members"""
    return service.record_payment(
        group_id=group_id,
        from_id=payment_in.from_user_id,
        to_id=payment_in.to_user_id,
        amount_cents=payment_in.amount_cents,
        related_expense_id=payment_in.related_expense_id,
        notes=payment_in.notes,
        payment_id=payment_in.payment_id,
    )


@router.get("/{group_id}/payments", response_model=List[PaymentResponse])
def list_payments(
    group_id: str,
    service: LedgerService = Depends(get_ledger_service)
):
    return service.list_payments(group_id)
