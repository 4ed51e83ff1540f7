from typing import List

from fastapi import APIRouter, Depends, status

from splitledger.api.deps import get_ledger_service
from splitledger.schemas.expense import ExpenseCreate, ExpenseResponse
from splitledger.services.ledger_service import LedgerService

router = APIRouter()


@router.post("/{group_id}/expenses", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
def submit_expense(
    group_id: str,
    expense_in: ExpenseCreate,
    service: LedgerService = Depends(get_ledger_service)
):
    """Split an expense and apply it to the group's ledger"""
    return service.submit_expense(
        group_id=group_id,
        description=expense_in.description,
        amount_cents=expense_in.amount_cents,
        payer_id=expense_in.payer_id,
        split=expense_in.split,
        participants=expense_in.participants,
        category=expense_in.category,
        notes=expense_in.notes,
        expense_id=expense_in.expense_id,
    )


@router.get("/{group_id}/expenses", response_model=List[ExpenseResponse])
def list_expenses(
    group_id: str,
    service: LedgerService = Depends(get_ledger_service)
):
    return service.list_expenses(group_id)
