from typing import List

from fastapi import APIRouter, Depends, status

from splitledger.api.deps import get_ledger_service
from splitledger.schemas.balance import (
    BalanceEntryResponse,
    BalanceSheetResponse,
    NetPositionsResponse,
    UserBalanceResponse,
)
from splitledger.schemas.group import GroupCreate, GroupResponse
from splitledger.services.ledger_service import LedgerService

router = APIRouter()


def _group_response(group) -> GroupResponse:
    return GroupResponse(
        id=group.id,
        name=group.name,
        created_at=group.created_at,
        expense_count=len(group.expenses),
        payment_count=len(group.payments),
    )


@router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED)
def create_group(
    group_in: GroupCreate,
    service: LedgerService = Depends(get_ledger_service)
):
    """Register a group with an empty ledger"""
    group = service.open_group(group_id=group_in.group_id, name=group_in.name)
    return _group_response(group)


@router.get("", response_model=List[GroupResponse])
def list_groups(service: LedgerService = Depends(get_ledger_service)):
    return [_group_response(group) for group in service.list_groups()]


@router.get("/{group_id}", response_model=GroupResponse)
def get_group(
    group_id: str,
    service: LedgerService = Depends(get_ledger_service)
):
    return _group_response(service.get_group(group_id))


@router.get("/{group_id}/balances", response_model=BalanceSheetResponse)
def get_balance_sheet(
    group_id: str,
    service: LedgerService = Depends(get_ledger_service)
):
    """All non-zero pairwise balances"""
    entries = service.get_balance_sheet(group_id)
    return BalanceSheetResponse(
        group_id=group_id,
        entries=[BalanceEntryResponse.model_validate(entry) for entry in entries],
    )


@router.get("/{group_id}/net-positions", response_model=NetPositionsResponse)
def get_net_positions(
    group_id: str,
    service: LedgerService = Depends(get_ledger_service)
):
    return NetPositionsResponse(group_id=group_id, positions=service.get_net_positions(group_id))


@router.get("/{group_id}/users/{user_id}/balances", response_model=UserBalanceResponse)
def get_user_balances(
    group_id: str,
    user_id: str,
    service: LedgerService = Depends(get_ledger_service)
):
    """A user's balance against each counterparty in the group"""
    result = service.get_user_balances(group_id, user_id)
    return UserBalanceResponse(
        group_id=group_id,
        user_id=user_id,
        balances=result["balances"],
        total_cents=result["total_cents"],
    )
