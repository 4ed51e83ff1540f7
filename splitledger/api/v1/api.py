from fastapi import APIRouter

from splitledger.api.v1.endpoints import expenses, groups, payments, settlements

api_router = APIRouter()

api_router.include_router(groups.router, prefix="/groups", tags=["groups"])
api_router.include_router(expenses.router, prefix="/groups", tags=["expenses"])
api_router.include_router(payments.router, prefix="/groups", tags=["payments"])
api_router.include_router(settlements.router, prefix="/groups", tags=["settlements"])
