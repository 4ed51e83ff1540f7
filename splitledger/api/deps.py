from fastapi import Request

from splitledger.services.ledger_service import LedgerService


def get_ledger_service(request: Request) -> LedgerService:
    """Return the LedgerService owned by the running app."""
    return request.app.state.ledger_service
