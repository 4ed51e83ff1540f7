import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from splitledger.api.v1.api import api_router
from splitledger.core.config import settings
from splitledger.core.errors import (
    GroupNotFound,
    InvalidInput,
    LedgerError,
    StateError,
    ValidationError,
)
from splitledger.core.logging_config import configure_logging
from splitledger.services.ledger_service import LedgerService

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    InvalidInput: 400,
    GroupNotFound: 404,
    ValidationError: 422,
    StateError: 500,
}


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    status_code = ERROR_STATUS.get(type(exc), 400)
    if isinstance(exc, StateError):
        logger.error("Ledger state error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "error": exc.kind, "context": _jsonable(exc.details)},
    )


def _jsonable(details: dict) -> dict:
    return {key: value if isinstance(value, (str, int, float, bool, list, type(None))) else str(value)
            for key, value in details.items()}


def create_app(service: Optional[LedgerService] = None) -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description=settings.DESCRIPTION,
        debug=settings.DEBUG,
    )
    app.state.ledger_service = service or LedgerService()
    app.add_exception_handler(LedgerError, ledger_error_handler)

    @app.get("/")
    async def root():
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app


app = create_app()
