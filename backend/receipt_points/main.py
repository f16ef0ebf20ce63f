# receipt_points/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from receipt_points.api.v1 import health, receipts
from receipt_points.core.config import settings
from receipt_points.services.store import ReceiptStore

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None) -> FastAPI:
    store = ReceiptStore(database_url or settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.store = store.open()
        try:
            yield
        finally:
            store.close()

    app = FastAPI(title="Receipt Points API", version="0.1.0", lifespan=lifespan)

    # every error body is {"error": "..."}
    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    # malformed JSON or missing fields get the same answer as a failed rule
    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        logger.info("Malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": receipts.INVALID_RECEIPT},
        )

    app.include_router(health.router)
    app.include_router(receipts.router, prefix="/receipts", tags=["receipts"])
    return app


app = create_app()
