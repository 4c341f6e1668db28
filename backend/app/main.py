import logging
import os

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.app.api.v1.router import router as v1_router
from backend.services.errors import InvalidState, NotFound, OrderServiceError

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="COMPTOIRS ORDERS", version="0.1.0")
app.include_router(v1_router, prefix="/v1")


# Map exception types to HTTP status codes
ERROR_STATUS_CODES: dict[type, int] = {
    NotFound: 404,
    InvalidState: 409,
}


@app.exception_handler(OrderServiceError)
async def order_service_error_handler(request: Request, exc: OrderServiceError) -> JSONResponse:
    """Map OrderServiceError subclasses to HTTP responses; the transaction is never committed."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    logger.warning("%s %s rejected (%d): %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )
