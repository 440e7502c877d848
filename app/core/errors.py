from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import BagDropError, ErrorKind
from app.schemas.response import ErrorResponse
from app.core.config import settings
from app.core.logging import get_logger
from utils.constants import INTERNAL_ERROR_MESSAGE

logger = get_logger(__name__)


def error_body(error: str, details=None) -> dict:
    return ErrorResponse(error=error, details=details).model_dump(exclude_none=True)


def add_exception_handlers(app: FastAPI):
    """
    Registers exception handlers with the FastAPI app.
    """
    @app.exception_handler(BagDropError)
    async def bagdrop_exception_handler(request: Request, exc: BagDropError):
        if exc.kind == ErrorKind.VALIDATION:
            logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(error_body(exc.message, exc.details))
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Handles standard HTTP exceptions (404 for unknown routes, 405, etc.)
        """
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Handles malformed request bodies (wrong JSON types, invalid JSON).
        """
        return JSONResponse(
            status_code=422,
            content=error_body("Input validation failed", jsonable_encoder(exc.errors()))
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catch-all for unhandled exceptions.
        """
        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={
                "method": request.method,
                "url": str(request.url),
                "client": request.client.host if request.client else "unknown"
            },
            exc_info=True
        )

        details = None if settings.is_production else str(exc)

        return JSONResponse(
            status_code=500,
            content=error_body(INTERNAL_ERROR_MESSAGE, details)
        )
