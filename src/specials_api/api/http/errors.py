"""JSON error bodies shared by the routers and exception handlers."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import JSONResponse


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the ``{"error": message}`` body used by every failing route."""
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Map request body validation failures to 400 ``{"error": ...}``."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Validation error on {}: {}", request.url.path, exc.errors())
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")
