import logging
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from product_service.errors import ErrorType, ERROR_STATUS_MAP

logger = logging.getLogger(__name__)

# Messages for request parsing failures, keyed by where the bad input was
VALIDATION_MESSAGES = {
    "path": "Invalid product ID",
    "query": "Invalid query parameters",
    "body": "Invalid request payload",
}


class AppException(Exception):
    """Custom exception that services can raise."""

    def __init__(self, error_type: ErrorType, message: str):
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class NotFoundError(AppException):
    """A single-row lookup matched zero rows."""

    def __init__(self, message: str = "Product not found"):
        super().__init__(ErrorType.NOT_FOUND, message)


class StoreError(AppException):
    """Any persistence failure other than a clean zero-row lookup."""

    def __init__(self, message: str = "Database error"):
        super().__init__(ErrorType.STORE_ERROR, message)


async def app_exception_handler(_request: Request, exc: AppException) -> JSONResponse:
    """Global handler for AppException - converts to proper HTTP response."""
    status_code = ERROR_STATUS_MAP.get(exc.error_type, 500)
    return JSONResponse(
        status_code=status_code,
        content={"error": exc.message}
    )


async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request parsing failures are reported as 400, not FastAPI's default 422."""
    errors = exc.errors()
    location = errors[0]["loc"][0] if errors and errors[0].get("loc") else "body"
    if location == "path" and errors[0]["loc"][-1] == "since":
        message = "Invalid changed value"
    else:
        message = VALIDATION_MESSAGES.get(location, "Invalid request payload")
    return JSONResponse(
        status_code=ERROR_STATUS_MAP[ErrorType.INVALID_REQUEST],
        content={"error": message}
    )


async def generic_exception_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Global handler for unhandled exceptions - returns 500."""
    logger.error(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"}
    )
