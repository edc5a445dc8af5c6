from enum import Enum


class ErrorType(Enum):
    NOT_FOUND = "not_found"
    INVALID_REQUEST = "invalid_request"
    STORE_ERROR = "store_error"
    INTERNAL_ERROR = "internal_error"


# Map error types to HTTP status codes
ERROR_STATUS_MAP = {
    ErrorType.NOT_FOUND: 404,
    ErrorType.INVALID_REQUEST: 400,
    ErrorType.STORE_ERROR: 500,
    ErrorType.INTERNAL_ERROR: 500,
}
