"""Storage error taxonomy and the exception handlers that translate it to HTTP."""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from swasthyaq.core.logging import get_logger

logger = get_logger(__name__)


class StorageError(Exception):
    """Base class for errors raised by the entity storage core."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NotFoundError(StorageError):
    """The addressed entity does not exist."""

    def __init__(self, entity_name: str, entity_id: str):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} '{entity_id}' not found")


class AlreadyExistsError(StorageError):
    """An entity with the same id is already stored."""

    def __init__(self, entity_name: str, entity_id: str):
        self.entity_name = entity_name
        self.entity_id = entity_id
        super().__init__(f"{entity_name} '{entity_id}' already exists")


class ValidationError(StorageError):
    """Input rejected before any storage call was made."""


class InvalidCursorError(ValidationError):
    """Raised when a pagination cursor cannot be decoded."""


class SubstrateError(StorageError):
    """The key-value substrate failed, or returned a value that cannot be decoded."""


class ConflictError(StorageError):
    """A versioned write found the record changed since it was read."""

    def __init__(self, entity_name: str, entity_id: str, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{entity_name} '{entity_id}' is at version {actual}, expected {expected}"
        )


_STATUS_BY_ERROR: dict[type[StorageError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyExistsError: status.HTTP_409_CONFLICT,
    ConflictError: status.HTTP_409_CONFLICT,
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    SubstrateError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(exc: StorageError) -> int:
    """Return the HTTP status for a storage error, honouring subclasses."""
    for error_type in type(exc).__mro__:
        if error_type in _STATUS_BY_ERROR:
            return _STATUS_BY_ERROR[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_body(message: str) -> dict[str, object]:
    return {"success": False, "error": message}


async def storage_exception_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Handle storage errors raised by the core.

    Args:
        request: The incoming request.
        exc: The exception that was raised.

    Returns:
        JSONResponse: Error response.
    """
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"Storage failure on {request.url.path}: {exc.message}", exc_info=True)
    else:
        logger.info("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content=error_body(exc.message))


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions.

    Args:
        request: The incoming request.
        exc: The HTTP exception that was raised.

    Returns:
        JSONResponse: Error response.
    """
    logger.warning(f"HTTP error {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=exc.headers,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions.

    Args:
        request: The incoming request.
        exc: The unhandled exception.

    Returns:
        JSONResponse: Error response.
    """
    logger.error(f"Unhandled error: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )
