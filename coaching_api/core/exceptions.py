from typing import Any, Dict, Optional


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""
    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class NotFoundError(ServiceError):
    status_code = 404
    code = "NOT_FOUND"


class ConflictError(ServiceError):
    status_code = 409
    code = "CONFLICT"


class StorageError(ServiceError):
    """A database call failed. Raised after the session has been rolled back."""
    status_code = 500
    code = "STORAGE_ERROR"


class ImmutableRecordError(ServiceError):
    """An update or delete was attempted on an append-only record."""
    status_code = 409
    code = "IMMUTABLE_RECORD"
