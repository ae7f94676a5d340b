from pydantic import BaseModel, Field
from typing import Generic, TypeVar, Optional, Any, Dict

DataType = TypeVar("DataType")

class APIResponse(BaseModel, Generic[DataType]):
    """Envelope for the course, student, test and question management routes."""
    message: str
    data: Optional[DataType] = None

class ErrorDetail(BaseModel):
    code: str = Field(..., description="NOT_FOUND, CONFLICT, STORAGE_ERROR, VALIDATION_ERROR, ...")
    message: str
    details: Optional[Dict[str, Any]] = None

class ErrorResponse(BaseModel):
    """Error body of the management routes."""
    error: ErrorDetail
    timestamp: str
    path: str
    request_id: Optional[str] = None

class ResultError(BaseModel):
    """
    Error body of the submission and result-listing routes.

    Clients of these routes read a single message, e.g.
    ``{"error": "Test not found"}``.
    """
    error: str = Field(..., examples=["Test not found", "Failed to submit test"])
