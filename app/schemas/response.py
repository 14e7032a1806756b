"""
Generic response schemas

The service answers in the same envelope the backend uses:
``{success, data, error: {code, message}}``.
"""

from pydantic import BaseModel, Field
from typing import Any, Optional, Dict, Generic, TypeVar
from datetime import datetime, timezone

T = TypeVar('T')


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response"""
    success: bool = True
    data: T
    message: str = "Operation successful"
    timestamp: datetime = Field(default_factory=utcnow)


class ErrorDetail(BaseModel):
    """Error detail schema"""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = {}


class ErrorResponse(BaseModel):
    """Generic error response"""
    success: bool = False
    error: ErrorDetail
    timestamp: datetime = Field(default_factory=utcnow)


class BackendErrorDetail(BaseModel):
    """Error part of a backend envelope; either field may be missing"""
    code: Optional[str] = None
    message: Optional[str] = None


class BackendEnvelope(BaseModel):
    """Envelope returned by the backend REST collaborator"""
    success: bool
    data: Any = None
    error: Optional[BackendErrorDetail] = None


class MessageResponse(BaseModel):
    """Simple message response"""
    success: bool = True
    message: str
    timestamp: datetime = Field(default_factory=utcnow)
