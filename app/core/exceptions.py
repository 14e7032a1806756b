"""
Custom application exceptions
"""

from typing import Optional, Dict, Any


class EscapeMapException(Exception):
    """Base exception for EscapeMap application"""

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(EscapeMapException):
    """Resource not found errors"""

    def __init__(self, resource: str, identifier: Any = None):
        message = f"{resource} not found"
        if identifier:
            message = f"{resource} with id {identifier} not found"
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404
        )


class ValidationError(EscapeMapException):
    """Validation errors raised before anything is submitted"""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            details=details
        )


class AdminModeRequired(EscapeMapException):
    """Admin action attempted while the local admin toggle is off"""

    def __init__(self, message: str = "Admin mode is not enabled"):
        super().__init__(
            message=message,
            code="ADMIN_MODE_REQUIRED",
            status_code=403
        )


class BackendError(EscapeMapException):
    """Backend REST failure: transport error or a non-success envelope"""

    def __init__(
        self,
        message: str = "Backend request failed",
        code: str = "BACKEND_ERROR",
        details: Optional[Dict] = None
    ):
        super().__init__(
            message=message,
            code=code,
            status_code=502,
            details=details
        )


class GeocodingError(EscapeMapException):
    """Geocoding service failure"""

    def __init__(self, message: str = "Geocoding failed", status_code: int = 500):
        super().__init__(
            message=message,
            code="GEOCODING_ERROR",
            status_code=status_code
        )


class GeocodingNotFoundError(GeocodingError):
    """Address could not be resolved to a coordinate"""

    def __init__(self, address: str):
        super().__init__(
            message=f"No result found for address: {address}",
            status_code=404
        )
        self.code = "ADDRESS_NOT_FOUND"
        self.details = {"address": address}
