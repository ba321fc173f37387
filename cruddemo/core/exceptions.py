from typing import Any, Dict, Optional


class CruddemoException(Exception):
    """
    Base class for every custom error raised by the application.
    Carries a stable code and optional details next to the message.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)


class NotFoundException(CruddemoException):
    """An expected resource does not exist."""
    def __init__(self, message: str = "Resource not found", details: dict = None):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            details=details
        )


class DatabaseConnectionError(CruddemoException):
    """The database could not be reached during startup."""
    def __init__(self, message: str):
        super().__init__(
            message=f"Database Error: {message}",
            code="DATABASE_UNAVAILABLE"
        )
