"""Custom exceptions for schedule loading and resolution."""

from typing import Any


class ScheduleError(Exception):
    """Base exception for all schedule errors.
    
    Attributes:
        message: Human-readable error description.
        code: Short error code string (e.g., "INVALID_JSON").
        details: Optional dictionary with additional context.
    """
    
    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize ScheduleError.
        
        Args:
            message: Human-readable error description.
            code: Short error code string.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
    
    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"[{self.code}] {self.message} (details: {self.details})"
        return f"[{self.code}] {self.message}"
    
    def __repr__(self) -> str:
        """Return repr string."""
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r}, details={self.details!r})"


class ScheduleLoadError(ScheduleError):
    """Raised when the schedule document cannot be loaded.
    
    Common codes:
        - FILE_NOT_FOUND: Schedule file does not exist.
        - READ_FAILED: Schedule file exists but could not be read.
        - INVALID_JSON: Schedule file is not valid JSON.
        - INVALID_SCHEDULE: JSON does not have the schedule shape.
    """
    pass


class LibraryUnavailableError(ScheduleError):
    """Raised when the sound library directory cannot be scanned.
    
    This is a soft failure: resolution continues without file names.
    """
    
    def __init__(
        self,
        message: str,
        code: str = "LIBRARY_UNAVAILABLE",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)
