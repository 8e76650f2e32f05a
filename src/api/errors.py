"""Error handling and HTTP mapping for the API.

This module provides:
- API-specific exception classes
- Mapping from internal errors to HTTP status codes
- Exception handlers for FastAPI

Error Code Mapping:
    - SoundLoadError -> 404 SOUND_NOT_AVAILABLE
    - VolumeSetError -> 500 VOLUME_SET_FAILED
    - PlaybackProcessError -> 500 PLAYBACK_FAILED (captured output in details)
    - Generic exceptions -> 500 INTERNAL_ERROR

Schedule load errors are not mapped here: the status page reports them in
its own ``error_message`` field.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from playback.errors import PlaybackProcessError, SoundLoadError, VolumeSetError

from .schemas import ApiErrorResponse, ErrorDetail


logger = logging.getLogger(__name__)


# =============================================================================
# API Exception Classes
# =============================================================================


class ApiError(Exception):
    """Base exception for API errors.
    
    Attributes:
        status_code: HTTP status code to return.
        code: Machine-readable error code.
        message: Human-readable error message.
        details: Optional additional context.
    """
    
    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details


class SoundNotAvailableError(ApiError):
    """Raised when the requested sound cannot be loaded."""
    
    def __init__(
        self,
        message: str = "Sound file not available",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=404,
            code="SOUND_NOT_AVAILABLE",
            message=message,
            details=details,
        )


class VolumeSetFailedError(ApiError):
    """Raised when the sound card volume cannot be set."""
    
    def __init__(
        self,
        message: str = "Unable to set the volume",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=500,
            code="VOLUME_SET_FAILED",
            message=message,
            details=details,
        )


class PlaybackFailedError(ApiError):
    """Raised when the playback command fails."""
    
    def __init__(
        self,
        message: str = "Audio output failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=500,
            code="PLAYBACK_FAILED",
            message=message,
            details=details,
        )


class InternalError(ApiError):
    """Raised for unexpected internal errors."""
    
    def __init__(
        self,
        message: str = "Internal server error",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=500,
            code="INTERNAL_ERROR",
            message=message,
            details=details,
        )


# =============================================================================
# Error Mapping Functions
# =============================================================================


def map_exception_to_api_error(exc: Exception) -> ApiError:
    """Map internal exceptions to appropriate API errors.
    
    Args:
        exc: The exception raised during processing.
        
    Returns:
        An ApiError subclass with appropriate HTTP status and code.
    """
    # Missing/unreadable sound -> 404
    if isinstance(exc, SoundLoadError):
        return SoundNotAvailableError(
            message=exc.message,
            details={"reason": exc.code, **exc.details},
        )
    
    # Mixer failure -> 500
    if isinstance(exc, VolumeSetError):
        return VolumeSetFailedError(
            message=f"unable to set the volume: {exc.message}",
            details=exc.details,
        )
    
    # Player failure -> 500, keep the output for diagnostics
    if isinstance(exc, PlaybackProcessError):
        return PlaybackFailedError(
            message=exc.message,
            details={
                "reason": exc.code,
                **exc.details,
                "output": exc.output.decode("utf-8", errors="replace"),
            },
        )
    
    # Already an API error, return as-is
    if isinstance(exc, ApiError):
        return exc
    
    # Generic fallback -> 500
    return InternalError(
        message=str(exc) or "An unexpected error occurred",
        details={"exception_type": type(exc).__name__},
    )


def create_error_response(api_error: ApiError) -> ApiErrorResponse:
    """Create a structured error response from an API error.
    
    Args:
        api_error: The API error to convert.
        
    Returns:
        ApiErrorResponse with properly structured error details.
    """
    return ApiErrorResponse(
        error=ErrorDetail(
            code=api_error.code,
            message=api_error.message,
            details=api_error.details,
        )
    )


# =============================================================================
# Exception Handlers
# =============================================================================


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Handle ApiError exceptions.
    
    Args:
        request: The incoming request.
        exc: The ApiError exception.
        
    Returns:
        JSONResponse with error details.
    """
    request_id = getattr(request.state, "request_id", "unknown")
    
    logger.warning(
        "API error: code=%s message=%s request_id=%s",
        exc.code,
        exc.message,
        request_id,
    )
    
    response = create_error_response(exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=response.model_dump(),
        headers={"X-Request-ID": request_id},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions.
    
    Maps internal exceptions to appropriate HTTP responses.
    
    Args:
        request: The incoming request.
        exc: The unhandled exception.
        
    Returns:
        JSONResponse with error details.
    """
    request_id = getattr(request.state, "request_id", "unknown")
    
    # Map to API error
    api_error = map_exception_to_api_error(exc)
    
    # Expected playback failures are logged without a traceback
    if isinstance(api_error, InternalError):
        logger.error(
            "Internal error: code=%s message=%s request_id=%s",
            api_error.code,
            api_error.message,
            request_id,
            exc_info=True,
        )
    else:
        logger.warning(
            "audio output failed: code=%s message=%s request_id=%s",
            api_error.code,
            api_error.message,
            request_id,
        )
    
    response = create_error_response(api_error)
    return JSONResponse(
        status_code=api_error.status_code,
        content=response.model_dump(),
        headers={"X-Request-ID": request_id},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app.
    
    Args:
        app: The FastAPI application instance.
    """
    # Handle API errors
    app.add_exception_handler(ApiError, api_error_handler)
    
    # Handle playback errors
    app.add_exception_handler(SoundLoadError, generic_exception_handler)
    app.add_exception_handler(VolumeSetError, generic_exception_handler)
    app.add_exception_handler(PlaybackProcessError, generic_exception_handler)
    
    # Catch-all for unexpected errors
    app.add_exception_handler(Exception, generic_exception_handler)
