"""Structured logging and request middleware for the API.

This module provides:
- Structured logging configuration (key=value format)
- Request ID middleware for tracing
- Request timing middleware

Example:
    >>> from src.api.logging import setup_logging
    >>> setup_logging("INFO")
"""

import logging
import sys
import threading
import time
import uuid
from contextvars import ContextVar
from typing import Callable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware


# Context variable for request ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

# Paths logged at DEBUG instead of INFO by the timing middleware
QUIET_PATHS = frozenset({"/health"})

# Record attributes set through `extra=` by the playback package
PLAYBACK_FIELDS = ("sound_file", "volume")


# =============================================================================
# Custom Logging Formatter
# =============================================================================


class StructuredFormatter(logging.Formatter):
    """Structured log formatter producing key=value output.
    
    Formats log messages as:
        timestamp=ISO8601 level=LEVEL logger=NAME request_id=ID [thread=NAME]
        [sound_file=NAME volume=N] message="MSG"
    
    The thread field is only added for records from the sound writer thread.
    Playback records carry the sound file and volume they concern.
    """
    
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as structured key=value pairs."""
        parts = [
            f"timestamp={self.formatTime(record, self.datefmt)}",
            f"level={record.levelname}",
            f"logger={record.name}",
            f"request_id={request_id_var.get() or '-'}",
        ]
        
        if record.threadName and record.threadName.startswith("sound-"):
            parts.append(f"thread={record.threadName}")
        
        for field in PLAYBACK_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                parts.append(f"{field}={value}")
        
        message = record.getMessage().replace('"', '\\"')
        parts.append(f'message="{message}"')
        
        if record.exc_info:
            exc_text = self.formatException(record.exc_info)
            exc_text = exc_text.replace("\n", " | ").replace('"', '\\"')
            parts.append(f'exception="{exc_text}"')
        
        return " ".join(parts)


# =============================================================================
# Logging Setup
# =============================================================================


_setup_lock = threading.Lock()


def setup_logging(log_level: str = "INFO") -> None:
    """Configure structured logging for the application.
    
    Replaces any handlers on the root logger with a single stdout handler.
    
    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR).
    """
    level = log_level.upper()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter(datefmt="%Y-%m-%dT%H:%M:%S%z"))
    handler.setLevel(level)
    
    with _setup_lock:
        root_logger = logging.getLogger()
        root_logger.setLevel(level)
        for existing in root_logger.handlers[:]:
            root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
    
    # Reduce noise from third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Middleware
# =============================================================================


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware to assign a unique request ID to each request.
    
    The request ID is taken from the X-Request-ID header or generated as a
    UUID4, stored in request.state.request_id and request_id_var, and echoed
    in the X-Request-ID response header.
    """
    
    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request with request ID tracking."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            request_id_var.reset(token)


class TimingMiddleware(BaseHTTPMiddleware):
    """Middleware to track and log request timing.
    
    Logs total request duration and adds X-Response-Time header.
    """
    
    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request with timing tracking."""
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        
        response.headers["X-Response-Time"] = f"{duration_ms:.2f}ms"
        
        level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
        logging.getLogger("audiobait.timing").log(
            level,
            "method=%s path=%s status=%d duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        
        return response


def add_middleware(app: FastAPI) -> None:
    """Add all middleware to the FastAPI application.
    
    Args:
        app: The FastAPI application instance.
    """
    # RequestID is added last so it runs first
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
