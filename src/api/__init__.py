"""FastAPI application for audiobait management.

This module provides a REST API with endpoints for:
- /health: Service health check
- /audiobait: Service status, resolved schedule, and restart
- /audiobait/log-entries: Recent service log entries
- /audiobait/play-test-sound: Sound playback

Example:
    To run the API server:
    
    $ uvicorn src.api.main:app --host 0.0.0.0 --port 8000
"""

from .main import app

__all__ = ["app"]
