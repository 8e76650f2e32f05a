"""FastAPI application for audiobait management.

This module provides the main FastAPI application with endpoints for:
- GET /health: Service health check
- GET /audiobait: Service status and the resolved schedule
- POST /audiobait: Restart the audiobait service
- GET /audiobait/log-entries: Recent audiobait log entries
- POST /audiobait/play-test-sound/{file_name}/{volume}: Play a sound

Example:
    Run with uvicorn:
    
    $ uvicorn src.api.main:app --host 0.0.0.0 --port 8000
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Path
from fastapi.middleware.cors import CORSMiddleware

from playback import MAX_VOLUME, MIN_VOLUME
from schedule import ScheduleLoadError, build_display_schedule

from .config import Settings, get_settings
from .deps import AppContext, build_app_context, get_app_context
from .errors import register_exception_handlers
from .logging import add_middleware, setup_logging
from .schemas import (
    AudiobaitResponse,
    DisplayScheduleSchema,
    HealthResponse,
    ResultResponse,
)


logger = logging.getLogger(__name__)


RESTART_OK_MESSAGE = "Audiobait service successfully restarted."
RESTART_FAILED_MESSAGE = "Could not restart audio bait service."


# =============================================================================
# Application Lifecycle
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events.
    
    Startup:
        - Initialize logging
        
    Shutdown:
        - Log shutdown
    """
    settings: Settings = app.state.context.settings
    
    setup_logging(settings.log_level)
    logger.info(
        "Starting %s v%s audio_dir=%s",
        settings.app_name,
        settings.app_version,
        settings.audio_dir,
    )
    
    yield
    
    logger.info("Application shutdown")


# =============================================================================
# Application Factory
# =============================================================================


def create_app(
    settings: Settings | None = None,
    context: AppContext | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.
    
    Args:
        settings: Application settings. If None, loads from environment.
            Ignored when ``context`` is given.
        context: Prebuilt handler context. If None, one is built from
            settings with the systemd/sox collaborators.
        
    Returns:
        Configured FastAPI application.
    """
    if context is None:
        if settings is None:
            settings = get_settings()
        context = build_app_context(settings)
    settings = context.settings
    
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Audiobait management API - view the playback schedule, control the audiobait service and play test sounds.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.context = context
    
    # Add CORS middleware (allow all in development)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Add custom middleware (request ID, timing)
    add_middleware(app)
    
    # Register exception handlers
    register_exception_handlers(app)
    
    # Register routes
    register_routes(app)
    
    return app


def build_audiobait_response(
    context: AppContext,
    response: AudiobaitResponse,
) -> AudiobaitResponse:
    """Attach the resolved schedule to a status response.
    
    A schedule that cannot be loaded leaves the schedule empty and sets
    ``error_message`` instead of failing the request.
    
    Args:
        context: Application context.
        response: Response with running/message fields already set.
        
    Returns:
        The same response, with schedule or error_message filled in.
    """
    settings = context.settings
    try:
        display = build_display_schedule(settings.audio_dir, settings.schedule_file_name)
    except ScheduleLoadError as e:
        logger.warning("Schedule unavailable: code=%s message=%s", e.code, e.message)
        if response.error_message:
            response.error_message = f"{response.error_message} {e.message}"
        else:
            response.error_message = e.message
        return response
    
    response.schedule = DisplayScheduleSchema.from_display(display)
    return response


def register_routes(app: FastAPI) -> None:
    """Register all API routes on the application.
    
    Handlers that shell out are plain ``def`` so FastAPI runs them in its
    threadpool.
    
    Args:
        app: The FastAPI application.
    """
    
    # =========================================================================
    # Health Endpoint
    # =========================================================================
    
    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
        description="Check service health and audio directory presence.",
    )
    def health(
        context: Annotated[AppContext, Depends(get_app_context)],
    ) -> HealthResponse:
        """Health check endpoint."""
        settings = context.settings
        return HealthResponse(
            status="ok",
            version=settings.app_version,
            audio_dir=str(settings.audio_dir),
            audio_dir_exists=settings.audio_dir.is_dir(),
        )
    
    # =========================================================================
    # Status / Restart Endpoints
    # =========================================================================
    
    @app.get(
        "/audiobait",
        response_model=AudiobaitResponse,
        tags=["Audiobait"],
        summary="Service status and schedule",
        description="Report whether the audiobait service is running and show the resolved schedule.",
    )
    def audiobait_status(
        context: Annotated[AppContext, Depends(get_app_context)],
    ) -> AudiobaitResponse:
        """Status endpoint.
        
        Returns:
            AudiobaitResponse with running flag and resolved schedule.
        """
        response = AudiobaitResponse(running=context.service.is_running())
        return build_audiobait_response(context, response)
    
    @app.post(
        "/audiobait",
        response_model=AudiobaitResponse,
        tags=["Audiobait"],
        summary="Restart the audiobait service",
        description="Restart the audiobait service and show the resolved schedule.",
    )
    def audiobait_restart(
        context: Annotated[AppContext, Depends(get_app_context)],
    ) -> AudiobaitResponse:
        """Restart endpoint.
        
        Returns:
            AudiobaitResponse with restart outcome and resolved schedule.
        """
        if context.service.restart():
            response = AudiobaitResponse(running=True, message=RESTART_OK_MESSAGE)
        else:
            response = AudiobaitResponse(error_message=RESTART_FAILED_MESSAGE)
        return build_audiobait_response(context, response)
    
    # =========================================================================
    # Log Endpoint
    # =========================================================================
    
    @app.get(
        "/audiobait/log-entries",
        response_model=ResultResponse,
        tags=["Audiobait"],
        summary="Recent log entries",
        description="Return recent audiobait log entries, newest first.",
    )
    def audiobait_log_entries(
        context: Annotated[AppContext, Depends(get_app_context)],
    ) -> ResultResponse:
        """Log entries endpoint."""
        return ResultResponse(result=context.read_log().strip())
    
    # =========================================================================
    # Play Endpoint
    # =========================================================================
    
    @app.post(
        "/audiobait/play-test-sound/{file_name}/{volume}",
        response_model=ResultResponse,
        tags=["Audiobait"],
        summary="Play a sound",
        description="Play a sound from the audio directory, or 'test.wav' for the built-in test sound, at a volume of 0-10.",
    )
    def play_test_sound(
        file_name: Annotated[str, Path(description="Sound file name, or test.wav")],
        volume: Annotated[
            int,
            Path(description="Volume (0-10)", ge=MIN_VOLUME, le=MAX_VOLUME),
        ],
        context: Annotated[AppContext, Depends(get_app_context)],
    ) -> ResultResponse:
        """Play a sound on the connected speaker(s).
        
        Args:
            file_name: Sound file to play.
            volume: Volume to play at.
        
        Returns:
            ResultResponse with the player's output.
        """
        start_time = time.perf_counter()
        
        output = context.player.play(file_name, volume)
        
        play_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            "Sound played: file=%s volume=%d play_ms=%.2f",
            file_name,
            volume,
            play_ms,
        )
        
        return ResultResponse(result=output.decode("utf-8", errors="replace"))


# =============================================================================
# Application Instance
# =============================================================================


# Create the application instance
app = create_app()
