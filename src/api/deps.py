"""FastAPI dependencies for the audiobait management API.

Collaborators (service control, log reader, sound player) are built once per
application into an ``AppContext`` and stored on ``app.state``. Handlers get
it through ``Depends(get_app_context)``; tests can build their own context
and pass it to ``create_app``.

Example:
    >>> from fastapi import Depends
    >>> from src.api.deps import AppContext, get_app_context
    
    >>> @app.get("/")
    >>> def endpoint(context: AppContext = Depends(get_app_context)):
    ...     return {"running": context.service.is_running()}
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable

from fastapi import Request

from playback import PlaybackConfig, SoundPlayer
from service import ServiceStatusProvider, SystemdService, get_log_entries

from .config import Settings, get_settings as _get_settings


logger = logging.getLogger(__name__)


# Re-export get_settings for dependency injection
get_settings = _get_settings


# =============================================================================
# Application Context
# =============================================================================


@dataclass
class AppContext:
    """Collaborators shared by the request handlers of one application.
    
    Attributes:
        settings: Application settings.
        service: Status and restart of the audiobait daemon.
        read_log: Returns recent daemon log text, newest first.
        player: Sound player.
    """
    
    settings: Settings
    service: ServiceStatusProvider
    read_log: Callable[[], str]
    player: SoundPlayer


def build_app_context(settings: Settings) -> AppContext:
    """Build the production context from settings.
    
    Args:
        settings: Application settings.
        
    Returns:
        AppContext wired to systemd, journald and the sox player.
    """
    logger.debug(
        "Building app context: audio_dir=%s unit=%s",
        settings.audio_dir,
        settings.service_unit,
    )
    return AppContext(
        settings=settings,
        service=SystemdService(
            unit=settings.service_unit,
            systemctl_command=settings.systemctl_command,
        ),
        read_log=partial(
            get_log_entries,
            unit=settings.service_unit,
            count=settings.log_entry_count,
            journalctl_command=settings.journalctl_command,
        ),
        player=SoundPlayer(get_playback_config(settings)),
    )


def get_app_context(request: Request) -> AppContext:
    """Return the context of the application serving the request."""
    return request.app.state.context


# =============================================================================
# Playback Configuration
# =============================================================================


def get_playback_config(settings: Settings | None = None) -> PlaybackConfig:
    """Get playback configuration from settings.
    
    Args:
        settings: Application settings. If None, uses get_settings().
        
    Returns:
        PlaybackConfig with settings applied.
    """
    if settings is None:
        settings = get_settings()
    
    return PlaybackConfig(
        audio_dir=settings.audio_dir,
        sound_card=settings.sound_card,
        volume_control=settings.volume_control,
        mixer_command=settings.mixer_command,
        play_command=settings.play_command,
        norm_db=settings.play_norm_db,
        timeout_sec=settings.playback_timeout_sec,
    )
