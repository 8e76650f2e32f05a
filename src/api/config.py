"""Configuration management for the audiobait management service.

This module provides centralized configuration using pydantic-settings,
loading values from environment variables with sensible defaults.

Example:
    >>> from src.api.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.audio_dir)
    /var/lib/audiobait
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.
    
    All settings can be overridden via environment variables.
    Environment variables use uppercase names matching the attribute names.
    
    Attributes:
        app_name: Name of the application for OpenAPI docs.
        app_version: API version string.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        audio_dir: Directory holding the schedule and sound files.
        schedule_file_name: Name of the schedule file in audio_dir.
        sound_card: ALSA card number for volume control.
        volume_control: ALSA mixer control name.
        mixer_command: Mixer executable.
        play_command: Playback executable.
        play_norm_db: Normalization level passed to the playback command.
        playback_timeout_sec: Kill playback after this many seconds
            (unset waits indefinitely).
        service_unit: Systemd unit of the audiobait daemon.
        systemctl_command: Path to systemctl.
        journalctl_command: Path to journalctl.
        log_entry_count: Number of journal lines to fetch.
    """
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    # Application settings
    app_name: str = "Audiobait Management"
    app_version: str = "1.0.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    
    # Schedule settings
    audio_dir: Path = Path("/var/lib/audiobait")
    schedule_file_name: str = "schedule.json"
    
    # Playback settings
    sound_card: int = 0
    volume_control: str = "PCM"
    mixer_command: str = "amixer"
    play_command: str = "play"
    play_norm_db: int = -3
    playback_timeout_sec: float | None = Field(default=None, gt=0)
    
    # Service settings
    service_unit: str = "audiobait"
    systemctl_command: str = "/bin/systemctl"
    journalctl_command: str = "/bin/journalctl"
    log_entry_count: int = Field(default=100, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.
    
    Uses lru_cache to ensure settings are only loaded once.
    
    Returns:
        Settings instance with values from environment.
    """
    return Settings()
