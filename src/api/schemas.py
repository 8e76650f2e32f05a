"""Pydantic schemas for API request/response models.

This module defines all the response schemas used by the API endpoints,
ensuring consistent serialization and validation.

Example:
    >>> from src.api.schemas import ResultResponse
    >>> response = ResultResponse(result="There are no audio bait log entries.")
"""

from typing import Any

from pydantic import BaseModel, Field

from schedule import DisplaySchedule


# =============================================================================
# Health Endpoint
# =============================================================================


class HealthResponse(BaseModel):
    """Response schema for /health endpoint."""
    
    status: str = Field(
        default="ok",
        description="Service status",
        examples=["ok"],
    )
    version: str = Field(
        description="API version",
        examples=["1.0.0"],
    )
    audio_dir: str = Field(
        description="Configured audio directory",
        examples=["/var/lib/audiobait"],
    )
    audio_dir_exists: bool = Field(
        description="Whether the audio directory exists",
    )


# =============================================================================
# Audiobait Status Endpoint
# =============================================================================


class SoundEntrySchema(BaseModel):
    """Schema for one sound slot of a combo."""
    
    display_text: str = Field(
        description="Text to display: file name, raw sound id, or 'Same'",
        examples=["3_bird.wav", "Same", "99"],
    )
    file_name: str = Field(
        default="",
        description="File name to play; empty if the sound could not be resolved",
        examples=["3_bird.wav"],
    )
    volume: int = Field(
        description="Volume the sound is played at (0-10)",
        examples=[5],
    )
    wait: int = Field(
        description="Minutes to wait after this sound before the next one; negative values are shown as stored",
        examples=[2],
    )


class ComboSchema(BaseModel):
    """Schema for one resolved combo."""
    
    from_time: str = Field(
        description="Start of the time window",
        examples=["6:00PM"],
    )
    until_time: str = Field(
        description="End of the time window",
        examples=["11:30PM"],
    )
    every: int = Field(
        description="Repeat interval in minutes",
        examples=[30],
    )
    sounds: list[SoundEntrySchema] = Field(
        default_factory=list,
        description="Sounds played in order",
    )


class DisplayScheduleSchema(BaseModel):
    """Schema for the schedule prepared for display."""
    
    description: str = Field(default="", examples=["Possum lure"])
    timestamp: str = Field(
        default="",
        description="When the schedule file was last written",
        examples=["3:04PM, Monday January 2 2006", "Unknown."],
    )
    control_nights: int = Field(default=0, examples=[2])
    play_nights: int = Field(default=0, examples=[3])
    start_day: int = Field(default=0, examples=[1])
    combos: list[ComboSchema] = Field(default_factory=list)
    
    @classmethod
    def from_display(cls, display: DisplaySchedule) -> "DisplayScheduleSchema":
        """Build the schema from a resolved DisplaySchedule."""
        return cls.model_validate(display.to_dict())


class AudiobaitResponse(BaseModel):
    """Response schema for /audiobait (status and schedule)."""
    
    running: bool = Field(
        default=False,
        description="Whether the audiobait service is active and enabled",
    )
    schedule: DisplayScheduleSchema = Field(
        default_factory=DisplayScheduleSchema,
        description="Resolved schedule; empty if it could not be loaded",
    )
    message: str = Field(
        default="",
        description="Informational message",
        examples=["Audiobait service successfully restarted."],
    )
    error_message: str = Field(
        default="",
        description="Error message, e.g. why the schedule could not be loaded",
    )


# =============================================================================
# Log / Sound Endpoints
# =============================================================================


class ResultResponse(BaseModel):
    """Plain text result wrapper."""
    
    result: str = Field(
        description="Result text",
        examples=["There are no audio bait log entries."],
    )


# =============================================================================
# Error Response
# =============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""
    
    code: str = Field(
        description="Error code for programmatic handling",
        examples=["SOUND_NOT_AVAILABLE", "PLAYBACK_FAILED"],
    )
    message: str = Field(
        description="Human-readable error message",
        examples=["unable to load audio bait sound file: 12_possum.wav"],
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional error context",
    )


class ApiErrorResponse(BaseModel):
    """Standard error response wrapper."""
    
    error: ErrorDetail = Field(
        description="Error details",
    )
