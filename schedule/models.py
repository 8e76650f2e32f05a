"""Pydantic models for the persisted audiobait schedule document.

The schedule file written by the audiobait daemon wraps the schedule in a
top-level ``Schedule`` key and uses Go-style capitalised field names:

    {
        "Schedule": {
            "Description": "Possum lure",
            "ControlNights": 2,
            "PlayNights": 3,
            "StartDay": 1,
            "Combos": [
                {
                    "From": "18:00",
                    "Every": 1800,
                    "Until": "23:30",
                    "Sounds": ["3", "same", "7"],
                    "Volumes": [5, 5, 8],
                    "Waits": [0, 45, 120]
                }
            ]
        }
    }

Example:
    >>> from schedule.models import ScheduleDocument
    >>> doc = ScheduleDocument.model_validate_json(raw_json)
    >>> doc.schedule.combos[0].sounds
    ['3', 'same', '7']
"""

from datetime import time

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


SAME_SOUND = "same"


class Combo(BaseModel):
    """One repeating block of the schedule.
    
    Attributes:
        from_time: Start of the time window.
        until_time: End of the time window. Wrapping past midnight is not
            handled specially.
        every: Repeat interval within the window, in seconds.
        sounds: Sound references, either numeric library ids or "same".
        volumes: Volume (0-10) for each sound.
        waits: Seconds to wait before playing each sound.
    """
    
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
    
    from_time: time = Field(alias="From")
    until_time: time = Field(alias="Until")
    every: int = Field(default=0, alias="Every")
    sounds: list[str] = Field(default_factory=list, alias="Sounds")
    volumes: list[int] = Field(default_factory=list, alias="Volumes")
    waits: list[int] = Field(default_factory=list, alias="Waits")
    
    @field_validator("sounds", mode="before")
    @classmethod
    def _sounds_as_text(cls, value):
        # Ids are stored as strings, but accept bare numbers too. Booleans
        # are left for the str check to reject.
        if isinstance(value, list):
            return [str(v) if type(v) is int else v for v in value]
        return value
    
    @model_validator(mode="after")
    def _check_parallel_lists(self) -> "Combo":
        if not (len(self.sounds) == len(self.volumes) == len(self.waits)):
            raise ValueError(
                "Sounds, Volumes and Waits must have the same length, got "
                f"{len(self.sounds)}, {len(self.volumes)}, {len(self.waits)}"
            )
        return self


class Schedule(BaseModel):
    """A complete audiobait schedule."""
    
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
    
    description: str = Field(default="", alias="Description")
    control_nights: int = Field(default=0, alias="ControlNights")
    play_nights: int = Field(default=0, alias="PlayNights")
    start_day: int = Field(default=0, alias="StartDay")
    combos: list[Combo] = Field(default_factory=list, alias="Combos")


class ScheduleDocument(BaseModel):
    """Top-level wrapper of the schedule file."""
    
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")
    
    schedule: Schedule = Field(alias="Schedule")
