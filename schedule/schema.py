"""Schema definitions for the display-ready (resolved) schedule.

These structures are built per request from a ``Schedule`` and the sound
library, returned to the caller, and discarded.

Example:
    >>> from schedule.schema import ResolvedCombo, ResolvedSoundEntry
    >>> entry = ResolvedSoundEntry(display_text="3_bird.wav", file_name="3_bird.wav", volume=5)
    >>> combo = ResolvedCombo(from_time="6:00PM", until_time="11:30PM", every=30, sounds=[entry])
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ResolvedSoundEntry:
    """A single sound slot of a combo, ready for display.
    
    Two text fields are needed because a slot may say "Same" on screen
    while still carrying the file name to play.
    
    Attributes:
        display_text: Text shown for the slot (file name, raw id or "Same").
        file_name: File name on disk, empty when the reference is unresolved.
        volume: Volume (0-10) the slot is played at.
        wait: Minutes to wait after this sound before the next one.
            Always 0 for the last sound of a combo.
    """
    
    display_text: str
    file_name: str = ""
    volume: int = 0
    wait: int = 0
    
    @property
    def is_resolved(self) -> bool:
        """Return True if the slot maps to a file on disk."""
        return bool(self.file_name)
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "display_text": self.display_text,
            "file_name": self.file_name,
            "volume": self.volume,
            "wait": self.wait,
        }


@dataclass
class ResolvedCombo:
    """A combo with formatted times and resolved sound slots.
    
    Attributes:
        from_time: Window start as a 12-hour clock string ("6:00PM").
        until_time: Window end as a 12-hour clock string.
        every: Repeat interval in whole minutes (truncated).
        sounds: Resolved sound slots in schedule order.
    """
    
    from_time: str
    until_time: str
    every: int
    sounds: list[ResolvedSoundEntry] = field(default_factory=list)
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "from_time": self.from_time,
            "until_time": self.until_time,
            "every": self.every,
            "sounds": [s.to_dict() for s in self.sounds],
        }


@dataclass
class DisplaySchedule:
    """The whole schedule prepared for display.
    
    Attributes:
        description: Free-text description of the schedule.
        timestamp: When the schedule file was last written, or "Unknown.".
        control_nights: Number of nights with no sounds played.
        play_nights: Number of nights with sounds played.
        start_day: Day the control/play cycle starts on.
        combos: Resolved combos in schedule order.
    """
    
    description: str = ""
    timestamp: str = ""
    control_nights: int = 0
    play_nights: int = 0
    start_day: int = 0
    combos: list[ResolvedCombo] = field(default_factory=list)
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "description": self.description,
            "timestamp": self.timestamp,
            "control_nights": self.control_nights,
            "play_nights": self.play_nights,
            "start_day": self.start_day,
            "combos": [c.to_dict() for c in self.combos],
        }
