"""Schedule module for loading and resolving audiobait schedules.

This module provides:
- Loading the persisted schedule document written by the audiobait daemon
- Indexing the sound library that sits next to it
- Resolving combos into a display-ready timeline

Example:
    >>> from schedule import build_display_schedule
    >>> display = build_display_schedule("/var/lib/audiobait", "schedule.json")
    >>> for combo in display.combos:
    ...     print(combo.from_time, combo.until_time, [s.display_text for s in combo.sounds])
"""

import logging
from pathlib import Path

from .errors import LibraryUnavailableError, ScheduleError, ScheduleLoadError
from .library import SoundLibrary, parse_sound_id
from .loader import load_schedule, schedule_timestamp
from .models import Combo, Schedule, ScheduleDocument
from .resolve import parse_sound_ref, resolve_combo, resolve_combos
from .schema import DisplaySchedule, ResolvedCombo, ResolvedSoundEntry
from .utils import UNKNOWN_TIMESTAMP, format_time_of_day, format_timestamp, seconds_to_minutes


__all__ = [
    # Main integration function
    "build_display_schedule",
    "open_library",
    # Models
    "Schedule",
    "Combo",
    "ScheduleDocument",
    # Display schema
    "DisplaySchedule",
    "ResolvedCombo",
    "ResolvedSoundEntry",
    # Errors
    "ScheduleError",
    "ScheduleLoadError",
    "LibraryUnavailableError",
    # Loader
    "load_schedule",
    "schedule_timestamp",
    # Library
    "SoundLibrary",
    "parse_sound_id",
    # Resolver
    "resolve_combos",
    "resolve_combo",
    "parse_sound_ref",
    # Utils
    "UNKNOWN_TIMESTAMP",
    "format_time_of_day",
    "format_timestamp",
    "seconds_to_minutes",
]


logger = logging.getLogger(__name__)


def open_library(directory: str | Path, schedule_file_name: str) -> SoundLibrary | None:
    """Open the sound library, returning None if it is unavailable.
    
    An unavailable library only costs display fidelity, so the error is
    logged rather than raised.
    """
    try:
        return SoundLibrary.open(directory, schedule_file_name)
    except LibraryUnavailableError as e:
        logger.warning("Sound library unavailable: %s", e)
        return None


def build_display_schedule(
    directory: str | Path,
    schedule_file_name: str,
) -> DisplaySchedule:
    """Load, index, and resolve the schedule in one step.
    
    This is the main entry point for schedule display. It:
    1. Loads the schedule document
    2. Reads the schedule file's modification time
    3. Opens the sound library (soft failure)
    4. Resolves every combo
    
    Args:
        directory: Audio directory holding the schedule and sound files.
        schedule_file_name: Name of the schedule file.
        
    Returns:
        DisplaySchedule ready for rendering.
        
    Raises:
        ScheduleLoadError: If the schedule document cannot be loaded.
    """
    schedule = load_schedule(directory, schedule_file_name)
    library = open_library(directory, schedule_file_name)
    
    return DisplaySchedule(
        description=schedule.description,
        timestamp=schedule_timestamp(directory, schedule_file_name),
        control_nights=schedule.control_nights,
        play_nights=schedule.play_nights,
        start_day=schedule.start_day,
        combos=resolve_combos(schedule, library),
    )
