"""Resolution of a schedule into a display-ready timeline.

Each combo's sound references are resolved through the sound library:
numeric ids become file names, and "same" repeats the previous slot's file.
Waits are stored against the sound that follows the pause, but the display
groups the pause with the sound that precedes it, so slot ``j`` shows
``Waits[j + 1]``.

Example:
    >>> from schedule.resolve import resolve_combos
    >>> combos = resolve_combos(schedule, library)
    >>> [s.display_text for s in combos[0].sounds]
    ['3_bird.wav', 'Same', 'Same']
"""

import logging
import re

from .library import SoundLibrary
from .models import SAME_SOUND, Combo, Schedule
from .schema import ResolvedCombo, ResolvedSoundEntry
from .utils import format_time_of_day, seconds_to_minutes


logger = logging.getLogger(__name__)


SAME_DISPLAY_TEXT = "Same"

_SOUND_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_sound_ref(ref: str) -> int | None:
    """Return the integer id of a sound reference, or None if it is not one.
    
    Examples:
        >>> parse_sound_ref("12")
        12
        >>> parse_sound_ref("same") is None
        True
    """
    if _SOUND_ID_PATTERN.fullmatch(ref) is None:
        return None
    return int(ref)


def resolve_combos(
    schedule: Schedule,
    library: SoundLibrary | None = None,
) -> list[ResolvedCombo]:
    """Resolve every combo of a schedule for display.
    
    Args:
        schedule: The loaded schedule.
        library: Sound library used to map ids to file names. If None (the
            library could not be opened), ids are displayed as-is.
            
    Returns:
        One ResolvedCombo per combo, in schedule order.
    """
    return [resolve_combo(combo, library) for combo in schedule.combos]


def resolve_combo(combo: Combo, library: SoundLibrary | None = None) -> ResolvedCombo:
    """Resolve a single combo.
    
    Args:
        combo: Combo to resolve.
        library: Optional sound library.
        
    Returns:
        ResolvedCombo with one entry per sound, in order.
    """
    resolved = ResolvedCombo(
        from_time=format_time_of_day(combo.from_time),
        until_time=format_time_of_day(combo.until_time),
        every=seconds_to_minutes(combo.every),
    )
    
    last_index = len(combo.sounds) - 1
    for j, ref in enumerate(combo.sounds):
        entry = ResolvedSoundEntry(display_text=ref, volume=combo.volumes[j])
        
        sound_id = parse_sound_ref(ref)
        if sound_id is not None:
            if library is not None:
                file_name, found = library.lookup(sound_id)
                if found:
                    entry.display_text = file_name
                    entry.file_name = file_name
                else:
                    logger.debug("Sound id not in library: id=%d", sound_id)
        elif j > 0 and ref.upper() == SAME_SOUND.upper():
            entry.display_text = SAME_DISPLAY_TEXT
            entry.file_name = resolved.sounds[j - 1].file_name
        else:
            logger.debug("Unresolved sound reference: ref=%r position=%d", ref, j)
        
        if j < last_index:
            entry.wait = seconds_to_minutes(combo.waits[j + 1])
        
        resolved.sounds.append(entry)
    
    return resolved
