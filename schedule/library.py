"""Sound file library index.

The audiobait daemon stores downloaded sounds next to the schedule file,
each named with its numeric id as a prefix, e.g. ``12_possum-call.mp3``.
The schedule refers to sounds by that id only.

Example:
    >>> from schedule.library import SoundLibrary
    >>> library = SoundLibrary.open("/var/lib/audiobait", "schedule.json")
    >>> library.lookup(12)
    ('12_possum-call.mp3', True)
"""

import logging
from pathlib import Path

from .errors import LibraryUnavailableError


logger = logging.getLogger(__name__)


ID_SEPARATOR = "_"


def parse_sound_id(file_name: str) -> int | None:
    """Extract the numeric id prefix from a library file name.
    
    Returns None when the name has no separator or the prefix is not an
    integer.
    
    Examples:
        >>> parse_sound_id("12_possum-call.mp3")
        12
        >>> parse_sound_id("readme.txt") is None
        True
    """
    prefix, sep, _ = file_name.partition(ID_SEPARATOR)
    if not sep or not (prefix.isascii() and prefix.isdigit()):
        return None
    return int(prefix)


class SoundLibrary:
    """Read-only mapping of sound ids to file names on disk.
    
    Attributes:
        directory: Directory the library was scanned from.
    """
    
    def __init__(self, directory: str | Path, files_by_id: dict[int, str]) -> None:
        self.directory = Path(directory)
        self._files_by_id = dict(files_by_id)
    
    @classmethod
    def open(cls, directory: str | Path, exclude_file_name: str) -> "SoundLibrary":
        """Scan a directory and index its sound files by id.
        
        Args:
            directory: Directory holding the sound files.
            exclude_file_name: File to skip, normally the schedule file.
            
        Returns:
            A SoundLibrary for the directory.
            
        Raises:
            LibraryUnavailableError: If the directory cannot be listed.
        """
        directory = Path(directory)
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise LibraryUnavailableError(
                message=f"Unable to open sound library: {directory}",
                details={"directory": str(directory), "error": str(e)},
            ) from e
        
        files_by_id: dict[int, str] = {}
        for entry in entries:
            if entry.name == exclude_file_name or not entry.is_file():
                continue
            sound_id = parse_sound_id(entry.name)
            if sound_id is None:
                continue
            if sound_id in files_by_id:
                logger.warning(
                    "Duplicate sound id in library: id=%d kept=%s ignored=%s",
                    sound_id,
                    files_by_id[sound_id],
                    entry.name,
                )
                continue
            files_by_id[sound_id] = entry.name
        
        logger.debug("Sound library opened: directory=%s sounds=%d", directory, len(files_by_id))
        return cls(directory, files_by_id)
    
    def lookup(self, sound_id: int) -> tuple[str, bool]:
        """Return (file_name, found) for a sound id."""
        file_name = self._files_by_id.get(sound_id)
        if file_name is None:
            return "", False
        return file_name, True
    
    def __len__(self) -> int:
        return len(self._files_by_id)
    
    def __contains__(self, sound_id: object) -> bool:
        return sound_id in self._files_by_id
