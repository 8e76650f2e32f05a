"""Configuration and helpers for sound playback."""

from dataclasses import dataclass
from pathlib import Path


DEFAULT_FILE_TYPE = "wav"

MIN_VOLUME = 0
MAX_VOLUME = 10


@dataclass
class PlaybackConfig:
    """Configuration for volume control and the playback command.
    
    Attributes:
        audio_dir: Directory holding the sound files.
        sound_card: ALSA card number passed to the mixer.
        volume_control: Mixer control name (e.g. "PCM", "Speaker").
        mixer_command: Mixer executable.
        play_command: Playback executable (sox ``play``).
        norm_db: Normalization level passed as ``--norm``.
        timeout_sec: Kill the playback command after this many seconds.
            None waits indefinitely.
    """
    
    audio_dir: Path = Path("/var/lib/audiobait")
    sound_card: int = 0
    volume_control: str = "PCM"
    mixer_command: str = "amixer"
    play_command: str = "play"
    norm_db: int = -3
    timeout_sec: float | None = None
    
    def __post_init__(self) -> None:
        self.audio_dir = Path(self.audio_dir)
        if self.timeout_sec is not None and self.timeout_sec <= 0:
            raise ValueError(f"timeout_sec must be > 0, got {self.timeout_sec}")


def sound_file_type(file_name: str) -> str:
    """Return the sox file type for a sound file name.
    
    Examples:
        >>> sound_file_type("12_possum.MP3")
        'mp3'
        >>> sound_file_type("noext")
        'wav'
    """
    suffix = Path(file_name).suffix.lstrip(".").lower()
    return suffix or DEFAULT_FILE_TYPE


def volume_to_percent(volume: int) -> int:
    """Scale a 0-10 volume to a mixer percentage.
    
    Raises:
        ValueError: If volume is outside 0-10.
    """
    if not MIN_VOLUME <= volume <= MAX_VOLUME:
        raise ValueError(
            f"volume must be between {MIN_VOLUME} and {MAX_VOLUME}, got {volume}"
        )
    return volume * 10
