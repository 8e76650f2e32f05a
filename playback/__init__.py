"""Playback module for playing audiobait sounds on the device speaker.

This module handles:
- Setting the sound card volume through the ALSA mixer
- Loading sounds from the audio directory or the built-in test sound
- Piping the sound through sox ``play`` and collecting its output

Example:
    >>> from playback import play_sound, PlaybackConfig
    >>> output = play_sound("12_possum-call.mp3", volume=7, config=PlaybackConfig())
"""

from .assets import TEST_SOUND_NAME, is_test_sound, load_test_sound
from .errors import (
    PlaybackError,
    PlaybackProcessError,
    SoundLoadError,
    VolumeSetError,
)
from .mixer import build_mixer_command, set_volume
from .player import SoundPlayer
from .utils import (
    DEFAULT_FILE_TYPE,
    MAX_VOLUME,
    MIN_VOLUME,
    PlaybackConfig,
    sound_file_type,
    volume_to_percent,
)


__all__ = [
    # Main integration function
    "play_sound",
    # Config
    "PlaybackConfig",
    # Errors
    "PlaybackError",
    "VolumeSetError",
    "SoundLoadError",
    "PlaybackProcessError",
    # Player
    "SoundPlayer",
    # Mixer
    "set_volume",
    "build_mixer_command",
    # Assets
    "TEST_SOUND_NAME",
    "is_test_sound",
    "load_test_sound",
    # Utils
    "DEFAULT_FILE_TYPE",
    "MIN_VOLUME",
    "MAX_VOLUME",
    "sound_file_type",
    "volume_to_percent",
]


def play_sound(
    file_name: str,
    volume: int,
    config: PlaybackConfig | None = None,
) -> bytes:
    """Play a sound in one step.
    
    Args:
        file_name: Sound file name under the audio directory, or "test.wav".
        volume: Volume in the 0-10 range.
        config: Playback configuration. If None, uses default PlaybackConfig().
        
    Returns:
        Combined output of the playback command.
        
    Raises:
        VolumeSetError: If the volume cannot be set.
        SoundLoadError: If the sound cannot be loaded.
        PlaybackProcessError: If the playback command fails.
    """
    return SoundPlayer(config).play(file_name, volume)
