"""Hardware volume control through the ALSA mixer."""

import logging
import subprocess

from .errors import VolumeSetError
from .utils import PlaybackConfig, volume_to_percent


logger = logging.getLogger(__name__)


def build_mixer_command(volume: int, config: PlaybackConfig) -> list[str]:
    """Build the mixer command line for a 0-10 volume.
    
    Examples:
        >>> build_mixer_command(7, PlaybackConfig())
        ['amixer', '-c', '0', 'sset', 'PCM', '70%']
    """
    return [
        config.mixer_command,
        "-c", str(config.sound_card),
        "sset",
        config.volume_control,
        f"{volume_to_percent(volume)}%",
    ]


def set_volume(volume: int, config: PlaybackConfig) -> None:
    """Set the sound card volume.
    
    Args:
        volume: Volume in the 0-10 range.
        config: Playback configuration naming the card and control.
        
    Raises:
        ValueError: If volume is outside 0-10.
        VolumeSetError: If the mixer cannot be run or exits non-zero.
    """
    cmd = build_mixer_command(volume, config)
    
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as e:
        raise VolumeSetError(
            message=f"volume set failed: {e}",
            details={"command": cmd, "error": str(e)},
        ) from e
    
    if result.returncode != 0:
        output = result.stdout.decode("utf-8", errors="replace")
        raise VolumeSetError(
            message=f"volume set failed: exit status {result.returncode}\noutput:\n{output}",
            details={"command": cmd, "returncode": result.returncode, "output": output},
        )
    
    logger.debug("Volume set: card=%d control=%s volume=%d", config.sound_card, config.volume_control, volume)
