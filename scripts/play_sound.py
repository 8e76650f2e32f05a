#!/usr/bin/env python3
"""Play an audiobait sound on the device speaker.

Usage:
    python scripts/play_sound.py --file test.wav --volume 5
    python scripts/play_sound.py --file 12_possum-call.mp3 --volume 8 --audio-dir ./audio
    python scripts/play_sound.py --file test.wav --volume 5 --card 1 --control Speaker

The player's output is printed to stdout. On failure a JSON error is printed
to stderr.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from playback import (
    MAX_VOLUME,
    MIN_VOLUME,
    PlaybackConfig,
    PlaybackProcessError,
    SoundLoadError,
    SoundPlayer,
    VolumeSetError,
)


def _print_error(e, **extra) -> None:
    print(json.dumps({
        "error": e.message,
        "code": e.code,
        "details": e.details,
        **extra,
    }, default=str), file=sys.stderr)


def main() -> int:
    """Main entry point for the script.
    
    Returns:
        Exit code: 0 success, 2 sound not loadable, 3 volume not set,
        4 player failed.
    """
    parser = argparse.ArgumentParser(
        description="Play an audiobait sound",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--file", "-f",
        type=str,
        required=True,
        help="Sound file name in the audio directory, or test.wav",
    )
    parser.add_argument(
        "--volume", "-v",
        type=int,
        required=True,
        choices=range(MIN_VOLUME, MAX_VOLUME + 1),
        metavar=f"{{{MIN_VOLUME}..{MAX_VOLUME}}}",
        help="Volume from 0 to 10",
    )
    parser.add_argument(
        "--audio-dir", "-a",
        type=str,
        default="/var/lib/audiobait",
        help="Directory holding the sound files (default: /var/lib/audiobait)",
    )
    parser.add_argument(
        "--card", "-c",
        type=int,
        default=0,
        help="ALSA sound card number (default: 0)",
    )
    parser.add_argument(
        "--control",
        type=str,
        default="PCM",
        help="ALSA mixer control (default: PCM)",
    )
    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Kill playback after this many seconds",
    )
    
    args = parser.parse_args()
    
    config = PlaybackConfig(
        audio_dir=Path(args.audio_dir),
        sound_card=args.card,
        volume_control=args.control,
        timeout_sec=args.timeout,
    )
    
    try:
        output = SoundPlayer(config).play(args.file, args.volume)
    except SoundLoadError as e:
        _print_error(e)
        return 2
    except VolumeSetError as e:
        _print_error(e)
        return 3
    except PlaybackProcessError as e:
        _print_error(e, output=e.output.decode("utf-8", errors="replace"))
        return 4
    
    sys.stdout.write(output.decode("utf-8", errors="replace"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
