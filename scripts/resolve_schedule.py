#!/usr/bin/env python3
"""Resolve the audiobait schedule and print it for display.

This script loads the schedule file, resolves sound ids through the sound
library, and outputs the display schedule as JSON to stdout.

Usage:
    python scripts/resolve_schedule.py --audio-dir /var/lib/audiobait
    python scripts/resolve_schedule.py --audio-dir ./audio --schedule schedule.json --pretty

Example output:
    {
        "description": "Possum lure",
        "timestamp": "3:04PM, Monday January 2 2006",
        "control_nights": 2,
        "play_nights": 3,
        "start_day": 1,
        "combos": [
            {"from_time": "6:00PM", "until_time": "11:30PM", "every": 30,
             "sounds": [{"display_text": "3_bird.wav", "file_name": "3_bird.wav", "volume": 5, "wait": 0}]}
        ]
    }
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from schedule import ScheduleLoadError, build_display_schedule


def main() -> int:
    """Main entry point for the script.
    
    Returns:
        Exit code (0 for success, 2 if the schedule cannot be loaded).
    """
    parser = argparse.ArgumentParser(
        description="Resolve the audiobait schedule for display",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s --audio-dir /var/lib/audiobait
    %(prog)s --audio-dir ./audio --schedule schedule.json --pretty
        """,
    )
    parser.add_argument(
        "--audio-dir", "-a",
        type=str,
        default="/var/lib/audiobait",
        help="Directory holding the schedule and sound files (default: /var/lib/audiobait)",
    )
    parser.add_argument(
        "--schedule", "-s",
        type=str,
        default="schedule.json",
        help="Schedule file name inside the audio directory (default: schedule.json)",
    )
    parser.add_argument(
        "--pretty", "-p",
        action="store_true",
        help="Pretty-print JSON output with indentation",
    )
    
    args = parser.parse_args()
    
    try:
        display = build_display_schedule(args.audio_dir, args.schedule)
    except ScheduleLoadError as e:
        print(json.dumps({
            "error": e.message,
            "code": e.code,
            "details": e.details,
        }), file=sys.stderr)
        return 2
    
    output = display.to_dict()
    if args.pretty:
        print(json.dumps(output, indent=2))
    else:
        print(json.dumps(output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
