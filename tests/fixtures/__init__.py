"""Test fixtures for schedule and playback tests.

This module provides utilities for generating schedule documents, sound
files, and stand-in executables for the mixer and player commands.
No binary files are committed - fixtures are generated programmatically.
"""

import io
import json
import stat
from pathlib import Path
from typing import Any

import numpy as np
import soundfile as sf


def make_combo(
    sounds: list[str],
    volumes: list[int] | None = None,
    waits: list[int] | None = None,
    from_time: str = "18:00",
    until_time: str = "23:30",
    every: int = 1800,
) -> dict[str, Any]:
    """Build a combo in the persisted (Go-style key) format.
    
    Volumes default to 5 and waits to 0 for every sound.
    """
    return {
        "From": from_time,
        "Every": every,
        "Until": until_time,
        "Sounds": sounds,
        "Volumes": volumes if volumes is not None else [5] * len(sounds),
        "Waits": waits if waits is not None else [0] * len(sounds),
    }


def make_schedule_document(
    combos: list[dict[str, Any]],
    description: str = "Test schedule",
    control_nights: int = 2,
    play_nights: int = 3,
    start_day: int = 1,
) -> dict[str, Any]:
    """Build a whole schedule document as written by the audiobait daemon."""
    return {
        "Schedule": {
            "Description": description,
            "ControlNights": control_nights,
            "PlayNights": play_nights,
            "StartDay": start_day,
            "Combos": combos,
        }
    }


def write_schedule_file(
    directory: Path,
    document: dict[str, Any],
    file_name: str = "schedule.json",
) -> Path:
    """Write a schedule document to ``directory`` and return its path."""
    path = directory / file_name
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


def generate_sine_wav_bytes(
    frequency: float = 440.0,
    duration_sec: float = 0.5,
    sample_rate: int = 16000,
    amplitude: float = 0.5,
) -> bytes:
    """Generate a mono sine wave WAV file as bytes.
    
    Args:
        frequency: Sine wave frequency in Hz.
        duration_sec: Duration in seconds.
        sample_rate: Sample rate in Hz.
        amplitude: Amplitude (0.0 to 1.0).
        
    Returns:
        WAV file as bytes.
    """
    num_samples = int(sample_rate * duration_sec)
    t = np.linspace(0, duration_sec, num_samples, dtype=np.float32)
    signal = (amplitude * np.sin(2 * np.pi * frequency * t)).astype(np.float32)
    
    buffer = io.BytesIO()
    sf.write(buffer, signal, sample_rate, format="WAV", subtype="PCM_16")
    buffer.seek(0)
    return buffer.read()


def write_sound_file(directory: Path, file_name: str, data: bytes | None = None) -> Path:
    """Write a sound file into the library directory."""
    path = directory / file_name
    path.write_bytes(generate_sine_wav_bytes() if data is None else data)
    return path


def make_executable(path: Path, body: str) -> Path:
    """Write a /bin/sh script and make it executable.
    
    Args:
        path: Where to write the script.
        body: Script body, without the shebang line.
        
    Returns:
        The script path.
    """
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def make_fake_mixer(directory: Path, exit_code: int = 0, message: str = "") -> tuple[Path, Path]:
    """Create a stand-in for ``amixer`` that records its arguments.
    
    Returns:
        Tuple of (script_path, args_log_path).
    """
    args_log = directory / "amixer.args"
    script = make_executable(
        directory / "fake-amixer",
        f'echo "$@" > "{args_log}"\n'
        f'echo "{message}" >&2\n'
        f"exit {exit_code}",
    )
    return script, args_log


def make_fake_player(directory: Path, body: str = "wc -c") -> tuple[Path, Path]:
    """Create a stand-in for sox ``play``.
    
    The script records its arguments, then runs ``body`` with the audio on
    stdin. The default body prints the number of bytes received.
    
    Returns:
        Tuple of (script_path, args_log_path). The args log only exists if
        the player was started.
    """
    args_log = directory / "play.args"
    script = make_executable(
        directory / "fake-play",
        f'echo "$@" > "{args_log}"\n{body}',
    )
    return script, args_log


class FakeService:
    """In-memory stand-in for the audiobait system service.
    
    Attributes:
        running: Value returned by is_running().
        restart_ok: Value returned by restart().
        restarts: Number of restart() calls.
    """
    
    def __init__(self, running: bool = True, restart_ok: bool = True) -> None:
        self.running = running
        self.restart_ok = restart_ok
        self.restarts = 0
    
    def is_running(self) -> bool:
        return self.running
    
    def restart(self) -> bool:
        self.restarts += 1
        return self.restart_ok
