"""Pytest configuration and fixtures for the test suite."""

import sys
from pathlib import Path

import pytest

# Ensure project root is in path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from playback import PlaybackConfig

from tests.fixtures import (
    make_combo,
    make_fake_mixer,
    make_fake_player,
    make_schedule_document,
    write_schedule_file,
    write_sound_file,
)


@pytest.fixture
def audio_dir(tmp_path: Path) -> Path:
    """An empty audio directory."""
    directory = tmp_path / "audio"
    directory.mkdir()
    return directory


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    """Directory for stand-in executables."""
    directory = tmp_path / "bin"
    directory.mkdir()
    return directory


@pytest.fixture
def populated_audio_dir(audio_dir: Path) -> Path:
    """An audio directory with a schedule and two library sounds.
    
    Library:
        3 -> 3_bird.wav
        7 -> 7_possum.mp3
    
    Schedule (one combo): ["3", "same", "7"] with waits [0, 45, 120].
    """
    write_sound_file(audio_dir, "3_bird.wav")
    write_sound_file(audio_dir, "7_possum.mp3", data=b"ID3 fake mp3 data")
    document = make_schedule_document(
        [
            make_combo(
                ["3", "same", "7"],
                volumes=[5, 6, 8],
                waits=[0, 45, 120],
                from_time="18:00",
                until_time="23:30",
                every=1800,
            )
        ],
        description="Possum lure",
    )
    write_schedule_file(audio_dir, document)
    return audio_dir


@pytest.fixture
def playback_config(audio_dir: Path, bin_dir: Path) -> PlaybackConfig:
    """Playback config wired to a succeeding fake mixer and byte-counting player."""
    mixer, _ = make_fake_mixer(bin_dir)
    player, _ = make_fake_player(bin_dir)
    return PlaybackConfig(
        audio_dir=audio_dir,
        sound_card=1,
        volume_control="Speaker",
        mixer_command=str(mixer),
        play_command=str(player),
    )


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers",
        "posix: marks tests that run /bin/sh stand-in executables",
    )
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow"
    )


def pytest_collection_modifyitems(config, items):
    """Skip tests that need /bin/sh where it is unavailable."""
    if Path("/bin/sh").exists():
        return
    skip_posix = pytest.mark.skip(reason="requires /bin/sh")
    for item in items:
        if "posix" in item.keywords:
            item.add_marker(skip_posix)
