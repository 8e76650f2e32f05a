"""Tests for playback.assets and playback.utils modules."""

import io

import numpy as np
import pytest
import soundfile as sf

from playback import (
    PlaybackConfig,
    build_mixer_command,
    is_test_sound,
    load_test_sound,
    sound_file_type,
    volume_to_percent,
)


class TestTestSound:
    """Tests for the built-in test sound."""
    
    def test_is_wav(self):
        data = load_test_sound()
        
        assert data[:4] == b"RIFF"
        assert data[8:12] == b"WAVE"
    
    def test_is_cached(self):
        assert load_test_sound() is load_test_sound()
    
    def test_decodes(self):
        audio, sample_rate = sf.read(io.BytesIO(load_test_sound()), dtype="float32")
        
        assert sample_rate == 44100
        assert audio.ndim == 1
        assert len(audio) == int(44100 * 1.5)
        assert np.max(np.abs(audio)) > 0.1
    
    def test_fades_in(self):
        audio, _ = sf.read(io.BytesIO(load_test_sound()), dtype="float32")
        
        assert abs(audio[0]) < 1e-3
    
    @pytest.mark.parametrize("name,expected", [
        ("test.wav", True),
        ("TEST.WAV", False),
        ("1_test.wav", False),
        ("", False),
    ])
    def test_is_test_sound(self, name, expected):
        assert is_test_sound(name) is expected


class TestSoundFileType:
    """Tests for sound_file_type function."""
    
    @pytest.mark.parametrize("name,expected", [
        ("3_bird.wav", "wav"),
        ("12_possum.MP3", "mp3"),
        ("5_call.ogg", "ogg"),
        ("8_noext", "wav"),
        ("9_archive.tar.gz", "gz"),
    ])
    def test_file_type(self, name, expected):
        assert sound_file_type(name) == expected


class TestVolume:
    """Tests for volume scaling and the mixer command line."""
    
    @pytest.mark.parametrize("volume,percent", [(0, 0), (1, 10), (5, 50), (10, 100)])
    def test_volume_to_percent(self, volume, percent):
        assert volume_to_percent(volume) == percent
    
    @pytest.mark.parametrize("volume", [-1, 11, 100])
    def test_out_of_range(self, volume):
        with pytest.raises(ValueError, match="between 0 and 10"):
            volume_to_percent(volume)
    
    def test_default_mixer_command(self):
        assert build_mixer_command(7, PlaybackConfig()) == [
            "amixer", "-c", "0", "sset", "PCM", "70%",
        ]
    
    def test_configured_mixer_command(self):
        config = PlaybackConfig(sound_card=2, volume_control="Speaker", mixer_command="/usr/bin/amixer")
        
        assert build_mixer_command(10, config) == [
            "/usr/bin/amixer", "-c", "2", "sset", "Speaker", "100%",
        ]


class TestPlaybackConfig:
    """Tests for PlaybackConfig validation."""
    
    def test_audio_dir_coerced_to_path(self):
        config = PlaybackConfig(audio_dir="/tmp/audio")
        
        assert str(config.audio_dir) == "/tmp/audio"
        assert config.audio_dir.name == "audio"
    
    @pytest.mark.parametrize("timeout", [0, -1.5])
    def test_non_positive_timeout_rejected(self, timeout):
        with pytest.raises(ValueError, match="timeout_sec"):
            PlaybackConfig(timeout_sec=timeout)
