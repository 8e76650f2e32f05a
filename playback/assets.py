"""Built-in test sound.

The test sound is addressed by the name ``test.wav`` but never read from
disk: it is synthesized once and kept in memory for the life of the process.
"""

import io
from functools import lru_cache

import numpy as np
import soundfile as sf


TEST_SOUND_NAME = "test.wav"

TEST_TONE_FREQUENCY = 1000.0
TEST_TONE_DURATION_SEC = 1.5
TEST_TONE_SAMPLE_RATE = 44100
TEST_TONE_AMPLITUDE = 0.5
TEST_TONE_FADE_SEC = 0.05


def is_test_sound(file_name: str) -> bool:
    """Return True if the name addresses the built-in test sound."""
    return file_name == TEST_SOUND_NAME


@lru_cache
def load_test_sound() -> bytes:
    """Return the built-in test sound as 16-bit PCM WAV bytes.
    
    The tone has short linear fades at both ends so it does not click.
    
    Returns:
        WAV file contents.
    """
    num_samples = int(TEST_TONE_SAMPLE_RATE * TEST_TONE_DURATION_SEC)
    t = np.arange(num_samples, dtype=np.float32) / TEST_TONE_SAMPLE_RATE
    signal = TEST_TONE_AMPLITUDE * np.sin(2 * np.pi * TEST_TONE_FREQUENCY * t)
    
    fade = int(TEST_TONE_SAMPLE_RATE * TEST_TONE_FADE_SEC)
    envelope = np.ones(num_samples, dtype=np.float32)
    envelope[:fade] = np.linspace(0.0, 1.0, fade, dtype=np.float32)
    envelope[-fade:] = np.linspace(1.0, 0.0, fade, dtype=np.float32)
    signal = (signal * envelope).astype(np.float32)
    
    buffer = io.BytesIO()
    sf.write(buffer, signal, TEST_TONE_SAMPLE_RATE, format="WAV", subtype="PCM_16")
    return buffer.getvalue()
