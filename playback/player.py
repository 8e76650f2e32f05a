"""Sound playback through an external decode/playback command.

Playing a sound goes through these steps:
1. Set the sound card volume (mixer)
2. Load the sound bytes (built-in test sound or a library file)
3. Launch the playback command reading raw audio from stdin
4. Stream the bytes to the command's stdin on a writer thread
5. Collect the command's combined output and exit status

Steps 4 and 5 run concurrently. Writing first and reading afterwards would
deadlock once the sound is larger than the OS pipe buffer and the command
blocks on its own output.

Example:
    >>> from playback import PlaybackConfig, SoundPlayer
    >>> player = SoundPlayer(PlaybackConfig(audio_dir="/var/lib/audiobait"))
    >>> output = player.play("test.wav", volume=5)
"""

import contextvars
import logging
import subprocess
import threading
from pathlib import Path
from typing import BinaryIO

from .assets import is_test_sound, load_test_sound
from .errors import PlaybackProcessError, SoundLoadError
from .mixer import set_volume
from .utils import DEFAULT_FILE_TYPE, PlaybackConfig, sound_file_type, volume_to_percent


logger = logging.getLogger(__name__)


class SoundPlayer:
    """Plays library sounds and the built-in test sound.
    
    A player holds no per-call state; one instance can serve concurrent
    requests.
    
    Attributes:
        config: Playback configuration.
    """
    
    def __init__(self, config: PlaybackConfig | None = None) -> None:
        self.config = config or PlaybackConfig()
    
    def play(self, file_name: str, volume: int) -> bytes:
        """Play a sound at the given volume.
        
        Args:
            file_name: Library file name under the audio directory, or
                "test.wav" for the built-in test sound.
            volume: Volume in the 0-10 range.
            
        Returns:
            Combined stdout/stderr of the playback command.
            
        Raises:
            ValueError: If volume is outside 0-10.
            VolumeSetError: If the volume cannot be set. Nothing is played.
            SoundLoadError: If the sound cannot be loaded. The playback
                command is not started.
            PlaybackProcessError: If the playback command cannot be started,
                exits non-zero, or times out. Carries the captured output.
        """
        volume_to_percent(volume)
        set_volume(volume, self.config)
        
        sound = self.load_sound(file_name)
        if is_test_sound(file_name):
            file_type = DEFAULT_FILE_TYPE
        else:
            file_type = sound_file_type(file_name)
        
        log_fields = {"sound_file": file_name, "volume": volume}
        logger.info(
            "Playing sound: file=%s volume=%d type=%s bytes=%d",
            file_name,
            volume,
            file_type,
            len(sound),
            extra=log_fields,
        )
        return self._run(self.build_play_command(file_type), sound, log_fields)
    
    def load_sound(self, file_name: str) -> bytes:
        """Load the raw bytes of a sound.
        
        Raises:
            SoundLoadError: If the file is missing, unreadable, empty, or
                outside the audio directory.
        """
        if is_test_sound(file_name):
            data = load_test_sound()
            if not data:
                raise SoundLoadError(
                    message="unable to load test audio",
                    code="EMPTY_SOUND",
                    details={"file_name": file_name},
                )
            return data
        
        message = f"unable to load audio bait sound file: {file_name}"
        audio_dir = Path(self.config.audio_dir).resolve()
        path = (audio_dir / file_name).resolve()
        
        if path == audio_dir or not path.is_relative_to(audio_dir):
            raise SoundLoadError(
                message=message,
                code="INVALID_SOUND_PATH",
                details={"file_name": file_name},
            )
        
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise SoundLoadError(
                message=message,
                code="SOUND_NOT_FOUND",
                details={"file_name": file_name, "path": str(path)},
            ) from e
        except OSError as e:
            raise SoundLoadError(
                message=message,
                code="SOUND_READ_FAILED",
                details={"file_name": file_name, "path": str(path), "error": str(e)},
            ) from e
        
        if not data:
            raise SoundLoadError(
                message=message,
                code="EMPTY_SOUND",
                details={"file_name": file_name, "path": str(path)},
            )
        return data
    
    def build_play_command(self, file_type: str) -> list[str]:
        """Build the playback command line for a file type.
        
        Examples:
            >>> SoundPlayer().build_play_command("mp3")
            ['play', '-t', 'mp3', '--norm=-3', '-q', '-']
        """
        return [
            self.config.play_command,
            "-t", file_type,
            f"--norm={self.config.norm_db}",
            "-q",
            "-",
        ]
    
    def _run(self, cmd: list[str], sound: bytes, log_fields: dict | None = None) -> bytes:
        """Run the playback command, feeding it the sound on stdin.
        
        ``log_fields`` is attached to the records logged on the writer thread.
        """
        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except OSError as e:
            raise PlaybackProcessError(
                message=f"unable to play audio: {e}",
                code="LAUNCH_FAILED",
                details={"command": cmd, "error": str(e)},
            ) from e
        
        # The writer runs in a copy of the caller's context so its records
        # keep the request id.
        writer = threading.Thread(
            target=contextvars.copy_context().run,
            args=(_stream_bytes, proc.stdin, sound, log_fields or {}),
            name="sound-writer",
            daemon=True,
        )
        
        timed_out = threading.Event()
        timer = None
        if self.config.timeout_sec is not None:
            timer = threading.Timer(self.config.timeout_sec, _kill, args=(proc, timed_out))
            timer.daemon = True
            timer.start()
        
        writer.start()
        try:
            output = proc.stdout.read()
            returncode = proc.wait()
        except BaseException:
            # Unblock the writer before joining it
            if proc.poll() is None:
                proc.kill()
                proc.wait()
            raise
        finally:
            if timer is not None:
                timer.cancel()
            writer.join()
            proc.stdout.close()
        
        if timed_out.is_set():
            raise PlaybackProcessError(
                message=f"playback timed out after {self.config.timeout_sec}s",
                code="PLAYBACK_TIMEOUT",
                details={"command": cmd, "timeout_sec": self.config.timeout_sec},
                output=output,
            )
        
        if returncode != 0:
            raise PlaybackProcessError(
                message=f"exit status {returncode}",
                code="PROCESS_FAILED",
                details={"command": cmd, "returncode": returncode},
                output=output,
            )
        
        return output


def _stream_bytes(stream: BinaryIO, data: bytes, log_fields: dict) -> None:
    """Write all bytes to the player's stdin, then close it.
    
    Runs on the writer thread. The stream is closed whatever happens so the
    player sees end of input.
    """
    try:
        stream.write(data)
    except (OSError, ValueError) as e:
        logger.warning("unable to pass audio: %s", e, extra=log_fields)
    finally:
        try:
            stream.close()
        except OSError as e:
            logger.debug("Closing player stdin failed: %s", e, extra=log_fields)


def _kill(proc: subprocess.Popen, timed_out: threading.Event) -> None:
    if proc.poll() is None:
        timed_out.set()
        logger.warning("Playback timed out, killing pid=%d", proc.pid)
        proc.kill()
