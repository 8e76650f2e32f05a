"""Custom exceptions for sound playback operations."""

from typing import Any


class PlaybackError(Exception):
    """Base exception for all playback errors.
    
    Attributes:
        message: Human-readable error description.
        code: Short error code string (e.g., "VOLUME_SET_FAILED").
        details: Optional dictionary with additional context.
    """
    
    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize PlaybackError.
        
        Args:
            message: Human-readable error description.
            code: Short error code string.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
    
    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"[{self.code}] {self.message} (details: {self.details})"
        return f"[{self.code}] {self.message}"
    
    def __repr__(self) -> str:
        """Return repr string."""
        return f"{self.__class__.__name__}(message={self.message!r}, code={self.code!r}, details={self.details!r})"


class VolumeSetError(PlaybackError):
    """Raised when the mixer command fails to set the volume.
    
    Playback is aborted before any audio is sent.
    """
    
    def __init__(
        self,
        message: str,
        code: str = "VOLUME_SET_FAILED",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class SoundLoadError(PlaybackError):
    """Raised when the sound to play cannot be loaded.
    
    Common codes:
        - SOUND_NOT_FOUND: Sound file does not exist.
        - SOUND_READ_FAILED: Sound file exists but could not be read.
        - EMPTY_SOUND: Sound file has zero bytes.
        - INVALID_SOUND_PATH: File name points outside the audio directory.
    """
    pass


class PlaybackProcessError(PlaybackError):
    """Raised when the playback command fails.
    
    The combined stdout/stderr of the command is kept for diagnostics.
    
    Common codes:
        - LAUNCH_FAILED: The playback command could not be started.
        - PROCESS_FAILED: The playback command exited non-zero.
        - PLAYBACK_TIMEOUT: The playback command was killed after the timeout.
    
    Attributes:
        output: Combined output captured from the command.
    """
    
    def __init__(
        self,
        message: str,
        code: str = "PROCESS_FAILED",
        details: dict[str, Any] | None = None,
        output: bytes = b"",
    ) -> None:
        super().__init__(message, code, details)
        self.output = output
