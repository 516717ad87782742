"""Playback-specific exceptions for error handling."""


class PlaybackError(Exception):
    """Base exception for playback operations."""

    pass


class DecodeError(PlaybackError):
    """Raised when a track cannot be opened or decoded.

    Covers missing files, corrupt data and unsupported codecs.
    """

    def __init__(self, path: str, reason: str = None):
        self.path = path
        self.reason = reason
        message = f"Failed to decode audio file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class NoPlayableTrack(PlaybackError):
    """Raised when every track in the catalog failed to decode."""

    def __init__(self, attempts: int = 0, message: str = None):
        self.attempts = attempts
        super().__init__(message or f"No playable track (tried {attempts})")


class AudioOutputError(PlaybackError):
    """Raised when the audio output cannot accept a decoded stream."""

    pass


class PreconditionViolation(PlaybackError):
    """Raised when a caller breaks an operation's contract.

    This is a bug in the caller, not a runtime condition to recover from.
    """

    pass
