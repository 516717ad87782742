"""Playback domain - timing, state machine and audio output.

This domain handles:
- Elapsed-time tracking across pause/resume (PlaybackClock)
- The audio output port interface and its mpv implementation
- The playback state machine (PlaybackController)
- Completion polling and repeat/shuffle handling (PlaybackDriver)
"""

# Errors
from .exceptions import (
    PlaybackError,
    DecodeError,
    NoPlayableTrack,
    AudioOutputError,
    PreconditionViolation,
)

# Timing
from .clock import PlaybackClock

# Audio output
from .port import AudioOutputPort, Stream
from .mpv_port import MpvAudioPort, MpvStream, check_mpv_available

# State machine
from .controller import (
    PlaybackController,
    PlaybackState,
    RepeatMode,
    COMPLETION_GRACE,
    FALLBACK_DURATION,
)

# Driver
from .driver import PlaybackDriver, install_signal_handlers

__all__ = [
    # Errors
    "PlaybackError",
    "DecodeError",
    "NoPlayableTrack",
    "AudioOutputError",
    "PreconditionViolation",
    # Timing
    "PlaybackClock",
    # Audio output
    "AudioOutputPort",
    "Stream",
    "MpvAudioPort",
    "MpvStream",
    "check_mpv_available",
    # State machine
    "PlaybackController",
    "PlaybackState",
    "RepeatMode",
    "COMPLETION_GRACE",
    "FALLBACK_DURATION",
    # Driver
    "PlaybackDriver",
    "install_signal_handlers",
]
