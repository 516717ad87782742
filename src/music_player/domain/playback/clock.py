"""
Playback clock - elapsed time for the current track across pause/resume.

The audio output does not report frame-accurate positions for every format,
so this clock is the authoritative progress source. It keeps two pieces of
state: the start of the open (unpaused) run, and the time accrued by runs
that already ended.
"""

import time
from typing import Callable, Optional

from .exceptions import PreconditionViolation

TimeSource = Callable[[], float]


class PlaybackClock:
    """Elapsed-time accumulator for one track at a time.

    total elapsed = accumulated_elapsed + (now - session_start, if a run is open)
    """

    def __init__(self, time_source: TimeSource = time.monotonic):
        self._now = time_source
        self.session_start: Optional[float] = None
        self.accumulated_elapsed: float = 0.0

    @property
    def is_running(self) -> bool:
        """True while an unpaused run is open."""
        return self.session_start is not None

    def start(self) -> None:
        """Open a new run at the current time.

        Raises:
            PreconditionViolation: If a run is already open
        """
        if self.session_start is not None:
            raise PreconditionViolation(
                "PlaybackClock.start() called while a session is already open; "
                "pause() or reset() first"
            )
        self.session_start = self._now()

    def pause(self) -> None:
        """Close the open run, folding its length into the accumulated total."""
        if self.session_start is None:
            return
        self.accumulated_elapsed += max(0.0, self._now() - self.session_start)
        self.session_start = None

    def reset(self) -> None:
        """Forget all elapsed time. Called exactly when a new track begins."""
        self.session_start = None
        self.accumulated_elapsed = 0.0

    def elapsed(self) -> float:
        """Total elapsed seconds for the current track (read-only)."""
        if self.session_start is None:
            return self.accumulated_elapsed
        return self.accumulated_elapsed + max(0.0, self._now() - self.session_start)
