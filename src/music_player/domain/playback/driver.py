"""
Playback driver - the periodic tick around the controller.

The controller never advances on its own. Once per tick of the UI loop the
driver checks for natural completion and decides what plays next from the
repeat and shuffle modes. Shutdown is cooperative: a threading.Event passed
in by the entry point, set by signal handlers or the quit key.
"""

import random
import signal
import threading
from typing import Optional

from loguru import logger

from .controller import PlaybackController, PlaybackState, RepeatMode
from .exceptions import AudioOutputError, NoPlayableTrack


def install_signal_handlers(shutdown: threading.Event) -> None:
    """Set the shutdown token on SIGINT/SIGTERM.

    Must be called from the main thread.
    """

    def _request_shutdown(signum, frame):
        # No logging here: loguru may already hold its sink lock
        shutdown.set()

    signal.signal(signal.SIGINT, _request_shutdown)
    signal.signal(signal.SIGTERM, _request_shutdown)


class PlaybackDriver:
    """Polls the controller for completion and applies repeat/shuffle."""

    def __init__(
        self,
        controller: PlaybackController,
        shutdown: Optional[threading.Event] = None,
        rng: Optional[random.Random] = None,
    ):
        self.controller = controller
        self.shutdown = shutdown if shutdown is not None else threading.Event()
        self._rng = rng if rng is not None else random.Random()

    @property
    def should_exit(self) -> bool:
        return self.shutdown.is_set()

    def request_exit(self) -> None:
        self.shutdown.set()

    def tick(self) -> Optional[str]:
        """Advance past a finished track.

        Only a PLAYING track can finish; paused and stopped sessions are left
        alone. Never raises for playback failures.

        Returns:
            A status message when playback had to stop, else None
        """
        controller = self.controller
        if controller.state is not PlaybackState.PLAYING:
            return None
        if not controller.is_track_finished():
            return None

        finished = controller.current_track
        logger.debug(f"Track finished: {finished.title if finished else '?'}")

        try:
            self._advance()
        except NoPlayableTrack:
            return "No playable track"
        except AudioOutputError as e:
            return f"Audio output error: {e}"
        return None

    def _advance(self) -> None:
        controller = self.controller

        if controller.repeat_mode is RepeatMode.ONE:
            controller.select(controller.current_index)
        elif controller.shuffled and controller.track_count > 1:
            controller.select(self._pick_shuffled())
        else:
            controller.next()

    def _pick_shuffled(self) -> int:
        """Pick a random index other than the current one."""
        current = self.controller.current_index
        choice = self._rng.randrange(self.controller.track_count - 1)
        return choice if choice < current else choice + 1
