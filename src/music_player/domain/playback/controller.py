"""
Playback controller - the state machine behind the player.

Owns the current index, the mode flags, the audio output port and the
playback clock. Every command runs to completion on the calling thread and
is not reentrant; the driver loop serializes calls.
"""

from enum import Enum
from typing import Iterable, Optional

from loguru import logger

from music_player.domain.library.catalog import TrackCatalog
from music_player.domain.library.models import Track

from .clock import PlaybackClock
from .exceptions import (
    AudioOutputError,
    DecodeError,
    NoPlayableTrack,
    PreconditionViolation,
)
from .port import AudioOutputPort, Stream

# Seconds past a known duration before a track counts as finished
COMPLETION_GRACE = 0.5

# Display-only length estimate for tracks whose duration is unknown
FALLBACK_DURATION = 300.0

# Highest progress reported before a track counts as finished
UNFINISHED_PROGRESS_CAP = 0.999


class PlaybackState(Enum):
    """Transport state of the controller."""

    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


class RepeatMode(Enum):
    """Repeat mode, interpreted by the driver when a track finishes."""

    OFF = "Off"
    ONE = "One"
    ALL = "All"

    def next(self) -> "RepeatMode":
        """Cycle Off -> One -> All -> Off."""
        order = [RepeatMode.OFF, RepeatMode.ONE, RepeatMode.ALL]
        return order[(order.index(self) + 1) % len(order)]

    def __str__(self) -> str:
        return self.value


class PlaybackController:
    """Decides what track is active and how far into it playback is.

    Before load() the catalog is empty and every command is a no-op.
    """

    def __init__(
        self,
        port: AudioOutputPort,
        clock: Optional[PlaybackClock] = None,
        completion_grace: float = COMPLETION_GRACE,
        fallback_duration: float = FALLBACK_DURATION,
    ):
        self._port = port
        self._clock = clock if clock is not None else PlaybackClock()
        self._completion_grace = completion_grace
        self._fallback_duration = fallback_duration

        self._catalog = TrackCatalog()
        self._loaded = False
        self._current_index = 0
        self._state = PlaybackState.STOPPED
        self._shuffled = False
        self._repeat_mode = RepeatMode.OFF

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load(self, tracks: Iterable[Track], origin: Optional[str] = None) -> None:
        """Install the catalog for this controller's lifetime.

        Args:
            tracks: Tracks in playback order
            origin: Where the tracks came from, for error messages

        Raises:
            EmptyCatalog: If there are no tracks
            PreconditionViolation: If a catalog was already loaded
        """
        if self._loaded:
            raise PreconditionViolation("PlaybackController.load() may only be called once")

        self._catalog = TrackCatalog.load(tracks, origin=origin)
        self._loaded = True
        self._current_index = 0
        logger.info(f"Catalog loaded: {len(self._catalog)} tracks")

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def tracks(self) -> TrackCatalog:
        return self._catalog

    @property
    def track_count(self) -> int:
        return len(self._catalog)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def current_track(self) -> Optional[Track]:
        if not self._catalog:
            return None
        return self._catalog[self._current_index]

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def is_paused(self) -> bool:
        return self._state is PlaybackState.PAUSED

    @property
    def is_playing(self) -> bool:
        return self._state is PlaybackState.PLAYING

    @property
    def shuffled(self) -> bool:
        return self._shuffled

    @property
    def repeat_mode(self) -> RepeatMode:
        return self._repeat_mode

    def elapsed(self) -> float:
        """Seconds played of the current track, pauses excluded."""
        return self._clock.elapsed()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def select(self, index: int) -> None:
        """Make `index` the current track and play it (with failover).

        Raises:
            IndexError: If index is outside the catalog
            NoPlayableTrack: If no track in the catalog decodes
        """
        if not self._catalog:
            return
        if not 0 <= index < len(self._catalog):
            raise IndexError(
                f"Track index {index} out of range for {len(self._catalog)} tracks"
            )
        self._current_index = index
        self.play_current()

    def play_current(self) -> None:
        """Play the track at current_index, skipping forward past tracks that fail to decode.

        Raises:
            NoPlayableTrack: If every track failed; playback settles in STOPPED
            AudioOutputError: If the port refused the stream; playback settles in STOPPED
        """
        if not self._catalog:
            logger.warning("No tracks loaded")
            return

        self._port.stop()

        found = self.find_next_playable()
        if found is None:
            self._settle_stopped()
            logger.error(f"No playable track among {len(self._catalog)} tracks")
            raise NoPlayableTrack(attempts=len(self._catalog))

        index, stream = found
        track = self._catalog[index]
        logger.info(f"Playing: {track.title}")

        try:
            self._port.replace(stream)
        except AudioOutputError:
            self._settle_stopped()
            logger.exception(f"Audio output refused '{track.title}'")
            raise

        self._clock.reset()
        self._clock.start()
        self._state = PlaybackState.PLAYING

    def find_next_playable(self) -> Optional[tuple[int, Stream]]:
        """Find the first track, starting at current_index, that decodes.

        Tries successive tracks (wrapping) at most once each. The first one
        that decodes becomes current_index.

        Returns:
            (index, stream) for the playable track, or None if all failed
        """
        if not self._catalog:
            return None

        count = len(self._catalog)
        start_index = self._current_index
        index = start_index

        for _ in range(count):
            track = self._catalog[index]
            try:
                stream = self._port.decode(track.path)
            except DecodeError as e:
                logger.warning(f"Skipping '{track.title}': {e}")
            else:
                self._current_index = index
                return index, stream

            index = (index + 1) % count
            if index == start_index:
                break

        return None

    def next(self) -> None:
        """Advance to the following track (wrapping) and play it."""
        if not self._catalog:
            return
        self._current_index = (self._current_index + 1) % len(self._catalog)
        self.play_current()

    def previous(self) -> None:
        """Step back to the preceding track (wrapping) and play it."""
        if not self._catalog:
            return
        self._current_index = (self._current_index - 1) % len(self._catalog)
        self.play_current()

    def toggle_pause(self) -> None:
        """Pause if playing, resume if paused, nothing if stopped."""
        if self._state is PlaybackState.PLAYING:
            self._clock.pause()
            self._port.set_paused(True)
            self._state = PlaybackState.PAUSED
            logger.debug(f"Paused at {self._clock.elapsed():.1f}s")
        elif self._state is PlaybackState.PAUSED:
            self._clock.start()
            self._port.set_paused(False)
            self._state = PlaybackState.PLAYING
            logger.debug(f"Resumed at {self._clock.elapsed():.1f}s")

    def stop(self) -> None:
        """Stop playback and forget elapsed time. Safe to repeat."""
        if not self._catalog:
            return
        was_active = self._state is not PlaybackState.STOPPED
        self._settle_stopped()
        if was_active:
            logger.info("Playback stopped")

    def toggle_shuffle(self) -> None:
        if not self._catalog:
            return
        self._shuffled = not self._shuffled
        logger.debug(f"Shuffle: {'On' if self._shuffled else 'Off'}")

    def cycle_repeat(self) -> None:
        if not self._catalog:
            return
        self._repeat_mode = self._repeat_mode.next()
        logger.debug(f"Repeat: {self._repeat_mode}")

    # ------------------------------------------------------------------
    # Progress and completion
    # ------------------------------------------------------------------

    def is_track_finished(self) -> bool:
        """Check whether the current track has played out.

        Finished when the port reports it drained, or when a known duration
        has been exceeded by the grace margin (for ports that report drained
        late or never). Without a known duration only the port counts.
        Never true while stopped.
        """
        if not self._catalog or self._state is PlaybackState.STOPPED:
            return False

        if self._port.is_drained():
            return True

        track = self._catalog[self._current_index]
        if track.duration is None:
            return False

        return self._clock.elapsed() >= track.duration + self._completion_grace

    def progress(self) -> float:
        """Playback progress of the current track in [0, 1].

        Exactly 1.0 once the track is finished. Tracks with unknown duration
        are measured against the fallback estimate.
        """
        if not self._catalog or self._state is PlaybackState.STOPPED:
            return 0.0

        if self.is_track_finished():
            return 1.0

        track = self._catalog[self._current_index]
        duration = track.duration if track.duration else self._fallback_duration
        elapsed = self._clock.elapsed()
        ratio = min(max(elapsed / duration, 0.0), UNFINISHED_PROGRESS_CAP)

        if ratio >= 0.95:
            logger.debug(
                "Track nearing completion: {:.1f}% - elapsed: {:.1f}s, duration: {:.1f}s",
                ratio * 100.0,
                elapsed,
                duration,
            )

        return ratio

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _settle_stopped(self) -> None:
        self._port.stop()
        self._clock.reset()
        self._state = PlaybackState.STOPPED
