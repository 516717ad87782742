"""Shared fixtures: a hand-advanced clock and an in-memory audio port."""

import pytest

from music_player.domain.library.models import Track
from music_player.domain.playback.clock import PlaybackClock
from music_player.domain.playback.controller import PlaybackController
from music_player.domain.playback.exceptions import AudioOutputError, DecodeError


class FakeTime:
    """Monotonic time source that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeAudioPort:
    """AudioOutputPort that records calls instead of making sound."""

    def __init__(self):
        self.failing_paths: set[str] = set()
        self.refuse_replace = False
        self.drained = False
        self.paused = False
        self.playing = None
        self.calls: list[tuple] = []

    def __enter__(self):
        self.calls.append(("enter",))
        return self

    def __exit__(self, exc_type, exc, tb):
        self.calls.append(("exit",))

    def decode(self, path: str):
        self.calls.append(("decode", path))
        if path in self.failing_paths:
            raise DecodeError(path, "corrupt")
        return ("stream", path)

    def replace(self, stream) -> None:
        self.calls.append(("replace", stream))
        if self.refuse_replace:
            raise AudioOutputError("device unplugged")
        self.playing = stream
        self.drained = False
        self.paused = False

    def set_paused(self, paused: bool) -> None:
        self.calls.append(("set_paused", paused))
        self.paused = paused

    def stop(self) -> None:
        self.calls.append(("stop",))
        self.playing = None

    def is_drained(self) -> bool:
        return self.drained

    def call_names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_time() -> FakeTime:
    """Time source advanced by hand."""
    return FakeTime()


@pytest.fixture
def clock(fake_time: FakeTime) -> PlaybackClock:
    """PlaybackClock reading the fake time source."""
    return PlaybackClock(time_source=fake_time)


@pytest.fixture
def port() -> FakeAudioPort:
    """In-memory audio port."""
    return FakeAudioPort()


@pytest.fixture
def make_tracks():
    """Factory for tracks named A, B, C... with optional durations."""

    def _make(*durations):
        return [
            Track(path=f"/music/{chr(65 + i)}.mp3", title=chr(65 + i), duration=d)
            for i, d in enumerate(durations)
        ]

    return _make


@pytest.fixture
def make_controller(port: FakeAudioPort, clock: PlaybackClock):
    """Factory for a controller on the fake port and clock, optionally loaded."""

    def _make(tracks=None, **kwargs):
        controller = PlaybackController(port, clock=clock, **kwargs)
        if tracks is not None:
            controller.load(tracks)
        return controller

    return _make
