"""Tests for the text produced by blessed UI components."""

import pytest
from blessed import Terminal

from music_player.domain.playback.controller import PlaybackState, RepeatMode
from music_player.ui.blessed.components.controls import HELP_LINES, controls_text
from music_player.ui.blessed.components.dashboard import (
    create_progress_bar,
    format_time,
    now_playing_text,
)
from music_player.ui.blessed.components.layout import calculate_layout, centered_rect
from music_player.ui.blessed.components.track_list import list_title, track_prefix
from music_player.ui.blessed.state import PlayerView, UIState


@pytest.fixture
def term():
    """Terminal that emits no escape sequences."""
    return Terminal(force_styling=None)


class FixedSizeTerminal:
    """Just enough of a Terminal for layout math."""

    def __init__(self, width, height):
        self.width = width
        self.height = height


class TestFormatTime:
    @pytest.mark.parametrize(
        "seconds, expected",
        [(0, "00:00"), (5.9, "00:05"), (65, "01:05"), (3599, "59:59"), (None, "--:--"), (-1, "--:--")],
    )
    def test_format(self, seconds, expected):
        assert format_time(seconds) == expected


class TestNowPlaying:
    def test_playing(self):
        view = PlayerView(titles=("Song",), state=PlaybackState.PLAYING)
        assert now_playing_text(view) == "♪ Playing: Song"

    def test_paused(self):
        view = PlayerView(titles=("Song",), state=PlaybackState.PAUSED)
        assert now_playing_text(view) == "⏸ Paused: Song"

    def test_stopped_without_emoji(self):
        view = PlayerView(titles=("Song",))
        assert now_playing_text(view, use_emoji=False) == "Stopped: Song"

    def test_no_tracks(self):
        assert now_playing_text(PlayerView()).endswith("No track selected")


class TestProgressBar:
    def test_half_full(self, term):
        view = PlayerView(titles=("a",), progress=0.5, elapsed=5.0, duration=10.0)
        bar = create_progress_bar(view, term, bar_width=10)
        assert bar == "█" * 5 + "░" * 5 + " 00:05 / 00:10"

    def test_unknown_duration(self, term):
        view = PlayerView(titles=("a",), progress=0.0, elapsed=3.0, duration=None)
        assert create_progress_bar(view, term, bar_width=4).endswith("00:03 / --:--")

    def test_full(self, term):
        view = PlayerView(titles=("a",), progress=1.0, elapsed=10.0, duration=10.0)
        assert create_progress_bar(view, term, bar_width=8).startswith("█" * 8 + " ")


class TestTrackList:
    def test_prefix_marks_current_track(self):
        view = PlayerView(titles=("a", "b"), current_index=1, state=PlaybackState.PLAYING)
        assert track_prefix(0, view) == "  "
        assert track_prefix(1, view) == "♪ "

    def test_prefix_paused(self):
        view = PlayerView(titles=("a",), state=PlaybackState.PAUSED)
        assert track_prefix(0, view) == "⏸ "
        assert track_prefix(0, view, use_emoji=False) == "| "

    def test_no_marker_while_stopped(self):
        view = PlayerView(titles=("a",))
        assert track_prefix(0, view) == "  "

    def test_title_shows_cursor_position(self):
        view = PlayerView(titles=("a", "b", "c"))
        assert list_title(UIState(selected=1), view) == "Tracks (2/3)"
        assert list_title(UIState(), PlayerView()) == "Tracks (0/0)"


class TestControls:
    def test_controls_text(self):
        view = PlayerView(shuffled=True, repeat_mode=RepeatMode.ALL)
        assert controls_text(view) == "Shuffle: On | Repeat: All | Press ? for help"

    def test_help_ends_with_close_hint(self):
        assert HELP_LINES[-1] == "Press any key to close help..."


class TestLayout:
    def test_regions_stack(self):
        layout = calculate_layout(FixedSizeTerminal(80, 24))
        assert layout["track_list_height"] == 15
        assert layout["track_list_rows"] == 13
        assert layout["now_playing_y"] == 15
        assert layout["progress_y"] == 18
        assert layout["controls_y"] == 21

    def test_tiny_terminal_keeps_one_row(self):
        layout = calculate_layout(FixedSizeTerminal(20, 5))
        assert layout["track_list_rows"] == 1

    def test_centered_rect(self):
        assert centered_rect(FixedSizeTerminal(100, 40), 60, 50) == (20, 10, 60, 20)
