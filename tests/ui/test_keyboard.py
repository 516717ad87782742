"""Tests for keyboard handling in the blessed UI."""

import pytest
from blessed.keyboard import Keystroke

from music_player.ui.blessed.events.keyboard import handle_key, parse_key
from music_player.ui.blessed.state import UIState

KEY_UP = Keystroke("\x1b[A", code=259, name="KEY_UP")
KEY_DOWN = Keystroke("\x1b[B", code=258, name="KEY_DOWN")
KEY_ENTER = Keystroke("\n", code=343, name="KEY_ENTER")
KEY_ESCAPE = Keystroke("\x1b", code=361, name="KEY_ESCAPE")
CTRL_C = Keystroke("\x03")


def press(state, key, track_count=5, current_index=0, visible_items=3):
    if not isinstance(key, Keystroke):
        key = Keystroke(key)
    return handle_key(state, key, track_count, current_index, visible_items)


class TestParseKey:
    @pytest.mark.parametrize(
        "key, expected",
        [
            (KEY_UP, "arrow_up"),
            (KEY_DOWN, "arrow_down"),
            (KEY_ENTER, "enter"),
            (Keystroke("\r"), "enter"),
            (KEY_ESCAPE, "escape"),
            (CTRL_C, "ctrl_c"),
            (Keystroke("j"), "char"),
            (Keystroke(" "), "char"),
        ],
    )
    def test_event_types(self, key, expected):
        assert parse_key(key)["type"] == expected

    def test_char_payload(self):
        assert parse_key(Keystroke("q"))["char"] == "q"
        assert parse_key(KEY_DOWN)["char"] is None


class TestQuit:
    @pytest.mark.parametrize("key", ["q", KEY_ESCAPE, CTRL_C])
    def test_quit_keys(self, key):
        _, command = press(UIState(), key)
        assert command.action == "quit"

    def test_escape_closes_help_instead_of_quitting(self):
        state, command = press(UIState(show_help=True), KEY_ESCAPE)
        assert command is None
        assert not state.show_help

    def test_q_quits_even_with_help_open(self):
        _, command = press(UIState(show_help=True), "q")
        assert command.action == "quit"


class TestHelp:
    @pytest.mark.parametrize("key", ["?", "h"])
    def test_toggle(self, key):
        state, command = press(UIState(), key)
        assert state.show_help and command is None
        state, command = press(state, key)
        assert not state.show_help and command is None

    def test_any_key_closes_help(self):
        """Keys are swallowed while the overlay is open."""
        state, command = press(UIState(show_help=True), "n")
        assert not state.show_help
        assert command is None


class TestNavigation:
    @pytest.mark.parametrize("key", ["j", KEY_DOWN])
    def test_down(self, key):
        state, command = press(UIState(), key)
        assert state.selected == 1
        assert command is None

    @pytest.mark.parametrize("key", ["k", KEY_UP])
    def test_up_wraps(self, key):
        state, _ = press(UIState(), key)
        assert state.selected == 4
        assert state.scroll == 2

    def test_scroll_follows_cursor(self):
        state = UIState()
        for _ in range(4):
            state, _ = press(state, "j")
        assert state.selected == 4
        assert state.scroll == 2

    def test_navigation_with_no_tracks(self):
        state, _ = press(UIState(), "j", track_count=0)
        assert state.selected == 0


class TestPlaybackKeys:
    def test_enter_plays_selected(self):
        _, command = press(UIState(selected=3), KEY_ENTER)
        assert command.action == "play"
        assert command.index == 3

    def test_space_on_other_track_plays_it(self):
        _, command = press(UIState(selected=2), " ", current_index=0)
        assert command.action == "play"
        assert command.index == 2

    def test_space_on_current_track_toggles_pause(self):
        _, command = press(UIState(selected=1), " ", current_index=1)
        assert command.action == "toggle_pause"

    @pytest.mark.parametrize(
        "key, action",
        [("n", "next"), ("p", "previous"), ("s", "shuffle"), ("r", "repeat"), ("S", "stop")],
    )
    def test_char_commands(self, key, action):
        state, command = press(UIState(), key)
        assert command.action == action
        assert state == UIState()

    def test_unbound_key(self):
        state, command = press(UIState(), "x")
        assert command is None
        assert state == UIState()
