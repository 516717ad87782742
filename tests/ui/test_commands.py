"""Tests for executing UI commands against the controller."""

import pytest

from music_player.core.output import clear_blessed_mode, drain_pending_messages, set_blessed_mode
from music_player.domain.playback.controller import PlaybackState, RepeatMode
from music_player.ui.blessed.events.commands import execute_command
from music_player.ui.blessed.state import UICommand


@pytest.fixture(autouse=True)
def queued_messages():
    """Capture log() output the way the running UI does."""
    drain_pending_messages()
    set_blessed_mode()
    yield
    clear_blessed_mode()
    drain_pending_messages()


class TestExecuteCommand:
    def test_quit(self, make_controller, make_tracks):
        assert execute_command(make_controller(make_tracks(1.0)), UICommand("quit"))

    def test_play_index(self, make_controller, make_tracks):
        controller = make_controller(make_tracks(1.0, 2.0, 3.0))
        assert not execute_command(controller, UICommand("play", index=2))
        assert controller.current_index == 2
        assert controller.state is PlaybackState.PLAYING

    def test_transport_commands(self, make_controller, make_tracks):
        controller = make_controller(make_tracks(1.0, 2.0))
        execute_command(controller, UICommand("next"))
        assert controller.current_index == 1
        execute_command(controller, UICommand("toggle_pause"))
        assert controller.state is PlaybackState.PAUSED
        execute_command(controller, UICommand("previous"))
        assert controller.current_index == 0
        execute_command(controller, UICommand("stop"))
        assert controller.state is PlaybackState.STOPPED

    def test_mode_commands_report_status(self, make_controller, make_tracks):
        controller = make_controller(make_tracks(1.0))
        execute_command(controller, UICommand("shuffle"))
        execute_command(controller, UICommand("repeat"))

        assert controller.shuffled
        assert controller.repeat_mode is RepeatMode.ONE
        assert [m for m, _ in drain_pending_messages()] == ["Shuffle: On", "Repeat: One"]

    def test_no_playable_track_is_reported(self, make_controller, make_tracks, port):
        tracks = make_tracks(1.0, 2.0)
        port.failing_paths.update(t.path for t in tracks)
        controller = make_controller(tracks)

        assert not execute_command(controller, UICommand("play", index=0))
        assert drain_pending_messages() == [("No playable track", "red")]
        assert controller.state is PlaybackState.STOPPED

    def test_audio_output_error_is_reported(self, make_controller, make_tracks, port):
        controller = make_controller(make_tracks(1.0))
        port.refuse_replace = True

        execute_command(controller, UICommand("next"))
        [(message, color)] = drain_pending_messages()
        assert message.startswith("Audio output error")
        assert color == "red"

    def test_unknown_action_is_ignored(self, make_controller, make_tracks, port):
        controller = make_controller(make_tracks(1.0))
        assert not execute_command(controller, UICommand("dance"))
        assert port.calls == []
