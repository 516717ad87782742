"""Tests for per-format duration probes."""

from unittest.mock import MagicMock, patch

import pytest
from mutagen import MutagenError

from music_player.domain.library import probes
from music_player.domain.library.probes import (
    get_probe,
    probe_duration,
    probe_mp3_duration,
    register_probe,
    unregister_probe,
)


@pytest.fixture
def wav_probe():
    """Register a temporary probe for .wav and remove it afterwards."""
    probe = MagicMock(return_value=42.0)
    register_probe("wav", probe)
    yield probe
    unregister_probe(".wav")


class TestRegistry:
    def test_mp3_registered_by_default(self):
        assert get_probe(".mp3") is probe_mp3_duration

    def test_extension_lookup_is_normalized(self):
        assert get_probe("MP3") is probe_mp3_duration

    def test_unregistered_extension(self):
        assert get_probe(".ogg") is None

    def test_register_new_format(self, wav_probe):
        assert probe_duration("/music/song.wav") == 42.0
        wav_probe.assert_called_once_with("/music/song.wav")

    def test_unregister_missing_is_noop(self):
        unregister_probe(".xyz")


class TestProbeDuration:
    def test_unknown_format_returns_none(self):
        assert probe_duration("/music/song.flac") is None

    def test_mp3_length(self):
        audio = MagicMock()
        audio.info.length = 187.4
        with patch.object(probes, "MP3", return_value=audio):
            assert probe_duration("/music/song.mp3") == pytest.approx(187.4)

    def test_mp3_zero_length_is_unknown(self):
        audio = MagicMock()
        audio.info.length = 0
        with patch.object(probes, "MP3", return_value=audio):
            assert probe_mp3_duration("/music/song.mp3") is None

    def test_unreadable_file_returns_none(self):
        with patch.object(probes, "MP3", side_effect=MutagenError("no frames")):
            assert probe_duration("/music/broken.mp3") is None

    def test_missing_file_returns_none(self, tmp_path):
        assert probe_duration(str(tmp_path / "missing.mp3")) is None
