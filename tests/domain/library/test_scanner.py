"""Tests for filesystem scanning."""

from pathlib import Path
from unittest.mock import patch

import pytest

from music_player.core.config import DEFAULT_SUPPORTED_FORMATS
from music_player.domain.library.scanner import (
    is_supported_format,
    scan_directory,
    scan_path,
    track_from_path,
)


@pytest.fixture(autouse=True)
def no_probing():
    """Scanning tests do not read audio headers."""
    with patch("music_player.domain.library.scanner.probe_duration", return_value=None) as mock_probe:
        yield mock_probe


@pytest.fixture
def music_dir(tmp_path: Path) -> Path:
    """A small library with nested folders and non-audio files."""
    (tmp_path / "b_song.mp3").write_bytes(b"")
    (tmp_path / "A_song.FLAC").write_bytes(b"")
    (tmp_path / "cover.jpg").write_bytes(b"")
    (tmp_path / "notes.txt").write_text("hi")
    album = tmp_path / "album"
    album.mkdir()
    (album / "track1.ogg").write_bytes(b"")
    (album / "track2.m4a").write_bytes(b"")
    (album / "track3.wav").write_bytes(b"")
    return tmp_path


class TestIsSupportedFormat:
    @pytest.mark.parametrize("name", ["a.mp3", "a.wav", "a.ogg", "a.flac", "a.m4a", "A.MP3"])
    def test_supported(self, name):
        assert is_supported_format(Path(name), DEFAULT_SUPPORTED_FORMATS)

    @pytest.mark.parametrize("name", ["a.jpg", "a.txt", "a", "a.mp3.bak", "a.opus"])
    def test_unsupported(self, name):
        assert not is_supported_format(Path(name), DEFAULT_SUPPORTED_FORMATS)


class TestTrackFromPath:
    def test_title_is_file_stem(self, no_probing):
        no_probing.return_value = 12.5
        track = track_from_path(Path("/music/My Song.mp3"))
        assert track.title == "My Song"
        assert track.path == "/music/My Song.mp3"
        assert track.duration == 12.5

    def test_unknown_title_without_stem(self):
        track = track_from_path(Path("/"))
        assert track.title == "Unknown"


class TestScanDirectory:
    def test_recursive_scan_filters_and_sorts(self, music_dir):
        tracks = scan_directory(music_dir, DEFAULT_SUPPORTED_FORMATS)
        titles = [t.title for t in tracks]
        assert titles == ["A_song", "track1", "track2", "track3", "b_song"]

    def test_flat_scan(self, music_dir):
        tracks = scan_directory(music_dir, DEFAULT_SUPPORTED_FORMATS, recursive=False)
        assert [t.title for t in tracks] == ["A_song", "b_song"]

    def test_progress_callback(self, music_dir):
        seen = []
        scan_directory(
            music_dir,
            DEFAULT_SUPPORTED_FORMATS,
            progress_callback=lambda path, track: seen.append(track.title),
        )
        assert len(seen) == 5

    def test_custom_format_list(self, music_dir):
        tracks = scan_directory(music_dir, [".wav"])
        assert [t.title for t in tracks] == ["track3"]


class TestScanPath:
    def test_single_supported_file(self, music_dir):
        tracks = scan_path(music_dir / "b_song.mp3", DEFAULT_SUPPORTED_FORMATS)
        assert [t.title for t in tracks] == ["b_song"]

    def test_single_unsupported_file(self, music_dir):
        assert scan_path(music_dir / "cover.jpg", DEFAULT_SUPPORTED_FORMATS) == []

    def test_missing_path(self, tmp_path):
        assert scan_path(tmp_path / "nowhere", DEFAULT_SUPPORTED_FORMATS) == []

    def test_empty_directory(self, tmp_path):
        assert scan_path(tmp_path, DEFAULT_SUPPORTED_FORMATS) == []

    def test_directory(self, music_dir):
        assert len(scan_path(music_dir, DEFAULT_SUPPORTED_FORMATS)) == 5
