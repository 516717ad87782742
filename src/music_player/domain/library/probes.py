"""
Duration probing keyed by file type.

Each probe takes a path and returns the playback length in seconds, or None
when it cannot tell. New formats register a probe here; nothing else changes.
"""

from pathlib import Path
from typing import Callable, Optional

from loguru import logger
from mutagen import MutagenError
from mutagen.mp3 import MP3

DurationProbe = Callable[[str], Optional[float]]

_PROBES: dict[str, DurationProbe] = {}


def _normalize_extension(extension: str) -> str:
    extension = extension.lower()
    return extension if extension.startswith(".") else f".{extension}"


def register_probe(extension: str, probe: DurationProbe) -> None:
    """Register (or replace) the duration probe for a file extension.

    Args:
        extension: File extension, with or without the leading dot
        probe: Callable returning duration in seconds or None
    """
    _PROBES[_normalize_extension(extension)] = probe


def unregister_probe(extension: str) -> None:
    """Remove the probe for an extension, if any."""
    _PROBES.pop(_normalize_extension(extension), None)


def get_probe(extension: str) -> Optional[DurationProbe]:
    """Get the probe registered for an extension."""
    return _PROBES.get(_normalize_extension(extension))


def probe_mp3_duration(path: str) -> Optional[float]:
    """Read the length of an MP3 file from its frame headers."""
    audio = MP3(path)
    length = getattr(audio.info, "length", None)
    if not length or length <= 0:
        return None
    return float(length)


def probe_duration(path: str) -> Optional[float]:
    """Probe the duration of a file using the probe for its extension.

    Args:
        path: Path to the audio file

    Returns:
        Duration in seconds, or None for unknown formats and unreadable files
    """
    probe = get_probe(Path(path).suffix)
    if probe is None:
        return None

    title = Path(path).stem
    try:
        duration = probe(path)
    except (MutagenError, OSError) as e:
        logger.warning(f"Failed to extract duration for '{title}': {e}")
        return None

    if duration is not None:
        logger.info(f"Extracted duration for '{title}': {duration:.1f}s")
    return duration


register_probe(".mp3", probe_mp3_duration)
