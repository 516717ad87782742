"""
Music loading from the filesystem.

Turns a file or directory into an ordered list of Track objects, keeping
only files whose extension is on the supported-format allow-list.
"""

from pathlib import Path
from typing import Callable, Iterable, Optional

from loguru import logger

from .models import Track
from .probes import probe_duration


def is_supported_format(local_path: Path, supported_formats: Iterable[str]) -> bool:
    """Check if file format is supported (case-insensitive extension match)."""
    return local_path.suffix.lower() in {ext.lower() for ext in supported_formats}


def track_from_path(local_path: Path) -> Track:
    """Build a Track with a filename-derived title and a probed duration."""
    title = local_path.stem or "Unknown"
    return Track(
        path=str(local_path),
        title=title,
        duration=probe_duration(str(local_path)),
    )


def _iter_directory(directory: Path, recursive: bool) -> list[Path]:
    """List files under a directory in a stable, sorted order."""
    pattern = directory.rglob("*") if recursive else directory.glob("*")
    return sorted(pattern, key=lambda p: str(p).lower())


def scan_directory(
    directory: Path,
    supported_formats: Iterable[str],
    recursive: bool = True,
    progress_callback: Optional[Callable[[str, Track], None]] = None,
) -> list[Track]:
    """Scan a directory for music files.

    Args:
        directory: Directory to scan
        supported_formats: Allowed extensions (with leading dot)
        recursive: Whether to descend into subdirectories
        progress_callback: Optional callback function(local_path, track) for progress updates

    Returns:
        List of Track objects in sorted path order
    """
    formats = list(supported_formats)
    tracks = []

    try:
        files = _iter_directory(directory, recursive)
    except PermissionError:
        logger.warning(f"Permission denied accessing: {directory}")
        return tracks

    for local_path in files:
        try:
            if not local_path.is_file() or not is_supported_format(local_path, formats):
                continue
            track = track_from_path(local_path)
        except OSError as e:
            logger.error(f"Error processing {local_path}: {e}")
            continue

        tracks.append(track)
        if progress_callback:
            progress_callback(str(local_path), track)

    return tracks


def scan_path(
    path: Path,
    supported_formats: Iterable[str],
    recursive: bool = True,
    progress_callback: Optional[Callable[[str, Track], None]] = None,
) -> list[Track]:
    """Load tracks from a directory or a single file.

    Args:
        path: Music directory or single audio file
        supported_formats: Allowed extensions (with leading dot)
        recursive: Whether to descend into subdirectories
        progress_callback: Optional callback function(local_path, track)

    Returns:
        List of Track objects (may be empty)
    """
    path = Path(path).expanduser()
    formats = list(supported_formats)
    tracks: list[Track] = []

    if path.is_file():
        if is_supported_format(path, formats):
            tracks.append(track_from_path(path))
            logger.info(f"Loaded single track: {path}")
        else:
            logger.warning(f"Unsupported file format: {path}")
    elif path.is_dir():
        tracks = scan_directory(
            path, formats, recursive=recursive, progress_callback=progress_callback
        )
        logger.info(f"Loaded {len(tracks)} tracks from directory: {path}")
    else:
        logger.warning(f"Music path does not exist: {path}")

    if not tracks:
        logger.warning(f"No supported audio files found in: {path}")

    return tracks
