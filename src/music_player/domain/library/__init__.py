"""Library domain - loading tracks into an ordered catalog.

This domain handles:
- Track data model
- Filesystem scanning with an extension allow-list
- Duration probing per file type
- The read-only track catalog
"""

# Models
from .models import Track

# Catalog
from .catalog import TrackCatalog
from .exceptions import LibraryError, EmptyCatalog

# Duration probes
from .probes import (
    DurationProbe,
    register_probe,
    unregister_probe,
    get_probe,
    probe_duration,
    probe_mp3_duration,
)

# Scanning
from .scanner import (
    is_supported_format,
    track_from_path,
    scan_directory,
    scan_path,
)

__all__ = [
    # Models
    "Track",
    # Catalog
    "TrackCatalog",
    "LibraryError",
    "EmptyCatalog",
    # Probes
    "DurationProbe",
    "register_probe",
    "unregister_probe",
    "get_probe",
    "probe_duration",
    "probe_mp3_duration",
    # Scanner
    "is_supported_format",
    "track_from_path",
    "scan_directory",
    "scan_path",
]
