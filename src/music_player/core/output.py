"""
Unified output system using Loguru.
Every message goes to the log file; user-facing ones are also printed (CLI mode)
or queued for the terminal UI status line (blessed mode).
"""

import threading
from pathlib import Path

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}"

# Global blessed mode tracking (set while the full-screen UI owns the terminal)
_blessed_mode_active = False
_blessed_mode_lock = threading.Lock()

# Messages logged while the UI is active, drained once per frame
_pending_messages: list[tuple[str, str]] = []
_pending_messages_lock = threading.Lock()

_LEVEL_COLORS = {
    "debug": "cyan",
    "info": "white",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


def setup_loguru(
    log_file: Path,
    level: str = "INFO",
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure loguru for file-only logging (blessed UI handles console display).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        max_file_size_mb: Size at which the log file is rotated
        backup_count: Number of rotated files to keep
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default stderr handler, it would scribble over the UI
    logger.remove()

    logger.add(
        log_file,
        rotation=f"{max_file_size_mb} MB",
        retention=backup_count,
        level=level.upper(),
        format=LOG_FORMAT,
        enqueue=False,  # Synchronous writes (thread-safe but blocking)
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def set_blessed_mode() -> None:
    """Enable blessed mode - suppresses stdout printing, queues messages for the UI."""
    global _blessed_mode_active
    with _blessed_mode_lock:
        _blessed_mode_active = True
    logger.debug("Blessed mode enabled - log() will queue messages for the UI")


def clear_blessed_mode() -> None:
    """Disable blessed mode - restores stdout printing."""
    global _blessed_mode_active
    with _blessed_mode_lock:
        _blessed_mode_active = False
    logger.debug("Blessed mode disabled - log() will print to stdout")


def drain_pending_messages() -> list[tuple[str, str]]:
    """
    Get and clear all pending UI messages.

    Returns:
        List of (message, color) tuples in the order they were logged
    """
    global _pending_messages
    with _pending_messages_lock:
        messages = _pending_messages[:]
        _pending_messages = []
        return messages


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to file AND shows the message to the user.

    Use this instead of print() for user-facing messages that should also be logged.

    Args:
        message: User-facing message
        level: Log level (debug, info, success, warning, error)
    """
    # depth=1 attributes the record to the caller, not this helper
    logger.opt(depth=1).log(level.upper(), message)

    with _blessed_mode_lock:
        blessed = _blessed_mode_active

    if blessed:
        color = _LEVEL_COLORS.get(level, "white")
        with _pending_messages_lock:
            _pending_messages.append((message, color))
    else:
        print(message)
