"""
Terminal music player - wiring between library, playback and UI.
"""

import threading
import time
from pathlib import Path
from typing import Optional

from loguru import logger

from music_player.core import config
from music_player.core.console import get_console, print_supported_formats, safe_print
from music_player.core.output import setup_loguru
from music_player.domain.library import EmptyCatalog, scan_path
from music_player.domain.playback import (
    AudioOutputError,
    MpvAudioPort,
    NoPlayableTrack,
    PlaybackController,
    PlaybackDriver,
    check_mpv_available,
    install_signal_handlers,
)

# How long --test lets the first track play
TEST_PLAY_SECONDS = 0.5


def init_logging(current_config: config.Config) -> Path:
    """Initialize loguru from config and return the log file path."""
    log_file = config.get_log_file_path(current_config)
    setup_loguru(
        log_file,
        level=current_config.logging.level,
        max_file_size_mb=current_config.logging.max_file_size_mb,
        backup_count=current_config.logging.backup_count,
    )
    return log_file


def build_controller(
    port: MpvAudioPort, current_config: config.Config, tracks: list, origin: str
) -> PlaybackController:
    """Create a loaded controller with the configured timing and start modes."""
    controller = PlaybackController(
        port,
        completion_grace=current_config.player.completion_grace,
        fallback_duration=current_config.player.fallback_duration,
    )
    controller.load(tracks, origin=origin)
    if current_config.player.shuffle_on_start:
        controller.toggle_shuffle()
    return controller


def run_test_playback(controller: PlaybackController) -> int:
    """Play the first playable track briefly, then stop."""
    try:
        controller.play_current()
    except NoPlayableTrack:
        safe_print("❌ No playable track", style="red")
        return 1
    except AudioOutputError as e:
        safe_print(f"❌ Audio output error: {e}", style="red")
        return 1

    track = controller.current_track
    safe_print(f"♪ Playing: {track.title}", style="green")
    time.sleep(TEST_PLAY_SECONDS)
    controller.stop()
    safe_print("✅ Playback test completed", style="green")
    return 0


def run_interactive(
    controller: PlaybackController,
    current_config: config.Config,
    shutdown: threading.Event,
) -> int:
    """Start the first playable track and hand the terminal to the UI."""
    from .ui.blessed import run_interactive_ui

    driver = PlaybackDriver(controller, shutdown)

    try:
        controller.play_current()
    except NoPlayableTrack:
        # Stay in the UI; the user can still browse and pick another track
        logger.warning("No playable track at startup")
    except AudioOutputError:
        safe_print("❌ Audio output failed, see log for details", style="red")
        return 1

    try:
        run_interactive_ui(controller, driver, current_config)
    finally:
        controller.stop()

    if shutdown.is_set():
        logger.info("Shutdown requested, playback stopped")

    return 0


def scan_with_status(music_path: Path, current_config: config.Config) -> list:
    """Scan music_path, showing the file being read on a rich status line."""
    with get_console().status("Scanning for music...") as status:

        def on_track(local_path: str, _track) -> None:
            status.update(f"Scanning: {Path(local_path).name}")

        return scan_path(
            music_path,
            current_config.music.supported_formats,
            recursive=current_config.music.scan_recursive,
            progress_callback=on_track,
        )


def run_player(
    music_path: Path, test_mode: bool = False, current_config: Optional[config.Config] = None
) -> int:
    """
    Load tracks from music_path and play them.

    Args:
        music_path: Music directory or single audio file
        test_mode: Play for a moment and exit instead of starting the UI
        current_config: Loaded configuration (defaults when None)

    Returns:
        Process exit code
    """
    current_config = current_config or config.Config()
    tracks = scan_with_status(music_path, current_config)

    # The port only spawns mpv when entered below
    port = MpvAudioPort(current_config.player)
    try:
        controller = build_controller(port, current_config, tracks, str(music_path))
    except EmptyCatalog as e:
        safe_print(f"❌ {e}", style="red")
        print_supported_formats(current_config.music.supported_formats)
        return 1

    safe_print(f"Found {controller.track_count} tracks", style="cyan")

    if not check_mpv_available():
        safe_print("❌ mpv is not installed or not on PATH", style="red")
        return 1

    shutdown = threading.Event()
    install_signal_handlers(shutdown)

    try:
        with port:
            if test_mode:
                return run_test_playback(controller)
            return run_interactive(controller, current_config, shutdown)
    except AudioOutputError as e:
        logger.exception("Audio output unavailable")
        safe_print(f"❌ Audio output error: {e}", style="red")
        return 1
