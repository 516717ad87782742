"""Main event loop and entry point for blessed UI."""

import dataclasses
import sys
import time

from blessed import Terminal
from loguru import logger

from music_player.core.config import Config
from music_player.core.output import (
    clear_blessed_mode,
    drain_pending_messages,
    log,
    set_blessed_mode,
)
from music_player.domain.playback import PlaybackController, PlaybackDriver

from .components import (
    calculate_layout,
    render_controls,
    render_help,
    render_now_playing,
    render_progress,
    render_track_list,
)
from .events import execute_command, handle_key
from .state import (
    PlayerView,
    UIState,
    create_initial_state,
    expire_status,
    select_track,
    set_status,
    snapshot_player,
)


def frame_key(term: Terminal, ui_state: UIState, view: PlayerView) -> int:
    """Hash of everything visible on screen; redraw only when it changes."""
    return hash((
        term.width,
        term.height,
        dataclasses.astuple(ui_state),
        view.current_index,
        view.state,
        round(view.progress, 3),
        int(view.elapsed),
        view.shuffled,
        view.repeat_mode,
    ))


def render(
    term: Terminal, ui_state: UIState, view: PlayerView, layout: dict, use_emoji: bool
) -> None:
    """Draw a full frame."""
    print(term.home + term.clear, end="")

    render_track_list(
        term,
        ui_state,
        view,
        layout['track_list_y'],
        layout['track_list_height'],
        use_emoji,
    )
    render_now_playing(term, view, layout['now_playing_y'], use_emoji)
    render_progress(term, view, layout['progress_y'])
    render_controls(term, ui_state, view, layout['controls_y'])

    if ui_state.show_help:
        render_help(term)

    sys.stdout.flush()


def run_interactive_ui(
    controller: PlaybackController, driver: PlaybackDriver, config: Config
) -> None:
    """
    Run the main interactive UI event loop.

    Args:
        controller: Loaded playback controller
        driver: Driver ticking the controller and holding the shutdown token
        config: Application configuration
    """
    term = Terminal()

    set_blessed_mode()
    try:
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            main_loop(term, controller, driver, config)
    finally:
        # Restore normal logging mode (CLI)
        clear_blessed_mode()


def main_loop(
    term: Terminal,
    controller: PlaybackController,
    driver: PlaybackDriver,
    config: Config,
) -> UIState:
    """
    Main event loop.

    Each iteration: fold queued log messages into the status line, redraw if
    anything visible changed, wait up to one tick for a key, then let the
    driver advance past a finished track.

    Args:
        term: blessed Terminal instance
        controller: Playback controller
        driver: Playback driver
        config: Application configuration

    Returns:
        Final UI state
    """
    ui_state = create_initial_state(config.ui.show_help_on_start)
    last_frame = None
    last_index = None

    while not driver.should_exit:
        layout = calculate_layout(term)
        rows = layout['track_list_rows']

        # Keep the cursor on the playing track when playback moves on its own
        if controller.current_index != last_index:
            ui_state = select_track(
                ui_state, controller.current_index, controller.track_count, rows
            )
            last_index = controller.current_index

        now = time.monotonic()
        for message, color in drain_pending_messages():
            ui_state = set_status(ui_state, message, color, now)
        ui_state = expire_status(ui_state, now)

        view = snapshot_player(controller)
        current_frame = frame_key(term, ui_state, view)
        if current_frame != last_frame:
            render(term, ui_state, view, layout, config.ui.use_emoji)
            last_frame = current_frame

        key = term.inkey(timeout=config.player.tick_interval)

        if key:
            ui_state, command = handle_key(
                ui_state, key, controller.track_count, controller.current_index, rows
            )
            if command and execute_command(controller, command):
                driver.request_exit()
                break

        message = driver.tick()
        if message:
            log(message, level="error")

    logger.info("UI loop finished")
    return ui_state
