"""Command execution."""

from loguru import logger

from music_player.core.output import log
from music_player.domain.playback import (
    AudioOutputError,
    NoPlayableTrack,
    PlaybackController,
)

from ..state import UICommand


def execute_command(controller: PlaybackController, command: UICommand) -> bool:
    """
    Execute a playback command against the controller.

    Playback failures never escape: they are reported through log() and end
    up on the status line.

    Args:
        controller: Playback controller
        command: Command produced by the keyboard handler

    Returns:
        True if the UI should quit
    """
    action = command.action

    if action == 'quit':
        return True

    try:
        if action == 'play':
            controller.select(command.index if command.index is not None else controller.current_index)
        elif action == 'toggle_pause':
            controller.toggle_pause()
        elif action == 'next':
            controller.next()
        elif action == 'previous':
            controller.previous()
        elif action == 'stop':
            controller.stop()
        elif action == 'shuffle':
            controller.toggle_shuffle()
            log(f"Shuffle: {'On' if controller.shuffled else 'Off'}", level="info")
        elif action == 'repeat':
            controller.cycle_repeat()
            log(f"Repeat: {controller.repeat_mode}", level="info")
        else:
            logger.warning(f"Unknown UI command: {action}")
    except NoPlayableTrack:
        log("No playable track", level="error")
    except AudioOutputError as e:
        log(f"Audio output error: {e}", level="error")

    return False
