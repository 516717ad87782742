"""Keyboard event handling."""

from typing import Optional

from blessed.keyboard import Keystroke

from ..state import (
    UICommand,
    UIState,
    hide_help,
    move_track_selection,
    toggle_help,
)


def parse_key(key: Keystroke) -> dict:
    """
    Parse keystroke into event dictionary.

    Args:
        key: blessed Keystroke

    Returns:
        Event dictionary describing the key press
    """
    event = {
        'type': 'unknown',
        'key': key,
        'name': key.name if hasattr(key, 'name') else None,
        'char': str(key) if key and key.isprintable() else None,
    }

    if key.name == 'KEY_ENTER' or key in ('\n', '\r'):
        event['type'] = 'enter'
    elif key.name == 'KEY_ESCAPE' or key == '\x1b':
        event['type'] = 'escape'
    elif key.name == 'KEY_UP':
        event['type'] = 'arrow_up'
    elif key.name == 'KEY_DOWN':
        event['type'] = 'arrow_down'
    elif key == '\x03':  # Ctrl+C
        event['type'] = 'ctrl_c'
    elif key and key.isprintable():
        event['type'] = 'char'

    return event


# Single-character bindings that map straight to a playback command
CHAR_COMMANDS = {
    'n': 'next',
    'p': 'previous',
    's': 'shuffle',
    'r': 'repeat',
    'S': 'stop',
}


def handle_key(
    state: UIState,
    key: Keystroke,
    track_count: int,
    current_index: int,
    visible_items: int = 10,
) -> tuple[UIState, Optional[UICommand]]:
    """
    Handle keyboard input and return updated state.

    Navigation keys only move the list cursor; playback changes come back as
    a UICommand for the caller to run against the controller.

    Args:
        state: Current UI state
        key: blessed Keystroke
        track_count: Number of tracks in the list
        current_index: Index of the track the controller considers current
        visible_items: Rows visible in the track list

    Returns:
        Tuple of (updated state, command to execute or None)
    """
    event = parse_key(key)
    etype = event['type']
    char = event['char']

    if etype in ('ctrl_c', 'escape') and not state.show_help:
        return state, UICommand('quit')
    if char == 'q':
        return state, UICommand('quit')

    # Help overlay: ?/h toggles, any other key just closes it
    if char in ('?', 'h'):
        return toggle_help(state), None
    if state.show_help:
        return hide_help(state), None

    if etype == 'arrow_down' or char == 'j':
        return move_track_selection(state, 1, track_count, visible_items), None
    if etype == 'arrow_up' or char == 'k':
        return move_track_selection(state, -1, track_count, visible_items), None

    if etype == 'enter':
        return state, UICommand('play', index=state.selected)

    if char == ' ':
        # Different track under the cursor: play it. Otherwise pause/unpause.
        if state.selected != current_index:
            return state, UICommand('play', index=state.selected)
        return state, UICommand('toggle_pause')

    if char in CHAR_COMMANDS:
        return state, UICommand(CHAR_COMMANDS[char])

    return state, None
