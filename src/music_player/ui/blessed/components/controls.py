"""Controls line and help overlay rendering functions."""

from blessed import Terminal

from ..state import PlayerView, UIState
from .layout import centered_rect, draw_box

HELP_LINES = [
    "Vim-Inspired Music Player",
    "",
    "Navigation:",
    "  j, ↓      - Move down in track list",
    "  k, ↑      - Move up in track list",
    "",
    "Playback:",
    "  Space     - Play selected track or pause/unpause",
    "  Enter     - Play selected track",
    "  n         - Next track",
    "  p         - Previous track",
    "  S         - Stop playback",
    "",
    "Modes:",
    "  s         - Toggle shuffle",
    "  r         - Cycle repeat mode (Off/One/All)",
    "",
    "Other:",
    "  q, Esc    - Quit",
    "  ?, h      - Toggle this help",
    "",
    "Press any key to close help...",
]

_STATUS_COLORS = {
    'white': 'white',
    'green': 'green',
    'red': 'red',
    'cyan': 'cyan',
    'yellow': 'yellow',
}


def controls_text(view: PlayerView) -> str:
    """Plain mode summary, e.g. "Shuffle: Off | Repeat: All | Press ? for help"."""
    shuffle = "On" if view.shuffled else "Off"
    return f"Shuffle: {shuffle} | Repeat: {view.repeat_mode} | Press ? for help"


def render_controls(term: Terminal, ui_state: UIState, view: PlayerView, y_start: int) -> None:
    """Render the boxed controls line, or the current status message if one is showing."""
    draw_box(term, 0, y_start, term.width, 3, "Controls")
    inner_width = max(term.width - 2, 0)

    if ui_state.status_message:
        color = getattr(term, _STATUS_COLORS.get(ui_state.status_color, 'white'))
        text = term.center(ui_state.status_message[:inner_width], inner_width)
        print(term.move_xy(1, y_start + 1) + color(text), end="")
        return

    shuffle_color = term.green if view.shuffled else term.red
    line = (
        "Shuffle: "
        + shuffle_color("On" if view.shuffled else "Off")
        + " | Repeat: "
        + term.cyan(str(view.repeat_mode))
        + " | Press "
        + term.yellow("?")
        + " for help"
    )
    pad = max((inner_width - len(controls_text(view))) // 2, 0)
    print(term.move_xy(1 + pad, y_start + 1) + line, end="")


def render_help(term: Terminal) -> None:
    """Render the help overlay centered on screen."""
    x, y, width, height = centered_rect(term, 60, 50)
    height = max(height, min(len(HELP_LINES) + 2, term.height))
    y = max((term.height - height) // 2, 0)
    draw_box(term, x, y, width, height, "Help")

    inner_width = max(width - 2, 0)
    for i, line in enumerate(HELP_LINES[: height - 2]):
        print(term.move_xy(x + 1, y + 1 + i) + line[:inner_width], end="")
