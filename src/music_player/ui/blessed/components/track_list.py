"""Track list rendering functions."""

from blessed import Terminal

from music_player.domain.playback.controller import PlaybackState

from ..state import PlayerView, UIState
from .layout import draw_box

ICONS = {
    "playing": "♪",
    "paused": "⏸",
}

ASCII_ICONS = {
    "playing": ">",
    "paused": "|",
}


def track_prefix(index: int, view: PlayerView, use_emoji: bool = True) -> str:
    """Marker shown in front of a title: note or pause sign for the current track."""
    if index != view.current_index or view.state is PlaybackState.STOPPED:
        return "  "
    icons = ICONS if use_emoji else ASCII_ICONS
    return f"{icons['paused' if view.state is PlaybackState.PAUSED else 'playing']} "


def list_title(ui_state: UIState, view: PlayerView) -> str:
    """Border title, e.g. "Tracks (3/12)"."""
    total = len(view.titles)
    position = ui_state.selected + 1 if total else 0
    return f"Tracks ({position}/{total})"


def render_track_list(
    term: Terminal,
    ui_state: UIState,
    view: PlayerView,
    y_start: int,
    height: int,
    use_emoji: bool = True,
) -> None:
    """
    Render the scrollable track list.

    Args:
        term: blessed Terminal instance
        ui_state: Current UI state (cursor and scroll)
        view: Player snapshot for this frame
        y_start: Starting y position
        height: Height of the region including borders
    """
    draw_box(term, 0, y_start, term.width, height, list_title(ui_state, view))

    rows = height - 2
    inner_width = max(term.width - 2, 0)
    visible = view.titles[ui_state.scroll:ui_state.scroll + rows]

    for offset, title in enumerate(visible):
        index = ui_state.scroll + offset
        text = (track_prefix(index, view, use_emoji) + title)[:inner_width]
        text = text.ljust(inner_width)

        if index == view.current_index and view.state is not PlaybackState.STOPPED:
            text = term.bold_yellow(text)
        if index == ui_state.selected:
            text = term.on_bright_black(text)

        print(term.move_xy(1, y_start + 1 + offset) + text, end="")
