"""UI state management - immutable state updates."""

from dataclasses import dataclass, replace
from typing import Optional

from music_player.domain.playback.controller import (
    PlaybackController,
    PlaybackState,
    RepeatMode,
)
from music_player.ui.blessed.helpers.scrolling import (
    calculate_scroll_offset,
    move_selection,
)

# Seconds a status message stays on screen
STATUS_TTL = 5.0


@dataclass(frozen=True)
class PlayerView:
    """Snapshot of controller state taken once per frame for rendering."""

    titles: tuple[str, ...] = ()
    current_index: int = 0
    state: PlaybackState = PlaybackState.STOPPED
    progress: float = 0.0
    elapsed: float = 0.0
    duration: Optional[float] = None
    shuffled: bool = False
    repeat_mode: RepeatMode = RepeatMode.OFF

    @property
    def current_title(self) -> Optional[str]:
        if not self.titles:
            return None
        return self.titles[self.current_index]


def snapshot_player(controller: PlaybackController) -> PlayerView:
    """Read everything the renderers need from the controller."""
    track = controller.current_track
    return PlayerView(
        titles=tuple(t.title for t in controller.tracks),
        current_index=controller.current_index,
        state=controller.state,
        progress=controller.progress(),
        elapsed=controller.elapsed(),
        duration=track.duration if track else None,
        shuffled=controller.shuffled,
        repeat_mode=controller.repeat_mode,
    )


@dataclass
class UICommand:
    """Playback command produced by a key press, executed against the controller."""

    action: str  # quit, play, toggle_pause, next, previous, stop, shuffle, repeat
    index: Optional[int] = None  # Track index for "play"


@dataclass
class UIState:
    """
    Complete UI state - immutable updates only.

    All state transformations return new UIState instances.
    """
    # Track list
    selected: int = 0
    scroll: int = 0

    # Overlays
    show_help: bool = False

    # Status line (last log message or playback error)
    status_message: Optional[str] = None
    status_color: str = "white"
    status_time: Optional[float] = None


def create_initial_state(show_help: bool = False) -> UIState:
    """Create the initial UI state."""
    return UIState(show_help=show_help)


def move_track_selection(
    state: UIState, delta: int, total_items: int, visible_items: int
) -> UIState:
    """Move the track list cursor, wrapping, without touching playback."""
    if total_items == 0:
        return state

    new_selected = move_selection(state.selected, delta, total_items)
    new_scroll = calculate_scroll_offset(
        new_selected, state.scroll, visible_items, total_items
    )
    return replace(state, selected=new_selected, scroll=new_scroll)


def select_track(
    state: UIState, index: int, total_items: int, visible_items: int
) -> UIState:
    """Put the cursor on a specific track (used to follow playback)."""
    if total_items == 0:
        return state

    index = max(0, min(index, total_items - 1))
    new_scroll = calculate_scroll_offset(index, state.scroll, visible_items, total_items)
    return replace(state, selected=index, scroll=new_scroll)


def toggle_help(state: UIState) -> UIState:
    return replace(state, show_help=not state.show_help)


def hide_help(state: UIState) -> UIState:
    return replace(state, show_help=False)


def set_status(
    state: UIState, message: str, color: str = "white", now: Optional[float] = None
) -> UIState:
    """Show a message on the status line."""
    return replace(
        state,
        status_message=message,
        status_color=color,
        status_time=now,
    )


def expire_status(state: UIState, now: float, ttl: float = STATUS_TTL) -> UIState:
    """Clear the status line once it has been shown for ttl seconds."""
    if state.status_message is None or state.status_time is None:
        return state
    if now - state.status_time < ttl:
        return state
    return replace(state, status_message=None, status_time=None)
