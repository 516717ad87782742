"""Now-playing and progress bar rendering functions."""

from typing import Optional

from blessed import Terminal

from music_player.domain.playback.controller import PlaybackState

from ..state import PlayerView
from .layout import draw_box


def format_time(seconds: Optional[float]) -> str:
    """Format seconds to MM:SS display."""
    if seconds is None or seconds < 0 or seconds > 86400:
        return "--:--"
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"


def now_playing_text(view: PlayerView, use_emoji: bool = True) -> str:
    """Status and title, e.g. "♪ Playing: Song"."""
    title = view.current_title or "No track selected"
    if view.state is PlaybackState.PAUSED:
        status = "⏸ Paused" if use_emoji else "Paused"
    elif view.state is PlaybackState.PLAYING:
        status = "♪ Playing" if use_emoji else "Playing"
    else:
        status = "■ Stopped" if use_emoji else "Stopped"
    return f"{status}: {title}"


def create_progress_bar(view: PlayerView, term: Terminal, bar_width: int = 40) -> str:
    """Create a colored progress bar with elapsed/total times."""
    bar_width = max(bar_width, 1)
    filled = int(bar_width * min(max(view.progress, 0.0), 1.0))

    progress_parts = []
    for i in range(filled):
        char_percentage = (i + 1) / bar_width
        if char_percentage < 0.33:
            progress_parts.append(term.green("█"))
        elif char_percentage < 0.66:
            progress_parts.append(term.yellow("█"))
        else:
            progress_parts.append(term.red("█"))

    progress_parts.append(term.white("░" * (bar_width - filled)))

    current = format_time(view.elapsed)
    total = format_time(view.duration)
    progress_parts.append(term.white(f" {current} / {total}"))

    return "".join(progress_parts)


def render_now_playing(
    term: Terminal, view: PlayerView, y_start: int, use_emoji: bool = True
) -> None:
    """Render the boxed now-playing line, centered."""
    draw_box(term, 0, y_start, term.width, 3, "Now Playing")
    inner_width = max(term.width - 2, 0)
    text = now_playing_text(view, use_emoji)[:inner_width]
    print(term.move_xy(1, y_start + 1) + term.center(text, inner_width), end="")


def render_progress(term: Terminal, view: PlayerView, y_start: int) -> None:
    """Render the boxed progress bar."""
    draw_box(term, 0, y_start, term.width, 3, "Progress")
    # Leave room for borders and the " MM:SS / MM:SS" label
    bar_width = max(term.width - 2 - 16, 10)
    print(term.move_xy(1, y_start + 1) + create_progress_bar(view, term, bar_width), end="")
