"""Layout calculation functions."""

from blessed import Terminal

# Fixed-height regions below the track list (borders included)
NOW_PLAYING_HEIGHT = 3
PROGRESS_HEIGHT = 3
CONTROLS_HEIGHT = 3


def calculate_layout(term: Terminal) -> dict[str, int]:
    """
    Pure function: calculate y-positions for all regions.

    The track list takes whatever the fixed regions leave, minimum 3 rows
    (two borders plus one track).

    Args:
        term: blessed Terminal instance

    Returns:
        Dictionary with region positions and heights
    """
    fixed = NOW_PLAYING_HEIGHT + PROGRESS_HEIGHT + CONTROLS_HEIGHT
    track_list_height = max(term.height - fixed, 3)

    return {
        'track_list_y': 0,
        'track_list_height': track_list_height,
        'track_list_rows': track_list_height - 2,
        'now_playing_y': track_list_height,
        'progress_y': track_list_height + NOW_PLAYING_HEIGHT,
        'controls_y': track_list_height + NOW_PLAYING_HEIGHT + PROGRESS_HEIGHT,
    }


def centered_rect(term: Terminal, percent_x: int, percent_y: int) -> tuple[int, int, int, int]:
    """Return (x, y, width, height) of a box centered in the terminal."""
    width = max(term.width * percent_x // 100, 1)
    height = max(term.height * percent_y // 100, 1)
    x = (term.width - width) // 2
    y = (term.height - height) // 2
    return x, y, width, height


def draw_box(term: Terminal, x: int, y: int, width: int, height: int, title: str = "") -> None:
    """Draw a bordered box with an optional title in the top border."""
    if width < 2 or height < 2:
        return

    inner = width - 2
    label = f" {title} " if title else ""
    top = "┌" + label[:inner] + "─" * max(inner - len(label), 0) + "┐"
    print(term.move_xy(x, y) + top, end="")
    for row in range(1, height - 1):
        print(term.move_xy(x, y + row) + "│" + " " * inner + "│", end="")
    print(term.move_xy(x, y + height - 1) + "└" + "─" * inner + "┘", end="")
