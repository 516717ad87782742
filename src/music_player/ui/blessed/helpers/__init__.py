"""Pure helpers shared by blessed UI components."""

from .scrolling import calculate_scroll_offset, move_selection

__all__ = ["calculate_scroll_offset", "move_selection"]
