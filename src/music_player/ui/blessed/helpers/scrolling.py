"""Pure helper functions for scrolling and selection in the track list."""


def calculate_scroll_offset(
    selected: int,
    current_scroll: int,
    visible_items: int,
    total_items: int,
) -> int:
    """Calculate scroll offset to keep the selected row inside the viewport.

    Args:
        selected: Index of the currently selected item (0-based)
        current_scroll: Current scroll offset (0-based)
        visible_items: Number of rows visible in the viewport
        total_items: Total number of items in the list

    Returns:
        New scroll offset, never past the point where the last item is the
        bottom row
    """
    if visible_items <= 0 or total_items <= visible_items:
        return 0

    if selected >= current_scroll + visible_items:
        scroll = selected - visible_items + 1
    elif selected < current_scroll:
        scroll = selected
    else:
        scroll = current_scroll

    return max(0, min(scroll, total_items - visible_items))


def move_selection(current: int, delta: int, total_items: int) -> int:
    """Move selection by delta, wrapping at both ends.

    >>> move_selection(current=9, delta=1, total_items=10)
    0
    >>> move_selection(current=0, delta=-1, total_items=10)
    9
    """
    if total_items == 0:
        return 0
    return (current + delta) % total_items
