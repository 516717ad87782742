"""Tests for scrolling helper functions."""

from music_player.ui.blessed.helpers.scrolling import calculate_scroll_offset, move_selection


class TestScrollOffset:
    """Test scroll window computation logic."""

    def test_no_scroll_when_fits(self):
        """When all items fit, the list never scrolls."""
        assert calculate_scroll_offset(4, 0, 10, 5) == 0

    def test_scroll_down_past_bottom(self):
        """Selecting below the window puts the selection on the last row."""
        assert calculate_scroll_offset(5, 0, 5, 20) == 1

    def test_scroll_up_past_top(self):
        """Selecting above the window puts the selection on the first row."""
        assert calculate_scroll_offset(2, 8, 5, 20) == 2

    def test_keep_scroll_inside_window(self):
        """Moving within the window leaves the scroll alone."""
        assert calculate_scroll_offset(10, 8, 5, 20) == 8

    def test_clamped_to_last_page(self):
        """The last item never rises above the bottom row."""
        assert calculate_scroll_offset(19, 18, 5, 20) == 15

    def test_zero_visible_rows(self):
        assert calculate_scroll_offset(3, 0, 0, 20) == 0


class TestMoveSelection:
    def test_wraps_forward(self):
        assert move_selection(9, 1, 10) == 0

    def test_wraps_backward(self):
        assert move_selection(0, -1, 10) == 9

    def test_empty_list(self):
        assert move_selection(0, 1, 0) == 0
