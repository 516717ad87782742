"""Rendering functions for blessed UI."""

from .layout import calculate_layout
from .track_list import render_track_list
from .dashboard import render_now_playing, render_progress, format_time
from .controls import render_controls, render_help

__all__ = [
    "calculate_layout",
    "render_track_list",
    "render_now_playing",
    "render_progress",
    "format_time",
    "render_controls",
    "render_help",
]
