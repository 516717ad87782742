"""UI layer for the terminal music player.

Contains:
- blessed: full-screen terminal interface
"""

__all__ = []
