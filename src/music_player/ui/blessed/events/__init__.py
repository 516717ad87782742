"""Event handling for blessed UI."""

from .keyboard import parse_key, handle_key
from .commands import execute_command

__all__ = ["parse_key", "handle_key", "execute_command"]
