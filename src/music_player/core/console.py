"""Centralized Rich Console management.

One Console instance is shared by the CLI entry point for everything printed
outside the full-screen UI (usage, load errors, test-mode results).
"""

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get or create the global Rich Console instance.

    Returns:
        Console: The global Rich Console instance
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def safe_print(message: str, style: str | None = None) -> None:
    """Print using Rich Console with optional styling.

    Args:
        message: The message to print
        style: Optional Rich style string (e.g., "bold red", "green")
    """
    console = get_console()
    if style:
        console.print(message, style=style)
    else:
        console.print(message)


def print_supported_formats(formats: list[str]) -> None:
    """Print the extension allow-list, e.g. "Supported formats: mp3, wav"."""
    names = ", ".join(ext.lstrip(".") for ext in formats)
    safe_print(f"Supported formats: {names}", style="dim")


def print_usage(program: str, formats: list[str]) -> None:
    """Print the banner and usage shown when no music path is given."""
    safe_print("🎵 Terminal Music Player", style="bold")
    safe_print(f"Usage: {program} <music_directory|music_file> [--test]")
    safe_print(f"Example: {program} ./music")
    safe_print("Options:")
    safe_print("  --test    Exit immediately after testing playback")
    safe_print("  --config  Path to a config.toml")
    print_supported_formats(formats)
