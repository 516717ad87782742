"""
Music Player CLI - Entry point

Parses the command line, loads configuration and logging, then hands off to
the player.
"""

import argparse
import sys
from pathlib import Path

from music_player.core import config
from music_player.core.console import print_usage


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the music-player command."""
    parser = argparse.ArgumentParser(
        prog=config.APP_NAME,
        description="Terminal music player with vim-style keys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'path',
        nargs='?',
        help='Music directory or single audio file',
    )
    parser.add_argument(
        '--test',
        action='store_true',
        help='Play the first playable track briefly and exit',
    )
    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to a config.toml (default: ./config.toml or XDG config dir)',
    )
    parser.add_argument(
        '--log-level',
        default=None,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        type=str.upper,
        help='Override the configured log level',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the music-player command."""
    args = build_parser().parse_args(argv)

    current_config = config.load_config(args.config)
    if args.log_level:
        current_config.logging.level = args.log_level

    if not args.path:
        print_usage(config.APP_NAME, current_config.music.supported_formats)
        return 1

    from .main import init_logging, run_player

    init_logging(current_config)
    return run_player(Path(args.path), test_mode=args.test, current_config=current_config)


if __name__ == "__main__":
    sys.exit(main())
