"""Allow `python -m music_player`."""

import sys

from music_player.cli import main

sys.exit(main())
