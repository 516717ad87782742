"""
Configuration management for the terminal music player
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

APP_NAME = "music-player"

DEFAULT_SUPPORTED_FORMATS = [".mp3", ".wav", ".ogg", ".flac", ".m4a"]


@dataclass
class MusicConfig:
    """Configuration for music loading."""

    supported_formats: List[str] = field(
        default_factory=lambda: list(DEFAULT_SUPPORTED_FORMATS)
    )
    scan_recursive: bool = True


@dataclass
class PlayerConfig:
    """Configuration for playback."""

    mpv_socket_path: Optional[str] = None
    volume: int = 50
    tick_interval: float = 0.1  # Seconds between completion polls
    completion_grace: float = 0.5  # Seconds past known duration before forcing "finished"
    fallback_duration: float = 300.0  # Display-only estimate for tracks without a duration
    shuffle_on_start: bool = False

    def validate(self) -> None:
        """Validate player configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not 0 <= self.volume <= 100:
            raise ValueError(f"volume must be between 0 and 100, got {self.volume}")
        if self.tick_interval <= 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
        if self.completion_grace < 0:
            raise ValueError(
                f"completion_grace must not be negative, got {self.completion_grace}"
            )
        if self.fallback_duration <= 0:
            raise ValueError(
                f"fallback_duration must be positive, got {self.fallback_duration}"
            )


@dataclass
class UIConfig:
    """Configuration for the terminal interface."""

    use_emoji: bool = True
    show_help_on_start: bool = False


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # Default: ~/.local/share/music-player/music-player.log
    max_file_size_mb: int = 10
    backup_count: int = 5


@dataclass
class Config:
    """Main configuration object."""

    music: MusicConfig = field(default_factory=MusicConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/music-player (or ~/.config/music-player)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_log_file_path(config: Config) -> Path:
    """Get the log file path, honouring a custom path from the config."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / f"{APP_NAME}.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Terminal Music Player Configuration

[music]
# Audio file extensions picked up when loading a directory
supported_formats = [".mp3", ".wav", ".ogg", ".flac", ".m4a"]

# Recursively scan subdirectories
scan_recursive = true

[player]
# Path for mpv socket (auto-generated if not specified)
# mpv_socket_path = "/tmp/mpv-socket"

# Default volume (0-100)
volume = 50

# Seconds between track-completion checks
tick_interval = 0.1

# Seconds past a known duration before a track counts as finished
completion_grace = 0.5

# Duration estimate (seconds) used for the progress bar when a track's length is unknown
fallback_duration = 300.0

# Start in shuffle mode
shuffle_on_start = false

[ui]
# Use emoji/unicode markers in the track list
use_emoji = true

# Open the help overlay on start
show_help_on_start = false

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/music-player/music-player.log)
# log_file = "/path/to/custom/music-player.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of rotated log files to keep
backup_count = 5
""".strip()


def _parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML, falling back to defaults per field."""
    config = Config()

    if "music" in toml_data:
        music_data = toml_data["music"]
        config.music = MusicConfig(
            supported_formats=[
                ext.lower() if ext.startswith(".") else f".{ext.lower()}"
                for ext in music_data.get(
                    "supported_formats", config.music.supported_formats
                )
            ],
            scan_recursive=music_data.get(
                "scan_recursive", config.music.scan_recursive
            ),
        )

    if "player" in toml_data:
        player_data = toml_data["player"]
        config.player = PlayerConfig(
            mpv_socket_path=player_data.get("mpv_socket_path"),
            volume=player_data.get("volume", config.player.volume),
            tick_interval=float(
                player_data.get("tick_interval", config.player.tick_interval)
            ),
            completion_grace=float(
                player_data.get("completion_grace", config.player.completion_grace)
            ),
            fallback_duration=float(
                player_data.get("fallback_duration", config.player.fallback_duration)
            ),
            shuffle_on_start=player_data.get(
                "shuffle_on_start", config.player.shuffle_on_start
            ),
        )
        try:
            config.player.validate()
        except ValueError as e:
            print(f"Warning: Invalid player configuration: {e}")
            print("Using default player configuration.")
            config.player = PlayerConfig()

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            use_emoji=ui_data.get("use_emoji", config.ui.use_emoji),
            show_help_on_start=ui_data.get(
                "show_help_on_start", config.ui.show_help_on_start
            ),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get(
                "backup_count", config.logging.backup_count
            ),
        )

    return config


def _apply_env_overrides(config: Config) -> Config:
    """Environment variables win over TOML values."""
    log_level = os.environ.get("MUSIC_PLAYER_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    socket_path = os.environ.get("MUSIC_PLAYER_MPV_SOCKET")
    if socket_path:
        config.player.mpv_socket_path = socket_path

    return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - MUSIC_PLAYER_LOG_LEVEL
    - MUSIC_PLAYER_MPV_SOCKET

    Args:
        config_path: Explicit config file; when given it is never created

    Returns:
        Parsed configuration (defaults on any read/parse error)
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    explicit = config_path is not None
    path = Path(config_path).expanduser() if explicit else get_config_path()

    if not path.exists():
        if explicit:
            print(f"Configuration file not found: {path}")
            print("Using default configuration.")
            return _apply_env_overrides(Config())

        # Create config directory and default file
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            print(f"Created default configuration at: {path}")
        except OSError as e:
            print(f"Could not write default configuration to {path}: {e}")
        return _apply_env_overrides(Config())

    try:
        with open(path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Error loading configuration from {path}: {e}")
        print("Using default configuration.")
        return _apply_env_overrides(Config())

    try:
        config = _parse_config(toml_data)
    except (ValueError, TypeError, AttributeError) as e:
        print(f"Error parsing configuration from {path}: {e}")
        print("Using default configuration.")
        config = Config()

    return _apply_env_overrides(config)
