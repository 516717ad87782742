"""Core infrastructure layer - no playback logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    MusicConfig,
    PlayerConfig,
    UIConfig,
    LoggingConfig,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    create_default_config,
)

# Output
from .output import (
    setup_loguru,
    set_blessed_mode,
    clear_blessed_mode,
    drain_pending_messages,
    log,
)

# Console
from .console import get_console, safe_print, print_supported_formats, print_usage

__all__ = [
    # Config
    "Config",
    "MusicConfig",
    "PlayerConfig",
    "UIConfig",
    "LoggingConfig",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "create_default_config",
    # Output
    "setup_loguru",
    "set_blessed_mode",
    "clear_blessed_mode",
    "drain_pending_messages",
    "log",
    # Console
    "get_console",
    "safe_print",
    "print_supported_formats",
    "print_usage",
]
