"""Byte-backed text values with a byte view and an unchecked text view."""
from .config import BinStringConfig, get_config, load_config, set_config
from .core import BinString, Pattern
from .errors import BinStringError, ConfigError, InvalidTextError, OutOfRangeError
from .logging import configure_logging

__version__ = "0.1.0"

__all__ = [
    "BinString",
    "Pattern",
    "BinStringConfig",
    "BinStringError",
    "ConfigError",
    "InvalidTextError",
    "OutOfRangeError",
    "configure_logging",
    "get_config",
    "load_config",
    "set_config",
]
