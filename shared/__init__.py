"""Shared configuration, logging and exceptions."""

from .config import GenerationConfig, load_config
from .exceptions import ConfigError, GenerationError, SharedError
from .logger import setup_logger

__all__ = [
    "GenerationConfig",
    "load_config",
    "SharedError",
    "ConfigError",
    "GenerationError",
    "setup_logger",
]
