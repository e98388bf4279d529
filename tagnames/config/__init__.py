"""Configuration loading and validation package."""

from .loader import load_names_config
from .models import KindConfig, LoggingConfig, NamesConfig

__all__ = [
    "KindConfig",
    "LoggingConfig",
    "NamesConfig",
    "load_names_config",
]
