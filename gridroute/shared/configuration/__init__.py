"""Configuration management."""
from .config_manager import ConfigManager, get_config, initialize_config
from .settings import (
    SearchSettings, DisplaySettings, LoggingSettings, ApplicationSettings
)

__all__ = [
    'ConfigManager', 'get_config', 'initialize_config',
    'SearchSettings', 'DisplaySettings', 'LoggingSettings', 'ApplicationSettings'
]
