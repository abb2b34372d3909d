"""Configuration manager for loading, saving, and managing application settings."""
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union

from .settings import ApplicationSettings

logger = logging.getLogger(__name__)


class ConfigManager:
    """Centralized configuration manager for gridroute."""
    
    DEFAULT_CONFIG_PATHS = [
        "gridroute.json",
        "config/gridroute.json",
        "~/.gridroute/config.json",
        "~/.config/gridroute/config.json"
    ]
    
    def __init__(self, config_path: Optional[Union[str, Path]] = None,
                 create_if_missing: bool = False):
        """Initialize configuration manager.
        
        Args:
            config_path: Optional path to configuration file.
                        If None, will search default locations.
            create_if_missing: Write a default config file when none exists.
        """
        self.config_path: Optional[Path] = None
        self.settings: ApplicationSettings = ApplicationSettings()
        
        if config_path:
            self.config_path = Path(config_path).expanduser().resolve()
        else:
            self.config_path = self._find_config_file()
        
        if self.config_path and self.config_path.exists():
            self.load()
        elif create_if_missing:
            self._create_default_config()
    
    def _find_config_file(self) -> Optional[Path]:
        """Find existing configuration file in default locations."""
        for path_str in self.DEFAULT_CONFIG_PATHS:
            path = Path(path_str).expanduser().resolve()
            if path.exists():
                logger.info(f"Found existing config file: {path}")
                return path
        
        default_path = Path(self.DEFAULT_CONFIG_PATHS[0]).expanduser().resolve()
        logger.debug(f"No existing config found, defaults apply (would save to {default_path})")
        return default_path
    
    def _create_default_config(self):
        """Create default configuration file."""
        if self.save():
            logger.info(f"Created default configuration file: {self.config_path}")
    
    def load(self, config_path: Optional[Union[str, Path]] = None) -> bool:
        """Load configuration from file.
        
        Args:
            config_path: Optional path to load from. Uses instance path if None.
            
        Returns:
            True if loaded successfully, False otherwise.
        """
        path = Path(config_path).expanduser().resolve() if config_path else self.config_path
        
        if not path or not path.exists():
            logger.warning(f"Configuration file not found: {path}")
            return False
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to load configuration from {path}: {e}")
            return False
        
        self._update_settings_from_dict(config_data)
        
        errors = self.validate()
        if any(error_list for error_list in errors.values()):
            logger.warning("Configuration validation errors found:")
            for category, error_list in errors.items():
                for error in error_list:
                    logger.warning(f"  {category}: {error}")
        
        logger.info(f"Configuration loaded from: {path}")
        return True
    
    def save(self, config_path: Optional[Union[str, Path]] = None) -> bool:
        """Save configuration to file.
        
        Args:
            config_path: Optional path to save to. Uses instance path if None.
            
        Returns:
            True if saved successfully, False otherwise.
        """
        path = Path(config_path).expanduser().resolve() if config_path else self.config_path
        
        if not path:
            logger.error("No configuration path specified")
            return False
        
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(asdict(self.settings), f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save configuration to {path}: {e}")
            return False
        
        logger.info(f"Configuration saved to: {path}")
        return True
    
    def _update_settings_from_dict(self, config_data: Dict[str, Any]):
        """Update settings from dictionary data."""
        def update_dataclass(obj, data):
            if not isinstance(data, dict):
                return
            
            for key, value in data.items():
                if hasattr(obj, key):
                    attr = getattr(obj, key)
                    if hasattr(attr, '__dataclass_fields__'):
                        update_dataclass(attr, value)
                    else:
                        setattr(obj, key, value)
                else:
                    logger.warning(f"Ignoring unknown setting: {key}")
        
        update_dataclass(self.settings, config_data)
    
    def get_settings(self) -> ApplicationSettings:
        """Get current application settings."""
        return self.settings
    
    def _update_group(self, group, label: str, **kwargs):
        for key, value in kwargs.items():
            if hasattr(group, key):
                setattr(group, key, value)
            else:
                logger.warning(f"Unknown {label} setting: {key}")
    
    def update_search_settings(self, **kwargs):
        """Update search settings."""
        self._update_group(self.settings.search, "search", **kwargs)
    
    def update_display_settings(self, **kwargs):
        """Update display settings."""
        self._update_group(self.settings.display, "display", **kwargs)
    
    def update_logging_settings(self, **kwargs):
        """Update logging settings."""
        self._update_group(self.settings.logging, "logging", **kwargs)
    
    def validate(self) -> Dict[str, Any]:
        """Validate current settings."""
        return self.settings.validate()
    
    def reset_to_defaults(self):
        """Reset all settings to defaults."""
        self.settings = ApplicationSettings()
        logger.info("Settings reset to defaults")
    
    def reset_category_to_defaults(self, category: str):
        """Reset a specific category to defaults."""
        if category not in ("search", "display", "logging"):
            logger.warning(f"Unknown settings category: {category}")
            return
        
        setattr(self.settings, category, getattr(ApplicationSettings(), category))
        logger.info(f"Reset {category} settings to defaults")
    
    def get_config_info(self) -> Dict[str, Any]:
        """Get information about current configuration."""
        return {
            "config_path": str(self.config_path) if self.config_path else None,
            "config_exists": self.config_path.exists() if self.config_path else False,
            "version": self.settings.version,
            "config_version": self.settings.config_version,
            "validation_errors": self.validate()
        }


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def initialize_config(config_path: Optional[Union[str, Path]] = None) -> ConfigManager:
    """Initialize the global configuration manager with optional custom path."""
    global _config_manager
    _config_manager = ConfigManager(config_path)
    return _config_manager
