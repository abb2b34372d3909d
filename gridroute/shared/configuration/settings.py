"""Settings dataclasses for gridroute."""
from dataclasses import dataclass, field
from typing import Dict, List

from ..utils.logging_utils import resolve_level
from ..utils.validation_utils import validate_choice
from ..exceptions import ValidationError

INSERT_ENDS = ("front", "back")


def _collect(checks) -> List[str]:
    """Run validation callables and collect their error messages."""
    errors = []
    for check in checks:
        try:
            check()
        except ValidationError as e:
            errors.append(str(e))
    return errors


@dataclass
class SearchSettings:
    """Search engine behaviour."""
    insert_from: str = "front"  # which end the frontier scan starts from
    trace_frontier: bool = False
    
    def validate(self) -> List[str]:
        return _collect([
            lambda: validate_choice(self.insert_from, INSERT_ENDS, "insert_from"),
        ])


@dataclass
class DisplaySettings:
    """Console output options for the CLI."""
    print_map: bool = True
    print_path: bool = True
    
    def validate(self) -> List[str]:
        return []


@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: str = "INFO"
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    console_output: bool = True
    file_output: bool = False
    log_file: str = "logs/gridroute.log"
    max_file_size_mb: int = 10
    backup_count: int = 3
    component_levels: Dict[str, str] = field(default_factory=dict)
    
    def validate(self) -> List[str]:
        errors = _collect([lambda: resolve_level(self.level)])
        if not isinstance(self.component_levels, dict):
            errors.append("component_levels must be a mapping of logger name to level")
        else:
            for component, level in self.component_levels.items():
                try:
                    resolve_level(level)
                except ValidationError as e:
                    errors.append(f"{component}: {e}")
        if not isinstance(self.max_file_size_mb, int) or self.max_file_size_mb <= 0:
            errors.append("max_file_size_mb must be a positive integer")
        if not isinstance(self.backup_count, int) or self.backup_count < 0:
            errors.append("backup_count must be a non-negative integer")
        return errors


@dataclass
class ApplicationSettings:
    """Top-level settings container."""
    version: str = "1.0.0"
    config_version: int = 1
    search: SearchSettings = field(default_factory=SearchSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    
    def validate(self) -> Dict[str, List[str]]:
        """Validate all settings groups.
        
        Returns:
            Mapping of category name to list of error messages
        """
        return {
            "search": self.search.validate(),
            "display": self.display.validate(),
            "logging": self.logging.validate(),
        }
