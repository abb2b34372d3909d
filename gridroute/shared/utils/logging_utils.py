"""Logging setup for gridroute."""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, List, Optional, TYPE_CHECKING

from ..exceptions import ValidationError

if TYPE_CHECKING:
    from ..configuration.settings import LoggingSettings


def resolve_level(level: Any) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Raises:
        ValidationError: If level is not the name of a standard logging level
    """
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if isinstance(value, int):
            return value
    raise ValidationError(f"Unknown log level: {level!r}", field="level", value=level)


def _file_handler(settings: 'LoggingSettings') -> logging.Handler:
    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        filename=log_path,
        maxBytes=settings.max_file_size_mb * 1024 * 1024,
        backupCount=settings.backup_count,
        encoding='utf-8'
    )


def setup_logging(settings: 'LoggingSettings') -> None:
    """Replace the root logger's handlers with ones built from settings.

    Console output goes to stdout so log lines interleave with the printed
    map. A log file that cannot be opened is reported and skipped.

    Raises:
        ValidationError: If a configured level name is unknown
    """
    level = resolve_level(settings.level)
    component_levels = {
        component: resolve_level(name) for component, name in settings.component_levels.items()
    }

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: List[logging.Handler] = []
    if settings.console_output:
        handlers.append(logging.StreamHandler(sys.stdout))

    file_error: Optional[OSError] = None
    if settings.file_output:
        try:
            handlers.append(_file_handler(settings))
        except OSError as e:
            file_error = e

    formatter = logging.Formatter(fmt=settings.format_string, datefmt=settings.date_format)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.error(f"Failed to open log file {settings.log_file}: {file_error}")

    for component, component_level in component_levels.items():
        logging.getLogger(component).setLevel(component_level)

    root_logger.debug(f"gridroute logging initialized at {logging.getLevelName(level)}")


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with ``[key=value ...]``."""

    def process(self, msg, kwargs):
        if self.extra:
            context = " ".join(f"{k}={v}" for k, v in self.extra.items())
            msg = f"[{context}] {msg}"
        return msg, kwargs


def get_context_logger(name: str, **context) -> ContextLogger:
    return ContextLogger(logging.getLogger(name), context)
