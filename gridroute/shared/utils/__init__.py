"""Shared utilities."""
from .logging_utils import setup_logging, resolve_level, get_context_logger
from .validation_utils import validate_position, validate_grid_rows, validate_choice
from .performance_utils import timing_context, memory_profiler

__all__ = [
    'setup_logging', 'resolve_level', 'get_context_logger',
    'validate_position', 'validate_grid_rows', 'validate_choice',
    'timing_context', 'memory_profiler'
]
