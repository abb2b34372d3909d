"""Shared exceptions for gridroute."""
from .base_exceptions import (
    GridRouteException, ConfigurationError, ValidationError
)
from .domain_exceptions import (
    GridError
)

__all__ = [
    'GridRouteException', 'ConfigurationError', 'ValidationError',
    'GridError'
]
