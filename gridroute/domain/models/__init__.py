"""Domain models package."""
from .position import Position
from .grid import CellKind, GridMap
from .search import SearchResult, SearchStatus

__all__ = [
    'Position',
    'CellKind', 'GridMap',
    'SearchResult', 'SearchStatus'
]
