"""
gridroute - best-first route search over character grids
"""

__version__ = "1.0.0"
__license__ = "MIT"
__description__ = "A*-style 8-connected grid router with an ordered linked-list frontier"

from .domain.models import Position, CellKind, GridMap, SearchResult, SearchStatus
from .algorithms import AStarPathfinder, CharGrid, OrderedFrontier, SortOrder, WeightedNode, demo_grid
from .shared.exceptions import GridRouteException, ConfigurationError, ValidationError, GridError

__all__ = [
    'Position', 'CellKind', 'GridMap', 'SearchResult', 'SearchStatus',
    'AStarPathfinder', 'CharGrid', 'OrderedFrontier', 'SortOrder', 'WeightedNode', 'demo_grid',
    'GridRouteException', 'ConfigurationError', 'ValidationError', 'GridError',
]
