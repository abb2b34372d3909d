"""Search algorithms and their supporting structures."""
from .astar import AStarPathfinder
from .base import CharGrid, DEMO_MAP, demo_grid, OrderedFrontier, SortOrder, NodeArena, WeightedNode

__all__ = [
    'AStarPathfinder',
    'CharGrid', 'DEMO_MAP', 'demo_grid',
    'OrderedFrontier', 'SortOrder', 'NodeArena', 'WeightedNode'
]
