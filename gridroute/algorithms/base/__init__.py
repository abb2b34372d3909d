"""Base search infrastructure."""
from .grid import CharGrid, DEMO_MAP, demo_grid
from .ordered_frontier import OrderedFrontier, SortOrder
from .weighted_node import NodeArena, WeightedNode, neighbor_positions

__all__ = [
    'CharGrid', 'DEMO_MAP', 'demo_grid',
    'OrderedFrontier', 'SortOrder',
    'NodeArena', 'WeightedNode', 'neighbor_positions'
]
