"""Grid contract consumed by the search engine."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Tuple

from .position import Position


class CellKind(Enum):
    """Kinds of grid cells, keyed by their map character."""
    WALL = "W"
    FREE = " "
    START = "S"
    GOAL = "E"
    PATH = "X"


class GridMap(ABC):
    """Read-mostly grid the search engine runs over.
    
    The engine only reads cell kinds and bounds while searching, and writes
    through ``mark_path`` while reconstructing a found route. The grid is
    owned by the caller.
    """
    
    @abstractmethod
    def kind_at(self, position: Position) -> CellKind:
        """Return the kind of the cell at position."""
        pass
    
    @abstractmethod
    def bounds(self) -> Tuple[int, int]:
        """Return the grid size as (width, height)."""
        pass
    
    @abstractmethod
    def mark_path(self, position: Position) -> None:
        """Mark a free cell as part of the route."""
        pass
    
    def in_bounds(self, position: Position) -> bool:
        width, height = self.bounds()
        return 0 <= position.x < width and 0 <= position.y < height
    
    def locate(self, kind: CellKind) -> List[Position]:
        """Find all cells of a kind in row-major order."""
        width, height = self.bounds()
        return [
            Position(x, y)
            for y in range(height)
            for x in range(width)
            if self.kind_at(Position(x, y)) == kind
        ]
