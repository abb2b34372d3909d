"""Grid position value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Value object representing an integer 2D grid coordinate (column, row)."""
    x: int
    y: int
    
    def sqr_distance(self, other: 'Position') -> float:
        """Squared Euclidean distance to another position."""
        return self.sqr_distance_between(self, other)
    
    @staticmethod
    def sqr_distance_between(start: 'Position', end: 'Position') -> float:
        dx = end.x - start.x
        dy = end.y - start.y
        return float(dx * dx + dy * dy)
    
    def offset(self, dx: int, dy: int) -> 'Position':
        return Position(self.x + dx, self.y + dy)
    
    def is_adjacent(self, other: 'Position') -> bool:
        """Check if other is one of the 8 surrounding cells."""
        if self == other:
            return False
        return abs(self.x - other.x) <= 1 and abs(self.y - other.y) <= 1
    
    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
