"""Search outcome models."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .position import Position
from ...shared.exceptions import GridRouteException


class SearchStatus(Enum):
    """Final state of a search run."""
    FOUND = "found"
    NO_PATH = "no_path"
    INVALID_GRID = "invalid_grid"


@dataclass
class SearchResult:
    """Outcome of a single path search.
    
    ``path`` lists the free cells walked from start to goal, excluding both
    endpoints. A FOUND result may carry an empty path when the start cell
    touches the goal cell; NO_PATH always does.
    """
    status: SearchStatus
    path: List[Position] = field(default_factory=list)
    start: Optional[Position] = None
    goal: Optional[Position] = None
    path_cost: Optional[float] = None
    iterations: int = 0
    closed_count: int = 0
    frontier_count: int = 0
    error: Optional[GridRouteException] = None
    
    @property
    def found(self) -> bool:
        return self.status == SearchStatus.FOUND
    
    def raise_for_error(self) -> None:
        """Raise the stored error, if the search could not run."""
        if self.error is not None:
            raise self.error
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "start": [self.start.x, self.start.y] if self.start else None,
            "goal": [self.goal.x, self.goal.y] if self.goal else None,
            "path": [[p.x, p.y] for p in self.path],
            "path_cost": self.path_cost,
            "iterations": self.iterations,
            "closed_count": self.closed_count,
            "frontier_count": self.frontier_count,
            "error": str(self.error) if self.error else None,
        }
