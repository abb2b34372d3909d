"""Weighted search nodes and the arena that owns them."""
from typing import Iterator, List, Optional, Tuple

from ...domain.models.position import Position

# East, South-East, South, South-West, West, North-West, North, North-East.
# The order decides which of several equal-weight candidates is queued first.
COMPASS_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (1, 1), (0, 1), (-1, 1),
    (-1, 0), (-1, -1), (0, -1), (1, -1),
)


def neighbor_positions(position: Position) -> List[Position]:
    """The 8 positions around position, in compass order."""
    return [position.offset(dx, dy) for dx, dy in COMPASS_OFFSETS]


class WeightedNode:
    """A grid cell reached during search.

    The heuristic is the squared straight-line distance to the goal captured
    at construction. Equality and hashing use the position only, so two
    nodes on the same cell compare equal whatever their weights.
    """
    __slots__ = ('position', 'goal', 'step_weight', 'predecessor', 'index')

    def __init__(self, position: Position, goal: Position, step_weight: float = 0.0,
                 predecessor: Optional[int] = None, index: int = -1):
        self.position = position
        self.goal = goal
        self.step_weight = step_weight
        self.predecessor = predecessor  # arena index of the node this one was reached from
        self.index = index

    @classmethod
    def for_goal(cls, position: Position) -> 'WeightedNode':
        """Build a goal node; its heuristic is measured against itself."""
        return cls(position, position)

    @property
    def heuristic(self) -> float:
        return self.position.sqr_distance(self.goal)

    @property
    def total_weight(self) -> float:
        return self.step_weight + self.heuristic

    def __eq__(self, other) -> bool:
        if not isinstance(other, WeightedNode):
            return NotImplemented
        return self.position == other.position

    def __hash__(self) -> int:
        return hash(self.position)

    def __repr__(self) -> str:
        return (f"WeightedNode(position={self.position}, step={self.step_weight}, "
                f"heuristic={self.heuristic}, total={self.total_weight}, "
                f"predecessor={self.predecessor})")


class NodeArena:
    """Owns every node created during one search run.

    Predecessor links are arena indices, so walking a chain back to the
    start is a sequence of list lookups.
    """

    def __init__(self):
        self._nodes: List[WeightedNode] = []

    def create(self, position: Position, goal: Position, step_weight: float = 0.0,
               predecessor: Optional[int] = None) -> WeightedNode:
        node = WeightedNode(position, goal, step_weight, predecessor, index=len(self._nodes))
        self._nodes.append(node)
        return node

    def adopt(self, node: WeightedNode) -> WeightedNode:
        """Take ownership of a node built outside the arena."""
        node.index = len(self._nodes)
        self._nodes.append(node)
        return node

    def __getitem__(self, index: int) -> WeightedNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[WeightedNode]:
        return iter(self._nodes)

    def predecessor_of(self, node: WeightedNode) -> Optional[WeightedNode]:
        if node.predecessor is None:
            return None
        return self._nodes[node.predecessor]

    def ancestry(self, node: WeightedNode) -> Iterator[WeightedNode]:
        """Yield node's predecessor, its predecessor, and so on to the root."""
        current = self.predecessor_of(node)
        while current is not None:
            yield current
            current = self.predecessor_of(current)
