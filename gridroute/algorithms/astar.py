"""Best-first (A*-style) router over an 8-connected grid."""
import logging
from typing import Dict, List, Optional

from ..domain.models.grid import CellKind, GridMap
from ..domain.models.position import Position
from ..domain.models.search import SearchResult, SearchStatus
from ..shared.configuration.settings import INSERT_ENDS, SearchSettings
from ..shared.exceptions import ConfigurationError
from ..shared.utils.logging_utils import get_context_logger
from ..shared.utils.validation_utils import validate_choice
from .base.ordered_frontier import OrderedFrontier, SortOrder
from .base.weighted_node import NodeArena, WeightedNode, neighbor_positions

logger = logging.getLogger(__name__)


class AStarPathfinder:
    """Finds a route from the grid's start cell to its goal cell.

    Each expansion pops the frontier node with the lowest total weight and
    queues its unseen non-wall neighbours. A cell already queued or already
    expanded is never queued again, even if it is reached more cheaply later.
    The search stops as soon as an expanded node touches the goal.

    The grid is borrowed: a successful run marks the route cells as PATH.
    """

    def __init__(self, grid: GridMap, settings: Optional[SearchSettings] = None):
        """
        Raises:
            ValidationError: If settings.insert_from is not "front" or "back"
        """
        self.grid = grid
        self.settings = settings or SearchSettings()
        validate_choice(self.settings.insert_from, INSERT_ENDS, "insert_from")
        width, height = grid.bounds()
        self.log = get_context_logger(__name__, grid=f"{width}x{height}")

        self._arena = NodeArena()
        self._frontier: OrderedFrontier[WeightedNode] = OrderedFrontier(
            key=lambda node: node.total_weight, order=SortOrder.ASCENDING
        )
        self._closed: Dict[Position, WeightedNode] = {}
        self._start: Optional[WeightedNode] = None
        self._goal: Optional[WeightedNode] = None
        self._iterations = 0

    def find_path(self) -> SearchResult:
        """Run one complete search over the grid.

        Returns:
            SearchResult with status FOUND (path from start to goal, both
            excluded), NO_PATH (frontier exhausted, grid untouched) or
            INVALID_GRID (start or goal missing; ``error`` holds a
            ConfigurationError).
        """
        self._reset()

        try:
            self._seed()
        except ConfigurationError as e:
            self.log.warning(f"Cannot search grid: {e}")
            return SearchResult(status=SearchStatus.INVALID_GRID, error=e)

        self.log.info(f"Searching from {self._start.position} to {self._goal.position}")
        found = self._search()

        if not found:
            self.log.info(f"No path found after {self._iterations} iterations "
                          f"({len(self._closed)} cells closed)")
            return self._result(SearchStatus.NO_PATH)

        path = self._trace_path()
        self.log.info(f"Found path of {len(path)} cells (cost {self._goal.step_weight}) "
                      f"in {self._iterations} iterations")
        return self._result(SearchStatus.FOUND, path)

    # -------------------- phases --------------------

    def _reset(self):
        self._arena = NodeArena()
        self._frontier = OrderedFrontier(
            key=lambda node: node.total_weight, order=SortOrder.ASCENDING
        )
        self._closed = {}
        self._start = None
        self._goal = None
        self._iterations = 0

    def _seed(self):
        """Locate the endpoints and queue the start node."""
        start_pos = self._locate_one(CellKind.START, "start")
        goal_pos = self._locate_one(CellKind.GOAL, "goal")

        missing = [name for name, pos in (("start", start_pos), ("goal", goal_pos)) if pos is None]
        if missing:
            raise ConfigurationError(
                f"Grid has no {' and no '.join(missing)} cell", missing=missing
            )

        self._goal = self._arena.adopt(WeightedNode.for_goal(goal_pos))
        self._start = self._arena.create(start_pos, self._goal.position)
        self._enqueue(self._start)

    def _locate_one(self, kind: CellKind, name: str) -> Optional[Position]:
        positions = self.grid.locate(kind)
        if not positions:
            return None
        if len(positions) > 1:
            self.log.warning(f"Grid has {len(positions)} {name} cells, using {positions[0]}")
        return positions[0]

    def _search(self) -> bool:
        """Expand nodes until the goal is touched or the frontier runs dry."""
        while self._frontier:
            if self.settings.trace_frontier:
                self._trace_frontier()

            node = self._frontier.pop_front()
            self._iterations += 1

            if self._expand(node):
                return True

            self._closed[node.position] = node

        return False

    def _expand(self, node: WeightedNode) -> bool:
        """Queue the neighbours of node. Returns True once the goal is reached."""
        previous = self._arena.predecessor_of(node)

        for position in neighbor_positions(node.position):
            if not self.grid.in_bounds(position):
                continue

            # Don't step straight back to where we came from
            if previous is not None and position == previous.position:
                continue

            kind = self.grid.kind_at(position)
            if kind == CellKind.WALL:
                continue

            if kind == CellKind.GOAL:
                self._goal.step_weight = node.step_weight + 1
                self._goal.predecessor = node.index
                logger.debug(f"Goal reached from {node.position}")
                return True

            if position in self._closed or self._queued(position):
                continue

            candidate = self._arena.create(
                position, self._goal.position,
                step_weight=node.step_weight + 1, predecessor=node.index
            )
            self._enqueue(candidate)

        return False

    def _queued(self, position: Position) -> bool:
        return self._frontier.contains(WeightedNode(position, self._goal.position))

    def _enqueue(self, node: WeightedNode):
        if self.settings.insert_from == "back":
            self._frontier.insert_sorted_from_back(node)
        else:
            self._frontier.insert_sorted_from_front(node)

    def _trace_path(self) -> List[Position]:
        """Walk back from the goal, marking free cells, and return them start-first."""
        stack: List[Position] = []
        for node in self._arena.ancestry(self._goal):
            if self.grid.kind_at(node.position) == CellKind.FREE:
                stack.append(node.position)
                self.grid.mark_path(node.position)

        return stack[::-1]

    # -------------------- reporting --------------------

    def _trace_frontier(self):
        if not self.log.isEnabledFor(logging.DEBUG):
            return
        self.log.debug(f"Frontier holds {len(self._frontier)} nodes")
        for node in self._frontier:
            previous = self._arena.predecessor_of(node)
            prev = previous.position if previous is not None else None
            self.log.debug(f"  Pos: {node.position}, Prev: {prev}, Step: {node.step_weight}, "
                           f"Dist: {node.heuristic}, Total: {node.total_weight}")

    def _result(self, status: SearchStatus, path: Optional[List[Position]] = None) -> SearchResult:
        return SearchResult(
            status=status,
            path=path or [],
            start=self._start.position,
            goal=self._goal.position,
            path_cost=self._goal.step_weight if status == SearchStatus.FOUND else None,
            iterations=self._iterations,
            closed_count=len(self._closed),
            frontier_count=len(self._frontier),
        )
