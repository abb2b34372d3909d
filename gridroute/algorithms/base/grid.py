"""Character grid implementation backed by a numpy array."""
import logging
from pathlib import Path
from typing import Iterable, List, Tuple, Union

import numpy as np

from ...domain.models.grid import CellKind, GridMap
from ...domain.models.position import Position
from ...shared.exceptions import GridError, ValidationError
from ...shared.utils.validation_utils import validate_grid_rows, validate_position

logger = logging.getLogger(__name__)

CELL_CHARACTERS = tuple(kind.value for kind in CellKind)

# W = wall, S = start, E = end
DEMO_MAP = (
    "WWWWWWWWWWWW",
    "W       W  W",
    "W WWW W W WW",
    "W   WWW W WW",
    "WWW W      W",
    "WSW WWWWWW W",
    "W W WWE  W W",
    "W   WW W W W",
    "W WWWWWW W W",
    "W W W    W W",
    "W   W WW   W",
    "WWWWWWWWWWWW",
)


class CharGrid(GridMap):
    """2D map of cell characters, indexed ``cells[row, col]`` (``[y, x]``)."""

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2:
            raise ValidationError(f"Grid array must be 2D, got shape {cells.shape}",
                                  field="cells", value=cells.shape)
        self.cells = cells
        self.height, self.width = cells.shape
        logger.debug(f"Initialized character grid: {self.width}x{self.height}")

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> 'CharGrid':
        """Build a grid from equal-length rows of cell characters.

        Raises:
            ValidationError: If rows are ragged, empty, or hold unknown characters
        """
        rows = list(rows)
        validate_grid_rows(rows, CELL_CHARACTERS)
        return cls(np.array([list(row) for row in rows], dtype='<U1'))

    @classmethod
    def from_text(cls, text: str) -> 'CharGrid':
        """Build a grid from newline-separated rows.

        A single leading and trailing newline are ignored so triple-quoted
        literals can be used directly.
        """
        if text.startswith("\n"):
            text = text[1:]
        if text.endswith("\n"):
            text = text[:-1]
        return cls.from_rows(text.split("\n"))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'CharGrid':
        """Read a map file written as UTF-8 text.

        Raises:
            OSError: If the file cannot be read
            ValidationError: If the file is not UTF-8 or not a valid grid
        """
        path = Path(path)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise ValidationError(f"Map file {path} is not UTF-8 text: {e}",
                                  field="path", value=str(path)) from e
        logger.info(f"Loaded grid from: {path}")
        return cls.from_text(text.replace("\r\n", "\n"))

    def bounds(self) -> Tuple[int, int]:
        return self.width, self.height

    def kind_at(self, position: Position) -> CellKind:
        validate_position(position, self.bounds())
        return CellKind(self.cells[position.y, position.x])

    def mark_path(self, position: Position) -> None:
        """Mark a free cell as route.

        Raises:
            ValidationError: If the position is outside the grid
            GridError: If the cell is not free
        """
        kind = self.kind_at(position)
        if kind != CellKind.FREE:
            raise GridError(f"Cannot mark {kind.name} cell at {position} as path",
                            position=position)
        self.cells[position.y, position.x] = CellKind.PATH.value

    def locate(self, kind: CellKind) -> List[Position]:
        # argwhere walks the array in row-major order
        return [Position(int(col), int(row))
                for row, col in np.argwhere(self.cells == kind.value)]

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self.cells == kind.value))

    def copy(self) -> 'CharGrid':
        return CharGrid(self.cells.copy())

    def rows(self) -> List[str]:
        return ["".join(row) for row in self.cells]

    def render(self) -> str:
        """The grid as text, one row per line."""
        return "\n".join(self.rows())

    def __eq__(self, other) -> bool:
        if not isinstance(other, CharGrid):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    def __repr__(self) -> str:
        return f"CharGrid({self.width}x{self.height})"


def demo_grid() -> CharGrid:
    """A fresh copy of the built-in 12x12 demonstration map."""
    return CharGrid.from_rows(DEMO_MAP)
