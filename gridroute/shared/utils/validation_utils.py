"""Validation utilities for gridroute."""
from typing import Any, Iterable, Sequence, Tuple

from ..exceptions import ValidationError


def validate_position(position, bounds: Tuple[int, int]) -> None:
    """Validate that a grid position lies inside the grid.
    
    Args:
        position: Object with integer ``x`` and ``y`` attributes
        bounds: Grid size as (width, height)
        
    Raises:
        ValidationError: If the position is outside the grid
    """
    width, height = bounds
    
    if not 0 <= position.x < width:
        raise ValidationError(
            f"X coordinate {position.x} out of bounds [0, {width - 1}]",
            field="x", value=position.x
        )
    
    if not 0 <= position.y < height:
        raise ValidationError(
            f"Y coordinate {position.y} out of bounds [0, {height - 1}]",
            field="y", value=position.y
        )


def validate_grid_rows(rows: Sequence[str], allowed: Iterable[str]) -> None:
    """Validate character grid rows.
    
    Rows must be non-empty, all of the same length, and contain only
    allowed cell characters.
    
    Raises:
        ValidationError: If the rows do not describe a rectangular grid
    """
    if not rows:
        raise ValidationError("Grid has no rows", field="rows", value=rows)
    
    width = len(rows[0])
    if width == 0:
        raise ValidationError("Grid rows are empty", field="rows", value=rows)
    
    allowed = set(allowed)
    for row_index, row in enumerate(rows):
        if len(row) != width:
            raise ValidationError(
                f"Row {row_index} has length {len(row)}, expected {width}",
                field="rows", value=row
            )
        
        unknown = set(row) - allowed
        if unknown:
            raise ValidationError(
                f"Row {row_index} contains unknown cell characters: {sorted(unknown)!r}",
                field="rows", value=row
            )


def validate_choice(value: Any, choices: Sequence[Any], field: str) -> None:
    """Validate that a value is one of the allowed choices.
    
    Raises:
        ValidationError: If value is not in choices
    """
    if value not in choices:
        raise ValidationError(
            f"{field} must be one of {list(choices)}, got {value!r}",
            field=field, value=value
        )
