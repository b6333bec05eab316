from dataclasses import dataclass, field
from typing import List, Tuple

from grid_model import CellUpdate, Position

SINGLE_CELL = "single_cell"
SINGLE_ROW = "single_row"
SINGLE_COLUMN = "single_column"
RECTANGULAR = "rectangular"


@dataclass
class PastePlan:
    shape: str
    updates: List[CellUpdate] = field(default_factory=list)
    required_rows: int = 0
    required_cols: int = 0

    def grow_by(self, shape: Tuple[int, int]) -> Tuple[int, int]:
        """Rows and columns the grid of ``shape`` lacks to hold this plan."""
        rows, cols = shape
        return (max(0, self.required_rows - rows), max(0, self.required_cols - cols))


def _pad(rows) -> List[List[str]]:
    width = max((len(r) for r in rows), default=0)
    return [list(r) + [""] * (width - len(r)) for r in rows]


def classify_shape(rows) -> str:
    n_rows = len(rows)
    n_cols = max((len(r) for r in rows), default=0)
    if n_rows == 1 and n_cols == 1:
        return SINGLE_CELL
    if n_rows == 1:
        return SINGLE_ROW
    if n_cols == 1:
        return SINGLE_COLUMN
    return RECTANGULAR


def _block(values, origin: Position) -> List[CellUpdate]:
    return [
        CellUpdate(Position(origin.row + dr, origin.col + dc), value)
        for dr, row in enumerate(values)
        for dc, value in enumerate(row)
    ]


def plan_paste(rows, anchor: Position, extent: Tuple[int, int] = (1, 1)) -> PastePlan:
    """Decide where each decoded clipboard value lands.

    ``extent`` is the ``(rows, cols)`` size of the destination selection,
    ``(1, 1)`` when nothing larger is selected. ``anchor`` is its top-left.
    """
    values = _pad(rows)
    shape = classify_shape(values)
    if not values or not values[0]:
        return PastePlan(shape)

    sel_rows, sel_cols = extent

    if shape == SINGLE_CELL and (sel_rows > 1 or sel_cols > 1):
        fill = [[values[0][0]] * sel_cols for _ in range(sel_rows)]
        updates = _block(fill, anchor)
    elif shape == SINGLE_ROW and sel_rows > 1:
        updates = _block(values * sel_rows, anchor)
    elif shape == SINGLE_COLUMN and sel_cols > 1:
        updates = _block([row * sel_cols for row in values], anchor)
    else:
        updates = _block(values, anchor)

    plan = PastePlan(shape, updates)
    plan.required_rows = max(u.position.row for u in updates) + 1
    plan.required_cols = max(u.position.col for u in updates) + 1
    return plan
