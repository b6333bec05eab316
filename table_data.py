from typing import Iterable, List, Optional

import table_history as th
from grid_model import DEFAULT_COLUMN_WIDTH, CellUpdate, GridModel, Position
from table_history import TableHistory


class TableData:
    """Single choke point for grid mutations.

    Every value or structural change is paired with exactly one history entry.
    Width changes are layout only and are never recorded.
    """

    def __init__(
        self,
        grid: Optional[GridModel] = None,
        max_depth: int = 50,
        default_width=DEFAULT_COLUMN_WIDTH,
    ):
        self.grid = grid if grid is not None else GridModel.blank(5, 5, default_width)
        self.default_width = default_width
        self.history = TableHistory(self.grid, max_depth=max_depth)

    # ---------- reads ----------
    @property
    def shape(self):
        return self.grid.shape

    def get(self, row: int, col: int) -> str:
        return self.grid.get(Position(row, col))

    def rows(self) -> List[List[str]]:
        return self.grid.to_rows()

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def _commit(self, action_type: str):
        self.history.push(action_type, self.grid)

    # ---------- values ----------
    def update_cell(self, row: int, col: int, value) -> bool:
        if not self.grid.set(Position(row, col), value):
            return False
        self._commit(th.CELL_UPDATE)
        return True

    def update_range(
        self,
        positions: Iterable[Position],
        value,
        action_type: str = th.MULTIPLE_CELLS_UPDATE,
    ) -> bool:
        if not self.grid.set_many(positions, value):
            return False
        self._commit(action_type)
        return True

    def update_distinct(
        self,
        updates: Iterable[CellUpdate],
        action_type: str = th.MULTIPLE_CELLS_UPDATE,
    ) -> bool:
        if not self.grid.set_many_distinct(updates, self.default_width):
            return False
        self._commit(action_type)
        return True

    # ---------- structure ----------
    def add_row(self, count: int = 1) -> bool:
        if not self.grid.add_rows(count):
            return False
        self._commit(th.ADD_ROW)
        return True

    def add_column(self, count: int = 1) -> bool:
        if not self.grid.add_columns(count, self.default_width):
            return False
        self._commit(th.ADD_COLUMN)
        return True

    def remove_row(self) -> bool:
        if not self.grid.remove_row():
            return False
        self._commit(th.REMOVE_ROW)
        return True

    def remove_column(self) -> bool:
        if not self.grid.remove_column():
            return False
        self._commit(th.REMOVE_COLUMN)
        return True

    # ---------- layout (not historized) ----------
    def set_column_width(self, col: int, width) -> bool:
        return self.grid.set_column_width(col, width)

    def set_column_widths(self, widths) -> int:
        changed = 0
        for col, width in enumerate(widths):
            if width is not None and self.grid.set_column_width(col, width):
                changed += 1
        return changed

    # ---------- history ----------
    def undo(self) -> bool:
        snap = self.history.undo()
        if snap is None:
            return False
        self.grid = snap
        return True

    def redo(self) -> bool:
        snap = self.history.redo()
        if snap is None:
            return False
        self.grid = snap
        return True
