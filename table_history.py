import time
from dataclasses import dataclass, field
from typing import List, Optional

from grid_model import GridModel

INITIAL = "initial"
CELL_UPDATE = "cell_update"
MULTIPLE_CELLS_UPDATE = "multiple_cells_update"
ADD_ROW = "add_row"
ADD_COLUMN = "add_column"
REMOVE_ROW = "remove_row"
REMOVE_COLUMN = "remove_column"
PASTE = "paste"
CUT = "cut"
CLEAR = "clear"


@dataclass
class HistoryEntry:
    action_type: str
    data: GridModel
    timestamp: float = field(default_factory=time.time)


class TableHistory:
    """Bounded snapshot stack with a linear undo/redo cursor.

    Entries own deep copies of the grid; neither ``push`` nor ``undo``/``redo``
    hands out a frame that the live grid could alias.
    """

    def __init__(self, initial_grid: GridModel, max_depth: int = 50):
        self.max_depth = max(1, int(max_depth))
        self.entries: List[HistoryEntry] = [
            HistoryEntry(INITIAL, initial_grid.snapshot())
        ]
        self.index = 0

    def push(self, action_type: str, grid: GridModel):
        del self.entries[self.index + 1 :]
        self.entries.append(HistoryEntry(action_type, grid.snapshot()))
        if len(self.entries) > self.max_depth:
            self.entries.pop(0)
        self.index = len(self.entries) - 1

    def undo(self) -> Optional[GridModel]:
        if not self.can_undo:
            return None
        self.index -= 1
        return self.entries[self.index].data.snapshot()

    def redo(self) -> Optional[GridModel]:
        if not self.can_redo:
            return None
        self.index += 1
        return self.entries[self.index].data.snapshot()

    @property
    def can_undo(self) -> bool:
        return self.index > 0

    @property
    def can_redo(self) -> bool:
        return self.index < len(self.entries) - 1

    def current_entry(self) -> HistoryEntry:
        return self.entries[self.index]

    def __len__(self):
        return len(self.entries)
