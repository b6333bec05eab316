from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from grid_model import Position

DIRECTIONS = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


@dataclass(frozen=True)
class Selection:
    start: Position
    end: Position

    def bounds(self) -> Tuple[int, int, int, int]:
        r0, r1 = sorted((self.start.row, self.end.row))
        c0, c1 = sorted((self.start.col, self.end.col))
        return (r0, r1, c0, c1)

    def contains(self, pos: Position) -> bool:
        r0, r1, c0, c1 = self.bounds()
        return r0 <= pos.row <= r1 and c0 <= pos.col <= c1

    def extent(self) -> Tuple[int, int]:
        r0, r1, c0, c1 = self.bounds()
        return (r1 - r0 + 1, c1 - c0 + 1)

    def top_left(self) -> Position:
        r0, _, c0, _ = self.bounds()
        return Position(r0, c0)


class TableSelection:
    """Rectangular selection state: current cell, anchor and drag session.

    Only the grid bounds are consulted (through ``shape_cb``); history and
    values are never touched here.
    """

    def __init__(self, shape_cb: Callable[[], Tuple[int, int]]):
        self._shape = shape_cb
        self.current_cell: Optional[Position] = None
        self.selection: Optional[Selection] = None
        self.anchor: Optional[Position] = None
        self.is_extending = False
        self.is_dragging = False

    # ---------- helpers ----------
    def _in_bounds(self, pos: Position) -> bool:
        rows, cols = self._shape()
        return 0 <= pos.row < rows and 0 <= pos.col < cols

    def _collapse_to(self, pos: Position):
        self.anchor = pos
        self.selection = Selection(pos, pos)

    def set_extending(self, flag: bool):
        self.is_extending = bool(flag)

    # ---------- selection ----------
    def select_cell(self, pos: Position):
        if not self._in_bounds(pos):
            return
        self.current_cell = pos
        if self.is_extending and self.anchor is not None:
            self.selection = Selection(self.anchor, pos)
        else:
            self._collapse_to(pos)

    def begin_drag(self, pos: Position, extend: bool = False):
        if not self._in_bounds(pos):
            return
        self.current_cell = pos
        if extend and self.anchor is not None:
            self.selection = Selection(self.anchor, pos)
        else:
            self._collapse_to(pos)
        self.is_dragging = True

    def drag_to(self, pos: Position):
        if not self.is_dragging or self.anchor is None:
            return
        if not self._in_bounds(pos):
            return
        self.current_cell = pos
        self.selection = Selection(self.anchor, pos)

    def end_drag(self):
        self.is_dragging = False

    def move(self, direction: str):
        if direction not in DIRECTIONS:
            return
        if self.current_cell is None:
            self.select_cell(Position(0, 0))
            return

        rows, cols = self._shape()
        dr, dc = DIRECTIONS[direction]
        row = min(max(0, self.current_cell.row + dr), rows - 1)
        col = min(max(0, self.current_cell.col + dc), cols - 1)
        target = Position(row, col)
        if target == self.current_cell:
            return
        # select_cell keeps the stored anchor while extending
        self.select_cell(target)

    def select_all(self):
        rows, cols = self._shape()
        if rows == 0 or cols == 0:
            return
        origin = Position(0, 0)
        self.current_cell = origin
        self.anchor = origin
        self.selection = Selection(origin, Position(rows - 1, cols - 1))

    def clear(self):
        self.current_cell = None
        self.selection = None
        self.anchor = None
        self.is_dragging = False

    # ---------- queries ----------
    def is_selected(self, pos: Position) -> bool:
        if self.selection is None:
            return False
        return self.selection.contains(pos)

    def bounds(self) -> Optional[Tuple[int, int, int, int]]:
        if self.selection is None:
            return None
        return self.selection.bounds()

    def extent(self) -> Tuple[int, int]:
        if self.selection is None:
            return (1, 1)
        return self.selection.extent()

    def top_left(self) -> Optional[Position]:
        if self.selection is not None:
            return self.selection.top_left()
        return self.current_cell

    def positions(self) -> List[Position]:
        rect = self.bounds()
        if rect is None:
            return []
        r0, r1, c0, c1 = rect
        return [Position(r, c) for r in range(r0, r1 + 1) for c in range(c0, c1 + 1)]

    def covers_row(self, row: int) -> bool:
        rect = self.bounds()
        return rect is not None and rect[0] <= row <= rect[1]

    def covers_col(self, col: int) -> bool:
        rect = self.bounds()
        return rect is not None and rect[2] <= col <= rect[3]

    # ---------- bounds maintenance ----------
    def clamp(self):
        """Pull stored positions back inside the grid after it shrank."""
        rows, cols = self._shape()

        def _clamp(pos):
            if pos is None:
                return None
            return Position(
                min(max(0, pos.row), rows - 1), min(max(0, pos.col), cols - 1)
            )

        self.current_cell = _clamp(self.current_cell)
        self.anchor = _clamp(self.anchor)
        if self.selection is not None:
            self.selection = Selection(
                _clamp(self.selection.start), _clamp(self.selection.end)
            )
