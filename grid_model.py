from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np
import pandas as pd

DEFAULT_COLUMN_WIDTH = 80


@dataclass(frozen=True)
class Position:
    row: int
    col: int


@dataclass(frozen=True)
class CellUpdate:
    position: Position
    value: str


@dataclass
class Cell:
    value: str
    is_editing: bool = False
    width: Optional[float] = None


def _as_text(value) -> str:
    if value is None:
        return ""
    try:
        if pd.isna(value):
            return ""
    except (TypeError, ValueError):
        pass
    return str(value)


class GridModel:
    """
    Owns the rectangular cell matrix.
    No selection, history or clipboard logic.

    Values live in an object-dtype DataFrame of strings; widths live in a
    float DataFrame of the same shape where NaN means "no width".
    """

    def __init__(self, values: pd.DataFrame, widths: Optional[pd.DataFrame] = None):
        self.values = values
        if widths is None:
            widths = pd.DataFrame(
                np.nan, index=values.index, columns=values.columns, dtype=float
            )
        self.widths = widths
        self.editing_cell: Optional[Position] = None

    # ---------- construction ----------
    @classmethod
    def from_rows(cls, rows, default_width=None) -> "GridModel":
        rows = [list(r) for r in (rows or [])]
        n_cols = max((len(r) for r in rows), default=0)
        if not rows or n_cols == 0:
            rows, n_cols = [[""]], 1
        padded = [[_as_text(v) for v in r] + [""] * (n_cols - len(r)) for r in rows]
        values = pd.DataFrame(padded, dtype=object)
        width = np.nan if default_width is None else float(default_width)
        widths = pd.DataFrame(width, index=values.index, columns=values.columns, dtype=float)
        return cls(values, widths)

    @classmethod
    def blank(cls, rows: int, cols: int, width=DEFAULT_COLUMN_WIDTH) -> "GridModel":
        rows = max(1, rows)
        cols = max(1, cols)
        return cls.from_rows([[""] * cols for _ in range(rows)], default_width=width)

    def snapshot(self) -> "GridModel":
        return GridModel(self.values.copy(deep=True), self.widths.copy(deep=True))

    # ---------- shape ----------
    @property
    def shape(self) -> Tuple[int, int]:
        return self.values.shape

    @property
    def row_count(self) -> int:
        return self.values.shape[0]

    @property
    def col_count(self) -> int:
        return self.values.shape[1]

    def in_bounds(self, pos: Position) -> bool:
        rows, cols = self.shape
        return 0 <= pos.row < rows and 0 <= pos.col < cols

    # ---------- reads ----------
    def get(self, pos: Position) -> str:
        if not self.in_bounds(pos):
            return ""
        return self.values.iat[pos.row, pos.col]

    def cell(self, pos: Position) -> Optional[Cell]:
        if not self.in_bounds(pos):
            return None
        width = self.widths.iat[pos.row, pos.col]
        return Cell(
            value=self.values.iat[pos.row, pos.col],
            is_editing=self.editing_cell == pos,
            width=None if pd.isna(width) else float(width),
        )

    def to_rows(self) -> List[List[str]]:
        return self.values.values.tolist()

    def rows_in(self, bounds) -> List[List[str]]:
        r0, r1, c0, c1 = bounds
        return self.values.iloc[r0 : r1 + 1, c0 : c1 + 1].values.tolist()

    def column_widths(self) -> List[Optional[float]]:
        last = self.widths.iloc[-1].tolist()
        return [None if pd.isna(w) else float(w) for w in last]

    # ---------- value writes ----------
    def set(self, pos: Position, value) -> bool:
        if not self.in_bounds(pos):
            return False
        self.values.iat[pos.row, pos.col] = _as_text(value)
        return True

    def set_many(self, positions: Iterable[Position], value) -> int:
        text = _as_text(value)
        written = 0
        for pos in positions:
            if self.in_bounds(pos):
                self.values.iat[pos.row, pos.col] = text
                written += 1
        return written

    def set_many_distinct(
        self, updates: Iterable[CellUpdate], width=DEFAULT_COLUMN_WIDTH
    ) -> int:
        updates = [u for u in updates if u.position.row >= 0 and u.position.col >= 0]
        if not updates:
            return 0

        max_row = max(u.position.row for u in updates)
        max_col = max(u.position.col for u in updates)
        rows, cols = self.shape

        # stage growth on local frames; commit only after every write landed
        values, widths = self.values, self.widths
        if max_row >= rows:
            values, widths = self._grown_rows(values, widths, max_row + 1 - rows)
        if max_col >= cols:
            values, widths = self._grown_cols(
                values, widths, max_col + 1 - cols, width
            )
        if values is self.values:
            values = values.copy()

        for u in updates:
            values.iat[u.position.row, u.position.col] = _as_text(u.value)

        self.values, self.widths = values, widths
        return len(updates)

    # ---------- structure ----------
    @staticmethod
    def _grown_rows(values, widths, count):
        n_cols = values.shape[1]
        extra = pd.DataFrame([[""] * n_cols] * count, columns=values.columns, dtype=object)
        last = widths.iloc[-1].tolist()
        extra_w = pd.DataFrame([last] * count, columns=widths.columns, dtype=float)
        return (
            pd.concat([values, extra], ignore_index=True),
            pd.concat([widths, extra_w], ignore_index=True),
        )

    @staticmethod
    def _grown_cols(values, widths, count, width):
        new_cols = range(values.shape[1] + count)
        return (
            values.reindex(columns=new_cols, fill_value=""),
            widths.reindex(columns=new_cols, fill_value=float(width)),
        )

    def add_row(self) -> bool:
        return self.add_rows(1)

    def add_rows(self, count: int) -> bool:
        if count <= 0:
            return False
        self.values, self.widths = self._grown_rows(self.values, self.widths, count)
        return True

    def add_column(self, width=DEFAULT_COLUMN_WIDTH) -> bool:
        return self.add_columns(1, width)

    def add_columns(self, count: int, width=DEFAULT_COLUMN_WIDTH) -> bool:
        if count <= 0:
            return False
        self.values, self.widths = self._grown_cols(self.values, self.widths, count, width)
        return True

    def remove_row(self) -> bool:
        if self.row_count <= 1:
            return False
        self.values = self.values.iloc[:-1].copy()
        self.widths = self.widths.iloc[:-1].copy()
        return True

    def remove_column(self) -> bool:
        if self.col_count <= 1:
            return False
        self.values = self.values.iloc[:, :-1].copy()
        self.widths = self.widths.iloc[:, :-1].copy()
        return True

    # ---------- layout ----------
    def set_column_width(self, col: int, width) -> bool:
        if not 0 <= col < self.col_count:
            return False
        self.widths.iloc[:, col] = float(width)
        return True
