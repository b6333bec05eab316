from typing import Callable, Optional

from grid_model import Position


class CellEditor:
    """In-place editing of the current cell.

    Holds the edit buffer and commits it through the table's ``update_cell``.
    While an IME composition is open the edit cannot be stopped.
    """

    def __init__(self, table, selection, set_status_cb: Optional[Callable] = None):
        self.table = table
        self.selection = selection
        self._set_status = set_status_cb or (lambda *_args: None)

        self.is_editing = False
        self.is_composing = False
        self.edit_value = ""
        self.initial_value = ""
        self.editing_pos: Optional[Position] = None

    def _mark(self, pos: Optional[Position]):
        self.editing_pos = pos
        self.table.grid.editing_cell = pos

    def start_editing(self, pending_key: Optional[str] = None) -> bool:
        pos = self.selection.current_cell
        if pos is None:
            return False
        current = self.table.grid.get(pos)
        self.initial_value = current
        # a typed character replaces the cell content, F2/Enter keeps it
        self.edit_value = pending_key if pending_key else current
        self.is_editing = True
        self._mark(pos)
        return True

    def set_value(self, text: str):
        if self.is_editing:
            self.edit_value = "" if text is None else str(text)

    def composition_start(self):
        self.is_composing = True

    def composition_end(self):
        self.is_composing = False

    def stop_editing(self, save: bool = True) -> bool:
        if not self.is_editing or self.is_composing:
            return False
        pos = self.editing_pos
        committed = False
        if save and pos is not None and self.edit_value != self.initial_value:
            committed = self.table.update_cell(pos.row, pos.col, self.edit_value)
            if committed:
                self._set_status("Cell updated", 2)
        if not save:
            self.edit_value = self.initial_value
        self.is_editing = False
        self._mark(None)
        return committed

    def follow_current_cell(self) -> bool:
        """Commit a pending edit when focus has moved to another cell."""
        if not self.is_editing or self.is_composing:
            return False
        if self.selection.current_cell == self.editing_pos:
            return False
        return self.stop_editing(save=True)
