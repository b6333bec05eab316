import table_history as th
from cell_editing import CellEditor
from config_paths import load_config
from grid_model import GridModel, Position
from system_clipboard import SystemClipboard
from table_clipboard import TableClipboard
from table_data import TableData
from table_selection import TableSelection


class TableController:
    """Owns the grid, its history, the selection and the editor.

    The command layer (keyboard, toolbar, mouse) calls into this object; it
    always works on the live state objects rather than captured copies.
    """

    def __init__(self, rows=None, config=None, set_status_cb=None, clipboard=None):
        self.config = config if config is not None else load_config()
        self._set_status = set_status_cb or (lambda *_args: None)

        width = self.config.get("DEFAULT_COLUMN_WIDTH", 80)
        if rows is None:
            grid = GridModel.blank(
                self.config.get("DEFAULT_ROWS", 5),
                self.config.get("DEFAULT_COLS", 5),
                width,
            )
        else:
            grid = GridModel.from_rows(rows, default_width=width)

        self.table = TableData(
            grid,
            max_depth=self.config.get("UNDO_MAX_DEPTH", 50),
            default_width=width,
        )
        self.selection = TableSelection(lambda: self.table.shape)
        self.clipboard = TableClipboard(
            self.table,
            self.selection,
            clipboard or SystemClipboard.from_config(self.config),
            self._set_status,
        )
        self.editor = CellEditor(self.table, self.selection, self._set_status)

    # ---------- reads ----------
    @property
    def shape(self):
        return self.table.shape

    def cell(self, row: int, col: int):
        return self.table.grid.cell(Position(row, col))

    def rows(self):
        return self.table.rows()

    def is_selected(self, row: int, col: int) -> bool:
        return self.selection.is_selected(Position(row, col))

    # ---------- selection ----------
    def set_extending(self, flag: bool):
        self.selection.set_extending(flag)

    def select_cell(self, row: int, col: int):
        self.selection.select_cell(Position(row, col))
        self.editor.follow_current_cell()

    def mouse_down(self, row: int, col: int, extend: bool = False):
        self.selection.begin_drag(Position(row, col), extend)
        self.editor.follow_current_cell()

    def mouse_move(self, row: int, col: int):
        self.selection.drag_to(Position(row, col))

    def mouse_up(self):
        self.selection.end_drag()

    def move(self, direction: str):
        self.selection.move(direction)
        self.editor.follow_current_cell()

    def select_all(self):
        self.selection.select_all()
        self.editor.follow_current_cell()

    def clear_selection(self):
        self.editor.stop_editing(save=False)
        self.selection.clear()

    # ---------- editing ----------
    def start_editing(self, pending_key=None) -> bool:
        return self.editor.start_editing(pending_key)

    def stop_editing(self, save: bool = True) -> bool:
        return self.editor.stop_editing(save)

    def _composing(self) -> bool:
        # an open input-method composition owns the keyboard until it ends
        if self.editor.is_composing:
            self._set_status("Finish composing first", 2)
            return True
        return False

    def clear_selected_cells(self) -> bool:
        if self._composing():
            return False
        positions = self.selection.positions()
        if not positions:
            return False
        return self.table.update_range(positions, "", th.CLEAR)

    # ---------- structure ----------
    def add_row(self, count: int = 1) -> bool:
        return self.table.add_row(count)

    def add_column(self, count: int = 1) -> bool:
        return self.table.add_column(count)

    def safe_remove_row(self) -> bool:
        rows, _ = self.table.shape
        if rows <= 1:
            return False
        if self.selection.covers_row(rows - 1):
            self.clear_selection()
        return self.table.remove_row()

    def safe_remove_column(self) -> bool:
        _, cols = self.table.shape
        if cols <= 1:
            return False
        if self.selection.covers_col(cols - 1):
            self.clear_selection()
        return self.table.remove_column()

    def set_column_width(self, col: int, width) -> bool:
        return self.table.set_column_width(col, width)

    def set_column_widths(self, widths) -> int:
        return self.table.set_column_widths(widths)

    def column_widths(self):
        return self.table.grid.column_widths()

    # ---------- history ----------
    def undo(self) -> bool:
        if self._composing():
            return False
        self.editor.stop_editing(save=False)
        if not self.table.undo():
            self._set_status("Nothing to undo", 2)
            return False
        self.selection.clamp()
        self._set_status("Undone", 2)
        return True

    def redo(self) -> bool:
        if self._composing():
            return False
        self.editor.stop_editing(save=False)
        if not self.table.redo():
            self._set_status("Nothing to redo", 2)
            return False
        self.selection.clamp()
        self._set_status("Redone", 2)
        return True

    @property
    def can_undo(self) -> bool:
        return self.table.can_undo

    @property
    def can_redo(self) -> bool:
        return self.table.can_redo

    # ---------- clipboard ----------
    def copy(self) -> bool:
        return self.clipboard.copy()

    def cut(self) -> bool:
        if self._composing():
            return False
        self.editor.stop_editing(save=True)
        return self.clipboard.cut()

    def paste(self) -> bool:
        if self._composing():
            return False
        self.editor.stop_editing(save=True)
        return self.clipboard.paste()

    def copy_markdown(self) -> bool:
        return self.clipboard.copy_markdown()
