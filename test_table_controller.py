from types import SimpleNamespace
from unittest.mock import patch

from system_clipboard import SystemClipboard
from table_controller import TableController

CONFIG = {
    "CLIPBOARD_INTERFACE_COMMAND": ["fake-copy"],
    "CLIPBOARD_PASTE_COMMAND": ["fake-paste"],
    "UNDO_MAX_DEPTH": 50,
    "DEFAULT_COLUMN_WIDTH": 80,
    "DEFAULT_ROWS": 5,
    "DEFAULT_COLS": 5,
}


def _controller(rows=None, config=None):
    messages = []
    ctrl = TableController(
        rows,
        config=config or dict(CONFIG),
        set_status_cb=lambda m, _: messages.append(m),
    )
    return ctrl, messages


def test_default_grid_comes_from_config():
    ctrl, _ = _controller(config=dict(CONFIG, DEFAULT_ROWS=2, DEFAULT_COLS=3))
    assert ctrl.shape == (2, 3)
    assert ctrl.cell(0, 0).width == 80
    assert isinstance(ctrl.clipboard.clipboard, SystemClipboard)
    assert ctrl.clipboard.clipboard.copy_command == ["fake-copy"]


def test_undo_depth_comes_from_config():
    ctrl, _ = _controller(config=dict(CONFIG, UNDO_MAX_DEPTH=3))
    for i in range(5):
        ctrl.add_row()
    assert len(ctrl.table.history) == 3


def test_copy_then_paste_elsewhere():
    ctrl, _ = _controller([["a", "b", ""], ["c", "d", ""], ["", "", ""]])
    ctrl.select_cell(0, 0)
    ctrl.set_extending(True)
    ctrl.move("right")
    ctrl.move("down")
    ctrl.set_extending(False)

    with patch("subprocess.run") as run:
        ctrl.copy()
        copied = run.call_args.kwargs.get("input")
        assert copied == "a\tb\nc\td\n"

        ctrl.select_cell(2, 2)
        run.return_value = SimpleNamespace(stdout=copied)
        assert ctrl.paste()

    assert ctrl.shape == (4, 4)
    assert ctrl.rows()[2][2:] == ["a", "b"]
    assert ctrl.rows()[3][2:] == ["c", "d"]


def test_drag_selection_then_cut_and_undo():
    ctrl, _ = _controller([["a", "b"], ["c", "d"]])
    ctrl.mouse_down(0, 0)
    ctrl.mouse_move(1, 1)
    ctrl.mouse_up()
    assert ctrl.is_selected(1, 0)

    with patch("subprocess.run"):
        assert ctrl.cut()
    assert ctrl.rows() == [["", ""], ["", ""]]
    assert ctrl.undo()
    assert ctrl.rows() == [["a", "b"], ["c", "d"]]


def test_clear_selected_cells():
    ctrl, _ = _controller([["a", "b"], ["c", "d"]])
    ctrl.select_all()
    assert ctrl.clear_selected_cells()
    assert ctrl.rows() == [["", ""], ["", ""]]
    ctrl.clear_selection()
    assert not ctrl.clear_selected_cells()


def test_safe_remove_row_clears_selection_covering_last_row():
    ctrl, _ = _controller([["a"], ["b"], ["c"]])
    ctrl.select_cell(2, 0)
    assert ctrl.safe_remove_row()
    assert ctrl.shape == (2, 1)
    assert ctrl.selection.selection is None


def test_safe_remove_column_keeps_unrelated_selection():
    ctrl, _ = _controller([["a", "b", "c"]])
    ctrl.select_cell(0, 0)
    assert ctrl.safe_remove_column()
    assert ctrl.shape == (1, 2)
    assert ctrl.is_selected(0, 0)


def test_safe_remove_refuses_at_floor():
    ctrl, _ = _controller([["a"]])
    assert not ctrl.safe_remove_row()
    assert not ctrl.safe_remove_column()


def test_undo_clamps_selection_to_shrunken_grid():
    ctrl, messages = _controller([["a"]])
    ctrl.add_row(2)
    ctrl.add_column(2)
    ctrl.select_cell(2, 2)
    ctrl.undo()
    ctrl.undo()
    assert ctrl.shape == (1, 1)
    assert ctrl.selection.current_cell.row == 0
    assert ctrl.selection.current_cell.col == 0
    assert not ctrl.undo()
    assert messages[-1] == "Nothing to undo"
    assert ctrl.redo()
    assert ctrl.shape == (3, 1)


def test_editing_commits_when_moving():
    ctrl, _ = _controller([["a", "b"]])
    ctrl.select_cell(0, 0)
    ctrl.start_editing()
    ctrl.editor.set_value("typed")
    ctrl.move("right")
    assert ctrl.rows() == [["typed", "b"]]
    assert not ctrl.editor.is_editing


def test_width_change_is_not_undoable():
    ctrl, _ = _controller([["a", "b"]])
    ctrl.set_column_width(1, 140)
    assert ctrl.cell(0, 1).width == 140
    assert not ctrl.can_undo


def test_copy_markdown():
    ctrl, _ = _controller([["h1", "h2"], ["a", "b"]])
    with patch("subprocess.run") as run:
        assert ctrl.copy_markdown()
        assert run.call_args.kwargs.get("input").startswith("| h1 | h2 |")


def test_undo_waits_for_open_composition():
    ctrl, messages = _controller([["a", "b"], ["c", "d"]])
    ctrl.table.update_cell(1, 1, "x")
    ctrl.select_cell(0, 0)
    ctrl.start_editing("q")
    ctrl.editor.composition_start()

    assert not ctrl.undo()
    assert messages[-1] == "Finish composing first"
    assert ctrl.rows() == [["a", "b"], ["c", "x"]]

    ctrl.editor.composition_end()
    assert ctrl.undo()
    assert not ctrl.stop_editing()
    assert ctrl.rows() == [["a", "b"], ["c", "d"]]
    assert ctrl.can_redo


def test_redo_and_clipboard_commands_wait_for_composition():
    ctrl, _ = _controller([["a", "b"]])
    ctrl.table.update_cell(0, 1, "x")
    ctrl.undo()
    ctrl.select_cell(0, 0)
    ctrl.start_editing()
    ctrl.editor.composition_start()

    with patch("subprocess.run", return_value=SimpleNamespace(stdout="p\n")) as run:
        assert not ctrl.redo()
        assert not ctrl.paste()
        assert not ctrl.cut()
        run.assert_not_called()
    assert not ctrl.clear_selected_cells()
    assert ctrl.rows() == [["a", "b"]]
    assert ctrl.can_redo


def test_column_widths_surface():
    ctrl, _ = _controller([["a", "b"]])
    assert ctrl.set_column_widths([None, 150]) == 1
    assert ctrl.column_widths() == [80.0, 150.0]
    assert not ctrl.can_undo
