import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "gridclip")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
CLIPBOARD_INTERFACE_COMMAND_DEFAULT = None
CLIPBOARD_PASTE_COMMAND_DEFAULT = None
UNDO_MAX_DEPTH_DEFAULT = 50
DEFAULT_COLUMN_WIDTH_DEFAULT = 80
DEFAULT_ROWS_DEFAULT = 5
DEFAULT_COLS_DEFAULT = 5


def _argv(value):
    if isinstance(value, list) and value and all(isinstance(x, str) for x in value):
        return list(value)
    return None


def _positive_int(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_config():
    cfg = {
        "CLIPBOARD_INTERFACE_COMMAND": CLIPBOARD_INTERFACE_COMMAND_DEFAULT,
        "CLIPBOARD_PASTE_COMMAND": CLIPBOARD_PASTE_COMMAND_DEFAULT,
        "UNDO_MAX_DEPTH": UNDO_MAX_DEPTH_DEFAULT,
        "DEFAULT_COLUMN_WIDTH": DEFAULT_COLUMN_WIDTH_DEFAULT,
        "DEFAULT_ROWS": DEFAULT_ROWS_DEFAULT,
        "DEFAULT_COLS": DEFAULT_COLS_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    copy_cmd = _argv(data.get("clipboard_interface_command"))
    if copy_cmd:
        cfg["CLIPBOARD_INTERFACE_COMMAND"] = copy_cmd
    paste_cmd = _argv(data.get("clipboard_paste_command"))
    if paste_cmd:
        cfg["CLIPBOARD_PASTE_COMMAND"] = paste_cmd

    depth = _positive_int(data.get("undo_max_depth"))
    if depth:
        cfg["UNDO_MAX_DEPTH"] = depth

    width = data.get("default_column_width")
    if isinstance(width, (int, float)) and not isinstance(width, bool) and width > 0:
        cfg["DEFAULT_COLUMN_WIDTH"] = width

    grid = data.get("default_grid")
    if isinstance(grid, dict):
        rows = _positive_int(grid.get("rows"))
        cols = _positive_int(grid.get("cols"))
        if rows:
            cfg["DEFAULT_ROWS"] = rows
        if cols:
            cfg["DEFAULT_COLS"] = cols

    return cfg
