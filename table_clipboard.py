from typing import Callable, Optional

import table_history as th
from clipboard_codec import decode_text, encode_range
from markdown_converter import convert_to_markdown
from paste_planner import plan_paste
from system_clipboard import ClipboardError, SystemClipboard


class TableClipboard:
    """Copy, cut and paste between the current selection and the platform clipboard."""

    def __init__(
        self,
        table,
        selection,
        clipboard: Optional[SystemClipboard] = None,
        set_status_cb: Optional[Callable[[str, float], None]] = None,
    ):
        self.table = table
        self.selection = selection
        self.clipboard = clipboard or SystemClipboard()
        self._set_status = set_status_cb or (lambda *_args: None)

    def _write(self, text: str, ok_msg: str) -> bool:
        try:
            self.clipboard.write(text)
        except ClipboardError as exc:
            self._set_status(f"Copy failed: {exc}", 3)
            return False
        self._set_status(ok_msg, 2)
        return True

    def copy(self) -> bool:
        rect = self.selection.bounds()
        if rect is None:
            return False
        rows, cols = self.selection.extent()
        text = encode_range(self.table.grid, rect)
        return self._write(text, f"Copied {rows}x{cols}")

    def cut(self) -> bool:
        if self.selection.bounds() is None:
            return False
        if not self.copy():
            return False
        self.table.update_range(self.selection.positions(), "", th.CUT)
        self._set_status("Cut", 2)
        return True

    def copy_markdown(self) -> bool:
        markdown = convert_to_markdown(self.table.rows())
        if not markdown:
            return False
        return self._write(markdown, "Markdown copied")

    def paste(self) -> bool:
        try:
            text = self.clipboard.read()
        except ClipboardError as exc:
            self._set_status(f"Paste failed: {exc}", 3)
            return False
        # selection and grid are read only now, after the clipboard answered
        return self.paste_text(text)

    def paste_text(self, text: str) -> bool:
        anchor = self.selection.top_left()
        if anchor is None:
            self._set_status("No cell selected", 2)
            return False

        rows = decode_text(text)
        if not rows:
            self._set_status("Clipboard is empty", 2)
            return False

        plan = plan_paste(rows, anchor, self.selection.extent())
        before = self.table.shape
        if not self.table.update_distinct(plan.updates, th.PASTE):
            self._set_status("Nothing pasted", 2)
            return False

        grew_rows, grew_cols = plan.grow_by(before)
        msg = f"Pasted {len(plan.updates)} cell{'s' if len(plan.updates) != 1 else ''}"
        if grew_rows or grew_cols:
            msg += f" (+{grew_rows} rows, +{grew_cols} cols)"
        self._set_status(msg, 2)
        return True
