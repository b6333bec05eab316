from typing import List

from grid_model import GridModel

FIELD_SEP = "\t"
ROW_SEP = "\n"
QUOTE = '"'


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_value(value) -> str:
    if value is None:
        return ""
    return _normalize_newlines(str(value)).rstrip("\n")


def format_cell_value(value) -> str:
    text = normalize_value(value)
    if ROW_SEP in text or FIELD_SEP in text or QUOTE in text:
        return QUOTE + text.replace(QUOTE, QUOTE * 2) + QUOTE
    return text


def encode_rows(rows) -> str:
    return "".join(
        FIELD_SEP.join(format_cell_value(v) for v in row) + ROW_SEP for row in rows
    )


def encode_range(grid: GridModel, bounds) -> str:
    """Encode the inclusive ``(r0, r1, c0, c1)`` rectangle as interchange text."""
    return encode_rows(grid.rows_in(bounds))


def decode_text(text: str) -> List[List[str]]:
    """Split interchange text into rows of fields.

    Accepts both quoted spreadsheet output and plain TAB/LF text. An
    unterminated quote swallows the rest of the input into the open field.
    """
    if not text:
        return []
    text = _normalize_newlines(text)

    rows: List[List[str]] = []
    row: List[str] = []
    field: List[str] = []
    in_quotes = False
    idx = 0
    length = len(text)
    while idx < length:
        ch = text[idx]
        if ch == QUOTE:
            if in_quotes and idx + 1 < length and text[idx + 1] == QUOTE:
                field.append(QUOTE)
                idx += 2
                continue
            in_quotes = not in_quotes
        elif ch == FIELD_SEP and not in_quotes:
            row.append("".join(field))
            field = []
        elif ch == ROW_SEP and not in_quotes:
            row.append("".join(field))
            rows.append(row)
            row = []
            field = []
        else:
            field.append(ch)
        idx += 1

    # a trailing LF outside quotes already closed the last row
    if in_quotes or not text.endswith(ROW_SEP):
        row.append("".join(field))
        rows.append(row)
    return rows
