import unicodedata

from clipboard_codec import normalize_value

LINE_BREAK = "<br>"


def display_width(text: str) -> int:
    """Column count of ``text`` in a monospace font; wide CJK glyphs take two."""
    width = 0
    for ch in text:
        if unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width


def format_cell_value(value) -> str:
    text = normalize_value(value)
    return text.replace("|", "\\|").replace("\n", LINE_BREAK)


def _pad(text: str, width: int) -> str:
    return text + " " * max(0, width - display_width(text))


def convert_to_markdown(rows) -> str:
    """Render rows as a Markdown table using the first row as its header."""
    if not rows or not rows[0]:
        return ""

    n_cols = max(len(r) for r in rows)
    cells = [
        [format_cell_value(v) for v in row] + [""] * (n_cols - len(row))
        for row in rows
    ]
    widths = [max(display_width(row[c]) for row in cells) for c in range(n_cols)]

    def line(row):
        return "| " + " | ".join(_pad(v, widths[c]) for c, v in enumerate(row)) + " |"

    header = line(cells[0])
    if len(cells) == 1:
        return header

    separator = "|" + "|".join("-" * (w + 2) for w in widths) + "|"
    return "\n".join([header, separator] + [line(row) for row in cells[1:]])
