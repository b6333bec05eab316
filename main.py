import sys
from importlib.metadata import PackageNotFoundError, version

from clipboard_codec import decode_text
from config_paths import load_config
from markdown_converter import convert_to_markdown
from system_clipboard import ClipboardError, SystemClipboard

try:
    __version__ = version("gridclip")
except PackageNotFoundError:
    __version__ = "0.0.0"

USAGE = (
    "gridclip - spreadsheet grid editing engine\n\n"
    "Usage:\n  gridclip -m   print the clipboard as a Markdown table\n"
    "  gridclip -v\n  gridclip -h\n"
)


def clipboard_to_markdown(clipboard: SystemClipboard) -> str:
    return convert_to_markdown(decode_text(clipboard.read()))


def main(argv=None):
    args = sys.argv[1:] if argv is None else argv

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-m" in args:
        clipboard = SystemClipboard.from_config(load_config())
        try:
            markdown = clipboard_to_markdown(clipboard)
        except ClipboardError as exc:
            print(f"Clipboard read failed: {exc}", file=sys.stderr)
            return 1
        if not markdown:
            print("Clipboard is empty", file=sys.stderr)
            return 1
        print(markdown)
        return 0

    print(USAGE, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
