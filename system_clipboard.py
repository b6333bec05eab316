import subprocess

DEFAULT_COPY_COMMAND = ["wl-copy"]
DEFAULT_PASTE_COMMAND = ["wl-paste", "--no-newline"]


class ClipboardError(Exception):
    """Raised when the platform clipboard cannot be read or written."""


class SystemClipboard:
    """Platform clipboard reached through external copy/paste commands."""

    def __init__(self, copy_command=None, paste_command=None):
        self.copy_command = list(copy_command or DEFAULT_COPY_COMMAND)
        self.paste_command = list(paste_command or DEFAULT_PASTE_COMMAND)

    @classmethod
    def from_config(cls, config) -> "SystemClipboard":
        config = config or {}
        return cls(
            copy_command=config.get("CLIPBOARD_INTERFACE_COMMAND"),
            paste_command=config.get("CLIPBOARD_PASTE_COMMAND"),
        )

    def write(self, text: str) -> None:
        try:
            subprocess.run(self.copy_command, input=text, text=True, check=True)
        except FileNotFoundError as exc:
            raise ClipboardError(f"{self.copy_command[0]} not found") from exc
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(f"copy exited with {exc.returncode}") from exc
        except OSError as exc:
            raise ClipboardError(str(exc)) from exc

    def read(self) -> str:
        try:
            result = subprocess.run(
                self.paste_command, capture_output=True, text=True, check=True
            )
        except FileNotFoundError as exc:
            raise ClipboardError(f"{self.paste_command[0]} not found") from exc
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(f"paste exited with {exc.returncode}") from exc
        except OSError as exc:
            raise ClipboardError(str(exc)) from exc
        return result.stdout or ""
