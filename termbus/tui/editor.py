"""Remote file editor view backed by an SFTP manager."""

from __future__ import annotations

from termbus.interfaces import SFTPManager
from termbus.tui.styles import editor_container_style, editor_footer_style, editor_header_style


class EditorError(Exception):
    """Raised when a file cannot be loaded, saved or is missing."""


class EditorModel:
    """Holds the lines of a remote file, a cursor and the modified flag."""

    def __init__(self, sftp: SFTPManager, width: int, height: int) -> None:
        self.sftp = sftp
        self.session_id = ""
        self.file_path = ""
        self.lines: list[str] = []
        self.cursor = 0
        self.scroll = 0
        self.modified = False
        self.loading = False
        self.error: Exception | None = None
        self.footer = "↑↓: Navigate | Enter: Edit | Ctrl+S: Save | Ctrl+Q: Quit"
        self.width = width
        self.height = height

    def load(self, session_id: str, path: str) -> None:
        """Read a remote file into the editor."""
        self.session_id = session_id
        self.file_path = path
        self.loading = True
        try:
            content = self.sftp.read_file(session_id, path)
        except Exception as exc:
            self.error = EditorError(f"failed to load file: {exc}")
            self.loading = False
            raise self.error from exc
        self.lines = content.split("\n")
        self.loading = False
        self.modified = False
        self.footer = f"File: {path} | {len(self.lines)} lines | Modified: no"

    def save(self) -> None:
        """Write the lines back to the remote file."""
        if not self.session_id or not self.file_path:
            raise EditorError("no file loaded")
        try:
            self.sftp.write_file(self.session_id, self.file_path, "\n".join(self.lines))
        except Exception as exc:
            raise EditorError(f"failed to save file: {exc}") from exc
        self.modified = False
        self.footer = f"File: {self.file_path} | {len(self.lines)} lines | Saved!"

    def validate(self) -> None:
        """Raise when no file is selected."""
        if not self.file_path:
            raise EditorError("no file selected")

    def is_modified(self) -> bool:
        """Whether there are unsaved changes."""
        return self.modified

    def set_size(self, width: int, height: int) -> None:
        """Set the view size."""
        self.width = width
        self.height = height

    def handle_key(self, key: str) -> bool:
        """Process a key; return True when the editor asks to quit."""
        if key == "up":
            if self.cursor > 0:
                self.cursor -= 1
        elif key == "down":
            if self.cursor < len(self.lines) - 1:
                self.cursor += 1
        elif key == "ctrl+s":
            try:
                self.save()
            except EditorError as exc:
                self.error = exc
        elif key == "ctrl+q":
            return True
        elif key == "enter":
            self.modified = True
            self.footer = f"File: {self.file_path} | {len(self.lines)} lines | Modified: yes"
        return False

    def view(self) -> str:
        """Render header, numbered lines and footer in a frame."""
        header = editor_header_style().replace(width=self.width - 2).render(
            f"Editing: {self.file_path}"
        )
        footer = editor_footer_style().replace(width=self.width - 2).render(self.footer)
        end = min(self.scroll + self.height - 6, len(self.lines))
        body = "".join(
            f"{'> ' if index == self.cursor else '  '}{index + 1:4d}  {self.lines[index]}\n"
            for index in range(self.scroll, end)
        )
        container = editor_container_style().replace(width=self.width, height=self.height)
        return container.render(header + "\n" + body + footer)