"""
Editor - In-memory editing context and edit application.

TextEditor is the reference EditorProtocol implementation used by the
manager and the CLI. apply_edit_result() writes a provider's EditResult
into any EditorProtocol:
- With ranges: replace replace_start..replace_end, select select_start..select_end
- Without ranges: replace everything, select everything
"""

from pathlib import Path

from .contracts import EditorProtocol, EditResult, Position

__all__ = [
    "DEFAULT_LANGUAGE_ID",
    "EXTENSION_LANGUAGES",
    "TextEditor",
    "apply_edit_result",
    "language_for_path",
]

DEFAULT_LANGUAGE_ID = "text"

EXTENSION_LANGUAGES: dict[str, str] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "jsx",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".json": "json",
    ".html": "html",
    ".htm": "html",
    ".xhtml": "html",
    ".css": "css",
    ".scss": "scss",
    ".less": "less",
    ".md": "markdown",
    ".markdown": "markdown",
    ".php": "php",
    ".py": "python",
    ".pyi": "python",
    ".rb": "ruby",
    ".go": "go",
    ".rs": "rust",
    ".java": "java",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".cc": "cpp",
    ".hpp": "cpp",
    ".xml": "xml",
    ".svg": "svg",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
    ".sql": "sql",
    ".sh": "bash",
    ".txt": "text",
}


def language_for_path(path: str | Path) -> str | None:
    """Language id for a file path by extension, or None if unknown."""
    return EXTENSION_LANGUAGES.get(Path(path).suffix.lower())


class TextEditor:
    """Plain-text buffer with a selection.

    Example:
        editor = TextEditor("a=1\\n", path="main.py")
        editor.get_language_id()  # "python"
        editor.set_text("a = 1\\n")
    """

    def __init__(
        self,
        text: str = "",
        language_id: str | None = None,
        path: str | Path | None = None,
    ) -> None:
        self._text = text
        self._language_id = language_id
        self.path = Path(path) if path is not None else None
        origin = Position(line=0, ch=0)
        self._selection = (origin, origin)

    @classmethod
    def from_file(cls, path: str | Path, language_id: str | None = None) -> "TextEditor":
        """Open a file as an editor."""
        path = Path(path)
        return cls(path.read_text(encoding="utf-8"), language_id=language_id, path=path)

    @property
    def text(self) -> str:
        return self._text

    @property
    def selection(self) -> tuple[Position, Position]:
        return self._selection

    @property
    def selected_text(self) -> str:
        start, end = self._selection
        return self._text[self.offset_of(start):self.offset_of(end)]

    def get_language_id(self) -> str:
        if self._language_id:
            return self._language_id
        if self.path is not None:
            return language_for_path(self.path) or DEFAULT_LANGUAGE_ID
        return DEFAULT_LANGUAGE_ID

    def offset_of(self, pos: Position) -> int:
        """Character offset of a position, clamped to the document."""
        lines = self._text.split("\n")
        if pos.line >= len(lines):
            return len(self._text)
        offset = sum(len(line) + 1 for line in lines[:pos.line])
        return offset + min(pos.ch, len(lines[pos.line]))

    def clamp(self, pos: Position) -> Position:
        """Nearest position that exists in the document."""
        lines = self._text.split("\n")
        if pos.line >= len(lines):
            return self.ending_cursor_pos()
        ch = min(pos.ch, len(lines[pos.line]))
        if ch == pos.ch:
            return pos
        return Position(line=pos.line, ch=ch)

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        if end < start:
            start, end = end, start
        begin = self.offset_of(start)
        self._text = self._text[:begin] + text + self._text[self.offset_of(end):]

    def set_text(self, text: str) -> None:
        self._text = text

    def set_selection(self, start: Position, end: Position) -> None:
        self._selection = (self.clamp(start), self.clamp(end))

    def ending_cursor_pos(self) -> Position:
        lines = self._text.split("\n")
        return Position(line=len(lines) - 1, ch=len(lines[-1]))

    def save(self, path: str | Path | None = None) -> Path:
        """Write the content back to disk."""
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("Editor has no path; pass one to save()")
        target.write_text(self._text, encoding="utf-8")
        return target

    def __repr__(self) -> str:
        return f"TextEditor(path={self.path!s}, language={self.get_language_id()!r})"


def apply_edit_result(editor: EditorProtocol, result: EditResult) -> None:
    """Apply a provider's edit to an editor and update the selection."""
    ranges = result.ranges
    if ranges is not None:
        editor.replace_range(result.changed_text, ranges.replace_start, ranges.replace_end)
        editor.set_selection(ranges.select_start, ranges.select_end)
    else:
        editor.set_text(result.changed_text)
        editor.set_selection(Position(line=0, ch=0), editor.ending_cursor_pos())
