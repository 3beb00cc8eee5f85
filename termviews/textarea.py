"""A pannable block of plain lines of text with an optional soft cursor."""

from __future__ import annotations

from typing import Iterable

from .cellarea import CellModel, CellView
from .widget import STYLE_DEFAULT, Style


class _LinesModel(CellModel):
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.width = 0
        self.height = 0
        self.x = 0
        self.y = 0
        self.hide = False
        self.cursor = False
        self.style = STYLE_DEFAULT

    def get_cell(self, x: int, y: int) -> tuple[str, Style, None, int]:
        if x < 0 or y < 0 or y >= self.height or x >= len(self.lines[y]):
            return "", self.style, None, 1
        return self.lines[y][x], self.style, None, 1

    def get_bounds(self) -> tuple[int, int]:
        return self.width, self.height

    def _limit_cursor(self) -> None:
        self.x = max(min(self.x, self.width - 1), 0)
        self.y = max(min(self.y, self.height - 1), 0)

    def set_cursor(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._limit_cursor()

    def move_cursor(self, offx: int, offy: int) -> None:
        self.x += offx
        self.y += offy
        self._limit_cursor()

    def get_cursor(self) -> tuple[int, int, bool, bool]:
        return self.x, self.y, self.cursor, not self.hide


class TextArea(CellView):
    """Lines of text, all in one style, shown in a pannable view."""

    def __init__(self) -> None:
        super().__init__()
        self._lines = _LinesModel()
        self.set_model(self._lines)

    def set_lines(self, lines: Iterable[str]) -> None:
        """Set the content, one string per line."""
        model = self._lines
        model.lines = list(lines)
        model.width = max((len(line) for line in model.lines), default=0)
        model.height = len(model.lines)
        self.set_model(model)

    def set_style(self, style: Style) -> None:
        """Set the style of all text and of the background."""
        self._lines.style = style
        super().set_style(style)

    def enable_cursor(self, on: bool) -> None:
        """Enable or disable the soft cursor."""
        self._lines.cursor = on

    def hide_cursor(self, on: bool) -> None:
        """Hide the cursor when on is true; shown only if enabled."""
        self._lines.hide = on

    def set_content(self, text: str) -> None:
        """Set the content from one string with newline separated lines."""
        self.set_lines(text.strip("\n").split("\n"))