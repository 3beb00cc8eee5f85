"""A widget that shows a block of text, optionally styled per character."""

from __future__ import annotations

from typing import Any

from wcwidth import wcwidth

from .constants import Alignment
from .widget import STYLE_DEFAULT, Event, Style, Widget


def _rune_width(ch: str) -> int:
    """Return the display width of a character; control characters are 0."""
    width = wcwidth(ch)
    return width if width > 0 else 0


class Text(Widget):
    """A block of text that may span several lines.

    Lines are separated by newlines.  Each character can carry its own
    style; combining characters share the cell of the preceding one.
    """

    def __init__(self) -> None:
        self._view: Any = None
        self._align = Alignment(0)
        self._style = STYLE_DEFAULT
        self._text: list[str] = []
        self._widths: list[int] = []
        self._styles: list[Style] = []
        self._lengths: list[int] = []
        self._width = 0
        self._height = 0

    @property
    def text(self) -> str:
        """The text that was set, including any injected spaces."""
        return "".join(self._text)

    @property
    def alignment(self) -> Alignment:
        """The current alignment."""
        return self._align

    @property
    def style(self) -> Style:
        """The default style; individual characters may differ."""
        return self._style

    def _clear(self) -> None:
        view = self._view
        width, height = view.size()
        view.clear()
        for y in range(height):
            for x in range(width):
                view.set_content(x, y, " ", None, self._style)

    def _calc_y(self, height: int) -> int:
        if self._align & Alignment.V_ALIGN_CENTER:
            return (height - len(self._lengths)) // 2
        if self._align & Alignment.V_ALIGN_BOTTOM:
            return height - len(self._lengths)
        return 0

    def _calc_x(self, width: int, line: int) -> int:
        if self._align & Alignment.H_ALIGN_CENTER:
            return (width - self._lengths[line]) // 2
        if self._align & Alignment.H_ALIGN_RIGHT:
            return width - self._lengths[line]
        return 0

    def draw(self) -> None:
        """Draw the text into the view, honouring the alignment."""
        view = self._view
        if view is None:
            return
        width, height = view.size()
        if width == 0 or height == 0:
            return

        self._clear()

        # X may go negative when the text is wider than the view; the
        # view clips it.
        y = self._calc_y(height)
        rune = ""
        cell_width = 0
        x = 0
        style = self._style
        comb: list[str] = []
        line = 0
        newline = True
        for ch, ch_width, ch_style in zip(self._text, self._widths, self._styles):
            if newline:
                x = self._calc_x(width, line)
                newline = False
            if ch == "\n":
                if cell_width:
                    view.set_content(x, y, rune, list(comb) or None, style)
                newline = True
                cell_width = 0
                comb = []
                line += 1
                y += 1
                continue
            if ch_width == 0:
                comb.append(ch)
                continue
            if cell_width:
                view.set_content(x, y, rune, list(comb) or None, style)
                x += cell_width
            rune = ch
            cell_width = ch_width
            style = ch_style
            comb = []
        if cell_width:
            view.set_content(x, y, rune, list(comb) or None, style)

    def size(self) -> tuple[int, int]:
        """Return the (width, height) of the text in cells."""
        if self._text:
            return self._width, self._height
        return 0, 0

    def set_alignment(self, align: Alignment) -> None:
        """Set the alignment, notifying watchers if it changed."""
        if align != self._align:
            self._align = Alignment(align)
            self.post_event_widget_content(self)

    def set_view(self, view: Any) -> None:
        """Set the view the text draws into."""
        self._view = view

    def handle_event(self, event: Event) -> bool:
        """Text consumes no events."""
        return False

    def set_text(self, s: str) -> None:
        """Set the text, resetting every character to the default style.

        A combining character at the start of a line gets a leading space.
        """
        chars: list[str] = []
        widths: list[int] = []
        lengths: list[int] = []
        length = 0
        widest = 0
        for ch in s:
            ch_width = _rune_width(ch)
            if ch == "\n":
                chars.append(ch)
                widths.append(ch_width)
                lengths.append(length)
                widest = max(widest, length)
                length = 0
            elif ch_width == 0 and length == 0:
                chars.extend((" ", ch))
                widths.extend((1, 0))
                length += 1
            else:
                chars.append(ch)
                widths.append(ch_width)
                length += ch_width
        if length > 0:
            lengths.append(length)
            widest = max(widest, length)

        self._text = chars
        self._widths = widths
        self._styles = [self._style] * len(chars)
        self._lengths = lengths
        self._width = widest
        self._height = len(lengths)
        self.post_event_widget_content(self)

    def set_style(self, style: Style) -> None:
        """Set the default style and apply it to every visible character."""
        self._style = style
        self._styles = [
            style if width != 0 else old
            for width, old in zip(self._widths, self._styles)
        ]
        self.post_event_widget_content(self)

    def set_style_at(self, pos: int, style: Style) -> None:
        """Set the style of the character at a rune index.

        Out-of-range indices and combining characters are ignored.
        """
        if pos < 0 or pos >= len(self._text) or self._widths[pos] < 1:
            return
        self._styles[pos] = style
        self.post_event_widget_content(self)

    def style_at(self, pos: int) -> Style:
        """Return the style at a rune index, or the default style if invalid."""
        if pos < 0 or pos >= len(self._text) or self._widths[pos] < 1:
            return STYLE_DEFAULT
        return self._styles[pos]

    def resize(self) -> None:
        """Tell watchers the view was resized."""
        self.post_event_widget_resize(self)