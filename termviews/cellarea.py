"""A pannable view of a two dimensional cell model, with an optional cursor."""

from __future__ import annotations

import abc
from typing import Any, Sequence

from .view import ViewPort
from .widget import STYLE_DEFAULT, Event, Key, KeyEvent, Style, Widget


class CellModel(abc.ABC):
    """The content shown by a CellView, in logical coordinates from (0, 0)."""

    @abc.abstractmethod
    def get_cell(self, x: int, y: int) -> tuple[str, Style, Sequence[str] | None, int]:
        """Return (char, style, combining chars, width) for a cell.

        An empty character (or NUL) means the cell has no content.
        """

    @abc.abstractmethod
    def get_bounds(self) -> tuple[int, int]:
        """Return the (width, height) of the content."""

    @abc.abstractmethod
    def set_cursor(self, x: int, y: int) -> None:
        """Place the cursor."""

    @abc.abstractmethod
    def get_cursor(self) -> tuple[int, int, bool, bool]:
        """Return (x, y, enabled, shown) for the cursor."""

    @abc.abstractmethod
    def move_cursor(self, offx: int, offy: int) -> None:
        """Move the cursor by a relative offset."""


class CellView(Widget):
    """A widget showing a CellModel through a scrollable view port.

    Arrow keys and paging keys move the cursor when the model has one
    enabled, and pan the view otherwise.
    """

    def __init__(self) -> None:
        self._port = ViewPort()
        self._view: Any = None
        self._style = STYLE_DEFAULT
        self._model: CellModel | None = None

    @property
    def model(self) -> CellModel | None:
        """The model being shown."""
        return self._model

    def draw(self) -> None:
        """Draw the visible part of the model."""
        port = self._port
        model = self._model
        port.fill(" ", self._style)
        if self._view is None or model is None:
            return
        vw, vh = self._view.size()
        for y in range(vh):
            for x in range(vw):
                self._view.set_content(x, y, " ", None, self._style)

        ex, ey = model.get_bounds()
        vx, vy = port.size()
        ex = max(ex, vx)
        ey = max(ey, vy)

        cx, cy, enabled, shown = model.get_cursor()
        for y in range(ey):
            x = 0
            while x < ex:
                ch, style, comb, width = model.get_cell(x, y)
                if not ch or ch == "\0":
                    ch = " "
                    style = self._style
                if enabled and shown and x == cx and y == cy:
                    style = style.reverse(True)
                port.set_content(x, y, ch, comb, style)
                x += max(width, 1)

    def _cursor_enabled(self) -> bool:
        return self._model.get_cursor()[2]

    def _key_up(self) -> None:
        if not self._cursor_enabled():
            self._port.scroll_up(1)
            return
        self._model.move_cursor(0, -1)
        self.make_cursor_visible()

    def _key_down(self) -> None:
        if not self._cursor_enabled():
            self._port.scroll_down(1)
            return
        self._model.move_cursor(0, 1)
        self.make_cursor_visible()

    def _key_left(self) -> None:
        if not self._cursor_enabled():
            self._port.scroll_left(1)
            return
        self._model.move_cursor(-1, 0)
        self.make_cursor_visible()

    def _key_right(self) -> None:
        if not self._cursor_enabled():
            self._port.scroll_right(1)
            return
        self._model.move_cursor(1, 0)
        self.make_cursor_visible()

    def _key_pgup(self) -> None:
        _, vy = self._port.size()
        if not self._cursor_enabled():
            self._port.scroll_up(vy)
            return
        self._model.move_cursor(0, -vy)
        self.make_cursor_visible()

    def _key_pgdn(self) -> None:
        _, vy = self._port.size()
        if not self._cursor_enabled():
            self._port.scroll_down(vy)
            return
        self._model.move_cursor(0, vy)
        self.make_cursor_visible()

    def _key_home(self) -> None:
        vx, vy = self._model.get_bounds()
        if not self._cursor_enabled():
            self._port.scroll_up(vy)
            self._port.scroll_left(vx)
            return
        self._model.set_cursor(0, 0)
        self.make_cursor_visible()

    def _key_end(self) -> None:
        vx, vy = self._model.get_bounds()
        if not self._cursor_enabled():
            self._port.scroll_down(vy)
            self._port.scroll_right(vx)
            return
        self._model.set_cursor(vx, vy)
        self.make_cursor_visible()

    _KEY_ACTIONS = {
        Key.UP: _key_up,
        Key.CTRL_P: _key_up,
        Key.DOWN: _key_down,
        Key.CTRL_N: _key_down,
        Key.RIGHT: _key_right,
        Key.CTRL_F: _key_right,
        Key.LEFT: _key_left,
        Key.CTRL_B: _key_left,
        Key.PGDN: _key_pgdn,
        Key.PGUP: _key_pgup,
        Key.END: _key_end,
        Key.HOME: _key_home,
    }

    def make_cursor_visible(self) -> None:
        """Pan so the cursor is visible, if the cursor is enabled."""
        if self._model is None:
            return
        x, y, enabled, _ = self._model.get_cursor()
        if enabled:
            self.make_visible(x, y)

    def handle_event(self, event: Event) -> bool:
        """Handle the keys that move the cursor or pan the view."""
        if self._model is None or not isinstance(event, KeyEvent):
            return False
        action = self._KEY_ACTIONS.get(event.key)
        if action is None:
            return False
        action(self)
        return True

    def size(self) -> tuple[int, int]:
        """Return the content size from the model, at least 2 by 2."""
        width, height = self._model.get_bounds() if self._model else (0, 0)
        return max(width, 2), max(height, 2)

    def set_model(self, model: CellModel) -> None:
        """Set the model to show."""
        width, height = model.get_bounds()
        self._model = model
        self._port.set_content_size(width, height, True)
        self._port.validate_view()
        self.post_event_widget_content(self)

    def set_view(self, view: Any) -> None:
        """Set the view to draw into."""
        self._port.set_view(view)
        self._view = view
        if view is None:
            return
        width, height = view.size()
        self._port.resize(0, 0, width, height)
        if self._model is not None:
            w, h = self._model.get_bounds()
            self._port.set_content_size(w, h, True)
        self.resize()

    def resize(self) -> None:
        """Fit the view port to the view and keep the cursor visible."""
        if self._view is None:
            return
        width, height = self._view.size()
        self._port.resize(0, 0, width, height)
        self._port.validate_view()
        self.make_cursor_visible()

    def set_cursor(self, x: int, y: int) -> None:
        """Set the cursor position."""
        self._model.set_cursor(x, y)

    def set_cursor_x(self, x: int) -> None:
        """Set the cursor column, keeping the row."""
        _, y, _, _ = self._model.get_cursor()
        self.set_cursor(x, y)

    def set_cursor_y(self, y: int) -> None:
        """Set the cursor row, keeping the column."""
        x, _, _, _ = self._model.get_cursor()
        self.set_cursor(x, y)

    def make_visible(self, x: int, y: int) -> None:
        """Pan the view port so (x, y) is visible."""
        self._port.make_visible(x, y)

    def set_style(self, style: Style) -> None:
        """Set the default fill style."""
        self._style = style