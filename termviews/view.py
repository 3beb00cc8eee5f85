"""Views: drawing surfaces, and the clipping, scrollable ViewPort."""

from __future__ import annotations

import abc
from typing import Sequence

from .widget import STYLE_DEFAULT, Style


class View(abc.ABC):
    """A logical drawing area operated on by widgets."""

    @abc.abstractmethod
    def set_content(
        self, x: int, y: int, ch: str, comb: Sequence[str] | None, style: Style
    ) -> None:
        """Set the content of the cell at (x, y)."""

    @abc.abstractmethod
    def size(self) -> tuple[int, int]:
        """Return the visible (width, height)."""

    @abc.abstractmethod
    def resize(self, x: int, y: int, width: int, height: int) -> None:
        """Set a new offset within the parent and new visible dimensions."""

    @abc.abstractmethod
    def fill(self, ch: str, style: Style) -> None:
        """Fill the visible area with a character and style."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Clear the visible area."""


class ViewPort(View):
    """A clipping, scrollable window onto a larger content area.

    Content is not retained; cells drawn outside the visible window are
    discarded, but may extend the recorded content size unless locked.
    """

    def __init__(
        self,
        view: View | None = None,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
    ) -> None:
        self._parent = view
        self._physx = 0
        self._physy = 0
        self._viewx = 0
        self._viewy = 0
        self._limx = width
        self._limy = height
        self._width = 0
        self._height = 0
        self._locked = False
        self.resize(x, y, width, height)

    def clear(self) -> None:
        """Fill the visible area with spaces in the default style."""
        self.fill(" ", STYLE_DEFAULT)

    def fill(self, ch: str, style: Style) -> None:
        """Fill the visible area with the given character and style."""
        if self._parent is None:
            return
        for y in range(self._height):
            for x in range(self._width):
                self._parent.set_content(
                    x + self._physx, y + self._physy, ch, None, style
                )

    def size(self) -> tuple[int, int]:
        """Return the visible (width, height)."""
        return self._width, self._height

    def reset(self) -> None:
        """Forget the content size and scroll back to the origin."""
        self._limx = 0
        self._limy = 0
        self._viewx = 0
        self._viewy = 0

    def set_content(
        self, x: int, y: int, ch: str, comb: Sequence[str] | None, style: Style
    ) -> None:
        """Place a cell at content coordinates, clipped to the window."""
        if self._parent is None:
            return
        if x > self._limx and not self._locked:
            self._limx = x
        if y > self._limy and not self._locked:
            self._limy = y
        if x < self._viewx or y < self._viewy:
            return
        if x >= self._viewx + self._width or y >= self._viewy + self._height:
            return
        self._parent.set_content(
            x - self._viewx + self._physx,
            y - self._viewy + self._physy,
            ch,
            comb,
            style,
        )

    def make_visible(self, x: int, y: int) -> None:
        """Scroll the minimum needed to bring (x, y) into view."""
        if x < self._limx and x >= self._viewx + self._width:
            self._viewx = x - (self._width - 1)
        if 0 <= x < self._viewx:
            self._viewx = x
        if y < self._limy and y >= self._viewy + self._height:
            self._viewy = y - (self._height - 1)
        if 0 <= y < self._viewy:
            self._viewy = y
        self.validate_view()

    def validate_view_y(self) -> None:
        """Keep the vertical offset within the content."""
        if self._viewy > self._limy - self._height:
            self._viewy = self._limy - self._height
        if self._viewy < 0:
            self._viewy = 0

    def validate_view_x(self) -> None:
        """Keep the horizontal offset within the content."""
        if self._viewx > self._limx - self._width:
            self._viewx = self._limx - self._width
        if self._viewx < 0:
            self._viewx = 0

    def validate_view(self) -> None:
        """Keep both offsets within the content."""
        self.validate_view_x()
        self.validate_view_y()

    def center(self, x: int, y: int) -> None:
        """Center the view on (x, y) where possible."""
        if x < 0 or y < 0 or x >= self._limx or y >= self._limy or self._parent is None:
            return
        self._viewx = x - self._width // 2
        self._viewy = y - self._height // 2
        self.validate_view()

    def scroll_up(self, rows: int) -> None:
        """Show lower numbered rows."""
        self._viewy -= rows
        self.validate_view_y()

    def scroll_down(self, rows: int) -> None:
        """Show higher numbered rows."""
        self._viewy += rows
        self.validate_view_y()

    def scroll_left(self, cols: int) -> None:
        """Show lower numbered columns."""
        self._viewx -= cols
        self.validate_view_x()

    def scroll_right(self, cols: int) -> None:
        """Show higher numbered columns."""
        self._viewx += cols
        self.validate_view_x()

    def set_size(self, width: int, height: int) -> None:
        """Set the visible size."""
        self._width = width
        self._height = height
        self.validate_view()

    def get_visible(self) -> tuple[int, int, int, int]:
        """Return (x1, y1, x2, y2) of the visible content, inclusive."""
        return (
            self._viewx,
            self._viewy,
            self._viewx + self._width - 1,
            self._viewy + self._height - 1,
        )

    def get_physical(self) -> tuple[int, int, int, int]:
        """Return (x1, y1, x2, y2) of the window in parent coordinates."""
        return (
            self._physx,
            self._physy,
            self._physx + self._width - 1,
            self._physy + self._height - 1,
        )

    def set_content_size(self, width: int, height: int, locked: bool) -> None:
        """Set the content size; when locked it will not grow on drawing."""
        self._limx = width
        self._limy = height
        self._locked = locked
        self.validate_view()

    def get_content_size(self) -> tuple[int, int]:
        """Return the content (width, height)."""
        return self._limx, self._limy

    def resize(self, x: int, y: int, width: int, height: int) -> None:
        """Move and size the window within the parent.

        A negative width or height extends to the parent's edge.
        """
        if self._parent is None:
            return
        px, py = self._parent.size()
        if 0 <= x < px:
            self._physx = x
        if 0 <= y < py:
            self._physy = y
        if width < 0 or width > px - x:
            width = px - x
        if height < 0 or height > py - y:
            height = py - y
        self._width = width
        self._height = height

    def set_view(self, view: View | None) -> None:
        """Set the parent view."""
        self._parent = view