"""A one-line bar with left, center and right text areas."""

from __future__ import annotations

from typing import Any

from .constants import Alignment
from .text import Text
from .view import ViewPort
from .widget import STYLE_DEFAULT, Event, EventWidgetContent, Style, Widget


class TextBar(Widget):
    """A single line with left-, center- and right-aligned text.

    Each area has its own style; the bar's style fills the gaps.
    """

    def __init__(self) -> None:
        self._changed = False
        self._style = STYLE_DEFAULT
        self._view: Any = None
        self._left = Text()
        self._center = Text()
        self._right = Text()
        self._lview = ViewPort()
        self._cview = ViewPort()
        self._rview = ViewPort()
        self._center.set_view(self._cview)
        self._left.set_view(self._lview)
        self._right.set_view(self._rview)
        self._center.set_alignment(Alignment.V_ALIGN_TOP | Alignment.H_ALIGN_CENTER)
        self._left.set_alignment(Alignment.V_ALIGN_TOP | Alignment.H_ALIGN_LEFT)
        self._right.set_alignment(Alignment.V_ALIGN_TOP | Alignment.H_ALIGN_RIGHT)
        self._center.watch(self)
        self._left.watch(self)
        self._right.watch(self)

    def _set_area(self, area: Text, s: str, style: Style) -> None:
        if style == STYLE_DEFAULT:
            style = self._style
        area.set_text(s)
        area.set_style(style)

    def set_center(self, s: str, style: Style = STYLE_DEFAULT) -> None:
        """Set the centered text; the default style means the bar's style."""
        self._set_area(self._center, s, style)

    def set_left(self, s: str, style: Style = STYLE_DEFAULT) -> None:
        """Set the left-aligned text; the default style means the bar's style."""
        self._set_area(self._left, s, style)

    def set_right(self, s: str, style: Style = STYLE_DEFAULT) -> None:
        """Set the right-aligned text; the default style means the bar's style."""
        self._set_area(self._right, s, style)

    def set_style(self, style: Style) -> None:
        """Set the bar's style; text already set keeps its style."""
        self._style = style

    def _layout(self) -> None:
        if self._view is None:
            return
        width, _ = self._view.size()
        ww, wh = self._left.size()
        self._lview.resize(0, 0, ww, wh)
        ww, wh = self._center.size()
        self._cview.resize((width - ww) // 2, 0, ww, wh)
        ww, wh = self._right.size()
        self._rview.resize(width - ww, 0, ww, wh)
        self._changed = False

    def set_view(self, view: Any) -> None:
        """Set the view the bar draws into."""
        self._view = view
        self._lview.set_view(view)
        self._rview.set_view(view)
        self._cview.set_view(view)
        self._changed = True

    def draw(self) -> None:
        """Fill the bar and draw the three areas."""
        if self._view is None:
            return
        if self._changed:
            self._layout()
        width, height = self._view.size()
        for y in range(height):
            for x in range(width):
                self._view.set_content(x, y, " ", None, self._style)
        # Right first, so that overlap is clipped on the right side.
        self._right.draw()
        self._center.draw()
        self._left.draw()

    def resize(self) -> None:
        """Lay out again after the view changed size."""
        self._layout()
        self._left.resize()
        self._center.resize()
        self._right.resize()
        self.post_event_widget_resize(self)

    def size(self) -> tuple[int, int]:
        """Return the total width of the areas and the tallest height."""
        sizes = [area.size() for area in (self._left, self._center, self._right)]
        return sum(w for w, _ in sizes), max(h for _, h in sizes)

    def handle_event(self, event: Event) -> bool:
        """Note content changes of the areas so the layout is redone."""
        if isinstance(event, EventWidgetContent):
            self._changed = True
            return True
        return False