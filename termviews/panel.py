"""A vertical layout with title, menu, content and status areas."""

from __future__ import annotations

from .boxlayout import BoxLayout
from .constants import Orientation
from .widget import Widget


class Panel(BoxLayout):
    """A layout of an optional title, menu, content pane and status.

    Only the content pane expands; the other areas keep their preferred
    size.  The areas may hold any widget.
    """

    def __init__(self) -> None:
        super().__init__(Orientation.HORIZONTAL)
        self._title: Widget | None = None
        self._menu: Widget | None = None
        self._content: Widget | None = None
        self._status: Widget | None = None

    def draw(self) -> None:
        """Draw the panel, always arranged top to bottom."""
        self.set_orientation(Orientation.VERTICAL)
        super().draw()

    def _replace(self, old: Widget | None, index: int, widget: Widget, fill: float) -> None:
        if old is not None:
            self.remove_widget(old)
        self.insert_widget(index, widget, fill)

    def set_title(self, widget: Widget) -> None:
        """Set the widget shown in the title area, at the top."""
        self._replace(self._title, 0, widget, 0.0)
        self._title = widget

    def set_menu(self, widget: Widget) -> None:
        """Set the widget shown in the menu area, just below the title."""
        index = int(self._title is not None)
        self._replace(self._menu, index, widget, 0.0)
        self._menu = widget

    def set_content(self, widget: Widget) -> None:
        """Set the widget shown in the expanding content area."""
        index = sum(w is not None for w in (self._title, self._menu))
        self._replace(self._content, index, widget, 1.0)
        self._content = widget

    def set_status(self, widget: Widget) -> None:
        """Set the widget shown in the status area, at the bottom."""
        index = sum(w is not None for w in (self._title, self._menu, self._content))
        self._replace(self._status, index, widget, 0.0)
        self._status = widget