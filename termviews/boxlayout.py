"""A container that lays its children out in a row or a column."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .constants import Orientation
from .view import ViewPort
from .widget import STYLE_DEFAULT, Event, EventWidgetContent, Style, Widget


@dataclass(eq=False)
class _Cell:
    widget: Widget
    fill: float
    view: ViewPort
    pad: int = 0
    frac: float = 0.0


class BoxLayout(Widget):
    """Lays out child widgets horizontally or vertically.

    Each child gets at least its preferred size along the main axis; any
    space left over is shared among children in proportion to their fill
    factors.
    """

    def __init__(self, orient: Orientation = Orientation.HORIZONTAL) -> None:
        self._view: Any = None
        self._orient = orient
        self._style = STYLE_DEFAULT
        self._cells: list[_Cell] = []
        self._width = 0
        self._height = 0
        self._changed = False

    def _distribute(self, extra: int, total_fill: float) -> None:
        resid = extra if total_fill else 0
        for cell in self._cells:
            if cell.fill > 0:
                cell.frac = extra * cell.fill / total_fill
                cell.pad = int(cell.frac)
                cell.frac -= cell.pad
                resid -= cell.pad

        # Leftover cells go to those with the highest residual fraction.
        while resid > 0:
            best = max(
                (cell for cell in self._cells if cell.fill != 0),
                key=lambda cell: cell.frac,
            )
            best.pad += 1
            best.frac = 0.0
            resid -= 1

    def _layout_along(self, axis: int) -> None:
        """Lay out along axis 0 (horizontal) or 1 (vertical)."""
        bounds = self._view.size()
        total_fill = 0.0
        main = cross = 0
        for cell in self._cells:
            preferred = cell.widget.size()
            total_fill += cell.fill
            main += preferred[axis]
            cross = max(cross, preferred[1 - axis])
            cell.pad = 0
            cell.frac = 0.0

        self._distribute(max(bounds[axis] - main, 0), total_fill)

        offset = 0
        for cell in self._cells:
            length = cell.widget.size()[axis] + cell.pad
            if axis == 0:
                cell.view.resize(offset, 0, length, bounds[1])
            else:
                cell.view.resize(0, offset, bounds[0], length)
            cell.widget.resize()
            offset += length

        self._width, self._height = (main, cross) if axis == 0 else (cross, main)

    def _layout(self) -> None:
        if self._view is None:
            return
        self._width, self._height = 0, 0
        if self._orient == Orientation.HORIZONTAL:
            self._layout_along(0)
        elif self._orient == Orientation.VERTICAL:
            self._layout_along(1)
        else:
            raise ValueError(f"bad orientation: {self._orient!r}")
        self._changed = False

    def resize(self) -> None:
        """Lay out again after the view changed size, and tell children."""
        self._layout()
        for cell in self._cells:
            cell.widget.resize()
        self.post_event_widget_resize(self)

    def draw(self) -> None:
        """Fill the background and draw every child."""
        if self._view is None:
            return
        if self._changed:
            self._layout()
        self._view.fill(" ", self._style)
        for cell in self._cells:
            cell.widget.draw()

    def size(self) -> tuple[int, int]:
        """Return the preferred (width, height) from the last layout."""
        return self._width, self._height

    def set_view(self, view: Any) -> None:
        """Set the view, which every child's view port is placed within."""
        self._changed = True
        self._view = view
        for cell in self._cells:
            cell.view.set_view(view)

    def handle_event(self, event: Event) -> bool:
        """Track content changes of children; otherwise offer to each child."""
        if isinstance(event, EventWidgetContent):
            self._changed = True
            self.post_event_widget_content(self)
            return True
        return any(cell.widget.handle_event(event) for cell in self._cells)

    def _attach(self, index: int, widget: Widget, fill: float) -> None:
        cell = _Cell(widget=widget, fill=fill, view=ViewPort(self._view, 0, 0, 0, 0))
        widget.set_view(cell.view)
        self._cells.insert(min(max(index, 0), len(self._cells)), cell)
        widget.watch(self)
        self._layout()
        self.post_event_widget_content(self)

    def add_widget(self, widget: Widget, fill: float) -> None:
        """Append a widget with the given fill factor (0 means no expansion)."""
        self._changed = True
        self._attach(len(self._cells), widget, fill)

    def insert_widget(self, index: int, widget: Widget, fill: float) -> None:
        """Insert a widget at an index, clamped to the ends of the layout."""
        self._attach(index, widget, fill)

    def remove_widget(self, widget: Widget) -> None:
        """Remove a widget; nothing happens if it is not in the layout."""
        remaining = [cell for cell in self._cells if cell.widget is not widget]
        if len(remaining) == len(self._cells):
            return
        self._cells = remaining
        self._changed = True
        widget.unwatch(self)
        self._layout()
        self.post_event_widget_content(self)

    def widgets(self) -> list[Widget]:
        """Return the child widgets in layout order."""
        return [cell.widget for cell in self._cells]

    def set_orientation(self, orient: Orientation) -> None:
        """Set the orientation, notifying watchers if it changed."""
        if self._orient != orient:
            self._orient = orient
            self._changed = True
            self.post_event_widget_content(self)

    def set_style(self, style: Style) -> None:
        """Set the background style."""
        self._style = style
        self.post_event_widget_content(self)