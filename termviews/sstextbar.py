"""A one-line bar with left, center and right marked-up text."""

from __future__ import annotations

from .boxlayout import BoxLayout
from .constants import Alignment, Orientation
from .spacer import Spacer
from .sstext import SimpleStyledText
from .widget import Style


class SimpleStyledTextBar(BoxLayout):
    """A single line with left-, center- and right-aligned areas.

    Each area is a SimpleStyledText and accepts its markup.
    """

    def __init__(self) -> None:
        super().__init__(Orientation.HORIZONTAL)
        self._left = SimpleStyledText()
        self._center = SimpleStyledText()
        self._right = SimpleStyledText()
        self._center.set_alignment(Alignment.V_ALIGN_TOP | Alignment.H_ALIGN_CENTER)
        self._left.set_alignment(Alignment.V_ALIGN_TOP | Alignment.H_ALIGN_LEFT)
        self._right.set_alignment(Alignment.V_ALIGN_TOP | Alignment.H_ALIGN_RIGHT)
        self.add_widget(self._left, 0.0)
        self.add_widget(Spacer(), 1.0)
        self.add_widget(self._center, 0.0)
        self.add_widget(Spacer(), 1.0)
        self.add_widget(self._right, 0.0)

    def set_right(self, markup: str) -> None:
        """Set the right-aligned text."""
        self._right.set_markup(markup)

    def set_left(self, markup: str) -> None:
        """Set the left-aligned text."""
        self._left.set_markup(markup)

    def set_center(self, markup: str) -> None:
        """Set the centered text."""
        self._center.set_markup(markup)

    def register_right_style(self, r: str, style: Style) -> None:
        """Register a markup style for the right text."""
        self._right.register_style(r, style)

    def register_left_style(self, r: str, style: Style) -> None:
        """Register a markup style for the left text."""
        self._left.register_style(r, style)

    def register_center_style(self, r: str, style: Style) -> None:
        """Register a markup style for the centered text."""
        self._center.register_style(r, style)

    def size(self) -> tuple[int, int]:
        """Return the preferred size, at least one cell each way."""
        width, height = super().size()
        return max(width, 1), max(height, 1)