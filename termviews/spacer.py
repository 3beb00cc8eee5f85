"""A blank widget used to soak up spare room in layouts."""

from __future__ import annotations

from typing import Any

from .widget import Event, Widget


class Spacer(Widget):
    """Asks for no room, paints nothing and ignores input."""

    def draw(self) -> None:
        return None

    def size(self) -> tuple[int, int]:
        return (0, 0)

    def set_view(self, view: Any) -> None:
        del view

    def handle_event(self, event: Event) -> bool:
        del event
        return False

    def resize(self) -> None:
        """Announce the new size to anyone watching."""
        self.post_event_widget_resize(self)