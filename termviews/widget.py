"""Widgets, the events they post, and the styles they draw with."""

from __future__ import annotations

import abc
import enum
import threading
import time
from dataclasses import dataclass, replace
from typing import Any, Protocol

_REGISTRY_LOCK = threading.Lock()


@dataclass(frozen=True)
class Style:
    """An immutable cell style: colours and a set of text attributes."""

    foreground: str | None = None
    background: str | None = None
    attributes: frozenset = frozenset()

    def _with_attribute(self, name: str, on: bool) -> Style:
        attrs = self.attributes | {name} if on else self.attributes - {name}
        return replace(self, attributes=frozenset(attrs))

    def reverse(self, on: bool = True) -> Style:
        """Return a copy with reverse video switched on or off."""
        return self._with_attribute("reverse", on)

    def bold(self, on: bool = True) -> Style:
        """Return a copy with bold switched on or off."""
        return self._with_attribute("bold", on)

    def underline(self, on: bool = True) -> Style:
        """Return a copy with underline switched on or off."""
        return self._with_attribute("underline", on)


STYLE_DEFAULT = Style()


class Key(enum.Enum):
    """Keys that widgets react to."""

    RUNE = enum.auto()
    ENTER = enum.auto()
    TAB = enum.auto()
    BACKSPACE = enum.auto()
    ESCAPE = enum.auto()
    INSERT = enum.auto()
    DELETE = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    HOME = enum.auto()
    END = enum.auto()
    PGUP = enum.auto()
    PGDN = enum.auto()
    CTRL_B = enum.auto()
    CTRL_F = enum.auto()
    CTRL_L = enum.auto()
    CTRL_N = enum.auto()
    CTRL_P = enum.auto()


class Event:
    """Base of all events; records the time it was created."""

    def __init__(self) -> None:
        self.when = time.time()


class KeyEvent(Event):
    """A key press, with the character for Key.RUNE presses."""

    def __init__(self, key: Key, rune: str = "", modifiers: int = 0) -> None:
        super().__init__()
        self.key = key
        self.rune = rune
        self.modifiers = modifiers

    def __repr__(self) -> str:
        return f"KeyEvent(key={self.key!r}, rune={self.rune!r}, modifiers={self.modifiers!r})"


class EventWidget(Event):
    """An event delivered by a specific widget."""

    def __init__(self, widget: Any) -> None:
        super().__init__()
        self.widget = widget


class EventWidgetContent(EventWidget):
    """Posted whenever a widget's content changes."""


class EventWidgetResize(EventWidget):
    """Posted whenever a widget is resized."""


class EventWidgetMove(EventWidget):
    """Posted whenever a widget changes location."""


class _EventHandler(Protocol):
    def handle_event(self, event: Event) -> bool: ...


class WidgetWatchers:
    """Thread-safe registry of handlers interested in a widget's events."""

    def _registry(self) -> tuple[dict, threading.Lock]:
        state = vars(self)
        if "_watchers" not in state:
            with _REGISTRY_LOCK:
                state.setdefault("_watchers_lock", threading.Lock())
                state.setdefault("_watchers", {})
        return state["_watchers"], state["_watchers_lock"]

    def watch(self, handler: _EventHandler) -> None:
        """Register a handler to receive this widget's events."""
        watchers, lock = self._registry()
        with lock:
            watchers[handler] = None

    def unwatch(self, handler: _EventHandler) -> None:
        """Stop delivering this widget's events to the handler."""
        watchers, lock = self._registry()
        with lock:
            watchers.pop(handler, None)

    def post_event(self, event: EventWidget) -> None:
        """Deliver the event to every registered handler."""
        watchers, lock = self._registry()
        with lock:
            targets = list(watchers)
        for handler in targets:
            handler.handle_event(event)

    def post_event_widget_content(self, widget: Any) -> None:
        """Tell watchers that the widget's content changed."""
        self.post_event(EventWidgetContent(widget))

    def post_event_widget_resize(self, widget: Any) -> None:
        """Tell watchers that the widget's view was resized."""
        self.post_event(EventWidgetResize(widget))

    def post_event_widget_move(self, widget: Any) -> None:
        """Tell watchers that the widget moved."""
        self.post_event(EventWidgetMove(widget))


class Widget(WidgetWatchers, abc.ABC):
    """Base of every on-screen element."""

    @abc.abstractmethod
    def draw(self) -> None:
        """Draw the widget into its view."""

    @abc.abstractmethod
    def resize(self) -> None:
        """React to a resize of the widget's view."""

    @abc.abstractmethod
    def handle_event(self, event: Event) -> bool:
        """Handle an event; return True if it was consumed."""

    @abc.abstractmethod
    def set_view(self, view: Any) -> None:
        """Set the view the widget draws into."""

    @abc.abstractmethod
    def size(self) -> tuple[int, int]:
        """Return the preferred (width, height) in cells."""