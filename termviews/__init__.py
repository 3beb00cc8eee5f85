"""Views, widgets, layouts and a raw-mode terminal device for text-mode UIs."""

__version__ = "0.1.0"

__all__ = [
    "boxlayout",
    "cellarea",
    "constants",
    "panel",
    "spacer",
    "sstext",
    "sstextbar",
    "text",
    "textarea",
    "textbar",
    "tty",
    "view",
    "widget",
]