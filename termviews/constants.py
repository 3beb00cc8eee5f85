"""Alignment and orientation values shared by widgets and layouts."""

from __future__ import annotations

import enum


class Alignment(enum.IntFlag):
    """Horizontal and vertical alignment; flags may be combined."""

    H_ALIGN_LEFT = 1 << 0
    H_ALIGN_CENTER = 1 << 1
    H_ALIGN_RIGHT = 1 << 2
    V_ALIGN_TOP = 1 << 3
    V_ALIGN_CENTER = 1 << 4
    V_ALIGN_BOTTOM = 1 << 5

    BEGIN = H_ALIGN_LEFT | V_ALIGN_TOP
    END = H_ALIGN_RIGHT | V_ALIGN_BOTTOM
    MIDDLE = H_ALIGN_CENTER | V_ALIGN_CENTER


class Orientation(enum.IntEnum):
    """Direction in which a layout arranges its children."""

    HORIZONTAL = 0
    VERTICAL = 1