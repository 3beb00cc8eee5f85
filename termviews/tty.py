"""A terminal device opened by path, switched to raw mode while running."""

from __future__ import annotations

import fcntl
import os
import signal
import struct
import termios
import threading
import tty
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class WindowSize:
    """Size of a terminal window in cells and pixels."""

    width: int
    height: int
    pixel_width: int = 0
    pixel_height: int = 0


def _env_int(name: str) -> int:
    try:
        return int(os.environ.get(name, ""))
    except ValueError:
        return 0


def _set_buf_params(fd: int, vmin: int, vtime: int) -> None:
    attrs = termios.tcgetattr(fd)
    attrs[6][termios.VMIN] = vmin
    attrs[6][termios.VTIME] = vtime
    termios.tcsetattr(fd, termios.TCSANOW, attrs)


class DevTty:
    """A terminal device such as /dev/tty.

    The device is opened twice: the first handle is kept for terminal
    control, and a fresh one is opened for I/O on every start.
    """

    def __init__(self, dev: str = "/dev/tty") -> None:
        self._dev = dev
        self._lock = threading.RLock()
        self._callback: Callable[[], None] | None = None
        self._io_fd: int | None = None
        self._deadline = False
        self._previous_handler: Any = None
        self._fd: int | None = os.open(dev, os.O_RDWR)
        if not os.isatty(self._fd):
            self._close_control()
            raise OSError(f"{dev}: not a terminal")
        try:
            self._saved = termios.tcgetattr(self._fd)
        except termios.error as exc:
            self._close_control()
            raise OSError(f"failed to get state: {exc}") from exc

    def _close_control(self) -> None:
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    def _require_io(self) -> int:
        if self._io_fd is None:
            raise RuntimeError("terminal is not started")
        return self._io_fd

    def read(self, size: int) -> bytes:
        """Read up to size bytes; raise TimeoutError once drained or stopped."""
        fd = self._require_io()
        if self._deadline:
            raise TimeoutError("read deadline exceeded")
        return os.read(fd, size)

    def write(self, data: bytes) -> int:
        """Write bytes and return how many were written."""
        return os.write(self._require_io(), data)

    def close(self) -> None:
        """Close the device handles."""
        if self._io_fd is not None:
            os.close(self._io_fd)
            self._io_fd = None
        self._close_control()

    def __enter__(self) -> DevTty:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _on_winch(self, signum: int, frame: Any) -> None:
        with self._lock:
            callback = self._callback
        if callback is not None:
            callback()

    def start(self) -> None:
        """Open the device for I/O, switch to raw mode, watch for resizes."""
        with self._lock:
            if self._io_fd is not None:
                os.close(self._io_fd)
            self._io_fd = os.open(self._dev, os.O_RDWR)
            if self._fd is None or not os.isatty(self._fd):
                raise OSError("device is not a terminal")
            self._deadline = False
            self._saved = termios.tcgetattr(self._fd)
            tty.setraw(self._fd, termios.TCSANOW)
            self._previous_handler = signal.signal(signal.SIGWINCH, self._on_winch)

    def drain(self) -> None:
        """Make pending and future reads return at once."""
        self._require_io()
        self._deadline = True
        _set_buf_params(self._fd, 0, 0)

    def stop(self) -> None:
        """Restore the saved terminal mode and stop watching for resizes."""
        with self._lock:
            self._require_io()
            termios.tcsetattr(self._fd, termios.TCSANOW, self._saved)
            self._deadline = True
            handler = self._previous_handler
            signal.signal(
                signal.SIGWINCH, handler if handler is not None else signal.SIG_DFL
            )
            self._previous_handler = None
        # A new handle is opened if the terminal is started again.
        os.close(self._io_fd)
        self._io_fd = None

    def window_size(self) -> WindowSize:
        """Return the window size, using COLUMNS/LINES or 80x25 for zeros."""
        packed = fcntl.ioctl(self._fd, termios.TIOCGWINSZ, struct.pack("HHHH", 0, 0, 0, 0))
        rows, cols, xpixel, ypixel = struct.unpack("HHHH", packed)
        width = cols or _env_int("COLUMNS") or 80
        height = rows or _env_int("LINES") or 25
        return WindowSize(width, height, xpixel, ypixel)

    def notify_resize(self, callback: Callable[[], None] | None) -> None:
        """Set the function called when the window is resized."""
        with self._lock:
            self._callback = callback


def open_dev_tty() -> DevTty:
    """Open the controlling terminal, /dev/tty."""
    return DevTty("/dev/tty")