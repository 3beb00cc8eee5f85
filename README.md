# termviews

This package provides the parts of a text-mode user interface: drawing
surfaces, scrollable view ports, text widgets, and layouts that size their
children for you.

## Installation

```
pip install termviews
```

To run the test suite:

```
pip install "termviews[test]"
pytest
```

## Concepts

- **View** (`termviews.view.View`): an abstract drawing surface. A view
  implements these methods:
  - `size()`
  - `set_content(x, y, ch, comb, style)`
  - `fill(ch, style)`
  - `clear()`
  - `resize(x, y, width, height)`
- **ViewPort** (`termviews.view.ViewPort`): a view that clips a larger
  logical content area onto part of a parent view.
  - Scrolling: `scroll_up`, `scroll_down`, `scroll_left` and `scroll_right`.
  - Positioning: `center` centers a point, and `make_visible` scrolls just
    far enough to show a point.
  - Content size: `set_content_size` sets it, and `get_content_size` reads
    it. When the size is not locked, drawing outside it makes it grow.
  - Visible area: `get_visible` returns it in content coordinates, and
    `get_physical` returns it in parent coordinates.
- **Widget** (`termviews.widget.Widget`): something that draws itself into
  a view.
  - It implements `draw()`, `resize()`, `handle_event(event)`,
    `set_view(view)` and `size()`.
  - Widgets inherit `WidgetWatchers`. Through it, other objects can
    `watch`/`unwatch` a widget and receive `EventWidgetContent`,
    `EventWidgetResize` and `EventWidgetMove` events.
- **Style** (`termviews.widget.Style`): an immutable style made of a
  foreground, a background and a set of attributes. `reverse()`, `bold()`
  and `underline()` each return a modified copy. `STYLE_DEFAULT` is the
  empty style.
- **Events**:
  - `KeyEvent(key, rune="", modifiers=0)` carries a `Key` value.
  - `CellView` reacts to the arrow, page, Home/End and Ctrl-B/F/N/P keys.

## Widgets

- `text.Text`: a block of text. It can span several lines and is aligned
  with `constants.Alignment` flags. Each character has its own style, set
  with `set_style_at` and read with `style_at`. Display widths come from
  `wcwidth`. Combining characters share the cell of the character before
  them.
- `sstext.SimpleStyledText`: text with inline markup, set through
  `set_markup`:
  - `%B` starts bold.
  - `%U` starts underline.
  - `%S` starts reverse video.
  - `%N` returns to the normal style.
  - `%%` gives a literal percent sign.

  `register_style` adds styles for other letters. The `markup` property
  returns the string exactly as it was set.
- `textbar.TextBar` and `sstextbar.SimpleStyledTextBar`: a single line with
  a left-aligned part, a centered part and a right-aligned part.
- `spacer.Spacer`: empty space that takes up room in a layout.
- `boxlayout.BoxLayout`: places its children in a horizontal or vertical
  line (`constants.Orientation`). Spare room is shared out in proportion to
  each child's fill factor.
- `panel.Panel`: a vertical layout with title, menu, content and status
  areas. Only the content area grows.
- `cellarea.CellView` shows a `CellModel` in an area that scrolls in two
  dimensions. It can show a soft cursor.
- `textarea.TextArea` is a `CellView` over plain lines of text. It uses
  `set_lines`, `set_content`, `enable_cursor` and `hide_cursor`.

## Example

```python
from termviews.boxlayout import BoxLayout
from termviews.constants import Alignment, Orientation
from termviews.text import Text
from termviews.view import View
from termviews.widget import STYLE_DEFAULT


class Grid(View):
    """An in-memory surface that records the characters drawn on it."""

    def __init__(self, width, height):
        self.width, self.height = width, height
        self.cells = [[" "] * width for _ in range(height)]

    def set_content(self, x, y, ch, comb, style):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[y][x] = ch

    def size(self):
        return self.width, self.height

    def resize(self, x, y, width, height):
        pass

    def fill(self, ch, style):
        for row in self.cells:
            row[:] = [ch] * self.width

    def clear(self):
        self.fill(" ", STYLE_DEFAULT)


left = Text()
left.set_text("Left")
right = Text()
right.set_text("Right")
right.set_alignment(Alignment.END)

box = BoxLayout(Orientation.HORIZONTAL)
box.add_widget(left, 0.0)
box.add_widget(right, 1.0)

grid = Grid(20, 1)
box.set_view(grid)
box.draw()
print("".join(grid.cells[0]))  # "Left           Right"
```

## Terminal device

`termviews.tty` works with POSIX terminals only.

- `open_dev_tty()` opens the controlling terminal. `DevTty(path)` opens any
  other terminal device. Both raise `OSError` if the device is not a
  terminal.
- `start()` puts the device into raw mode and installs a `SIGWINCH`
  handler.
- `stop()` restores the saved settings.
- `read`, `write` and `close` do I/O on the device. After `drain()` or
  `stop()`, `read` raises `TimeoutError`.
- `window_size()` returns a `WindowSize` in cells and pixels. If the device
  reports zeros, it falls back to `COLUMNS`/`LINES`, then to 80×25.
- `notify_resize(callback)` sets a function that is called whenever the
  window changes size.

## What this package does not do

termviews has no screen back end and no application event loop:

- Widgets draw only into a `View` that you supply.
- Nothing converts styles into terminal escape sequences.
- Nothing decodes key presses from the terminal into `KeyEvent`s.

It also provides no command-line program.