from termviews.constants import Orientation
from termviews.panel import Panel
from termviews.text import Text
from termviews.view import View
from termviews.widget import EventWidgetContent


class _Screen(View):
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.cells = {}

    def set_content(self, x, y, ch, comb, style):
        if 0 <= x < self.width and 0 <= y < self.height:
            self.cells[(x, y)] = (ch, style)

    def size(self):
        return self.width, self.height

    def resize(self, x, y, width, height):
        pass

    def fill(self, ch, style):
        for y in range(self.height):
            for x in range(self.width):
                self.cells[(x, y)] = (ch, style)

    def clear(self):
        self.cells.clear()

    def row(self, y):
        return "".join(self.cells.get((x, y), (" ", None))[0] for x in range(self.width))


def _text(s):
    t = Text()
    t.set_text(s)
    return t


def test_widgets_are_ordered_regardless_of_setting_order():
    panel = Panel()
    title, menu, content, status = (_text(s) for s in ("T", "M", "C", "S"))
    panel.set_status(status)
    panel.set_content(content)
    panel.set_menu(menu)
    panel.set_title(title)
    assert panel.widgets() == [title, menu, content, status]


def test_replacing_title_removes_old_one():
    panel = Panel()
    old, new, content = _text("old"), _text("new"), _text("body")
    panel.set_title(old)
    panel.set_content(content)
    panel.set_title(new)
    assert panel.widgets() == [new, content]


def test_replacing_content_keeps_position():
    panel = Panel()
    title, first, second, status = (_text(s) for s in ("T", "a", "b", "S"))
    panel.set_title(title)
    panel.set_content(first)
    panel.set_status(status)
    panel.set_content(second)
    assert panel.widgets() == [title, second, status]


def test_draw_places_title_top_and_status_bottom():
    panel = Panel()
    panel.set_title(_text("Title"))
    panel.set_content(_text("Body"))
    panel.set_status(_text("Status"))
    screen = _Screen(10, 5)
    panel.set_view(screen)
    panel.draw()
    assert screen.row(0).startswith("Title")
    assert screen.row(1).startswith("Body")
    assert screen.row(screen.height - 1).startswith("Status")
    assert screen.row(2).strip() == ""


def test_draw_switches_to_vertical_layout():
    panel = Panel()
    panel.set_title(_text("ab"))
    panel.set_content(_text("cd"))
    panel.set_view(_Screen(10, 4))
    panel.draw()
    width, height = panel.size()
    assert height == 2
    assert width == 2


def test_child_content_change_is_consumed():
    panel = Panel()
    child = _text("x")
    panel.set_content(child)
    assert panel.handle_event(EventWidgetContent(child)) is True
    assert Orientation.VERTICAL != Orientation.HORIZONTAL