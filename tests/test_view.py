import pytest

from termviews.view import View, ViewPort
from termviews.widget import STYLE_DEFAULT


class Surface(View):
    def __init__(self, width=20, height=10):
        self.dims = (width, height)
        self.cells = {}

    def set_content(self, x, y, ch, comb, style):
        self.cells[x, y] = (ch, comb, style)

    def size(self):
        return self.dims

    def resize(self, x, y, width, height):
        self.dims = (width, height)

    def fill(self, ch, style):
        w, h = self.dims
        self.cells.update({(x, y): (ch, None, style) for x in range(w) for y in range(h)})

    def clear(self):
        return self.fill(" ", STYLE_DEFAULT)


def scrollable(width=10, height=5):
    parent = Surface()
    port = ViewPort(parent, 0, 0, width, height)
    port.set_content_size(100, 100, True)
    return parent, port


def put(port, x, y, ch="a"):
    port.set_content(x, y, ch, None, STYLE_DEFAULT)


def test_view_is_abstract():
    with pytest.raises(TypeError):
        View()


def test_set_content_offsets_into_parent():
    parent = Surface()
    port = ViewPort(parent, 2, 3, 5, 4)
    put(port, 0, 0)
    assert parent.cells == {(2, 3): ("a", None, STYLE_DEFAULT)}
    assert port.get_physical() == (2, 3, 6, 6)


@pytest.mark.parametrize("x, y", [(5, 0), (0, 4), (-1, 0)])
def test_set_content_clips_outside_window(x, y):
    parent = Surface()
    port = ViewPort(parent, 0, 0, 5, 4)
    put(port, x, y)
    assert parent.cells == {}


def test_fill_covers_window_only():
    parent = Surface()
    style = STYLE_DEFAULT.bold(True)
    ViewPort(parent, 1, 1, 3, 2).fill("#", style)
    assert set(parent.cells) == {(x, y) for x in (1, 2, 3) for y in (1, 2)}
    assert set(parent.cells.values()) == {("#", None, style)}


def test_clear_uses_space_default_style():
    parent = Surface(4, 4)
    ViewPort(parent, 0, 0, 2, 2).clear()
    assert len(parent.cells) == 4
    assert set(parent.cells.values()) == {(" ", None, STYLE_DEFAULT)}


def test_negative_size_extends_to_parent_edge():
    assert ViewPort(Surface(), 2, 3, -1, -1).size() == (18, 7)


def test_oversize_is_clipped_to_parent():
    assert ViewPort(Surface(), 0, 0, 100, 100).size() == (20, 10)


def test_without_parent_nothing_happens():
    port = ViewPort()
    port.resize(0, 0, 10, 10)
    put(port, 0, 0)
    assert port.size() == (0, 0)
    assert port.get_content_size() == (0, 0)


@pytest.mark.parametrize("locked, expected", [(False, (10, 12)), (True, (3, 3))])
def test_content_growth_depends_on_lock(locked, expected):
    port = ViewPort(Surface(), 0, 0, 5, 5)
    port.set_content_size(3, 3, locked)
    put(port, 10, 12)
    assert port.get_content_size() == expected


def test_scrolling_is_bounded_by_content():
    _, port = scrollable()
    port.scroll_down(5)
    assert port.get_visible()[1] == 5
    port.scroll_up(50)
    assert port.get_visible()[1] == 0
    port.scroll_down(1000)
    assert port.get_visible()[3] == 99
    port.scroll_right(1000)
    assert port.get_visible()[2] == 99
    port.scroll_left(1000)
    assert port.get_visible()[0] == 0


def test_scrolled_content_lands_at_window_origin():
    parent, port = scrollable()
    port.scroll_down(7)
    port.scroll_right(4)
    put(port, 4, 7, "q")
    assert parent.cells == {(0, 0): ("q", None, STYLE_DEFAULT)}


def test_make_visible_scrolls_minimally():
    _, port = scrollable()
    port.make_visible(30, 40)
    assert port.get_visible()[2:] == (30, 40)
    port.make_visible(2, 3)
    assert port.get_visible()[:2] == (2, 3)


def test_make_visible_already_visible_is_noop():
    _, port = scrollable()
    before = port.get_visible()
    port.make_visible(3, 2)
    assert port.get_visible() == before


def test_center_places_point_in_middle():
    _, port = scrollable(10, 6)
    port.center(50, 50)
    x1, y1, x2, y2 = port.get_visible()
    assert x1 <= 50 <= x2 and y1 <= 50 <= y2
    assert (x1, y1) == (45, 47)


def test_center_outside_content_is_ignored():
    _, port = scrollable(10, 6)
    before = port.get_visible()
    port.center(100, 5)
    port.center(-1, 5)
    assert port.get_visible() == before


def test_reset_returns_to_origin():
    _, port = scrollable()
    port.scroll_down(20)
    port.reset()
    assert port.get_content_size() == (0, 0)
    assert port.get_visible()[:2] == (0, 0)
    assert port.size() == (10, 5)


def test_set_size_and_set_view():
    port = ViewPort()
    port.set_size(4, 3)
    assert port.size() == (4, 3)
    parent = Surface(8, 8)
    port.set_view(parent)
    put(port, 1, 1, "b")
    assert parent.cells[(1, 1)][0] == "b"