import pytest

from termviews.cellarea import CellModel, CellView
from termviews.view import View
from termviews.widget import STYLE_DEFAULT, EventWidgetContent, Key, KeyEvent


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
                self.set_content(x, y, ch, None, style)

    def clear(self):
        self.fill(" ", STYLE_DEFAULT)


def _char(x, y):
    return chr(ord("a") + (x + 2 * y) % 26)


class _Grid(CellModel):
    def __init__(self, width, height, enabled=False, shown=True):
        self.width = width
        self.height = height
        self.x = 0
        self.y = 0
        self.enabled = enabled
        self.shown = shown

    def get_cell(self, x, y):
        if 0 <= x < self.width and 0 <= y < self.height:
            return _char(x, y), STYLE_DEFAULT, None, 1
        return "", STYLE_DEFAULT, None, 1

    def get_bounds(self):
        return self.width, self.height

    def set_cursor(self, x, y):
        self.x = min(max(x, 0), self.width - 1)
        self.y = min(max(y, 0), self.height - 1)

    def get_cursor(self):
        return self.x, self.y, self.enabled, self.shown

    def move_cursor(self, offx, offy):
        self.set_cursor(self.x + offx, self.y + offy)


class _Recorder:
    def __init__(self):
        self.events = []

    def handle_event(self, event):
        self.events.append(event)
        return True


def _make(enabled=False, shown=True):
    screen = _Screen(10, 4)
    model = _Grid(20, 10, enabled=enabled, shown=shown)
    view = CellView()
    view.set_model(model)
    view.set_view(screen)
    return view, model, screen


def test_draw_shows_top_left_of_model():
    view, _, screen = _make()
    view.draw()
    for y in range(4):
        for x in range(10):
            assert screen.cells[(x, y)][0] == _char(x, y)


def test_enabled_cursor_is_drawn_reversed():
    view, _, screen = _make(enabled=True)
    view.draw()
    assert screen.cells[(0, 0)][1] == STYLE_DEFAULT.reverse(True)
    assert screen.cells[(1, 0)][1] == STYLE_DEFAULT


def test_hidden_cursor_is_not_reversed():
    view, _, screen = _make(enabled=True, shown=False)
    view.draw()
    assert screen.cells[(0, 0)][1] == STYLE_DEFAULT


def test_moving_cursor_right_pans_view():
    view, model, screen = _make(enabled=True)
    for _ in range(12):
        assert view.handle_event(KeyEvent(Key.RIGHT))
    assert model.get_cursor()[:2] == (12, 0)
    view.draw()
    assert screen.cells[(9, 0)][0] == _char(12, 0)
    assert screen.cells[(9, 0)][1] == STYLE_DEFAULT.reverse(True)


def test_down_without_cursor_scrolls():
    view, model, screen = _make()
    assert view.handle_event(KeyEvent(Key.DOWN))
    view.draw()
    assert screen.cells[(0, 0)][0] == _char(0, 1)
    assert model.get_cursor()[:2] == (0, 0)


def test_end_without_cursor_scrolls_to_bottom_right():
    view, _, screen = _make()
    assert view.handle_event(KeyEvent(Key.END))
    view.draw()
    assert screen.cells[(9, 3)][0] == _char(19, 9)
    assert view.handle_event(KeyEvent(Key.HOME))
    view.draw()
    assert screen.cells[(0, 0)][0] == _char(0, 0)


@pytest.mark.parametrize(
    "key, alias",
    [
        (Key.UP, Key.CTRL_P),
        (Key.DOWN, Key.CTRL_N),
        (Key.LEFT, Key.CTRL_B),
        (Key.RIGHT, Key.CTRL_F),
    ],
)
def test_control_aliases_move_like_arrows(key, alias):
    view_a, model_a, _ = _make(enabled=True)
    view_b, model_b, _ = _make(enabled=True)
    model_a.set_cursor(5, 5)
    model_b.set_cursor(5, 5)
    view_a.handle_event(KeyEvent(key))
    view_b.handle_event(KeyEvent(alias))
    assert model_a.get_cursor() == model_b.get_cursor()
    assert model_a.get_cursor()[:2] != (5, 5)


def test_home_and_end_move_cursor():
    view, model, _ = _make(enabled=True)
    view.handle_event(KeyEvent(Key.END))
    assert model.get_cursor()[:2] == (model.width - 1, model.height - 1)
    view.handle_event(KeyEvent(Key.HOME))
    assert model.get_cursor()[:2] == (0, 0)


def test_page_down_moves_cursor_by_view_height():
    view, model, screen = _make(enabled=True)
    view.handle_event(KeyEvent(Key.PGDN))
    assert model.get_cursor()[:2] == (0, screen.height)
    view.handle_event(KeyEvent(Key.PGUP))
    assert model.get_cursor()[:2] == (0, 0)


def test_unhandled_events():
    view, _, _ = _make()
    assert view.handle_event(KeyEvent(Key.ENTER)) is False
    assert CellView().handle_event(KeyEvent(Key.UP)) is False


def test_size_has_two_by_two_minimum():
    small = CellView()
    small.set_model(_Grid(1, 1))
    assert small.size() == (2, 2)
    large = CellView()
    large.set_model(_Grid(20, 10))
    assert large.size() == (20, 10)


def test_set_model_posts_content_event():
    view = CellView()
    recorder = _Recorder()
    view.watch(recorder)
    model = _Grid(3, 3)
    view.set_model(model)
    assert view.model is model
    assert len(recorder.events) == 1
    assert isinstance(recorder.events[0], EventWidgetContent)
    assert recorder.events[0].widget is view


def test_set_cursor_x_and_y():
    view, model, _ = _make(enabled=True)
    view.set_cursor(4, 6)
    view.set_cursor_x(7)
    assert model.get_cursor()[:2] == (7, 6)
    view.set_cursor_y(2)
    assert model.get_cursor()[:2] == (7, 2)


def test_style_fills_empty_cells():
    screen = _Screen(10, 4)
    view = CellView()
    style = STYLE_DEFAULT.bold(True)
    view.set_style(style)
    view.set_model(_Grid(3, 2))
    view.set_view(screen)
    view.draw()
    assert screen.cells[(5, 3)] == (" ", style)
    assert screen.cells[(1, 1)][0] == _char(1, 1)