import math
import pathlib
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

from riemann_surface.math3d import TILT_LIMIT, ViewState
from riemann_surface.orbit import DRAG_SENSITIVITY, OrbitController, PointerEvent, PointerKind


def press(x, y):
    return PointerEvent(PointerKind.PRESS, x, y)


def move(x, y):
    return PointerEvent(PointerKind.MOVE, x, y)


def test_move_while_idle_is_noop():
    ctl = OrbitController()
    view = ViewState(0.1, 0.2)
    assert ctl.handle(move(50, 80), view) is view
    assert not ctl.dragging


def test_drag_updates_yaw_and_tilt():
    ctl = OrbitController()
    view = ViewState(0.0, 0.0)
    view = ctl.handle(press(100, 100), view)
    assert ctl.dragging
    view = ctl.handle(move(120, 90), view)
    assert math.isclose(view.rot_y, 20 * DRAG_SENSITIVITY)
    assert math.isclose(view.rot_x, -10 * DRAG_SENSITIVITY)
    # deltas are taken from the last recorded position, not the press
    view = ctl.handle(move(130, 90), view)
    assert math.isclose(view.rot_y, 30 * DRAG_SENSITIVITY)
    assert math.isclose(view.rot_x, -10 * DRAG_SENSITIVITY)


def test_release_and_leave_end_drag():
    for kind in (PointerKind.RELEASE, PointerKind.LEAVE):
        ctl = OrbitController()
        view = ctl.handle(press(0, 0), ViewState(0.0, 0.0))
        view = ctl.handle(PointerEvent(kind, 10, 10), view)
        assert not ctl.dragging
        after = ctl.handle(move(500, 500), view)
        assert after == view


def test_tilt_pinned_at_limit():
    ctl = OrbitController()
    view = ctl.handle(press(0, 0), ViewState(0.0, 0.0))
    y = 0
    for _ in range(20):
        y += 200
        view = ctl.handle(move(0, y), view)
        assert view.rot_x <= TILT_LIMIT
    assert view.rot_x == math.pi / 2 - 0.1
    for _ in range(40):
        y -= 200
        view = ctl.handle(move(0, y), view)
        assert view.rot_x >= -TILT_LIMIT
    assert view.rot_x == -(math.pi / 2 - 0.1)


def test_yaw_is_unbounded():
    ctl = OrbitController()
    view = ctl.handle(press(0, 0), ViewState(0.0, 0.0))
    view = ctl.handle(move(10000, 0), view)
    assert math.isclose(view.rot_y, 10000 * DRAG_SENSITIVITY)
    assert view.rot_x == 0.0


def test_new_press_resets_anchor():
    ctl = OrbitController()
    view = ctl.handle(press(0, 0), ViewState(0.0, 0.0))
    view = ctl.handle(PointerEvent(PointerKind.RELEASE, 40, 0), view)
    view = ctl.handle(press(300, 300), view)
    view = ctl.handle(move(300, 300), view)
    assert view == ViewState(0.0, 0.0)
