"""State mutators of TransformController: drag, rotate, zoom, center, focus."""

from __future__ import annotations

import math

import pytest

from transformview.view.rect import Rect
from transformview.view.transform import TransformController


def _state(c: TransformController) -> tuple[float, float, float, float]:
    return (c.translate_x, c.translate_y, c.scale, c.rotation)


def test_initial_state(controller: TransformController) -> None:
    assert _state(controller) == (0.0, 0.0, 1.0, 0.0)
    assert controller.get_focus() == Rect()
    assert controller.is_rotating is False


def test_focus_round_trip(controller: TransformController) -> None:
    focus = Rect(1, 2, 3, 4)
    controller.set_focus(focus)
    assert controller.get_focus() is focus


# --- drag ---------------------------------------------------------------


def test_drag_accumulates_and_requests_redraw(controller, surface) -> None:
    controller.drag(10, -5)
    assert (controller.translate_x, controller.translate_y) == (10, -5)
    assert surface.draw_requests == 1


@pytest.mark.parametrize(
    "d1, d2",
    [((3, 4), (-1, 7)), ((0.5, -2.25), (100, 0)), ((-20, -20), (20, 20))],
)
def test_drag_additivity(surface, d1, d2) -> None:
    a = TransformController(surface)
    a.drag(*d1)
    a.drag(*d2)

    b = TransformController(surface)
    b.drag(d1[0] + d2[0], d1[1] + d2[1])

    assert a.translate_x == pytest.approx(b.translate_x)
    assert a.translate_y == pytest.approx(b.translate_y)


# --- rotate -------------------------------------------------------------


def test_rotate_additivity(surface) -> None:
    a = TransformController(surface)
    a.rotate(0.3)
    a.rotate(-1.1)

    b = TransformController(surface)
    b.rotate(0.3 - 1.1)

    assert a.rotation == pytest.approx(b.rotation)


def test_rotation_is_not_wrapped(controller, surface) -> None:
    for _ in range(5):
        controller.rotate(math.pi)
    assert controller.rotation == pytest.approx(5 * math.pi)
    assert surface.draw_requests == 5


# --- zoom ---------------------------------------------------------------


def test_zoom_toward_point(controller) -> None:
    controller.zoom(2, 50, 50)
    assert controller.scale == 2
    assert (controller.translate_x, controller.translate_y) == (-50, -50)


def test_zoom_does_not_request_redraw(controller, surface) -> None:
    controller.zoom(2, 10, 10)
    assert surface.draw_requests == 0


@pytest.mark.parametrize("x, y", [(0, 0), (50, -20), (1e3, 7.5)])
def test_zoom_sign_guard(controller, x, y) -> None:
    controller.scale = 2.0
    controller.translate_x, controller.translate_y = 12.0, -3.0
    controller.zoom(-1.0, x, y)
    assert _state(controller) == (12.0, -3.0, 2.0, 0.0)


def test_zoom_zero_factor_is_ignored(controller) -> None:
    controller.drag(4, 4)
    controller.zoom(0.0, 100, 100)
    assert _state(controller) == (4, 4, 1.0, 0.0)


@pytest.mark.parametrize("factor", [0.1, 0.5, 1.0, 1.5, 3.0, 10.0])
@pytest.mark.parametrize("tx, ty", [(0, 0), (50, 50), (-30, 210.5)])
def test_zoom_keeps_anchor_fixed(controller, factor, tx, ty) -> None:
    controller.set_focus(Rect(10, 20, 80, 40))
    controller.drag(17, -9)
    controller.zoom(1.7, 3, 4)
    controller.rotate(0.6)

    world = controller.screen_to_world(tx, ty)
    controller.zoom(factor, tx, ty)
    after = controller.world_to_screen(*world)

    assert after == pytest.approx((tx, ty), abs=1e-9)


@pytest.mark.parametrize("f", [0.25, 2.0, 7.3])
@pytest.mark.parametrize("x, y", [(0, 0), (123.0, -45.0)])
def test_zoom_round_trip(controller, f, x, y) -> None:
    controller.drag(33, 44)
    controller.zoom(1.3, 5, 5)
    before = _state(controller)

    controller.zoom(f, x, y)
    controller.zoom(1 / f, x, y)

    assert _state(controller) == pytest.approx(before)


# --- center -------------------------------------------------------------


def test_center_end_to_end(focused, surface) -> None:
    focused.center()
    assert focused.translate_x == pytest.approx(150)
    assert focused.translate_y == pytest.approx(100)
    assert focused.scale == pytest.approx(1.0)
    assert surface.draw_requests == 1


def test_center_is_idempotent(focused) -> None:
    focused.drag(-70, 20)
    focused.zoom(2.5, 30, 40)
    focused.rotate(1.2)

    focused.center()
    first = (focused.translate_x, focused.translate_y)
    focused.center()
    second = (focused.translate_x, focused.translate_y)

    assert second == pytest.approx(first)


def test_center_keeps_scale_and_rotation(focused, surface) -> None:
    focused.zoom(2, 0, 0)
    focused.rotate(0.75)
    focused.center()

    assert focused.scale == pytest.approx(2.0)
    assert focused.rotation == pytest.approx(0.75)
    # the focus center lands on the surface center
    assert focused.world_to_screen(50, 50) == pytest.approx(
        (surface.width / 2, surface.height / 2)
    )
    assert (focused.translate_x, focused.translate_y) == pytest.approx((100, 50))


def test_center_with_zero_sized_focus(controller, surface) -> None:
    controller.set_focus(Rect(20, 30, 0, 0))
    controller.center()
    assert controller.world_to_screen(20, 30) == pytest.approx((200, 150))
