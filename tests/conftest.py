"""Shared fixtures: a stand-in drawing surface and a controller bound to it."""

from __future__ import annotations

import pytest

from transformview.view.rect import Rect
from transformview.view.transform import TransformController


class FakeSurface:
    """Fixed-size surface that counts redraw requests."""

    def __init__(self, width: int = 400, height: int = 300) -> None:
        self.width = width
        self.height = height
        self.draw_requests = 0

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    def queue_draw(self) -> None:
        self.draw_requests += 1


@pytest.fixture()
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture()
def controller(surface: FakeSurface) -> TransformController:
    return TransformController(surface)


@pytest.fixture()
def focused(controller: TransformController) -> TransformController:
    controller.set_focus(Rect(0, 0, 100, 100))
    return controller
