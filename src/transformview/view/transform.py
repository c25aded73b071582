import math
from typing import Iterable, Protocol

import cairo
import numpy as np
from numpy.typing import ArrayLike, NDArray

from transformview.view import logger
from transformview.view.rect import Rect

## Vertical drag distance, in pixels, that rotates the view by pi radians.
ROTATION_DRAG_PIXELS = 500.0

## Wheel ticks are divided by this before being added to the scale.
## The negative sign makes scrolling "up" zoom in.
WHEEL_TICK_DIVISOR = -10.0

DEFAULT_ROTATE_KEYS = ("Control_L", "Control_R")


class Surface(Protocol):
    """What the controller needs from the widget it is attached to.

    Every `Gtk.Widget` already provides these.
    """
    def get_width(self) -> int: ...
    def get_height(self) -> int: ...
    def queue_draw(self) -> None: ...


class TransformController:
    """Pan, zoom and rotate state for a drawable surface.

    The transform is kept as four scalars (translation, uniform scale and
    rotation) plus a focus rectangle. `compose` rebuilds the affine transform
    from those on every redraw: translate, then scale, then rotate about the
    center of the focus.
    """

    def __init__(self, surface:Surface, rotate_keys:Iterable[str] = DEFAULT_ROTATE_KEYS):
        self.surface = surface
        self.rotate_keys = frozenset(rotate_keys)

        self.translate_x = 0.0
        self.translate_y = 0.0
        self.scale = 1.0
        self.rotation = 0.0  # radians, never wrapped
        self.focus = Rect()

        # Pointer tracking
        self.prev_pointer_x = 0.0
        self.prev_pointer_y = 0.0
        self.is_rotating = False

    def get_focus(self) -> Rect:
        return self.focus

    def set_focus(self, focus:Rect):
        self.focus = focus

    def drag(self, dx:float, dy:float):
        """Move the view by (dx, dy) surface pixels."""
        self.translate_x += dx
        self.translate_y += dy
        self.surface.queue_draw()

    def rotate(self, angle:float):
        """Rotate the view by `angle` radians about the focus center."""
        self.rotation += angle
        self.surface.queue_draw()

    def zoom(self, factor:float, target_x:float, target_y:float):
        """Multiply the scale by `factor`, keeping (target_x, target_y) fixed.

        The target is in surface coordinates. A factor that would flip the
        sign of the scale, or collapse it to zero, is ignored.

        No redraw is requested, so several zooms can be chained before the
        caller repaints.
        """
        if self.scale * factor <= 0:
            logger.debug("Ignoring zoom factor=%s at scale=%s", factor, self.scale)
            return

        prev_scale_x = self.scale
        prev_scale_y = self.scale

        self.scale *= factor

        quotient_x = self.scale / prev_scale_x
        quotient_y = self.scale / prev_scale_y

        self.translate_x = quotient_x * self.translate_x + (1 - quotient_x) * target_x
        self.translate_y = quotient_y * self.translate_y + (1 - quotient_y) * target_y

    def center(self):
        """Place the focus center on the surface center.

        Scale and rotation are preserved.
        """
        current_scale = self.scale
        width = self.surface.get_width()
        height = self.surface.get_height()

        # Back to unit scale so the translation can be set directly
        self.zoom(1.0 / current_scale, 0, 0)

        self.translate_x = -self.focus.x + (width - self.focus.width) / 2.0
        self.translate_y = -self.focus.y + (height - self.focus.height) / 2.0

        self.zoom(current_scale, width / 2.0, height / 2.0)
        logger.debug("Centered focus %s in %sx%s", self.focus, width, height)

        self.surface.queue_draw()

    # Gesture handlers.
    # Coordinates are local to the surface.

    def on_pointer_down(self, x:float, y:float):
        self.prev_pointer_x = x
        self.prev_pointer_y = y

    def on_pointer_drag(self, x:float, y:float):
        dx = x - self.prev_pointer_x
        dy = y - self.prev_pointer_y

        if not self.is_rotating:
            self.drag(dx, dy)
        else:
            self.rotate(dy * math.pi / ROTATION_DRAG_PIXELS)

        self.prev_pointer_x = x
        self.prev_pointer_y = y

    def on_wheel(self, ticks:float, x:float, y:float):
        self.zoom((self.scale + ticks / WHEEL_TICK_DIVISOR) / self.scale, x, y)
        self.surface.queue_draw()

    def on_key_down(self, key:str|None):
        if key in self.rotate_keys:
            self.is_rotating = True

    def on_key_up(self, key:str|None):
        if key in self.rotate_keys:
            self.is_rotating = False

    # Composition

    def get_matrix(self) -> cairo.Matrix:
        cx, cy = self.focus.center
        matrix = cairo.Matrix()
        matrix.translate(self.translate_x, self.translate_y)
        matrix.scale(self.scale, self.scale)
        matrix.translate(cx, cy)
        matrix.rotate(self.rotation)
        matrix.translate(-cx, -cy)
        return matrix

    def get_inverse_matrix(self) -> cairo.Matrix:
        matrix = self.get_matrix()
        matrix.invert()
        return matrix

    def compose(self, ctx:cairo.Context):
        """Apply the view transform to `ctx`.

        Anything drawn on `ctx` afterwards is in content coordinates.
        Wrap the call in `ctx.save()`/`ctx.restore()` to draw screen-space
        overlays afterwards.
        """
        ctx.transform(self.get_matrix())

    def world_to_screen(self, x:float, y:float) -> tuple[float, float]:
        return self.get_matrix().transform_point(x, y)

    def screen_to_world(self, x:float, y:float) -> tuple[float, float]:
        return self.get_inverse_matrix().transform_point(x, y)

    def to_array(self) -> NDArray[np.float64]:
        """The view transform as a 3x3 homogeneous matrix."""
        m = self.get_matrix()
        return np.array([
            [m.xx, m.xy, m.x0],
            [m.yx, m.yy, m.y0],
            [0.0, 0.0, 1.0],
        ], dtype=np.float64)

    def transform_points(self, points:ArrayLike) -> NDArray[np.float64]:
        """Map an (N, 2) array of content points to surface coordinates."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        m = self.to_array()
        return pts @ m[:2, :2].T + m[:2, 2]
