from typing import Callable

import cairo

from transformview.ui.gestures import GtkGestureAdapter
from transformview.ui.gtk4 import Gtk, Graphene
from transformview.ui.panel import create_state_panel
from transformview.view.rect import Rect
from transformview.view.transform import TransformController

PANEL_PADDING = 8
BG_COLOR = (0.12, 0.12, 0.14)

ContentFunc = Callable[["TransformCanvas", cairo.Context], None]


class TransformCanvas(Gtk.DrawingArea):
    """A drawing area whose content can be panned, zoomed and rotated.

    Content is supplied with `set_content_func`; it is drawn in content
    coordinates after the view transform has been composed onto the context.
    Drag to pan, scroll to zoom, hold Ctrl and drag vertically to rotate.
    """

    def __init__(self):
        super().__init__()
        self.controller = TransformController(self)
        self.gestures = GtkGestureAdapter(self, self.controller)
        self.content_func:ContentFunc|None = None
        self.show_state = True

    def set_content_func(self, func:ContentFunc|None):
        self.content_func = func
        self.queue_draw()

    # Programmatic access to the view

    def get_focus(self) -> Rect:
        return self.controller.get_focus()

    def set_focus(self, focus:Rect):
        self.controller.set_focus(focus)

    def drag(self, dx:float, dy:float):
        self.controller.drag(dx, dy)

    def rotate(self, angle:float):
        self.controller.rotate(angle)

    def zoom(self, factor:float, target_x:float, target_y:float):
        """Zoom about (target_x, target_y) and queue a redraw.

        Unlike `TransformController.zoom`, this always repaints.
        """
        self.controller.zoom(factor, target_x, target_y)
        self.queue_draw()

    def center(self):
        self.controller.center()

    def _draw_background(self, cr:cairo.Context):
        cr.set_source_rgb(*BG_COLOR)
        cr.paint()

    def _draw_state(self, cr:cairo.Context):
        sfc = create_state_panel(self.controller)
        cr.set_source_surface(sfc, PANEL_PADDING, PANEL_PADDING)
        cr.paint()

    def do_snapshot(self, snapshot:Gtk.Snapshot):
        width = self.get_width()
        height = self.get_height()

        rect = Graphene.Rect()
        rect.init(0, 0, width, height)
        cr = snapshot.append_cairo(rect)

        self._draw_background(cr)

        if self.content_func is not None:
            cr.save()
            self.controller.compose(cr)
            self.content_func(self, cr)
            cr.restore()

        if self.show_state:
            self._draw_state(cr)
