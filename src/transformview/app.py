import math

import cairo
import numpy as np

from transformview.view import add_file_handler, logger
from transformview.view.rect import Rect
from transformview.ui.canvas import TransformCanvas
from transformview.ui.mainwindow import App

DEMO_FOCUS = Rect(0, 0, 400, 300)
DEMO_GRID_SPACING = 50


def star_points(cx:float, cy:float, r_outer:float, r_inner:float, n:int = 5) -> np.ndarray:
    angles = np.arange(2 * n) * math.pi / n - math.pi / 2
    radii = np.where(np.arange(2 * n) % 2 == 0, r_outer, r_inner)
    return np.column_stack((cx + radii * np.cos(angles), cy + radii * np.sin(angles)))


def draw_demo(canvas:TransformCanvas, cr:cairo.Context):
    focus = canvas.get_focus()
    line_width = 1.0 / canvas.controller.scale

    cr.set_source_rgb(0.95, 0.95, 0.9)
    cr.rectangle(focus.x, focus.y, focus.width, focus.height)
    cr.fill()

    cr.set_line_width(line_width)
    cr.set_source_rgb(0.8, 0.8, 0.85)
    for x in np.arange(focus.x, focus.x + focus.width + 1, DEMO_GRID_SPACING):
        cr.move_to(x, focus.y)
        cr.line_to(x, focus.y + focus.height)
    for y in np.arange(focus.y, focus.y + focus.height + 1, DEMO_GRID_SPACING):
        cr.move_to(focus.x, y)
        cr.line_to(focus.x + focus.width, y)
    cr.stroke()

    cx, cy = focus.center
    r = min(focus.width, focus.height) * 0.35
    pts = star_points(cx, cy, r, r * 0.45)
    cr.move_to(*pts[0])
    for x, y in pts[1:]:
        cr.line_to(x, y)
    cr.close_path()
    cr.set_source_rgb(0.9, 0.6, 0.1)
    cr.fill_preserve()
    cr.set_source_rgb(0.3, 0.2, 0.05)
    cr.set_line_width(2 * line_width)
    cr.stroke()

    # Marks the content's "up" so rotation is visible
    cr.set_source_rgb(0.2, 0.4, 0.8)
    cr.arc(focus.x + 12, focus.y + 12, 6, 0, 2 * math.pi)
    cr.fill()


def on_activate(app:App):
    canvas = app.canvas
    canvas.set_focus(DEMO_FOCUS)
    canvas.set_content_func(draw_demo)

    def on_first_resize(widget, width, height):
        widget.center()
        widget.disconnect(handler_id)

    handler_id = canvas.connect("resize", on_first_resize)
    logger.info("Started with focus %s", DEMO_FOCUS)


def run():
    add_file_handler()
    app = App()
    app.connect("activate", on_activate)
    app.run(None)

if __name__ == "__main__":
    run()
