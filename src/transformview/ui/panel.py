import math

import cairo

from transformview.view.transform import TransformController

BG_COLOR = (0.1, 0.1, 0.1)
FG_COLOR = (0.9, 0.9, 0.9)
FONT_FAMILY = "Liberation Mono"

TITLE_FONT_SIZE = 11
CONTENT_FONT_SIZE = 11

X_PAD = 4
Y_PAD = 4
LINE_HEIGHT = CONTENT_FONT_SIZE


def _record_text(lines:list[str], font_size:float, weight, color) -> cairo.RecordingSurface:
    rec = cairo.RecordingSurface(cairo.Content.COLOR_ALPHA, None)
    ctx = cairo.Context(rec)
    ctx.select_font_face(FONT_FAMILY, cairo.FONT_SLANT_NORMAL, weight)
    ctx.set_font_size(font_size)
    ctx.set_source_rgb(*color)

    y = Y_PAD
    for line in lines:
        y += LINE_HEIGHT
        ctx.move_to(0, y)
        ctx.show_text(line)
    return rec


def create_panel(title:str|None, lines:list[str]) -> cairo.ImageSurface:
    """Render a titled box of monospace text lines."""
    rec_title = None
    title_w = title_h = full_title_height = 0.0
    if title:
        rec_title = _record_text([title.upper()], TITLE_FONT_SIZE, cairo.FONT_WEIGHT_BOLD, BG_COLOR)
        title_x, title_y, title_w, title_h = rec_title.ink_extents()
        full_title_height = title_h + (Y_PAD * 2)

    rec_content = _record_text(lines, CONTENT_FONT_SIZE, cairo.FONT_WEIGHT_NORMAL, FG_COLOR)
    content_x, content_y, content_w, content_h = rec_content.ink_extents()
    full_content_height = content_h + (Y_PAD * 2)

    width = int(max(title_w, content_w)) + (X_PAD * 2)
    height = int(full_title_height + full_content_height)

    img = cairo.ImageSurface(cairo.FORMAT_ARGB32, max(width, 1), max(height, 1))
    ctx = cairo.Context(img)

    ctx.set_source_rgb(*BG_COLOR)
    ctx.paint()

    ctx.set_source_rgb(*FG_COLOR)
    ctx.set_hairline(True)
    ctx.rectangle(0, 0, width, height)
    ctx.stroke()

    if rec_title:
        ctx.set_source_rgb(*FG_COLOR)
        ctx.rectangle(0, 0, width, full_title_height)
        ctx.fill()
        ctx.set_source_surface(rec_title, -title_x + X_PAD, -title_y + Y_PAD)
        ctx.paint()

    ctx.set_source_surface(
        rec_content,
        -content_x + X_PAD,
        -content_y + Y_PAD + full_title_height
    )
    ctx.paint()

    return img


def create_state_panel(controller:TransformController) -> cairo.ImageSurface:
    focus = controller.get_focus()
    disp = [
        ("translate", f"({controller.translate_x:.1f}, {controller.translate_y:.1f})"),
        ("scale",     f"{controller.scale:.3f}"),
        ("rotation",  f"{math.degrees(controller.rotation):.1f}°"),
        ("focus",     f"({focus.x:g}, {focus.y:g}, {focus.width:g}, {focus.height:g})"),
        ("mode",      "rotate" if controller.is_rotating else "pan"),
    ]
    lines = [f"{label:<10} {value:>22}" for label, value in disp]
    return create_panel("view", lines)
