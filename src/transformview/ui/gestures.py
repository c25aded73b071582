from transformview.ui.gtk4 import Gtk, Gdk
from transformview.view.transform import TransformController

## GTK reports one wheel notch as dy=±1; scale it to the tick count
## the controller expects per notch.
WHEEL_UNITS_PER_NOTCH = 3


class GtkGestureAdapter:
    """Feeds GTK input events on `widget` into a `TransformController`.

    Every position handed to the controller is widget-local.
    """

    def __init__(self, widget:Gtk.Widget, controller:TransformController):
        self.widget = widget
        self.controller = controller
        self.pointer_x = 0.0
        self.pointer_y = 0.0
        self.drag_start = (0.0, 0.0)

        widget.set_focusable(True)

        motion = Gtk.EventControllerMotion.new()
        motion.connect("motion", self.on_motion)
        widget.add_controller(motion)

        drag = Gtk.GestureDrag.new()
        drag.set_button(Gdk.BUTTON_PRIMARY)
        drag.connect("drag-begin", self.on_drag_begin)
        drag.connect("drag-update", self.on_drag_update)
        widget.add_controller(drag)

        scroll = Gtk.EventControllerScroll.new(Gtk.EventControllerScrollFlags.VERTICAL)
        scroll.connect("scroll", self.on_scroll)
        widget.add_controller(scroll)

        keys = Gtk.EventControllerKey.new()
        keys.connect("key-pressed", self.on_key_pressed)
        keys.connect("key-released", self.on_key_released)
        widget.add_controller(keys)

    def on_motion(self, _ctrl, x, y):
        self.pointer_x = x
        self.pointer_y = y

    def on_drag_begin(self, gesture, start_x, start_y):
        self.widget.grab_focus()
        self.drag_start = (start_x, start_y)
        self.controller.on_pointer_down(start_x, start_y)

    def on_drag_update(self, gesture, offset_x, offset_y):
        x = self.drag_start[0] + offset_x
        y = self.drag_start[1] + offset_y
        self.pointer_x, self.pointer_y = x, y
        self.controller.on_pointer_drag(x, y)

    def on_scroll(self, controller, dx, dy):
        if dy == 0:
            return False
        self.controller.on_wheel(dy * WHEEL_UNITS_PER_NOTCH, self.pointer_x, self.pointer_y)
        return True

    def on_key_pressed(self, controller, keyval:int, keycode:int, state:Gdk.ModifierType) -> bool:
        self.controller.on_key_down(Gdk.keyval_name(keyval))
        return False

    def on_key_released(self, controller, keyval:int, keycode:int, state:Gdk.ModifierType):
        self.controller.on_key_up(Gdk.keyval_name(keyval))
