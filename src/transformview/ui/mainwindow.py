from transformview.view import logger
from transformview.ui.gtk4 import Gtk, Gdk, Gio, GLib
from transformview.ui.canvas import TransformCanvas


APP_ID = "com.qmew.TransformView"
WINDOW_DEFAULT_SIZE = (800, 600)

## Zoom step for the Up/Down keys
KEY_ZOOM_FACTOR = 1.25


class App(Gtk.Application):

    def __init__(self):
        super().__init__(application_id=APP_ID, flags=Gio.ApplicationFlags.FLAGS_NONE)
        self.canvas = TransformCanvas()
        self.canvas.set_hexpand(True)
        self.canvas.set_vexpand(True)
        self.canvas.set_halign(Gtk.Align.FILL)
        self.canvas.set_valign(Gtk.Align.FILL)

        self.__init_menu_actions()

    def __init_menu_actions(self):
        show_state = Gio.SimpleAction.new_stateful(
            "show_state", None, GLib.Variant.new_boolean(self.canvas.show_state)
        )
        show_state.connect("change-state", self.on_toggle_changed)
        self.add_action(show_state)

        act_center = Gio.SimpleAction.new("center", None)
        act_center.connect("activate", lambda a, p: self.canvas.center())
        self.add_action(act_center)

        act_quit = Gio.SimpleAction.new("quit", None)
        act_quit.connect("activate", lambda a, p: self.quit())
        self.add_action(act_quit)

        self.set_accels_for_action("app.quit", ["<Primary>q"])
        self.set_accels_for_action("app.show_state", ["i"])
        self.set_accels_for_action("app.center", ["c"])

    def on_toggle_changed(self, action:Gio.SimpleAction, value:GLib.Variant):
        action.set_state(value)
        if action.get_name() == "show_state":
            self.canvas.show_state = value.get_boolean()
            self.canvas.queue_draw()

    def __build_menu(self) -> Gio.Menu:
        item = Gio.MenuItem.new("Show view state", "app.show_state")
        item.set_attribute_value("toggle", GLib.Variant.new_boolean(True))

        menu = Gio.Menu()
        menu.append_item(item)

        section = Gio.Menu()
        section.append("Quit", "app.quit")

        top = Gio.Menu()
        top.append_section("Options", menu)
        top.append_section(None, section)
        return top

    def do_activate(self):
        Gtk.Application.do_activate(self)
        win = self.props.active_window
        if not win:
            win = self._build_window()
        win.present()
        self.canvas.grab_focus()

    def _build_window(self) -> Gtk.ApplicationWindow:
        win = Gtk.ApplicationWindow(application=self, title=APP_ID)
        win.set_default_size(*WINDOW_DEFAULT_SIZE)
        win.set_child(self.canvas)

        controller = Gtk.EventControllerKey.new()
        controller.connect("key-pressed", self.on_key_pressed)
        win.add_controller(controller)

        header = Gtk.HeaderBar()

        menu_button = Gtk.MenuButton(icon_name="open-menu-symbolic")
        menu_button.set_menu_model(self.__build_menu())
        header.pack_end(menu_button)

        center_button = Gtk.Button(label="Center", action_name="app.center", can_focus=False)
        header.pack_start(center_button)

        win.set_titlebar(header)
        return win

    def on_key_pressed(self, controller:Gtk.EventControllerKey, keyval:int, keycode:int, state:Gdk.ModifierType) -> bool:
        width = self.canvas.get_width()
        height = self.canvas.get_height()

        if keyval == Gdk.KEY_Escape:
            self.quit()
            return True
        elif keyval == Gdk.KEY_Up:
            self.canvas.zoom(KEY_ZOOM_FACTOR, width / 2, height / 2)
            return True
        elif keyval == Gdk.KEY_Down:
            self.canvas.zoom(1 / KEY_ZOOM_FACTOR, width / 2, height / 2)
            return True
        logger.debug("Unhandled key %s", Gdk.keyval_name(keyval))
        return False
