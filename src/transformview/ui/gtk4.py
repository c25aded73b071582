import sys

import gi
try:
    gi.require_version('Gtk', '4.0')
except ValueError:
    print("GTK 4.0 not available")
    sys.exit(1)
from gi.repository import Gtk, Gdk, GLib, Gio, Graphene  # type: ignore
