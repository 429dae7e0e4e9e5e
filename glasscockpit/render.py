"""Render objects and the window that lays them out and dispatches input."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, IntEnum, IntFlag


class Modifier(IntFlag):
    """Keyboard modifier bits passed to keyboard callbacks."""

    NONE = 0x00
    SHIFT = 0x01
    CTRL = 0x04
    ALT = 0x08
    META = 0x40


class MouseState(IntEnum):
    DOWN = 0
    UP = 1


class InputKind(Enum):
    MOUSE_DOWN = "mouse_down"
    MOUSE_UP = "mouse_up"
    KEYBOARD = "keyboard"


@dataclass(frozen=True)
class InputEvent:
    """The last input an object received through its default handlers."""

    kind: InputKind
    button: int = 0
    x: float = 0.0
    y: float = 0.0
    keycode: int = 0
    modifiers: int = 0


class RenderObject(ABC):
    """Base class for anything that draws in a render window."""

    def __init__(self):
        self.units_per_pixel = 1.0
        self.parent = None
        self.scale = (1.0, 1.0)
        self.physical_position = (0.0, 0.0)
        self.pixel_position = (0, 0)
        self.physical_size = (0.0, 0.0)
        self.pixel_size = (0, 0)
        self.last_input = None

    def set_units_per_pixel(self, units_per_pixel):
        """Set the pixel-to-physical conversion factor (mm per pixel)."""
        self.units_per_pixel = units_per_pixel

    def set_scale(self, x_scale, y_scale):
        """Set the scale; non-positive components leave that axis unchanged."""
        sx, sy = self.scale
        if x_scale > 0.0:
            sx = x_scale
        if y_scale > 0.0:
            sy = y_scale
        self.scale = (sx, sy)

    def set_position(self, x, y):
        """Place the object in the render window, in mm."""
        self.physical_position = (x, y)

    def set_parent(self, parent):
        """Set the parent object used for cascading position information."""
        self.parent = parent

    def handle_mouse_button(self, button, state, x, y):
        """Dispatch a click at pixel coordinates if it falls inside this object."""
        if not self.click_test(button, state, x, y):
            return
        phys_x = (x - self.pixel_position[0]) / self.pixel_size[0] * self.physical_size[0]
        phys_y = (y - self.pixel_position[1]) / self.pixel_size[1] * self.physical_size[1]
        if state == MouseState.DOWN:
            self.on_mouse_down(button, phys_x, phys_y)
        else:
            self.on_mouse_up(button, phys_x, phys_y)

    def on_mouse_down(self, button, physical_x, physical_y):
        """Called on a mouse-down inside the object; records it by default."""
        self.last_input = InputEvent(InputKind.MOUSE_DOWN, button, physical_x, physical_y)

    def on_mouse_up(self, button, physical_x, physical_y):
        """Called on a mouse-up inside the object; records it by default."""
        self.last_input = InputEvent(InputKind.MOUSE_UP, button, physical_x, physical_y)

    def on_keyboard(self, keycode, modifiers):
        """Called on a key press; records it by default."""
        self.last_input = InputEvent(InputKind.KEYBOARD, keycode=keycode, modifiers=modifiers)

    @abstractmethod
    def click_test(self, button, state, x, y):
        """Return True if the pixel position lies inside the object."""

    @abstractmethod
    def render(self):
        """Draw the object."""


@dataclass(frozen=True)
class DisplaySettings:
    """The drawing state a render window sets up before its first frame."""

    clear_color: tuple = (0.0, 0.0, 0.0, 0.0)
    filled_polygons: bool = True
    vertex_arrays: bool = True
    depth_test: bool = False
    blending: bool = True
    point_smoothing: bool = True
    line_smoothing: bool = True
    polygon_smoothing: bool = False
    nicest_hints: bool = True


class RenderWindow:
    """Holds the gauges, the projection and dispatches input to gauges.

    Rendering is disabled until ``ok_to_render`` is set to True.
    """

    FREEZE_KEY = ord("1")
    QUIT_KEY = ord("q")
    FREEZE_SECONDS = 2

    def __init__(self):
        self.window_size = (0, 0)
        self.units_per_pixel = 0.25
        self.ortho_params = None
        self.gauges = []
        self.display = None
        self.display_initialized = False
        self.ok_to_render = False

    def resize(self, cx, cy):
        """Record the new window size and recompute the orthographic projection."""
        cx = cx or 1
        cy = cy or 1
        self.window_size = (cx, cy)
        self.ortho_params = (
            0.0,
            self.units_per_pixel * cx,
            0.0,
            self.units_per_pixel * cy,
            1.0,
            -1.0,
        )

    def setup_display(self):
        """Establish the drawing state used for every frame."""
        self.display = DisplaySettings()

    def render(self):
        """Render the whole window; return False if rendering is not allowed."""
        if not self.ok_to_render:
            return False
        if not self.display_initialized:
            self.setup_display()
            self.display_initialized = True
        self.render_gauges()
        return True

    def add_gauge(self, gauge):
        """Add a gauge to the window."""
        self.gauges.append(gauge)

    def render_gauges(self):
        """Render every gauge in the order they were added."""
        for gauge in self.gauges:
            gauge.render()

    def keyboard(self, keycode, modifiers):
        """Handle a key press; keys that are not app-global go to every gauge."""
        if keycode == self.FREEZE_KEY:
            time.sleep(self.FREEZE_SECONDS)
            return
        if keycode == self.QUIT_KEY and modifiers & Modifier.CTRL:
            return
        print(f'Keyboard event {keycode} "{chr(keycode)}"')
        for gauge in self.gauges:
            gauge.on_keyboard(keycode, modifiers)

    def mouse(self, button, state, x, y):
        """Pass a mouse event to every gauge, with y measured from the bottom."""
        y = self.window_size[1] - y
        for gauge in self.gauges:
            gauge.handle_mouse_button(button, state, x, y)