"""Entry point for the flood fill visualizer.

Sets up the session (ECS world, grid, playback), event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color, color
from floodfill.config import load_config
from floodfill.constants import CONTROL_PANEL_HEIGHT, MIN_MARGIN, PREFERRED_SURFACE_SIZE
from floodfill.events.bus import (
    EventBus,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_SURFACE_RESIZED,
    EVENT_TICK,
)
from floodfill.systems.controller import CURSOR_DRAW, CURSOR_FILL, CURSOR_WAIT
from floodfill.systems.input import InputSystem
from floodfill.systems.render import RenderSystem
from floodfill.ui.layout import available_viewport, compute_surface_size
from floodfill.world import create_session

WINDOW_WIDTH = PREFERRED_SURFACE_SIZE + 2 * MIN_MARGIN
WINDOW_HEIGHT = PREFERRED_SURFACE_SIZE + CONTROL_PANEL_HEIGHT + 2 * MIN_MARGIN

_CURSORS = {
    CURSOR_WAIT: Window.CURSOR_WAIT,
    CURSOR_DRAW: Window.CURSOR_CROSSHAIR,
    CURSOR_FILL: Window.CURSOR_HAND,
}


class FloodFillWindow(Window):
    def __init__(self, config):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Flood Fill", resizable=True)
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        surface_size = compute_surface_size(
            available_viewport(self.width, self.height),
            tile_size=config.tile_size,
            preferred=config.preferred_surface_size,
            margin=config.surface_margin,
        )
        self.session = create_session(self.event_bus, config, surface_size=surface_size)
        self.controller = self.session.controller
        self.render_system = RenderSystem(
            self.session.world, self.session.grid, self.session.surface, self, margin=config.surface_margin
        )
        self.input_system = InputSystem(self.event_bus, self, self.session.grid, margin=config.surface_margin)
        self._cursor_name = None
        set_background_color(color.BLACK)

    def on_resize(self, width: int, height: int):
        # pyglet may dispatch a resize before __init__ has built the session
        if hasattr(self, 'event_bus'):
            self.event_bus.emit(EVENT_SURFACE_RESIZED, width=width, height=height)
        return super().on_resize(width, height)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)
        self._update_cursor()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button, modifiers=modifiers)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=dx, dy=dy)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_RELEASE, x=x, y=y, button=button)

    def on_mouse_leave(self, x: float, y: float):
        self.event_bus.emit(EVENT_MOUSE_LEAVE, x=x, y=y)

    def _update_cursor(self):
        name = self.controller.cursor
        if name == self._cursor_name:
            return
        self._cursor_name = name
        self.set_mouse_cursor(self.get_system_mouse_cursor(_CURSORS[name]))


def main():
    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    window = FloodFillWindow(config)
    run()

if __name__ == "__main__":
    main()
