from floodfill.components.tool_state import Tool
from floodfill.constants import MIN_MARGIN
from floodfill.events.bus import (
    EventBus,
    EVENT_MOUSE_LEAVE,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_MOUSE_RELEASE,
    EVENT_PLAYBACK_STOP_REQUEST,
    EVENT_POINTER_LEAVE,
    EVENT_POINTER_RELEASE,
    EVENT_RESET_REQUEST,
    EVENT_SPEED_CHANGE_REQUEST,
    EVENT_TILE_HOVER,
    EVENT_TILE_PRESS,
    EVENT_TOOL_SELECT,
)
from floodfill.systems.grid import GridSystem
from floodfill.ui.control_panel import (
    ACTION_DRAW,
    ACTION_FASTER,
    ACTION_FILL,
    ACTION_RESET,
    ACTION_SLOWER,
    ACTION_STOP,
)
from floodfill.ui.layout import compute_surface_origin, window_to_surface

LEFT_BUTTON = 1  # arcade.MOUSE_BUTTON_LEFT


class InputSystem:
    """Maps window pointer events to control actions or grid tiles."""

    def __init__(self, event_bus: EventBus, window, grid: GridSystem, margin: int = MIN_MARGIN):
        self.event_bus = event_bus
        self.window = window
        self.grid = grid
        self.margin = margin
        self._inside = False
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_MOUSE_RELEASE, self.on_mouse_release)
        self.event_bus.subscribe(EVENT_MOUSE_LEAVE, self.on_mouse_leave)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        render_system = getattr(self.window, 'render_system', None)
        if render_system and hasattr(render_system, 'get_control_at_point'):
            control = render_system.get_control_at_point(x, y)
            if control is not None:
                if control.enabled:
                    self._dispatch_action(control.action)
                return
        tile = self._tile_at_window_point(x, y)
        if tile is None:
            return
        self._inside = True
        self.event_bus.emit(EVENT_TILE_PRESS, row=tile.row, col=tile.col)

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        tile = self._tile_at_window_point(x, y)
        if tile is None:
            if self._inside:
                self._inside = False
                self.event_bus.emit(EVENT_POINTER_LEAVE)
            return
        self._inside = True
        self.event_bus.emit(EVENT_TILE_HOVER, row=tile.row, col=tile.col)

    def on_mouse_release(self, sender, **kwargs):
        self.event_bus.emit(EVENT_POINTER_RELEASE)

    def on_mouse_leave(self, sender, **kwargs):
        self._inside = False
        self.event_bus.emit(EVENT_POINTER_LEAVE)

    def _tile_at_window_point(self, x: float, y: float):
        surface_size = self.grid.board.surface_size
        left, top = compute_surface_origin(
            self.window.width, self.window.height, surface_size, margin=self.margin
        )
        sx, sy = window_to_surface(x, y, left, top)
        return self.grid.tile_at_point(sx, sy)

    def _dispatch_action(self, action: str) -> None:
        if action == ACTION_DRAW:
            self.event_bus.emit(EVENT_TOOL_SELECT, tool=Tool.DRAW)
        elif action == ACTION_FILL:
            self.event_bus.emit(EVENT_TOOL_SELECT, tool=Tool.FILL)
        elif action == ACTION_STOP:
            self.event_bus.emit(EVENT_PLAYBACK_STOP_REQUEST)
        elif action == ACTION_RESET:
            self.event_bus.emit(EVENT_RESET_REQUEST)
        elif action == ACTION_SLOWER:
            self.event_bus.emit(EVENT_SPEED_CHANGE_REQUEST, increase=False)
        elif action == ACTION_FASTER:
            self.event_bus.emit(EVENT_SPEED_CHANGE_REQUEST, increase=True)
