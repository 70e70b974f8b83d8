from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems alive even when nobody holds the system.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SYSTEM & TIMING
# ============================================================================
EVENT_TICK = "tick"                                # payload: dt=float (seconds)
EVENT_SURFACE_RESIZED = "surface_resized"          # payload: width=int, height=int


# ============================================================================
# RAW INPUT (window -> InputSystem)
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button, modifiers
EVENT_MOUSE_MOVE = "mouse_move"            # payload: x, y, dx, dy
EVENT_MOUSE_RELEASE = "mouse_release"      # payload: x, y, button
EVENT_MOUSE_LEAVE = "mouse_leave"          # payload: x, y


# ============================================================================
# POINTER ON GRID (InputSystem -> controller)
# ============================================================================
EVENT_TILE_HOVER = "tile_hover"            # payload: row, col
EVENT_TILE_PRESS = "tile_press"            # payload: row, col
EVENT_POINTER_RELEASE = "pointer_release"  # payload: None
EVENT_POINTER_LEAVE = "pointer_leave"      # payload: None


# ============================================================================
# CONTROLS
# ============================================================================
EVENT_TOOL_SELECT = "tool_select"                      # payload: tool=Tool
EVENT_TOOL_CHANGED = "tool_changed"                    # payload: tool=Tool, previous=Tool|None
EVENT_SPEED_CHANGE_REQUEST = "speed_change_request"    # payload: increase=bool
EVENT_SPEED_CHANGED = "speed_changed"                  # payload: speed=float, interval=int, can_increase=bool, can_decrease=bool
EVENT_PLAYBACK_STOP_REQUEST = "playback_stop_request"  # payload: None
EVENT_RESET_REQUEST = "reset_request"                  # payload: None


# ============================================================================
# GRID & FILL
# ============================================================================
EVENT_TILE_PAINTED = "tile_painted"        # payload: row, col
EVENT_FILL_STARTED = "fill_started"        # payload: row, col, events=int, depth=int
EVENT_GRID_RESET = "grid_reset"            # payload: None
EVENT_GRID_REBUILT = "grid_rebuilt"        # payload: rows=int, cols=int, surface_size=int


# ============================================================================
# PLAYBACK
# ============================================================================
EVENT_PLAYBACK_STARTED = "playback_started"    # payload: events=int, interval=int
EVENT_PLAYBACK_STOPPED = "playback_stopped"    # payload: reason=str ('drained' | 'cancelled'), remaining=int
EVENT_PHASE_ADVANCED = "phase_advanced"        # payload: step=int, phase=DrawPhase, count=int
