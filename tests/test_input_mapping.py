import pytest

from floodfill.components.tool_state import Tool
from floodfill.config import FloodFillConfig
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
from floodfill.systems.input import InputSystem
from floodfill.systems.render import RenderSystem
from floodfill.ui.control_panel import (
    ACTION_FASTER,
    ACTION_FILL,
    ACTION_RESET,
    ACTION_SLOWER,
    ACTION_STOP,
)
from floodfill.ui.layout import compute_surface_origin
from floodfill.world import create_session
from tests.helpers import DummyWindow


class Capture:
    def __init__(self, bus: EventBus, *names):
        self.received = []
        for name in names:
            bus.subscribe(name, self._handler(name))

    def _handler(self, name):
        def on_event(sender, **payload):
            self.received.append((name, payload))
        return on_event


@pytest.fixture
def setup_session():
    bus = EventBus()
    session = create_session(bus, FloodFillConfig(), surface_size=600)
    window = DummyWindow(620, 676)
    render = RenderSystem(session.world, session.grid, session.surface, window)
    # Attach render_system to the window so InputSystem can hit-test controls
    setattr(window, 'render_system', render)
    input_sys = InputSystem(bus, window, session.grid)
    return bus, session, window, render, input_sys


def _tile_center(window, session, row, col):
    tile_size = session.grid.board.tile_size
    left, top = compute_surface_origin(window.width, window.height, session.grid.board.surface_size)
    return left + col * tile_size + tile_size / 2, top - row * tile_size - tile_size / 2


def _button_center(render, action):
    button = render.control_panel().button(action)
    return button.left + button.width / 2, button.bottom + button.height / 2


def test_click_center_first_tile_maps_correctly(setup_session):
    bus, session, window, render, _ = setup_session
    cap = Capture(bus, EVENT_TILE_PRESS)
    x, y = _tile_center(window, session, 0, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert cap.received == [(EVENT_TILE_PRESS, {"row": 0, "col": 0})]


def test_click_maps_rows_from_the_top(setup_session):
    bus, session, window, render, _ = setup_session
    cap = Capture(bus, EVENT_TILE_PRESS)
    x, y = _tile_center(window, session, 23, 5)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert cap.received == [(EVENT_TILE_PRESS, {"row": 23, "col": 5})]


def test_click_outside_surface_no_event(setup_session):
    bus, session, window, render, _ = setup_session
    cap = Capture(bus, EVENT_TILE_PRESS)
    left, top = compute_surface_origin(window.width, window.height, 600)
    bus.emit(EVENT_MOUSE_PRESS, x=left - 5, y=top - 10, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=left + 10, y=top - 605, button=1)
    assert cap.received == []


def test_non_left_buttons_are_ignored(setup_session):
    bus, session, window, render, _ = setup_session
    cap = Capture(bus, EVENT_TILE_PRESS)
    x, y = _tile_center(window, session, 0, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=4)
    assert cap.received == []


def test_motion_emits_hover_then_leave_once(setup_session):
    bus, session, window, render, _ = setup_session
    cap = Capture(bus, EVENT_TILE_HOVER, EVENT_POINTER_LEAVE)
    x, y = _tile_center(window, session, 2, 3)
    bus.emit(EVENT_MOUSE_MOVE, x=x, y=y, dx=0, dy=0)
    bus.emit(EVENT_MOUSE_MOVE, x=1, y=1, dx=0, dy=0)
    bus.emit(EVENT_MOUSE_MOVE, x=2, y=2, dx=0, dy=0)
    assert cap.received == [
        (EVENT_TILE_HOVER, {"row": 2, "col": 3}),
        (EVENT_POINTER_LEAVE, {}),
    ]


def test_release_and_window_leave_are_forwarded(setup_session):
    bus, session, window, render, _ = setup_session
    cap = Capture(bus, EVENT_POINTER_RELEASE, EVENT_POINTER_LEAVE)
    bus.emit(EVENT_MOUSE_RELEASE, x=0, y=0, button=1)
    bus.emit(EVENT_MOUSE_LEAVE, x=0, y=0)
    assert [name for name, _ in cap.received] == [EVENT_POINTER_RELEASE, EVENT_POINTER_LEAVE]


def test_control_buttons_dispatch_actions(setup_session):
    bus, session, window, render, _ = setup_session
    cap = Capture(
        bus, EVENT_TOOL_SELECT, EVENT_SPEED_CHANGE_REQUEST, EVENT_RESET_REQUEST, EVENT_TILE_PRESS,
    )
    for action in (ACTION_FILL, ACTION_FASTER, ACTION_SLOWER, ACTION_RESET):
        x, y = _button_center(render, action)
        bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert cap.received == [
        (EVENT_TOOL_SELECT, {"tool": Tool.FILL}),
        (EVENT_SPEED_CHANGE_REQUEST, {"increase": True}),
        (EVENT_SPEED_CHANGE_REQUEST, {"increase": False}),
        (EVENT_RESET_REQUEST, {}),
    ]
    assert session.controller.tool_state.tool is Tool.FILL


def test_disabled_buttons_swallow_clicks(setup_session):
    bus, session, window, render, _ = setup_session
    cap = Capture(bus, EVENT_PLAYBACK_STOP_REQUEST, EVENT_SPEED_CHANGE_REQUEST)
    x, y = _button_center(render, ACTION_STOP)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    while session.scheduler.increase_speed():
        pass
    x, y = _button_center(render, ACTION_FASTER)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert cap.received == []


def test_full_fill_through_pointer_events(setup_session):
    bus, session, window, render, _ = setup_session
    x, y = _button_center(render, ACTION_FILL)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    x, y = _tile_center(window, session, 0, 0)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert session.scheduler.active
    assert render.control_panel().button(ACTION_STOP).enabled
    x, y = _button_center(render, ACTION_STOP)
    bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=1)
    assert not session.scheduler.active


def test_render_context_geometry_headless(setup_session):
    bus, session, window, render, _ = setup_session
    ctx = render.build_context()
    assert ctx.surface_size == 600
    assert ctx.surface_left == 10
    assert ctx.surface_top == 610
    assert ctx.surface_bottom == 10
    assert ctx.surface_right == 610
    assert ctx.panel.speed_label == "1x"


def test_configured_margin_places_surface_for_clicks_and_drawing():
    bus = EventBus()
    config = FloodFillConfig(surface_margin=30)
    session = create_session(bus, config, surface_size=550)
    window = DummyWindow(620, 676)
    render = RenderSystem(session.world, session.grid, session.surface, window, margin=30)
    setattr(window, 'render_system', render)
    InputSystem(bus, window, session.grid, margin=30)
    cap = Capture(bus, EVENT_TILE_PRESS)

    ctx = render.build_context()
    assert (ctx.surface_left, ctx.surface_top) == (35, 590)

    bus.emit(EVENT_MOUSE_PRESS, x=35 + 12.5, y=590 - 12.5, button=1)
    assert cap.received == [(EVENT_TILE_PRESS, {"row": 0, "col": 0})]
