from __future__ import annotations

import logging
from typing import Optional

from esper import World

from floodfill.components.tile import Tile
from floodfill.components.tool_state import Tool, ToolState
from floodfill.config import FloodFillConfig
from floodfill.constants import ACTIVE_HIGHLIGHT_COLOR, DRAW_COLOR
from floodfill.events.bus import (
    EVENT_FILL_STARTED,
    EVENT_GRID_RESET,
    EVENT_PLAYBACK_STOP_REQUEST,
    EVENT_POINTER_LEAVE,
    EVENT_POINTER_RELEASE,
    EVENT_RESET_REQUEST,
    EVENT_SPEED_CHANGE_REQUEST,
    EVENT_SURFACE_RESIZED,
    EVENT_TILE_HOVER,
    EVENT_TILE_PAINTED,
    EVENT_TILE_PRESS,
    EVENT_TOOL_CHANGED,
    EVENT_TOOL_SELECT,
    EventBus,
)
from floodfill.rendering.tile_surface import TileSurface
from floodfill.systems.flood_fill import flood_fill
from floodfill.systems.grid import GridSystem
from floodfill.systems.playback import PlaybackScheduler
from floodfill.ui.layout import available_viewport, compute_surface_size

logger = logging.getLogger(__name__)

CURSOR_WAIT = "wait"
CURSOR_DRAW = "draw"
CURSOR_FILL = "fill"


class FloodFillController:
    """Per-session owner of grid, surface, scheduler and tool state.

    Pointer and tool input is ignored while playback runs, so the grid has a
    single writer at any time: either the user's pen/fill request or the
    scheduler's ticks.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        grid: GridSystem,
        surface: TileSurface,
        scheduler: PlaybackScheduler,
        config: FloodFillConfig,
    ):
        self.world = world
        self.event_bus = event_bus
        self.grid = grid
        self.surface = surface
        self.scheduler = scheduler
        self.config = config
        self.tool_entity = self.world.create_entity(ToolState())
        self.surface.draw_grid_lines()
        self.event_bus.subscribe(EVENT_TILE_HOVER, self.on_tile_hover)
        self.event_bus.subscribe(EVENT_TILE_PRESS, self.on_tile_press)
        self.event_bus.subscribe(EVENT_POINTER_RELEASE, self.on_pointer_release)
        self.event_bus.subscribe(EVENT_POINTER_LEAVE, self.on_pointer_release)
        self.event_bus.subscribe(EVENT_TOOL_SELECT, self.on_tool_select)
        self.event_bus.subscribe(EVENT_SPEED_CHANGE_REQUEST, self.on_speed_change_request)
        self.event_bus.subscribe(EVENT_PLAYBACK_STOP_REQUEST, self.on_stop_request)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self.on_reset_request)
        self.event_bus.subscribe(EVENT_SURFACE_RESIZED, self.on_surface_resized)

    @property
    def tool_state(self) -> ToolState:
        return self.world.component_for_entity(self.tool_entity, ToolState)

    @property
    def cursor(self) -> str:
        if self.scheduler.active:
            return CURSOR_WAIT
        if self.tool_state.tool is Tool.DRAW:
            return CURSOR_DRAW
        return CURSOR_FILL

    # ------------------------------------------------------------------
    # Pointer
    # ------------------------------------------------------------------
    def on_tile_hover(self, sender, **kwargs):
        tile = self._tile_from(kwargs)
        if tile is None or self.scheduler.active:
            return
        if not self._set_active_tile(tile):
            return
        if self.tool_state.drawing:
            self._paint(tile)

    def on_tile_press(self, sender, **kwargs):
        tile = self._tile_from(kwargs)
        if tile is None or self.scheduler.active:
            return
        # Touch input has no hover beforehand, so the pressed tile becomes active here.
        self._set_active_tile(tile)
        state = self.tool_state
        if state.tool is Tool.DRAW:
            state.drawing = True
            self._paint(tile)
        else:
            self.fill_from(tile)

    def on_pointer_release(self, sender, **kwargs):
        if self.scheduler.active:
            return
        self.tool_state.drawing = False

    def fill_from(self, tile: Optional[Tile]) -> bool:
        """Run a traversal from ``tile`` and start playing it back."""
        if tile is None:
            logger.debug("fill ignored: no start tile")
            return False
        if self.scheduler.active:
            logger.debug("fill ignored at %s: playback active", tile.position)
            return False
        events = flood_fill(self.grid, tile)
        depth = events[-1].step if events else 0
        self.event_bus.emit(EVENT_FILL_STARTED, row=tile.row, col=tile.col, events=len(events), depth=depth)
        return self.scheduler.start(events)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def on_tool_select(self, sender, **kwargs):
        tool = kwargs.get('tool')
        if tool is None:
            return
        try:
            tool = Tool(tool)
        except ValueError:
            return
        self.select_tool(tool)

    def select_tool(self, tool: Tool) -> bool:
        state = self.tool_state
        if state.tool is tool:
            return False
        previous = state.tool
        state.tool = tool
        state.drawing = False
        self.event_bus.emit(EVENT_TOOL_CHANGED, tool=tool, previous=previous)
        return True

    def on_speed_change_request(self, sender, **kwargs):
        increase = kwargs.get('increase')
        if increase is None:
            return
        self.scheduler.change_speed(bool(increase))

    def on_stop_request(self, sender, **kwargs):
        self.scheduler.stop()

    def on_reset_request(self, sender, **kwargs):
        self.reset()

    def reset(self) -> None:
        """Stop playback, wipe the surface and return every tile to unvisited."""
        self.scheduler.stop()
        self.surface.clear_surface()
        self.surface.draw_grid_lines()
        self.grid.reset()
        state = self.tool_state
        state.active_tile = None
        state.drawing = False
        logger.info("grid reset")
        self.event_bus.emit(EVENT_GRID_RESET)

    def on_surface_resized(self, sender, **kwargs):
        width = kwargs.get('width')
        height = kwargs.get('height')
        if width is None or height is None:
            return
        self.resize(int(width), int(height))

    def resize(self, window_width: int, window_height: int) -> bool:
        """Rebuild the grid when the window calls for a different surface size."""
        size = compute_surface_size(
            available_viewport(window_width, window_height),
            tile_size=self.config.tile_size,
            preferred=self.config.preferred_surface_size,
            margin=self.config.surface_margin,
        )
        if size == self.grid.board.surface_size:
            return False
        # Queued events point at tiles that are about to disappear.
        self.scheduler.stop()
        self.grid.rebuild(size)
        self.surface.resize(self.grid.board.surface_size)
        self.surface.draw_grid_lines()
        state = self.tool_state
        state.active_tile = None
        state.drawing = False
        return True

    # ------------------------------------------------------------------
    def _tile_from(self, payload) -> Optional[Tile]:
        row = payload.get('row')
        col = payload.get('col')
        if row is None or col is None:
            return None
        return self.grid.tile_at(row, col)

    def _set_active_tile(self, tile: Tile) -> bool:
        state = self.tool_state
        if state.active_tile == tile.position:
            return False
        if state.active_tile is not None:
            previous = self.grid.tile_at(*state.active_tile)
            if previous is not None:
                self.surface.unhighlight(previous)
        self.surface.highlight(tile, ACTIVE_HIGHLIGHT_COLOR)
        state.active_tile = tile.position
        return True

    def _paint(self, tile: Tile) -> None:
        if tile.painted:
            return
        tile.mark_painted()
        self.surface.paint(tile, DRAW_COLOR)
        self.event_bus.emit(EVENT_TILE_PAINTED, row=tile.row, col=tile.col)
