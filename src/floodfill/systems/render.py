from __future__ import annotations

from typing import Optional

from esper import World

from floodfill.components.playback_state import PlaybackMode, PlaybackState
from floodfill.components.tool_state import ToolState
from floodfill.constants import MIN_MARGIN
from floodfill.rendering.context import RenderContext, build_render_context
from floodfill.rendering.panel_renderer import PanelRenderer
from floodfill.rendering.tile_surface import TileSurface
from floodfill.systems.grid import GridSystem
from floodfill.ui.control_panel import ControlButton, ControlPanel, build_control_panel


class RenderSystem:
    def __init__(self, world: World, grid: GridSystem, surface: TileSurface, window, margin: int = MIN_MARGIN):
        self.world = world
        self.grid = grid
        self.surface = surface
        self.window = window
        self.margin = margin
        self._panel_renderer = PanelRenderer()

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Headless safeguard: without an active window skip draw calls but still build layout.
        headless = False
        try:
            arcade.get_window()
        except Exception:
            headless = True
        ctx = self.build_context()
        if headless:
            return
        self._panel_renderer.render(arcade, ctx)
        self.surface.render(arcade, ctx, headless=headless)

    def build_context(self) -> RenderContext:
        board = self.grid.board
        return build_render_context(
            window_width=self.window.width,
            window_height=self.window.height,
            surface_size=board.surface_size,
            tile_size=board.tile_size,
            panel=self.control_panel(),
            margin=self.margin,
        )

    def control_panel(self) -> ControlPanel:
        tool_state = self._first(ToolState) or ToolState()
        playback = self._first(PlaybackState) or PlaybackState()
        return build_control_panel(
            self.window.width,
            self.window.height,
            tool=tool_state.tool,
            speed=playback.speed,
            can_increase=playback.can_increase,
            can_decrease=playback.can_decrease,
            playback_active=playback.mode is PlaybackMode.ACTIVE,
        )

    def get_control_at_point(self, x: float, y: float) -> Optional[ControlButton]:
        """Return the control button under the point, using a fresh layout."""
        return self.control_panel().hit_test(x, y)

    def _first(self, component_type):
        for _, component in self.world.get_component(component_type):
            return component
        return None
