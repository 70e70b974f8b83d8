from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Tuple

from floodfill.components.tile import Tile
from floodfill.constants import (
    FILL_COLOR,
    GRID_BG_COLOR,
    GRID_COLOR,
    GRID_LINE_WIDTH,
)

if TYPE_CHECKING:
    from floodfill.rendering.context import RenderContext

Color = Tuple[int, int, int]
Position = Tuple[int, int]


class TileSurface:
    """Retained drawing surface for the grid.

    Drawing calls only record what a canvas would hold (cell fills and
    border colours); ``render`` replays that state with arcade each frame.
    """

    def __init__(self, surface_size: int, tile_size: int, fill_color: Color = FILL_COLOR):
        self.surface_size = surface_size
        self.tile_size = tile_size
        self.fill_color = fill_color
        self.fills: Dict[Position, Color] = {}
        self.highlights: Dict[Position, Color] = {}
        self.grid_lines_visible = False

    def resize(self, surface_size: int) -> None:
        self.surface_size = surface_size
        self.clear_surface()

    def highlight(self, tile: Tile, color: Color) -> None:
        self.highlights[tile.position] = color

    def unhighlight(self, tile: Tile) -> None:
        self.highlights.pop(tile.position, None)

    def paint(self, tile: Tile, color: Color) -> None:
        self.fills[tile.position] = color

    def commit_paint(self, tile: Tile) -> None:
        self.paint(tile, self.fill_color)

    def draw_grid_lines(self) -> None:
        self.grid_lines_visible = True

    def clear_surface(self) -> None:
        self.fills.clear()
        self.highlights.clear()
        self.grid_lines_visible = False

    def cell_bounds(self, ctx: RenderContext, row: int, col: int) -> Tuple[float, float, float, float]:
        """(left, right, bottom, top) in window coordinates; row 0 is the top row."""
        left = ctx.surface_left + col * self.tile_size
        top = ctx.surface_top - row * self.tile_size
        return left, left + self.tile_size, top - self.tile_size, top

    def render(self, arcade, ctx: RenderContext, headless: bool) -> None:
        if headless or self.surface_size <= 0:
            return
        arcade.draw_lrbt_rectangle_filled(
            ctx.surface_left, ctx.surface_right, ctx.surface_bottom, ctx.surface_top, GRID_BG_COLOR
        )
        for (row, col), color in self.fills.items():
            arcade.draw_lrbt_rectangle_filled(*self.cell_bounds(ctx, row, col), color)
        if self.grid_lines_visible:
            self._render_grid_lines(arcade, ctx)
        for (row, col), color in self.highlights.items():
            arcade.draw_lrbt_rectangle_outline(*self.cell_bounds(ctx, row, col), color, GRID_LINE_WIDTH)

    def _render_grid_lines(self, arcade, ctx: RenderContext) -> None:
        size = self.tile_size
        offset = size
        while offset < self.surface_size:
            x = ctx.surface_left + offset
            y = ctx.surface_top - offset
            arcade.draw_line(x, ctx.surface_bottom, x, ctx.surface_top, GRID_COLOR, GRID_LINE_WIDTH)
            arcade.draw_line(ctx.surface_left, y, ctx.surface_right, y, GRID_COLOR, GRID_LINE_WIDTH)
            offset += size
        arcade.draw_lrbt_rectangle_outline(
            ctx.surface_left, ctx.surface_right, ctx.surface_bottom, ctx.surface_top,
            GRID_COLOR, GRID_LINE_WIDTH,
        )
