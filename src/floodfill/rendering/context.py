from __future__ import annotations

from dataclasses import dataclass

from floodfill.constants import MIN_MARGIN
from floodfill.ui.control_panel import ControlPanel
from floodfill.ui.layout import compute_surface_origin


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped geometry shared across renderer subcomponents."""

    window_width: int
    window_height: int
    surface_left: float
    surface_top: float
    surface_size: int
    tile_size: int
    panel: ControlPanel

    @property
    def surface_bottom(self) -> float:
        return self.surface_top - self.surface_size

    @property
    def surface_right(self) -> float:
        return self.surface_left + self.surface_size


def build_render_context(
    window_width: int,
    window_height: int,
    surface_size: int,
    tile_size: int,
    panel: ControlPanel,
    margin: int = MIN_MARGIN,
) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    left, top = compute_surface_origin(window_width, window_height, surface_size, margin=margin)
    return RenderContext(
        window_width=window_width,
        window_height=window_height,
        surface_left=left,
        surface_top=top,
        surface_size=surface_size,
        tile_size=tile_size,
        panel=panel,
    )
