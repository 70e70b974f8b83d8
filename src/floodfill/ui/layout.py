from floodfill.constants import CONTROL_PANEL_HEIGHT, MIN_MARGIN, PREFERRED_SURFACE_SIZE, TILE_SIZE


def compute_surface_size(
    viewport_size: int,
    tile_size: int = TILE_SIZE,
    preferred: int = PREFERRED_SURFACE_SIZE,
    margin: int = MIN_MARGIN,
) -> int:
    """Side length of the square grid surface for the available viewport.

    Uses the preferred size (rounded down to whole tiles) when it fits with
    a margin on both sides, otherwise the largest multiple of tile_size that
    does (possibly 0).
    """
    preferred -= preferred % tile_size
    total_margin = 2 * margin
    if viewport_size >= preferred + total_margin:
        return preferred
    available = viewport_size - total_margin
    if available <= 0:
        return 0
    return available - (available % tile_size)


def available_viewport(window_width: int, window_height: int, panel_height: int = CONTROL_PANEL_HEIGHT) -> int:
    """The square area left for the surface once the control panel is placed."""
    return int(min(window_width, window_height - panel_height))


def compute_surface_origin(
    window_width: int,
    window_height: int,
    surface_size: int,
    panel_height: int = CONTROL_PANEL_HEIGHT,
    margin: int = MIN_MARGIN,
):
    """Return (left, top) of the surface in window coordinates.

    The surface is centred horizontally and hangs below the control panel.
    """
    left = (window_width - surface_size) / 2
    top = window_height - panel_height - margin
    return left, top


def window_to_surface(x: float, y: float, left: float, top: float):
    """Convert a window point (origin bottom-left) to surface coordinates (origin top-left)."""
    return x - left, top - y
