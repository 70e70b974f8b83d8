from __future__ import annotations

from typing import Iterable, Tuple

from floodfill.components.tile import Tile
from floodfill.config import FloodFillConfig
from floodfill.events.bus import EventBus
from floodfill.world import Session, create_session


class DummyWindow:
    def __init__(self, width=620, height=676):
        self.width = width
        self.height = height


class RecordingRenderer:
    """Captures renderer calls as (name, (row, col), extra) tuples."""

    def __init__(self):
        self.calls: list[tuple] = []

    def highlight(self, tile: Tile, color) -> None:
        self.calls.append(("highlight", tile.position, color))

    def unhighlight(self, tile: Tile) -> None:
        self.calls.append(("unhighlight", tile.position, None))

    def commit_paint(self, tile: Tile) -> None:
        self.calls.append(("commit_paint", tile.position, None))

    def names(self) -> list[str]:
        return [name for name, _, _ in self.calls]

    def positions(self, name: str) -> list[Tuple[int, int]]:
        return [pos for call, pos, _ in self.calls if call == name]


def make_session(size: int = 3, tile_size: int = 10, **config_overrides) -> Session:
    """A session whose grid is ``size`` x ``size`` tiles."""
    config = FloodFillConfig(
        tile_size=tile_size,
        preferred_surface_size=max(size * tile_size, tile_size),
        **config_overrides,
    )
    return create_session(EventBus(), config, surface_size=size * tile_size)


def paint_cells(session: Session, cells: Iterable[Tuple[int, int]]) -> None:
    for row, col in cells:
        session.grid.tile_at(row, col).mark_painted()
