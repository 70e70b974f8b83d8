from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

from esper import World

from floodfill.components.board import Board
from floodfill.components.tile import Tile
from floodfill.events.bus import EVENT_GRID_REBUILT, EventBus

logger = logging.getLogger(__name__)

# North, south, east, west. Diagonals never count as adjacent.
ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, 1), (0, -1))


class GridSystem:
    """Owns the square tile grid: one Board entity plus one entity per Tile.

    Row 0 is the top row of the surface; surface points are measured from
    the surface's top-left corner.
    """

    def __init__(self, world: World, event_bus: EventBus, surface_size: int, tile_size: int):
        self.world = world
        self.event_bus = event_bus
        self.board_entity = self.world.create_entity()
        self._index: dict[Tuple[int, int], Tuple[int, Tile]] = {}
        self.world.add_component(
            self.board_entity,
            Board(rows=0, cols=0, tile_size=tile_size, surface_size=0),
        )
        self._build(surface_size)

    @property
    def board(self) -> Board:
        return self.world.component_for_entity(self.board_entity, Board)

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def cols(self) -> int:
        return self.board.cols

    def rebuild(self, surface_size: int) -> None:
        """Drop every tile and lay out a fresh grid for a new surface size."""
        for entity, _ in self._index.values():
            self.world.delete_entity(entity, immediate=True)
        self._index.clear()
        self._build(surface_size)
        board = self.board
        logger.info("grid rebuilt: %dx%d tiles on a %dpx surface", board.rows, board.cols, surface_size)
        self.event_bus.emit(
            EVENT_GRID_REBUILT, rows=board.rows, cols=board.cols, surface_size=surface_size
        )

    def _build(self, surface_size: int) -> None:
        board = self.board
        count = max(surface_size, 0) // board.tile_size
        board.rows = count
        board.cols = count
        board.surface_size = count * board.tile_size
        for r in range(board.rows):
            for c in range(board.cols):
                tile = Tile(row=r, col=c)
                ent = self.world.create_entity(tile)
                self._index[(r, c)] = (ent, tile)

    def tile_at(self, row: int, col: int) -> Optional[Tile]:
        entry = self._index.get((row, col))
        if entry is None:
            return None
        return entry[1]

    def tile_at_point(self, x: float, y: float) -> Optional[Tile]:
        """Resolve a surface-local point to its tile, or None when off the grid."""
        board = self.board
        if x < 0 or y < 0 or x >= board.surface_size or y >= board.surface_size:
            return None
        return self.tile_at(int(y // board.tile_size), int(x // board.tile_size))

    def entity_for(self, tile: Tile) -> Optional[int]:
        entry = self._index.get(tile.position)
        if entry is None or entry[1] is not tile:
            return None
        return entry[0]

    def contains(self, tile: Tile) -> bool:
        return self.entity_for(tile) is not None

    def neighbors(self, tile: Tile) -> List[Tile]:
        found: List[Tile] = []
        for dr, dc in ORTHOGONAL_OFFSETS:
            other = self.tile_at(tile.row + dr, tile.col + dc)
            if other is not None:
                found.append(other)
        return found

    def tiles(self) -> Iterator[Tile]:
        for _, tile in self._index.values():
            yield tile

    def reset(self) -> None:
        """Return every tile to UNVISITED. Callers stop playback first."""
        for tile in self.tiles():
            tile.reset()
