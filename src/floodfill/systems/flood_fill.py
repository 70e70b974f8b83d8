from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Set, Tuple

from floodfill.components.draw_event import DrawEvent, HighlightCategory
from floodfill.components.tile import Tile
from floodfill.systems.grid import GridSystem


class InvalidStartTileError(ValueError):
    """Raised when a fill is started from no tile or a tile outside the grid."""


def classify(tile: Tile) -> HighlightCategory:
    # Visited wins over painted: a committed fill is reported as visited.
    if tile.visited:
        return HighlightCategory.ALREADY_VISITED
    if tile.painted:
        return HighlightCategory.ALREADY_PAINTED
    return HighlightCategory.NEWLY_VALID


def flood_fill(grid: GridSystem, start: Optional[Tile]) -> List[DrawEvent]:
    """Breadth-first fill from ``start``, returning every draw event in order.

    The whole traversal runs before returning. Tiles that were visited or
    painted before they were dequeued still get an event (for feedback) but
    are not expanded. Newly valid tiles are marked visited and their
    orthogonal neighbours queued one step deeper, each tile at most once
    per run, so a NEWLY_VALID event's step is its BFS distance from start.
    """
    if start is None or not grid.contains(start):
        raise InvalidStartTileError(f"cannot fill from {start!r}")

    events: List[DrawEvent] = []
    checked: Set[Tuple[int, int]] = {start.position}
    queue: Deque[Tuple[Tile, int]] = deque()
    start.pending_check = True
    queue.append((start, 0))

    while queue:
        tile, step = queue.popleft()
        tile.pending_check = False
        category = classify(tile)
        events.append(DrawEvent(tile=tile, step=step, category=category))
        if category is not HighlightCategory.NEWLY_VALID:
            continue
        tile.mark_visited()
        for neighbor in grid.neighbors(tile):
            if neighbor.pending_check or neighbor.position in checked:
                continue
            neighbor.pending_check = True
            checked.add(neighbor.position)
            queue.append((neighbor, step + 1))
    return events
