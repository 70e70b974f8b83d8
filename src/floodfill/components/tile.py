from dataclasses import dataclass
from enum import Enum, auto


class TileState(Enum):
    """Exclusive tile status.

    FILLED is a tile that a fill both expanded and committed; PAINTED is a
    tile covered by the draw tool without ever being expanded.
    """
    UNVISITED = auto()
    VISITED = auto()
    PAINTED = auto()
    FILLED = auto()


_VISITED_STATES = frozenset({TileState.VISITED, TileState.FILLED})
_PAINTED_STATES = frozenset({TileState.PAINTED, TileState.FILLED})


@dataclass(slots=True, eq=False)
class Tile:
    """One grid cell. Compared by identity; (row, col) is unique per grid.

    State only moves forward (UNVISITED -> VISITED/PAINTED -> FILLED) until
    ``reset``. ``pending_check`` is traversal bookkeeping and is true only
    while the tile waits in a discovery queue.
    """
    row: int
    col: int
    state: TileState = TileState.UNVISITED
    pending_check: bool = False

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def visited(self) -> bool:
        return self.state in _VISITED_STATES

    @property
    def painted(self) -> bool:
        return self.state in _PAINTED_STATES

    def mark_visited(self) -> None:
        if self.state is TileState.UNVISITED:
            self.state = TileState.VISITED
        elif self.state is TileState.PAINTED:
            self.state = TileState.FILLED

    def mark_painted(self) -> None:
        if self.state is TileState.UNVISITED:
            self.state = TileState.PAINTED
        elif self.state is TileState.VISITED:
            self.state = TileState.FILLED

    def reset(self) -> None:
        self.state = TileState.UNVISITED
        self.pending_check = False
