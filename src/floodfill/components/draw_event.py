from dataclasses import dataclass
from enum import Enum, auto

from floodfill.components.tile import Tile


class HighlightCategory(Enum):
    ALREADY_VISITED = auto()
    ALREADY_PAINTED = auto()
    NEWLY_VALID = auto()


class DrawPhase(Enum):
    PENDING_HIGHLIGHT = auto()
    PENDING_COMMIT = auto()


@dataclass(slots=True)
class DrawEvent:
    """What to render for one tile at one BFS step of a fill."""
    tile: Tile
    step: int
    category: HighlightCategory
    phase: DrawPhase = DrawPhase.PENDING_HIGHLIGHT

    @property
    def commits_paint(self) -> bool:
        return self.category is HighlightCategory.NEWLY_VALID
