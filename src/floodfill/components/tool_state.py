from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class Tool(Enum):
    DRAW = "draw"
    FILL = "fill"


@dataclass(slots=True)
class ToolState:
    """Singleton component for pointer tooling.

    active_tile is the grid position under the pointer (highlighted yellow);
    drawing is True while the pen is held down with the draw tool.
    """
    tool: Tool = Tool.DRAW
    active_tile: Optional[Tuple[int, int]] = None
    drawing: bool = False
