from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Mapping, Optional, Protocol, Tuple

from floodfill.components.draw_event import DrawEvent, DrawPhase, HighlightCategory
from floodfill.components.tile import Tile
from floodfill.constants import (
    PAINTED_HIGHLIGHT_COLOR,
    VALID_HIGHLIGHT_COLOR,
    VISITED_HIGHLIGHT_COLOR,
)

Color = Tuple[int, int, int]

HIGHLIGHT_COLORS: Mapping[HighlightCategory, Color] = {
    HighlightCategory.ALREADY_VISITED: VISITED_HIGHLIGHT_COLOR,
    HighlightCategory.ALREADY_PAINTED: PAINTED_HIGHLIGHT_COLOR,
    HighlightCategory.NEWLY_VALID: VALID_HIGHLIGHT_COLOR,
}


class FillRenderer(Protocol):
    def highlight(self, tile: Tile, color: Color) -> None: ...

    def unhighlight(self, tile: Tile) -> None: ...

    def commit_paint(self, tile: Tile) -> None: ...


class AnimationQueue:
    """Draw events of one fill, consumed one step group at a time.

    Each ``advance`` runs one phase for the contiguous front group sharing
    a step: first every tile in the group is highlighted, on the next call
    the group is removed, unhighlighted, and its newly valid tiles are
    painted. Depth k therefore highlights and commits before depth k+1
    starts.
    """

    def __init__(self, colors: Mapping[HighlightCategory, Color] = HIGHLIGHT_COLORS):
        self._events: Deque[DrawEvent] = deque()
        self._colors = colors

    def __len__(self) -> int:
        return len(self._events)

    @property
    def is_empty(self) -> bool:
        return not self._events

    @property
    def front_step(self) -> Optional[int]:
        return self._events[0].step if self._events else None

    @property
    def front_phase(self) -> Optional[DrawPhase]:
        return self._events[0].phase if self._events else None

    def events(self) -> List[DrawEvent]:
        return list(self._events)

    def load(self, events: Iterable[DrawEvent]) -> int:
        if self._events:
            raise RuntimeError("animation queue still holds events from a previous fill")
        self._events.extend(events)
        return len(self._events)

    def clear(self) -> List[DrawEvent]:
        discarded = list(self._events)
        self._events.clear()
        return discarded

    def advance(self, renderer: FillRenderer) -> bool:
        """Run one phase on the front step group; False once the queue is empty."""
        if not self._events:
            return False
        step = self._events[0].step
        if self._events[0].phase is DrawPhase.PENDING_HIGHLIGHT:
            for event in self._events:
                if event.step != step:
                    break
                renderer.highlight(event.tile, self._colors[event.category])
                event.phase = DrawPhase.PENDING_COMMIT
        else:
            while self._events and self._events[0].step == step:
                event = self._events.popleft()
                renderer.unhighlight(event.tile)
                if event.commits_paint:
                    event.tile.mark_painted()
                    renderer.commit_paint(event.tile)
        return True
