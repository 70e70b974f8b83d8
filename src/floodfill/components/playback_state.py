"""Playback state resource mirrored from the scheduler for renderers and UI."""
from dataclasses import dataclass
from enum import Enum, auto


class PlaybackMode(Enum):
    IDLE = auto()
    ACTIVE = auto()


@dataclass
class PlaybackState:
    mode: PlaybackMode = PlaybackMode.IDLE
    speed: float = 1.0
    can_increase: bool = True
    can_decrease: bool = True
