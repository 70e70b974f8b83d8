from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from floodfill.components.tool_state import Tool
from floodfill.constants import (
    CONTROL_BUTTON_GAP,
    CONTROL_BUTTON_HEIGHT,
    CONTROL_BUTTON_WIDTH,
    CONTROL_PANEL_HEIGHT,
)

ACTION_DRAW = "draw"
ACTION_FILL = "fill"
ACTION_STOP = "stop"
ACTION_RESET = "reset"
ACTION_SLOWER = "slower"
ACTION_FASTER = "faster"

_BUTTONS = (
    (ACTION_DRAW, "Draw"),
    (ACTION_FILL, "Fill"),
    (ACTION_STOP, "Stop"),
    (ACTION_RESET, "Reset"),
    (ACTION_SLOWER, "-"),
    (ACTION_FASTER, "+"),
)

SPEED_READOUT_WIDTH = 64


def format_speed(speed: float) -> str:
    return f"{speed:g}x"


@dataclass(slots=True)
class ControlButton:
    action: str
    label: str
    left: float
    bottom: float
    width: float
    height: float
    enabled: bool = True
    active: bool = False

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x <= self.left + self.width and self.bottom <= y <= self.bottom + self.height


@dataclass(slots=True)
class ControlPanel:
    """Button strip across the top of the window.

    The speed readout sits between the slower and faster buttons.
    """
    buttons: List[ControlButton]
    speed_label: str
    readout_x: float
    readout_y: float
    left: float
    bottom: float
    width: float
    height: float

    def hit_test(self, x: float, y: float) -> Optional[ControlButton]:
        for button in self.buttons:
            if button.contains(x, y):
                return button
        return None

    def button(self, action: str) -> Optional[ControlButton]:
        for button in self.buttons:
            if button.action == action:
                return button
        return None


def build_control_panel(
    window_width: float,
    window_height: float,
    *,
    tool: Tool,
    speed: float,
    can_increase: bool,
    can_decrease: bool,
    playback_active: bool,
    panel_height: int = CONTROL_PANEL_HEIGHT,
) -> ControlPanel:
    count = len(_BUTTONS)
    strip_width = count * CONTROL_BUTTON_WIDTH + (count - 1) * CONTROL_BUTTON_GAP + SPEED_READOUT_WIDTH
    x = (window_width - strip_width) / 2
    panel_bottom = window_height - panel_height
    bottom = panel_bottom + (panel_height - CONTROL_BUTTON_HEIGHT) / 2
    buttons: List[ControlButton] = []
    readout_x = x
    for action, label in _BUTTONS:
        enabled = True
        if action == ACTION_SLOWER:
            enabled = can_decrease
        elif action == ACTION_FASTER:
            enabled = can_increase
        elif action == ACTION_STOP:
            enabled = playback_active
        active = (action == ACTION_DRAW and tool is Tool.DRAW) or (action == ACTION_FILL and tool is Tool.FILL)
        buttons.append(ControlButton(
            action=action,
            label=label,
            left=x,
            bottom=bottom,
            width=CONTROL_BUTTON_WIDTH,
            height=CONTROL_BUTTON_HEIGHT,
            enabled=enabled,
            active=active,
        ))
        x += CONTROL_BUTTON_WIDTH + CONTROL_BUTTON_GAP
        if action == ACTION_SLOWER:
            readout_x = x + SPEED_READOUT_WIDTH / 2 - CONTROL_BUTTON_GAP / 2
            x += SPEED_READOUT_WIDTH
    return ControlPanel(
        buttons=buttons,
        speed_label=format_speed(speed),
        readout_x=readout_x,
        readout_y=bottom + CONTROL_BUTTON_HEIGHT / 2,
        left=0,
        bottom=panel_bottom,
        width=window_width,
        height=panel_height,
    )
