from __future__ import annotations

from typing import TYPE_CHECKING

from floodfill.constants import (
    BUTTON_ACTIVE_COLOR,
    BUTTON_COLOR,
    BUTTON_DISABLED_COLOR,
    BUTTON_DISABLED_TEXT_COLOR,
    BUTTON_TEXT_COLOR,
    PANEL_BG_COLOR,
)

if TYPE_CHECKING:
    from floodfill.rendering.context import RenderContext


class PanelRenderer:
    """Draws the tool buttons, speed controls and speed readout."""

    def __init__(self, font_size: int = 14):
        self._font_size = font_size

    def render(self, arcade, ctx: RenderContext) -> None:
        panel = ctx.panel
        arcade.draw_lrbt_rectangle_filled(
            panel.left, panel.left + panel.width, panel.bottom, panel.bottom + panel.height, PANEL_BG_COLOR
        )
        for button in panel.buttons:
            if not button.enabled:
                fill = BUTTON_DISABLED_COLOR
                text_color = BUTTON_DISABLED_TEXT_COLOR
            elif button.active:
                fill = BUTTON_ACTIVE_COLOR
                text_color = BUTTON_TEXT_COLOR
            else:
                fill = BUTTON_COLOR
                text_color = BUTTON_TEXT_COLOR
            arcade.draw_lrbt_rectangle_filled(
                button.left, button.left + button.width, button.bottom, button.bottom + button.height, fill
            )
            arcade.draw_text(
                button.label,
                button.left + button.width / 2,
                button.bottom + button.height / 2,
                text_color,
                self._font_size,
                anchor_x="center",
                anchor_y="center",
            )
        arcade.draw_text(
            panel.speed_label,
            panel.readout_x,
            panel.readout_y,
            BUTTON_TEXT_COLOR,
            self._font_size,
            anchor_x="center",
            anchor_y="center",
        )
