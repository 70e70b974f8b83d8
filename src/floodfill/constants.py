# Surface sizing (pixels). The surface is square; it shrinks below the
# preferred size to a multiple of TILE_SIZE when the viewport is narrow.
PREFERRED_SURFACE_SIZE = 600
MIN_MARGIN = 10
TILE_SIZE = 25

# Height of the control strip drawn above the grid surface.
CONTROL_PANEL_HEIGHT = 56
CONTROL_BUTTON_WIDTH = 72
CONTROL_BUTTON_HEIGHT = 32
CONTROL_BUTTON_GAP = 8

# Playback timing. Delays are in milliseconds; the tick interval is
# floor(BASE_DRAW_DELAY / speed).
BASE_DRAW_DELAY = 500
SPEED_INCREMENT = 0.25
MIN_SPEED = SPEED_INCREMENT
MAX_SPEED = 2.0
INITIAL_SPEED = 1.0

GRID_LINE_WIDTH = 2

# Colors (RGB)
GRID_COLOR = (169, 169, 169)          # darkgray
GRID_BG_COLOR = (211, 211, 211)       # lightgray
ACTIVE_HIGHLIGHT_COLOR = (255, 255, 0)
VISITED_HIGHLIGHT_COLOR = (0, 0, 255)
PAINTED_HIGHLIGHT_COLOR = (255, 0, 0)
VALID_HIGHLIGHT_COLOR = (0, 128, 0)
FILL_COLOR = (173, 216, 230)          # lightblue
DRAW_COLOR = (0, 0, 0)

PANEL_BG_COLOR = (40, 40, 48)
BUTTON_COLOR = (90, 90, 104)
BUTTON_ACTIVE_COLOR = (70, 130, 180)
BUTTON_DISABLED_COLOR = (60, 60, 66)
BUTTON_TEXT_COLOR = (240, 240, 240)
BUTTON_DISABLED_TEXT_COLOR = (130, 130, 130)
