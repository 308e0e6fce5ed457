"""
Byte Package Builder - Editor Constants

All configuration constants for the editor including window size,
layout values and colors.
"""

# Window
WINDOW_WIDTH = 900
WINDOW_HEIGHT = 640
WINDOW_TITLE = "Byte Package Builder"
FPS = 60

# UI Layout
MARGIN = 16
HEADER_HEIGHT = 28
ROW_HEIGHT = 36
ROW_SPACING = 4
FIELD_SPACING = 8
DELETE_BUTTON_WIDTH = 48
VALUE_COLUMN_WEIGHT = 2  # Value : description width ratio is 2 : 5
DESCRIPTION_COLUMN_WEIGHT = 5
PRESET_BAR_HEIGHT = 48
ACTION_BAR_HEIGHT = 48
STATUS_HEIGHT = 30
SCROLL_STEP = ROW_HEIGHT

# Text input
FIELD_PADDING = 8
MAX_DESCRIPTION_LENGTH = 200
CURSOR_BLINK_MS = 500

# Status toast duration
STATUS_MESSAGE_MS = 2500

# Colors
COLOR_BG = (48, 48, 48)
COLOR_PANEL = (40, 40, 40)
COLOR_STATUS = (32, 32, 32)
COLOR_GRID = (80, 80, 80)
COLOR_SELECTION = (255, 255, 0)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DARK = (20, 20, 20)
COLOR_TEXT_MUTED = (150, 150, 150)
COLOR_BUTTON = (64, 64, 64)
COLOR_BUTTON_HOVER = (80, 80, 80)
COLOR_BUTTON_DISABLED = (52, 52, 52)
COLOR_FIELD = (255, 255, 255)
COLOR_FIELD_READONLY = (238, 238, 238)
COLOR_FIELD_INVALID = (248, 187, 208)  # Pink for odd-length values
COLOR_ERROR = (255, 50, 50)
