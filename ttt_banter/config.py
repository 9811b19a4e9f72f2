"""
fixed settings for the game and its windows
"""

# -----------------------------------------------------------------------------
# THEME COLORS
# -----------------------------------------------------------------------------

PRIMARY = "#4A90E2"      # X, active 2-player button
SECONDARY = "#FFFFFF"
ACCENT = "#D0021B"       # O, winner, active vs-ai button

WINDOW_COLOR = "#F7F9FC"
WINDOW_TEXT_COLOR = "#282C34"
BASE_COLOR = "#FFFFFF"
ALT_BASE_COLOR = "#EEF2F7"
BUTTON_COLOR = "#E6EBF2"
BUTTON_TEXT_COLOR = "#282C34"
HIGHLIGHT_COLOR = PRIMARY
HIGHLIGHTED_TEXT_COLOR = SECONDARY
DISABLED_TEXT_COLOR = "#A0A6B0"

GRID_COLOR = "#C8D0DC"
CELL_COLOR = SECONDARY
WIN_CELL_COLOR = "#FFF3C4"   # background behind the winning line
MUTED_TEXT_COLOR = "#AAAAAA"

# -----------------------------------------------------------------------------
# GAME
# -----------------------------------------------------------------------------

AI_DELAY_MS = 400        # opponent "thinking" pause
COMPACT_WIDTH = 400      # below this the window uses the compact layout
HISTORY_SIZE = 5         # commentary lines kept on screen

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = "WARNING"
