"""
BonCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "BonCalc"
VERSION = "1.0.0"

# Number formatting
MAX_FRACTION_DIGITS = 16
SIGNIFICANT_DIGITS = 15    # digits a double holds reliably
USE_GROUPING = False      # thousands separators ("1,234")
INFINITY_TEXT = "∞"       # shown after dividing by zero
NAN_TEXT = "NaN"          # shown for 0 ÷ 0

# Display Settings
WINDOW_WIDTH = 360
WINDOW_HEIGHT = 560
DISPLAY_FONT = ("Helvetica", 48)
BUTTON_FONT = ("Helvetica", 22)

# Button colours by key kind
BUTTON_COLORS = {
    "digit":    ("#555555", "#FFFFFF"),
    "point":    ("#555555", "#FFFFFF"),
    "function": ("#333333", "#FFFFFF"),
    "operator": ("#FF9500", "#FFFFFF"),
}
BG_COLOR = "#4B3F8C"
DISPLAY_FG = "#FFFFFF"

# Web Portal settings
START_WEB_PORTAL = True
WEB_HOST = '0.0.0.0'
WEB_PORT = 8888
API_SCRIPT = os.path.join(os.path.dirname(os.path.abspath(__file__)), "api.py")
