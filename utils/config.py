# File format constants
IMAGE_EXTS = frozenset({".jpg", ".png", ".bmp", ".gif"})
OPEN_DIALOG_FILTER = "Images (*.png *.jpg *.bmp *.gif)"

# Application
APP_NAME = "Simple Image Viewer"
SHUTDOWN_WAIT_MS = 1000

# Themes
THEME_NAMES = ("light", "dark")
DEFAULT_THEME = "dark"
FALLBACK_TEXT_COLOR = "#ffffff"

# UI Constants
FOUND_TEMPLATE = "Found: {count}"
WINDOW_SIZE_FRACTION = (0.7, 0.8)
