"""Application configuration constants."""

from __future__ import annotations

# Window
WINDOW_TITLE = "Simple Image Viewer"
TARGET_FPS = 60

# Image bounds (pixels)
MAX_SCREEN_WIDTH = 2400
MAX_IMAGE_HEIGHT = 1350
PANE_HEIGHT = 40
MAX_SCREEN_HEIGHT = MAX_IMAGE_HEIGHT + PANE_HEIGHT
MONITOR_FIT_FRAC = 0.90

# Loading
PREFETCH_SPAN = 10

# Magnification applied when scaling is toggled on (percent)
DEFAULT_RATIO_PERCENT = 150

# Caption
FONT_PATH = "./fonts/NotoSansKR-Regular.ttf"
FONT_SIZE = PANE_HEIGHT >> 1
CAPTION_MARGIN_X = 10
CAPTION_MARGIN_Y = PANE_HEIGHT >> 2

# Colours (RGBA)
COLOR_BACKGROUND = (0, 0, 0, 255)
COLOR_PANE = (0, 0, 0, 255)
COLOR_TEXT = (255, 255, 255, 255)
COLOR_TINT = (255, 255, 255, 255)
COLOR_BLANK = (0, 0, 0, 0)

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_QUIT = 81               # KEY_Q
KEY_PREV_IMAGE = 263        # KEY_LEFT
KEY_PREV_IMAGE_ALT = 65     # KEY_A
KEY_NEXT_IMAGE = 262        # KEY_RIGHT
KEY_NEXT_IMAGE_ALT = 68     # KEY_D
KEY_TOGGLE_SCALE = 69       # KEY_E

# WebP header signature
WEBP_MAGIC_SIZE = 16
WEBP_RIFF_MAGIC = 0x46464952        # "RIFF"
WEBP_VP8_MAGIC = 0x2038505650424557  # "WEBPVP8 "
