"""
Configuration & Constants
=========================
This module serves as the central registry for drawing constants, default
input values and user-facing strings.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (pixels per unit, colours, default
   texts) scattered throughout the renderer and the controller.
2. Locale: The alert messages live here, in Simplified Chinese.

Exports:
    CANVAS_WIDTH, CANVAS_HEIGHT (int): Drawing surface size in pixels.
    SCALE (float): Pixels per unit of the complex plane.
    DEFAULT_REAL ... DEFAULT_MULTIPLIER_IMAG (str): Default input texts.
"""
import math

# --- Drawing surface ---
CANVAS_WIDTH: int = 600
CANVAS_HEIGHT: int = 600
SCALE: float = 40.0  # Pixels per unit

# --- Vectors ---
ARROW_LENGTH: float = 8.0
ARROW_SPREAD: float = math.pi / 6
VECTOR_WIDTH: float = 2.0
LABEL_OFFSET: float = 5.0
LABEL_DROP: float = 15.0
LABEL_FONT_SIZE: int = 12

# --- Axes ---
AXIS_COLOR: str = "#ccc"
AXIS_LABEL_COLOR: str = "#999"
AXIS_FONT_SIZE: int = 10
TICK_HALF_LENGTH: float = 3.0

# --- Rotation arc ---
ARC_COLOR: str = "#aaa"
ARC_LABEL_COLOR: str = "#555"
ARC_FONT_SIZE: int = 11
ARC_DASH: tuple[float, float] = (3.0, 3.0)
ARC_SEGMENTS_PER_TURN: int = 180
MIN_ARC_RADIUS: float = 0.01

# Multiplier vectors shorter than this are not drawn
MIN_MULTIPLIER_MAGNITUDE: float = 1e-6

COLOR_INITIAL: str = "blue"
COLOR_ROTATED: str = "red"
COLOR_MULTIPLIER: str = "green"
COLOR_PRODUCT: str = "purple"

# --- Inputs ---
DEFAULT_REAL: str = "1"
DEFAULT_IMAG: str = "1"
DEFAULT_ANGLE: str = "45"
DEFAULT_MULTIPLIER_REAL: str = "0"
DEFAULT_MULTIPLIER_IMAG: str = "1"

# --- Messages (zh_CN) ---
MSG_INVALID_COMPLEX: str = "请输入有效的实部和虚部！"
MSG_INVALID_ANGLE: str = "请输入有效的旋转角度！"
MSG_INVALID_MULTIPLIER: str = "请输入有效的乘数实部和虚部！"
MSG_SESSION_UNSET: str = "请先确定初始复数！"

VISIBLE_APP_NAME: str = "复平面旋转"

# --- Logging ---
LOGGER_NAME: str = "complexplane"
DEBUG_FLAG: str = "--debug"
DEBUG_LOG_FILE: str = "complexplane_debug.log"
