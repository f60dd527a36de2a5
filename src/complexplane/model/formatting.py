"""Text shown in the output labels and next to the drawn vectors."""
from __future__ import annotations

import math


def format_complex(real: float, imag: float) -> str:
    """
    Format a complex number with two decimals, e.g. ``"1.00 + 1.00i"``.

    The separator is always ``" + "``; a negative imaginary part keeps its
    own sign (``"1.00 + -1.00i"``).
    """
    return f"{_fixed(real, 2)} + {_fixed(imag, 2)}i"


def format_degrees(angle_rad: float) -> str:
    return f"{_fixed(math.degrees(angle_rad), 1)}°"


def format_angle(angle_deg: float, angle_rad: float) -> str:
    """Rotation angle output, e.g. ``"45.0° (0.79 rad)"``."""
    return f"{_fixed(angle_deg, 1)}° ({_fixed(angle_rad, 2)} rad)"


def vector_label(name: str, real: float, imag: float) -> str:
    return f"{name} = {format_complex(real, imag)}"


def _fixed(value: float, decimals: int) -> str:
    # Avoid "-0.00" for values that round to zero
    text = f"{value:.{decimals}f}"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text
