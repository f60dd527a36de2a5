"""
Complex Arithmetic
==================
Closed-form rotation and multiplication on (real, imaginary) pairs.

All functions are pure and total over finite floats. Inputs are validated by
the controller before they get here, so NaN never enters.
"""
from __future__ import annotations

import math
from typing import NamedTuple


class ComplexNumber(NamedTuple):
    """An immutable complex number stored as an ordered pair."""
    real: float
    imag: float

    @property
    def magnitude(self) -> float:
        return magnitude(self.real, self.imag)

    def is_negligible(self, eps: float) -> bool:
        """True when both parts are within `eps` of zero."""
        return abs(self.real) <= eps and abs(self.imag) <= eps


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180)


def magnitude(x: float, y: float) -> float:
    """Euclidean norm of the pair (x, y)."""
    return math.sqrt(x * x + y * y)


def rotate(x: float, y: float, angle_rad: float) -> ComplexNumber:
    """
    Rotate the point (x, y) about the origin.

    Args:
        x: Real part.
        y: Imaginary part.
        angle_rad: Rotation angle in radians, counter-clockwise positive.

    Returns:
        The rotated point (x cos θ - y sin θ, x sin θ + y cos θ).
    """
    cos_theta = math.cos(angle_rad)
    sin_theta = math.sin(angle_rad)
    return ComplexNumber(
        x * cos_theta - y * sin_theta,
        x * sin_theta + y * cos_theta,
    )


def multiply(a_real: float, a_imag: float, b_real: float, b_imag: float) -> ComplexNumber:
    """(a + bi) * (c + di) = (ac - bd) + (ad + bc)i"""
    return ComplexNumber(
        a_real * b_real - a_imag * b_imag,
        a_real * b_imag + a_imag * b_real,
    )
