"""
Session Controller
==================
Wires the four user actions (confirm, rotate, multiply, reset) to input
validation, arithmetic, redraw and input enablement.

Every action either fails before touching anything (raising
`InvalidNumericInput`) or runs to completion: the session, the form and the
surface are never left half-updated.
"""
from __future__ import annotations

import logging

from complexplane.config import (
    COLOR_INITIAL, COLOR_MULTIPLIER, COLOR_PRODUCT, COLOR_ROTATED, MIN_MULTIPLIER_MAGNITUDE,
    MSG_INVALID_ANGLE, MSG_INVALID_COMPLEX, MSG_INVALID_MULTIPLIER, MSG_SESSION_UNSET,
)
from complexplane.model import arithmetic
from complexplane.model.arithmetic import ComplexNumber
from complexplane.model.errors import InvalidNumericInput
from complexplane.model.formatting import format_angle, format_complex, vector_label
from complexplane.model.parsing import parse_number
from complexplane.model.state import (
    COMPLEX_GROUP, MULTIPLY_GROUP, ROTATE_GROUP, Field, FormState, Output, SessionState,
)
from complexplane.view.renderer import PlaneRenderer

logger = logging.getLogger(__name__)


class SessionController:
    """Owns the session and form state and redraws the full scene after each action."""

    def __init__(self, session: SessionState, form: FormState, renderer: PlaneRenderer) -> None:
        self.session = session
        self.form = form
        self.renderer = renderer

    # --- ACTIONS ---

    def confirm(self, real_text: str, imag_text: str) -> ComplexNumber:
        """Commit a new initial complex number and unlock rotate/multiply."""
        a, b = self._parse_pair(real_text, imag_text, Field.REAL, Field.IMAG, MSG_INVALID_COMPLEX)
        z = ComplexNumber(a, b)
        self.session.confirm(z)

        self._draw_initial_scene(z)

        self.form.clear_outputs()
        self.form.outputs[Output.INITIAL] = format_complex(a, b)

        self.form.set_group_enabled(COMPLEX_GROUP, False)
        self.form.set_group_enabled(ROTATE_GROUP, True)
        self.form.set_group_enabled(MULTIPLY_GROUP, True)
        self.form.focus = Field.ANGLE

        logger.info(f"Confirmed initial complex number {format_complex(a, b)}")
        return z

    def rotate(self, angle_text: str) -> ComplexNumber:
        """Rotate the confirmed number by an angle given in degrees."""
        z = self._require_session()
        try:
            angle_deg = parse_number(angle_text, Field.ANGLE.value, MSG_INVALID_ANGLE)
        except InvalidNumericInput:
            logger.warning(f"Invalid rotation angle: {angle_text!r}")
            raise
        angle_rad = arithmetic.degrees_to_radians(angle_deg)

        rotated = arithmetic.rotate(z.real, z.imag, angle_rad)

        self._draw_initial_scene(z)
        self.renderer.draw_vector(
            rotated.real, rotated.imag, COLOR_ROTATED, vector_label("z'", rotated.real, rotated.imag)
        )
        self.renderer.draw_rotation_arc(angle_rad, z.magnitude)

        self.form.outputs[Output.ROTATION_ANGLE] = format_angle(angle_deg, angle_rad)
        self.form.outputs[Output.ROTATED] = format_complex(rotated.real, rotated.imag)

        # Ready for the next complex number; the session value is kept for multiply
        self.form.set_group_enabled(ROTATE_GROUP, False)
        self.form.set_group_enabled(COMPLEX_GROUP, True)
        self.form.focus = Field.REAL

        logger.info(f"Rotated {format_complex(*z)} by {angle_deg:g}° -> {format_complex(*rotated)}")
        return rotated

    def multiply(self, mult_real_text: str, mult_imag_text: str) -> ComplexNumber:
        """Multiply the confirmed number by w = c + di. Enablement is left unchanged."""
        z = self._require_session()
        c, d = self._parse_pair(
            mult_real_text, mult_imag_text, Field.MULTIPLIER_REAL, Field.MULTIPLIER_IMAG,
            MSG_INVALID_MULTIPLIER,
        )
        w = ComplexNumber(c, d)
        product = arithmetic.multiply(z.real, z.imag, c, d)

        self._draw_initial_scene(z)
        if not w.is_negligible(MIN_MULTIPLIER_MAGNITUDE):
            self.renderer.draw_vector(c, d, COLOR_MULTIPLIER, vector_label("w", c, d))
        self.renderer.draw_vector(
            product.real, product.imag, COLOR_PRODUCT, vector_label("z*w", product.real, product.imag)
        )

        # The scene no longer depicts a rotation
        self.form.clear_outputs(Output.ROTATION_ANGLE, Output.ROTATED)
        self.form.outputs[Output.MULTIPLIER] = format_complex(c, d)
        self.form.outputs[Output.PRODUCT] = format_complex(product.real, product.imag)
        # Focus stays wherever the user left it
        self.form.focus = None

        logger.info(f"Multiplied {format_complex(*z)} by {format_complex(c, d)} -> {format_complex(*product)}")
        return product

    def reset(self) -> None:
        """Back to the start: default inputs, no session, bare axes, initial enablement."""
        self.form.reset()
        self.session.reset()
        self.renderer.redraw()
        logger.info("Session reset.")

    # --- HELPERS ---

    def _require_session(self) -> ComplexNumber:
        if self.session.current is None:
            logger.warning("Operation rejected: no initial complex number confirmed.")
            raise InvalidNumericInput(MSG_SESSION_UNSET)
        return self.session.current

    @staticmethod
    def _parse_pair(first_text: str, second_text: str, first: Field, second: Field,
                    message: str) -> tuple[float, float]:
        """Parse two inputs; the error names every field that failed."""
        values: list[float] = []
        bad: list[str] = []
        for text, key in ((first_text, first), (second_text, second)):
            try:
                values.append(parse_number(text, key.value, message))
            except InvalidNumericInput:
                bad.append(key.value)
        if bad:
            logger.warning(f"Invalid numeric input in {', '.join(bad)}")
            raise InvalidNumericInput(message, tuple(bad))
        return values[0], values[1]

    def _draw_initial_scene(self, z: ComplexNumber) -> None:
        self.renderer.redraw()
        self.renderer.draw_vector(z.real, z.imag, COLOR_INITIAL, vector_label("z", z.real, z.imag))
