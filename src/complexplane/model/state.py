"""
Session State (Data Model)
==========================
This module defines the data the running application keeps between user
actions.

Why is this file needed?
------------------------
1. State Management: It holds the single confirmed complex number and the
   visible form (input texts, enablement, outputs) in one place.
2. Decoupling: The controller writes to these objects; the window only
   mirrors them onto its widgets.

Classes:
    SessionState: The confirmed complex number, or nothing.
    FormState: Everything the control panel displays.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Optional

from complexplane.config import (
    DEFAULT_REAL, DEFAULT_IMAG, DEFAULT_ANGLE, DEFAULT_MULTIPLIER_REAL, DEFAULT_MULTIPLIER_IMAG,
)
from complexplane.model.arithmetic import ComplexNumber

logger = logging.getLogger(__name__)


class Field(str, Enum):
    """The five numeric inputs."""
    REAL = "real"
    IMAG = "imag"
    ANGLE = "angle"
    MULTIPLIER_REAL = "multiplier_real"
    MULTIPLIER_IMAG = "multiplier_imag"


class Action(str, Enum):
    """The confirm buttons whose enablement follows the session."""
    CONFIRM_COMPLEX = "confirm_complex"
    CONFIRM_ROTATE = "confirm_rotate"
    CONFIRM_MULTIPLY = "confirm_multiply"


class Output(str, Enum):
    """The five read-only text outputs."""
    INITIAL = "initial"
    ROTATION_ANGLE = "rotation_angle"
    ROTATED = "rotated"
    MULTIPLIER = "multiplier"
    PRODUCT = "product"


DEFAULT_INPUTS: dict[Field, str] = {
    Field.REAL: DEFAULT_REAL,
    Field.IMAG: DEFAULT_IMAG,
    Field.ANGLE: DEFAULT_ANGLE,
    Field.MULTIPLIER_REAL: DEFAULT_MULTIPLIER_REAL,
    Field.MULTIPLIER_IMAG: DEFAULT_MULTIPLIER_IMAG,
}

# Input groups, each unlocked or locked together with its confirm button
COMPLEX_GROUP = (Field.REAL, Field.IMAG, Action.CONFIRM_COMPLEX)
ROTATE_GROUP = (Field.ANGLE, Action.CONFIRM_ROTATE)
MULTIPLY_GROUP = (Field.MULTIPLIER_REAL, Field.MULTIPLIER_IMAG, Action.CONFIRM_MULTIPLY)


@dataclass
class SessionState:
    """
    Holds the currently confirmed complex number.
    `current` is None until the user confirms one, and again after a reset.
    """
    current: Optional[ComplexNumber] = None

    @property
    def is_set(self) -> bool:
        return self.current is not None

    def confirm(self, value: ComplexNumber) -> None:
        """Replace any previous number; no history is kept."""
        self.current = value
        logger.debug(f"Session set to {value}")

    def reset(self) -> None:
        self.current = None
        logger.debug("Session cleared.")


def _initial_enablement() -> dict[Field | Action, bool]:
    enabled: dict[Field | Action, bool] = {}
    for key in COMPLEX_GROUP:
        enabled[key] = True
    for key in ROTATE_GROUP + MULTIPLY_GROUP:
        enabled[key] = False
    return enabled


@dataclass
class FormState:
    """Everything the control panel shows: input texts, enablement, outputs and focus."""
    inputs: dict[Field, str] = field(default_factory=lambda: dict(DEFAULT_INPUTS))
    enabled: dict[Field | Action, bool] = field(default_factory=_initial_enablement)
    outputs: dict[Output, str] = field(default_factory=lambda: {o: "" for o in Output})
    focus: Optional[Field] = Field.REAL

    def set_group_enabled(self, group: tuple[Field | Action, ...], enabled: bool) -> None:
        for key in group:
            self.enabled[key] = enabled

    def clear_outputs(self, *outputs: Output) -> None:
        """Clear the given outputs, or all of them when none are given."""
        for key in outputs or tuple(Output):
            self.outputs[key] = ""

    def reset(self) -> None:
        self.inputs = dict(DEFAULT_INPUTS)
        self.enabled = _initial_enablement()
        self.clear_outputs()
        self.focus = Field.REAL
