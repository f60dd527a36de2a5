"""
Error Types
===========
Every failure the user can trigger is a validation failure: a text field
that does not hold a finite number, or an operation attempted before an
initial complex number was confirmed.
"""
from __future__ import annotations


class ComplexPlaneError(Exception):
    """Base class for all errors raised by the package."""


class InvalidNumericInput(ComplexPlaneError, ValueError):
    """
    A required input could not be used as a number.

    Attributes:
        message: User-facing text, shown verbatim in the alert dialog.
        fields: Keys of the offending input fields (may be empty).
    """
    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.fields = fields
