from __future__ import annotations

import math

from complexplane.model.errors import InvalidNumericInput


def parse_number(text: str, field: str, message: str | None = None) -> float:
    """
    Parse the text of an input field into a finite float.

    Args:
        text: Raw text typed by the user. Surrounding whitespace is ignored.
        field: Key of the input field, attached to the raised error.
        message: User-facing message for the error. Defaults to a generic one.

    Raises:
        InvalidNumericInput: If the text is empty, not a number, or not finite.
    """
    message = message or f"Invalid number in field '{field}'."
    stripped = (text or "").strip()
    if not stripped:
        raise InvalidNumericInput(message, (field,))
    try:
        value = float(stripped)
    except ValueError:
        raise InvalidNumericInput(message, (field,)) from None
    if not math.isfinite(value):
        raise InvalidNumericInput(message, (field,))
    return value
