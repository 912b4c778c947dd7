"""Validation functions for text typed into edit sessions."""

from __future__ import annotations


def clamp(value, minimum=None, maximum=None):
    """Clamp value into [minimum, maximum]; a None bound is open."""
    if minimum is not None and value < minimum:
        return minimum
    if maximum is not None and value > maximum:
        return maximum
    return value


def validate_int(value: str, minimum: int | None = None, maximum: int | None = None) -> int | None:
    """Parse an integer and clamp it into range.

    Args:
        value: String value from the edit buffer
        minimum: Lower bound (None for no bound)
        maximum: Upper bound (None for no bound)

    Returns:
        Clamped integer or None if the text is not an integer
    """
    stripped = value.strip()
    try:
        num = int(stripped)
    except ValueError:
        return None
    return clamp(num, minimum, maximum)


def validate_float(value: str, minimum: float | None = None, maximum: float | None = None) -> float | None:
    """Parse a decimal number and clamp it into range.

    Returns:
        Clamped float or None if the text is not a finite number
    """
    stripped = value.strip()
    try:
        num = float(stripped)
    except ValueError:
        return None
    # nan/inf parse fine but are never meaningful settings
    if num != num or num in (float("inf"), float("-inf")):
        return None
    return clamp(num, minimum, maximum)


def validate_text(value: str) -> str:
    """Strings are stored exactly as typed (separators rely on spaces)."""
    return value
