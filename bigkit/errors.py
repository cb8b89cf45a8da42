"""Checked conditions that raise an error carrying a readable message."""

from __future__ import annotations

__all__ = ["CheckError", "ensure_not"]

_PREFIX = "Hit An Err Because condition "


class CheckError(Exception):
    """Raised when a condition that must not hold turns out to hold."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def ensure_not(condition: object, description: str) -> None:
    """Raise CheckError if ``condition`` is truthy.

    ``description`` is the text of the condition and ends up in the message.
    """
    if condition:
        raise CheckError(_PREFIX + description)