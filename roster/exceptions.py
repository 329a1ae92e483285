"""
Exception hierarchy for the employee roster package.

Only duplication can fail; construction, population and list access are
infallible under normal memory conditions.
"""

from __future__ import annotations


class RosterError(Exception):
    """Base class for all roster errors."""


class CloneNotSupportedError(RosterError):
    """
    Raised when a holder type has opted out of duplication.

    Attributes
    ----------
    type_name : str
        Name of the concrete type that refused to be cloned.
    """

    def __init__(self, type_name: str) -> None:
        self.type_name = type_name
        super().__init__(f"{type_name} does not support cloning")


__all__ = ["RosterError", "CloneNotSupportedError"]
