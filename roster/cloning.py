"""
Duplication helpers for the employee roster.

`duplicate()` is the free-standing form of the prototype operation: it asks
an object to clone itself (shallow by default) and surfaces any refusal to
the caller unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol, TypeVar, runtime_checkable

from roster.exceptions import CloneNotSupportedError
from roster.utils.logging import get_logger

log = get_logger(__name__)

T = TypeVar("T", bound="Cloneable")


class CloneMode(str, Enum):
    """How a duplicate relates to its original's storage."""

    SHALLOW = "shallow"
    DEEP = "deep"


@runtime_checkable
class Cloneable(Protocol):
    def clone(self: T) -> T: ...

    def deep_clone(self: T) -> T: ...


def duplicate(obj: T, deep: bool = False) -> T:
    """
    Produce a copy of `obj` via its own clone operations.

    Parameters
    ----------
    obj : Cloneable
        The prototype to copy.
    deep : bool
        If True, request an independent copy; otherwise reference-level state
        is shared with the original.

    Returns
    -------
    Cloneable
        A new instance of the same type as `obj`.

    Raises
    ------
    CloneNotSupportedError
        If `obj` is not cloneable or its type has opted out.
    """
    type_name = type(obj).__name__
    if not isinstance(obj, Cloneable):
        raise CloneNotSupportedError(type_name)

    mode = CloneMode.DEEP if deep else CloneMode.SHALLOW
    try:
        copy = obj.deep_clone() if deep else obj.clone()
    except CloneNotSupportedError:
        log.warning(
            "Refused to clone %s", type_name, extra={"type": type_name, "mode": mode.value}
        )
        raise
    log.debug("Cloned %s (%s)", type_name, mode.value, extra={"type": type_name, "mode": mode.value})
    return copy


__all__ = ["CloneMode", "Cloneable", "duplicate"]
