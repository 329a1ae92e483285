"""
Abstract data source interfaces for populating an employee roster.

Concrete sources implement the NameSource protocol (or subclass
AbstractNameSource) and hand back a fresh list of names on every call, in the
order the holder should store them.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, runtime_checkable


@runtime_checkable
class NameSource(Protocol):
    """
    Common interface all name sources must implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of where the names come from.
    """

    name: str
    description: str

    def fetch_names(self) -> List[str]:
        """
        Return the names to append to a roster, in load order.

        Returns
        -------
        List[str]
            A list owned by the caller; duplicates are allowed.
        """
        ...


class AbstractNameSource(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `name` and `description` and implement `fetch_names`.
    """

    name: str
    description: str

    @abc.abstractmethod
    def fetch_names(self) -> List[str]:  # pragma: no cover - interface only
        """Return the names to load."""
        raise NotImplementedError


__all__ = [
    "NameSource",
    "AbstractNameSource",
]
