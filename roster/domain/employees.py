"""
The employee roster: an ordered list of names that can clone itself.

`Employees.clone()` is a shallow, field-by-field copy: the duplicate is a new
object but its `names` list is the very same list as the original's, so
appending through either holder shows up in both. `deep_clone()` is the
independent alternative. Types that must not be duplicated set
`cloneable = False` and both operations raise `CloneNotSupportedError`.
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional, TypeVar

from roster.exceptions import CloneNotSupportedError
from roster.sources.abstract import NameSource
from roster.sources.static import StaticNameSource
from roster.utils.logging import get_logger

log = get_logger(__name__)

E = TypeVar("E", bound="Employees")


class Employees:
    """
    Holder for an ordered list of employee names.

    Parameters
    ----------
    names : list[str] | None
        Existing list to wrap. The holder keeps a reference to this exact
        object; the caller and the holder see each other's changes. When
        omitted a new empty list is allocated.
    """

    cloneable: ClassVar[bool] = True

    def __init__(self, names: Optional[List[str]] = None) -> None:
        self._names: List[str] = [] if names is None else names

    @property
    def names(self) -> List[str]:
        """The live internal list (not a copy)."""
        return self._names

    def get_emp_list(self) -> List[str]:
        return self._names

    def load_data(self, source: Optional[NameSource] = None) -> None:
        """
        Append every name from `source` to the held list.

        Not idempotent: loading twice appends the same names twice.

        Parameters
        ----------
        source : NameSource | None
            Where to read names from. Defaults to the static employee list.
        """
        if source is None:
            source = StaticNameSource()
        fetched = source.fetch_names()
        self._names.extend(fetched)
        log.debug(
            "Loaded %d names from %s",
            len(fetched),
            source.name,
            extra={"source": source.name, "loaded": len(fetched), "size": len(self._names)},
        )

    def clone(self: E) -> E:
        """
        Return a shallow duplicate sharing this holder's `names` list.

        Raises
        ------
        CloneNotSupportedError
            If the concrete type has opted out of cloning.
        """
        self._ensure_cloneable()
        duplicate = self.__class__.__new__(self.__class__)
        duplicate.__dict__.update(self.__dict__)
        return duplicate

    def deep_clone(self: E) -> E:
        """
        Return a duplicate holding a new list with the same names.

        Raises
        ------
        CloneNotSupportedError
            If the concrete type has opted out of cloning.
        """
        duplicate = self.clone()
        duplicate._names = list(self._names)
        return duplicate

    def _ensure_cloneable(self) -> None:
        if not type(self).cloneable:
            raise CloneNotSupportedError(type(self).__name__)

    def __copy__(self: E) -> E:
        return self.clone()

    def __deepcopy__(self: E, memo: Dict[int, Any]) -> E:
        duplicate = self.deep_clone()
        memo[id(self)] = duplicate
        return duplicate

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._names!r})"


class SealedEmployees(Employees):
    """A roster that refuses to be duplicated."""

    cloneable: ClassVar[bool] = False


__all__ = ["Employees", "SealedEmployees"]
