"""
Static name source: a fixed, in-memory list standing in for the employee table.

Used by `Employees.load_data` whenever no real source is wired in, so loading
is deterministic.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from roster.sources.abstract import AbstractNameSource

DEFAULT_EMPLOYEE_NAMES: Tuple[str, ...] = ("Pankaj", "Raj", "David", "Lisa")


class StaticNameSource(AbstractNameSource):
    """
    Yield a fixed sequence of names.

    The names are captured at construction; later changes to the iterable
    passed in do not leak into the source.
    """

    name: str = "static"
    description: str = "Hard-coded employee names (no database wired in)."

    def __init__(self, names: Iterable[str] = DEFAULT_EMPLOYEE_NAMES) -> None:
        self._names: Tuple[str, ...] = tuple(names)

    def fetch_names(self) -> List[str]:
        return list(self._names)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._names)!r})"


__all__ = ["DEFAULT_EMPLOYEE_NAMES", "StaticNameSource"]
