"""
Demonstration driver for the prototype pattern.

Usage (example from CLI):
    from roster.demo import run_demo

    result = run_demo(mode="shallow", add=["Ana"], remove=["Raj"])
    print(result.original.names, result.duplicate.names)

The duplicate is mutated through its `names` list. With a shallow clone the
original sees every change; with a deep clone it does not.
"""

from __future__ import annotations

from typing import Iterable, Optional

from roster.cloning import CloneMode, duplicate
from roster.domain.employees import Employees
from roster.domain.models import DemoResult, RosterSnapshot
from roster.sources.abstract import NameSource
from roster.utils.logging import get_logger

log = get_logger(__name__)


def run_demo(
    mode: CloneMode | str = CloneMode.SHALLOW,
    add: Iterable[str] = (),
    remove: Iterable[str] = (),
    source: Optional[NameSource] = None,
) -> DemoResult:
    """
    Load a roster, duplicate it, and mutate the duplicate.

    Parameters
    ----------
    mode : CloneMode | str
        "shallow" shares the names list with the original; "deep" copies it.
    add : iterable[str]
        Names appended through the duplicate, in order.
    remove : iterable[str]
        Names removed through the duplicate (first occurrence each). Names not
        present are skipped with a warning.
    source : NameSource | None
        Source for the initial load. Defaults to the static employee list.

    Returns
    -------
    DemoResult
        Snapshots of the original and the duplicate after mutation.
    """
    clone_mode = CloneMode(mode)
    added = list(add)
    removed_requested = list(remove)

    log.info(f"[DEMO START] mode={clone_mode.value}", extra={"mode": clone_mode.value})

    original = Employees()
    original.load_data(source)
    copy = duplicate(original, deep=clone_mode is CloneMode.DEEP)

    names = copy.names
    names.extend(added)
    removed = []
    for name in removed_requested:
        if name in names:
            names.remove(name)
            removed.append(name)
        else:
            log.warning(f"[DEMO] {name!r} not in roster, skipping", extra={"employee": name})

    result = DemoResult(
        mode=clone_mode,
        added=added,
        removed=removed,
        original=RosterSnapshot.capture("original", original),
        duplicate=RosterSnapshot.capture("duplicate", copy, reference=original),
    )
    log.info(
        f"[DEMO COMPLETE] mode={clone_mode.value}",
        extra={
            "mode": clone_mode.value,
            "original_size": result.original.size,
            "duplicate_size": result.duplicate.size,
            "shares_storage": result.duplicate.shares_storage,
        },
    )
    return result


__all__ = ["run_demo"]
