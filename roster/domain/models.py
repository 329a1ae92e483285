"""
Reporting models for the employee roster.

Snapshots copy a holder's names at a point in time and record the identity of
the holder and of its list, so the shared-storage relationship between an
original and its duplicate can be shown after the fact.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from roster.cloning import CloneMode
from roster.domain.employees import Employees


class RosterSnapshot(BaseModel):
    """
    Point-in-time view of a single holder.
    """

    label: str = Field(..., description="Role of the holder in the run (e.g. original).")
    holder_type: str = Field(..., description="Concrete holder class name.")
    holder_id: int = Field(..., description="id() of the holder object.")
    storage_id: int = Field(..., description="id() of the holder's names list.")
    names: List[str] = Field(default_factory=list, description="Copy of the names.")
    size: int = Field(0, description="Number of names held.")
    shares_storage: bool = Field(
        False, description="Whether the names list is the reference holder's list."
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
    }

    @classmethod
    def capture(
        cls, label: str, holder: Employees, reference: Optional[Employees] = None
    ) -> "RosterSnapshot":
        """Snapshot `holder`, comparing its storage against `reference` if given."""
        return cls(
            label=label,
            holder_type=type(holder).__name__,
            holder_id=id(holder),
            storage_id=id(holder.names),
            names=list(holder.names),
            size=len(holder.names),
            shares_storage=reference is not None and holder.names is reference.names,
        )


class DemoResult(BaseModel):
    """
    Outcome of a demonstration run: the original and its duplicate after mutation.
    """

    mode: CloneMode
    added: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    original: RosterSnapshot
    duplicate: RosterSnapshot

    model_config = {"frozen": True}

    @property
    def distinct_instances(self) -> bool:
        return self.original.holder_id != self.duplicate.holder_id


__all__ = ["RosterSnapshot", "DemoResult"]
