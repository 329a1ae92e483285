"""
Domain package for the employee roster.

Exports the holder types and the snapshot models used by the demo and the
reporter. Keep this package focused on data definitions.
"""

from roster.domain.employees import Employees, SealedEmployees
from roster.domain.models import DemoResult, RosterSnapshot

__all__ = [
    "Employees",
    "SealedEmployees",
    "DemoResult",
    "RosterSnapshot",
]
