"""
Sources package for the employee roster.

Re-exports the source interfaces and the concrete sources so downstream code
can import from `roster.sources` directly.
"""

from roster.sources.abstract import AbstractNameSource, NameSource
from roster.sources.static import DEFAULT_EMPLOYEE_NAMES, StaticNameSource

__all__ = [
    # Abstracts
    "AbstractNameSource",
    "NameSource",
    # Concrete sources
    "DEFAULT_EMPLOYEE_NAMES",
    "StaticNameSource",
]
