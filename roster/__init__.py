"""
Employee roster - a small demonstration of the prototype pattern.

This package provides a holder for an ordered list of employee names that can
duplicate itself:

- Shallow clones that share the original's names list
- Deep clones that own an independent copy
- Types that opt out of cloning and raise CloneNotSupportedError

Loading is backed by a pluggable name source; the default is a static list.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from roster.cloning import Cloneable, CloneMode, duplicate
from roster.config import Settings, get_settings
from roster.demo import run_demo
from roster.domain.employees import Employees, SealedEmployees
from roster.domain.models import DemoResult, RosterSnapshot
from roster.exceptions import CloneNotSupportedError, RosterError
from roster.sources import DEFAULT_EMPLOYEE_NAMES, AbstractNameSource, NameSource, StaticNameSource
from roster.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Holders
    "Employees",
    "SealedEmployees",
    # Cloning
    "Cloneable",
    "CloneMode",
    "duplicate",
    # Errors
    "RosterError",
    "CloneNotSupportedError",
    # Sources
    "AbstractNameSource",
    "NameSource",
    "StaticNameSource",
    "DEFAULT_EMPLOYEE_NAMES",
    # Demo and reporting models
    "run_demo",
    "DemoResult",
    "RosterSnapshot",
    # Logging
    "configure_logging",
    "get_logger",
]
