from __future__ import annotations

import logging

import pytest

from roster.cloning import Cloneable, CloneMode, duplicate
from roster.domain.employees import Employees, SealedEmployees
from roster.exceptions import CloneNotSupportedError, RosterError


def test_employees_satisfy_cloneable_protocol():
    assert isinstance(Employees(), Cloneable)
    assert not isinstance(["Ana"], Cloneable)


def test_duplicate_shares_storage_by_default(loaded_roster: Employees):
    copy = duplicate(loaded_roster)
    assert copy is not loaded_roster
    assert copy.names is loaded_roster.names

    loaded_roster.names.append("Eve")
    assert copy.names[-1] == "Eve"


def test_duplicate_empty_holder():
    copy = duplicate(Employees([]))
    assert copy.names == []


def test_duplicate_deep_is_independent(loaded_roster: Employees):
    copy = duplicate(loaded_roster, deep=True)
    assert copy.names == loaded_roster.names
    assert copy.names is not loaded_roster.names


def test_duplicate_surfaces_opt_out(caplog: pytest.LogCaptureFixture):
    sealed = SealedEmployees(["Ana"])
    with caplog.at_level(logging.WARNING, logger="roster.cloning"):
        with pytest.raises(CloneNotSupportedError):
            duplicate(sealed)

    assert sealed.names == ["Ana"]
    assert any("Refused to clone SealedEmployees" in r.getMessage() for r in caplog.records)


def test_duplicate_rejects_non_cloneable_objects():
    with pytest.raises(CloneNotSupportedError) as excinfo:
        duplicate(object())  # type: ignore[type-var]
    assert excinfo.value.type_name == "object"


def test_clone_error_is_roster_error():
    err = CloneNotSupportedError("Thing")
    assert isinstance(err, RosterError)
    assert str(err) == "Thing does not support cloning"


def test_clone_mode_values():
    assert CloneMode("shallow") is CloneMode.SHALLOW
    assert CloneMode("deep") is CloneMode.DEEP
    with pytest.raises(ValueError):
        CloneMode("bitwise")
