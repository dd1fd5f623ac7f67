"""Tests for datum package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_datum() -> None:
    """Import datum package succeeds."""
    import datum

    assert hasattr(datum, "__version__")
    assert datum.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import datum.core submodule succeeds."""
    from datum import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import datum.units submodule succeeds."""
    from datum import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import datum.format submodule succeeds."""
    from datum import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import datum.convert submodule succeeds."""
    from datum import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import datum.arithmetic submodule succeeds."""
    from datum import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_internal_module() -> None:
    """Import datum._internal submodule succeeds."""
    from datum import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import datum.errors succeeds with all exception classes."""
    from datum.errors import (
        DatumError,
        InvariantViolation,
        ParseError,
        ValidationError,
    )

    # Verify inheritance hierarchy
    assert issubclass(ValidationError, DatumError)
    assert issubclass(ParseError, ValidationError)
    assert issubclass(InvariantViolation, DatumError)
    assert not issubclass(InvariantViolation, ValidationError)
    assert issubclass(DatumError, Exception)


def test_import_constants() -> None:
    """Import datum._internal.constants succeeds."""
    from datum._internal.constants import (
        DAYS_IN_MONTH,
        ISO_STRING_LENGTH,
        MAX_YEAR,
        MIN_YEAR,
        REFERENCE_MONDAY,
    )

    assert MIN_YEAR == 0
    assert MAX_YEAR == 9999
    assert ISO_STRING_LENGTH == 10
    assert REFERENCE_MONDAY == (2019, 8, 26)
    assert len(DAYS_IN_MONTH) == 13  # 0-indexed placeholder + 12 months
    assert sum(DAYS_IN_MONTH) == 365


def test_top_level_exports() -> None:
    """The names in datum.__all__ are all present."""
    import datum

    for name in datum.__all__:
        assert hasattr(datum, name), name
