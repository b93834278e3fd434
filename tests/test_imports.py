"""Tests for Tempus package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import logging


def test_import_tempus() -> None:
    """Import tempus package succeeds."""
    import tempus

    assert hasattr(tempus, "__version__")
    assert tempus.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import tempus.core submodule succeeds."""
    from tempus import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    """Import tempus.units submodule succeeds."""
    from tempus import units

    assert hasattr(units, "__all__")


def test_import_format_module() -> None:
    """Import tempus.format submodule succeeds."""
    from tempus import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import tempus.convert submodule succeeds."""
    from tempus import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    """Import tempus.arithmetic submodule succeeds."""
    from tempus import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_fields_module() -> None:
    """Import tempus.fields submodule succeeds."""
    from tempus import fields

    assert hasattr(fields, "__all__")


def test_import_internal_module() -> None:
    """Import tempus._internal submodule succeeds."""
    from tempus import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """All exceptions share the TempusError base."""
    from tempus.errors import (
        DivisionByZero,
        MalformedInput,
        NoTransformAvailable,
        TempusError,
        TimezoneError,
        UnclassifiableInput,
        UnknownField,
        UnknownUnit,
        UnrecognizedFormat,
        UnsupportedConversion,
        UnsupportedField,
        UnsupportedOperation,
        ValidationError,
    )

    for exc in (
        DivisionByZero,
        MalformedInput,
        NoTransformAvailable,
        TimezoneError,
        UnclassifiableInput,
        UnknownField,
        UnknownUnit,
        UnrecognizedFormat,
        UnsupportedConversion,
        UnsupportedField,
        UnsupportedOperation,
        ValidationError,
    ):
        assert issubclass(exc, TempusError)
    assert issubclass(UnrecognizedFormat, MalformedInput)
    assert issubclass(DivisionByZero, ZeroDivisionError)
    assert issubclass(UnknownUnit, LookupError)


def test_public_names_resolve() -> None:
    """Every name in tempus.__all__ is an attribute of the package."""
    import tempus

    for name in tempus.__all__:
        assert hasattr(tempus, name), name


def test_library_logger_has_null_handler() -> None:
    """The package logger does not emit unless the application configures it."""
    import tempus  # noqa: F401

    handlers = logging.getLogger("tempus").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
