"""Assertion helpers for mappings, timestamps and runtime kinds.

Every helper raises ``AssertionError`` on failure, so it reads naturally
inside a pytest test and pytest reports the message as the failure reason.
Where a helper takes ``message``, the given text replaces the default
failure message.

All value comparisons are strict: ``1``, ``1.0``, ``True`` and ``"1"`` are
different values.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Mapping
from typing import Any

from extra_asserts.api import compare
from extra_asserts.diff.config import DiffConfig
from extra_asserts.diff.engine import strictly_equal
from extra_asserts.exceptions import (
    InvalidTypeError,
    NotArrayError,
    NotBooleanError,
    NotFloatError,
    NotIntegerError,
    NotMappingError,
    NotObjectError,
    NotStringError,
)
from extra_asserts.kinds import Kind, kind_of
from extra_asserts.timestamps import is_rfc3339
from extra_asserts.validator import assert_is_type as _validate

__all__ = [
    "assert_element",
    "assert_has_key_value",
    "assert_has_keys",
    "assert_is_array",
    "assert_is_bool",
    "assert_is_float",
    "assert_is_integer",
    "assert_is_mapping",
    "assert_is_object",
    "assert_is_object_or_existing_class",
    "assert_is_string",
    "assert_is_type",
    "assert_mappings_equal",
    "assert_mappings_have_differences",
    "assert_rfc3339",
    "assert_rfc3339_or_none",
    "find_element_with_key_value",
    "format_mapping",
    "mass_assert_equals",
]


# ----------------------------------------------------------------------
# Keys and values
# ----------------------------------------------------------------------


def assert_has_key_value(
    key: Any,
    expected: Any,
    mapping: Mapping[Any, Any],
    message: str | None = None,
) -> None:
    """Assert ``mapping`` has ``key`` and its value strictly equals ``expected``."""
    if key not in mapping:
        raise AssertionError(message or f"Key not found: {key}")
    actual = mapping[key]
    if not strictly_equal(expected, actual):
        raise AssertionError(
            message
            or f"Value for key '{key}' is not as expected: "
            f"expected {expected!r}, found {actual!r}"
        )


def assert_element(key: Any, mapping: Mapping[Any, Any], expected: Any) -> None:
    """Deprecated: use ``assert_has_key_value(key, expected, mapping)``."""
    warnings.warn(
        "assert_element() is deprecated, use assert_has_key_value() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    assert_has_key_value(key, expected, mapping)


def assert_has_keys(
    keys: Iterable[Any],
    mapping: Mapping[Any, Any],
    message: str | None = None,
) -> None:
    """Assert ``mapping`` has ALL of ``keys``."""
    missing = [key for key in keys if key not in mapping]
    if missing:
        raise AssertionError(message or f"Keys not found: {missing}")


def find_element_with_key_value(
    elements: Iterable[Any], key: Any, value: Any
) -> Mapping[Any, Any] | None:
    """Return the first mapping in ``elements`` whose ``key`` strictly equals ``value``."""
    for element in elements:
        if isinstance(element, Mapping) and key in element and strictly_equal(element[key], value):
            return element
    return None


# ----------------------------------------------------------------------
# Structural comparison
# ----------------------------------------------------------------------


def assert_mappings_equal(
    expected: Mapping[Any, Any],
    actual: Mapping[Any, Any],
    message: str | None = None,
    config: DiffConfig | None = None,
) -> None:
    """Assert both mappings hold the same content, irrespective of key order.

    ``{"a": 1, "b": 2}`` equals ``{"b": 2, "a": 1}``, but
    ``{"a": 1, "b": 2}`` differs from ``{"a": 2, "b": 1}``.
    """
    assert_mappings_have_differences(0, expected, actual, message, config)


def assert_mappings_have_differences(
    count: int,
    expected: Mapping[Any, Any],
    actual: Mapping[Any, Any],
    message: str | None = None,
    config: DiffConfig | None = None,
) -> None:
    """Assert the two mappings differ by exactly ``count`` entries."""
    report = compare(expected, actual, config=config)
    if report.count == count:
        return
    if message is not None:
        raise AssertionError(message)

    lines = [f"Expected {count} differences, found {report.count}"]
    if report.paths:
        lines.append(f"  paths: {report.paths}")
    if report.tree:
        lines.append("  diff:")
        lines.append(format_mapping(report.tree, indent=1))
    raise AssertionError("\n".join(lines))


def mass_assert_equals(
    expected: Mapping[Any, Any],
    actual: Mapping[Any, Any],
    keys_to_ignore: Iterable[Any] = (),
) -> None:
    """Assert every key of ``expected`` has the same value in ``actual``, recursively.

    Keys in ``keys_to_ignore`` are skipped at every depth.  Keys present only
    in ``actual`` are not checked.  The failure message tells a type mismatch
    apart from a value mismatch.
    """
    _mass_assert(expected, actual, frozenset(keys_to_ignore))


def _mass_assert(
    expected: Mapping[Any, Any], actual: Mapping[Any, Any], ignored: frozenset[Any]
) -> None:
    for key, value in expected.items():
        if key in ignored:
            continue
        if key not in actual:
            raise AssertionError(f"Key not found: '{key}'")
        other = actual[key]

        if isinstance(value, Mapping) and isinstance(other, Mapping):
            _mass_assert(value, other, ignored)
        elif type(value) is not type(other):
            expected_label, found_label = _type_labels(value, other)
            raise AssertionError(
                f"Type mismatch for key '{key}'. "
                f"Expected '{expected_label}', found '{found_label}'"
            )
        elif not strictly_equal(value, other):
            raise AssertionError(
                f"Value mismatch for key '{key}'. Expected '{value}', found '{other}'"
            )


def _type_labels(a: Any, b: Any) -> tuple[str, str]:
    labels = (str(kind_of(a)), str(kind_of(b)))
    if labels[0] == labels[1]:
        # same kind, different classes (list vs tuple, two object types)
        return type(a).__name__, type(b).__name__
    return labels


def format_mapping(
    mapping: Mapping[Any, Any], indent: int = 0, indent_block: str = "  "
) -> str:
    """Render ``mapping`` in compact indented form, one entry per line.

    Nested mappings render as ``key:`` followed by their entries one level
    deeper.  Values render with ``str()``; a value whose ``str()`` raises
renders as the exception text.
    """
    prefix = indent_block * (indent + 1)
    lines: list[str] = []
    for key, value in mapping.items():
        if isinstance(value, Mapping):
            lines.append(f"{prefix}{key}:")
            nested = format_mapping(value, indent + 1, indent_block)
            if nested:
                lines.append(nested)
        else:
            lines.append(f"{prefix}{key}: {_render(value)}")
    return "\n".join(lines)


def _render(value: Any) -> str:
    try:
        return str(value)
    except Exception as ex:  # noqa: BLE001
        # a broken __str__ must not hide the assertion failure it decorates
        return str(ex)


# ----------------------------------------------------------------------
# Timestamps
# ----------------------------------------------------------------------


def assert_rfc3339(stamp: Any, message: str | None = None) -> None:
    """Assert ``stamp`` is a valid RFC3339 timestamp string."""
    if not isinstance(stamp, str):
        raise AssertionError(message or f"'{kind_of(stamp)}' provided. String required")
    if not is_rfc3339(stamp):
        raise AssertionError(message or f"'{stamp}' is not a valid RFC3339 time stamp string")


def assert_rfc3339_or_none(stamp: Any, message: str | None = None) -> None:
    """Assert ``stamp`` is None or a valid RFC3339 timestamp string."""
    if stamp is None:
        return
    if not isinstance(stamp, str) or not is_rfc3339(stamp):
        raise AssertionError(
            message or f"'{stamp}' is neither a valid RFC3339 time stamp string nor None"
        )


# ----------------------------------------------------------------------
# Runtime kinds
# ----------------------------------------------------------------------


def assert_is_type(
    value: Any,
    allowed: Kind | str | Iterable[Kind | str],
    var_name: str | None = None,
) -> None:
    """Raise ``InvalidTypeError`` unless the kind of ``value`` is in ``allowed``."""
    _validate(value, allowed, InvalidTypeError, var_name)


def assert_is_mapping(value: Any, var_name: str | None = None) -> None:
    _validate(value, Kind.MAPPING, NotMappingError, var_name)


def assert_is_array(value: Any, var_name: str | None = None) -> None:
    _validate(value, Kind.ARRAY, NotArrayError, var_name)


def assert_is_bool(value: Any, var_name: str | None = None) -> None:
    _validate(value, Kind.BOOL, NotBooleanError, var_name)


def assert_is_float(value: Any, var_name: str | None = None) -> None:
    _validate(value, Kind.FLOAT, NotFloatError, var_name)


def assert_is_integer(value: Any, var_name: str | None = None) -> None:
    _validate(value, Kind.INTEGER, NotIntegerError, var_name)


def assert_is_object(value: Any, var_name: str | None = None) -> None:
    _validate(value, Kind.OBJECT, NotObjectError, var_name)


def assert_is_string(value: Any, var_name: str | None = None) -> None:
    _validate(value, Kind.STRING, NotStringError, var_name)


def assert_is_object_or_existing_class(value: Any, var_name: str | None = None) -> None:
    """Raise ``NotObjectError`` unless ``value`` is an object or names an existing class."""
    _validate(value, [Kind.EXISTING_CLASS, Kind.OBJECT], NotObjectError, var_name)
