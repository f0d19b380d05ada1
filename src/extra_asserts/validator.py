"""Type validator: asserts a value's runtime kind is one of the allowed kinds."""

from __future__ import annotations

from collections.abc import Iterable

from extra_asserts.exceptions import InvalidTypeError
from extra_asserts.kinds import Kind, kind_of, resolve_class

__all__ = ["assert_is_type"]


def assert_is_type(
    value: object,
    allowed: Kind | str | Iterable[Kind | str],
    exc_class: type[InvalidTypeError] = InvalidTypeError,
    var_name: str | None = None,
) -> None:
    """Check that the kind of ``value`` is one of ``allowed`` (an OR of kinds).

    ``Kind.EXISTING_CLASS`` is artificial: it is satisfied when ``value`` is a
    string naming a class that ``resolve_class`` can find, and is otherwise
    ignored when matching the real kind of ``value``.

    Args:
        value:     Value to check.
        allowed:   A single kind or an iterable of kinds (Kind members or
                   their string values).
        exc_class: ``InvalidTypeError`` subclass raised on mismatch.
        var_name:  Label of the variable, used in the error message only.

    Raises:
        ValueError: If ``allowed`` is empty or names an unknown kind.
        InvalidTypeError: ``exc_class`` when the kind of ``value`` is not
            allowed.
    """
    kinds = _normalize_kinds(allowed)

    filtered = [k for k in kinds if k is not Kind.EXISTING_CLASS]
    if len(filtered) != len(kinds) and resolve_class(value) is not None:
        return

    if not filtered:
        raise ValueError("List of allowed types cannot be empty.")

    found = kind_of(value)
    if found not in filtered:
        raise _build_exception(exc_class, found, filtered, var_name)


def _normalize_kinds(allowed: Kind | str | Iterable[Kind | str]) -> list[Kind]:
    items = [allowed] if isinstance(allowed, str) else list(allowed)
    if not items:
        raise ValueError("List of allowed types cannot be empty.")
    kinds: list[Kind] = []
    for item in items:
        try:
            kind = Kind(item)
        except ValueError:
            raise ValueError(f"Unknown kind: {item!r}") from None
        if kind not in kinds:
            kinds.append(kind)
    return kinds


def _build_exception(
    exc_class: type[InvalidTypeError],
    found: Kind,
    allowed: list[Kind],
    var_name: str | None,
) -> InvalidTypeError:
    expected = ", ".join(str(k) for k in allowed)
    if len(allowed) == 1:
        msg = f'"{var_name}" must be type(s) of {expected} but {found} found.'
    else:
        msg = f'"{var_name}" must be one of allowed types: {expected} but {found} found.'
    return exc_class(
        msg,
        found=str(found),
        expected=[str(k) for k in allowed],
        var_name=var_name,
    )
