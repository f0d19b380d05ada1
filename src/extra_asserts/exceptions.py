"""Exception taxonomy for runtime kind validation.

``InvalidTypeError`` is a ``TypeError`` so callers that only care about
"wrong type" can catch the built-in.  Each ``assert_is_*`` helper raises
its own subclass, which lets tests distinguish *which* expectation failed.
"""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "InvalidTypeError",
    "NotArrayError",
    "NotBooleanError",
    "NotFloatError",
    "NotIntegerError",
    "NotMappingError",
    "NotObjectError",
    "NotStringError",
]


class InvalidTypeError(TypeError):
    """A value's runtime kind is not one of the allowed kinds.

    Attributes:
        found:    Name of the kind actually found (e.g. ``"integer"``).
        expected: Names of the allowed kinds, in the order given.
        var_name: Label of the validated variable, if the caller gave one.
    """

    def __init__(
        self,
        message: str,
        *,
        found: str | None = None,
        expected: Sequence[str] = (),
        var_name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.found = found
        self.expected = tuple(expected)
        self.var_name = var_name


class NotMappingError(InvalidTypeError):
    pass


class NotArrayError(InvalidTypeError):
    pass


class NotBooleanError(InvalidTypeError):
    pass


class NotFloatError(InvalidTypeError):
    pass


class NotIntegerError(InvalidTypeError):
    pass


class NotObjectError(InvalidTypeError):
    pass


class NotStringError(InvalidTypeError):
    pass
