"""RFC3339 timestamp validation.

Accepts ``YYYY-MM-DDTHH:MM:SS`` with optional fractional seconds (one to
three digits) followed by a mandatory ``Z`` or ``+HH:MM``/``-HH:MM`` offset.
The ``T`` and ``Z`` markers are case-insensitive.  Only the shape is
checked; calendar validity (month 13, hour 25) is not.
"""

from __future__ import annotations

import re

from extra_asserts.exceptions import NotStringError
from extra_asserts.kinds import kind_of

__all__ = ["RFC3339_PATTERN", "is_rfc3339"]

# re.ASCII keeps \d from matching non-ASCII digits such as "٢".
RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d{1,3})?(?:[+\-]\d{2}:\d{2}|Z)$",
    re.IGNORECASE | re.ASCII,
)


def is_rfc3339(text: str) -> bool:
    """Return True if ``text`` is an RFC3339 timestamp string.

    Raises:
        NotStringError: If ``text`` is not a string.
    """
    if not isinstance(text, str):
        found = kind_of(text)
        raise NotStringError(
            f"'{found}' provided. String required",
            found=str(found),
            expected=["string"],
        )
    # fullmatch: "$" alone would also accept a trailing newline
    return RFC3339_PATTERN.fullmatch(text) is not None
