"""DiffReport dataclass for structural comparison output.

This module provides the rich result type returned by compare() calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["DiffReport"]


@dataclass(frozen=True, slots=True)
class DiffReport:
    """Rich result of a compare() call.

    Attributes:
        count: Number of entries on which the two mappings disagree.  0 means
            the mappings are equivalent irrespective of key order.
        tree: Mapping of the same shape as the inputs holding only the
            differing keys, with values taken from the left operand.
        paths: JSON Pointer paths (RFC 6901) of every entry reported in
            ``tree``, in traversal order.
        computation_time_ms: Wall-clock duration of the comparison in
            milliseconds.
    """

    count: int
    tree: dict[Any, Any]
    paths: list[str]
    computation_time_ms: float

    @property
    def is_equal(self) -> bool:
        """True when no differences were counted."""
        return self.count == 0
