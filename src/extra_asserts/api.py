"""Public API functions for structural diffing.

This module provides the four user-facing functions: compare,
count_differences, diff_tree, and equals. Each call creates a fresh
StructuralDiffEngine to guarantee zero global state mutation between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from extra_asserts.diff.config import DiffConfig
from extra_asserts.diff.engine import StructuralDiffEngine
from extra_asserts.result import DiffReport

__all__ = ["compare", "count_differences", "diff_tree", "equals"]


def compare(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    config: DiffConfig | None = None,
) -> DiffReport:
    """Compare two nested mappings and return a rich DiffReport.

    Args:
        left:   The reference mapping.
        right:  The mapping compared against it.
        config: Diff parameters. Defaults to ``DiffConfig()`` when None.

    Returns:
        A ``DiffReport`` with count, tree, paths, and computation_time_ms
        populated.
    """
    return StructuralDiffEngine(config=config).compare(left, right)


def count_differences(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    config: DiffConfig | None = None,
) -> int:
    """Return how many entries the two mappings disagree on.

    The count is 0 if and only if both mappings have the same key sets at
    every level and strictly equal leaves (same type and value).
    """
    return StructuralDiffEngine(config=config).count_differences(left, right)


def diff_tree(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    config: DiffConfig | None = None,
) -> dict[Any, Any]:
    """Return the sub-mapping of ``left`` holding only the differing keys."""
    return StructuralDiffEngine(config=config).diff_tree(left, right)


def equals(
    left: Mapping[Any, Any],
    right: Mapping[Any, Any],
    config: DiffConfig | None = None,
) -> bool:
    """Return True if the two mappings are equivalent irrespective of key order.

    Args:
        left:   First mapping.
        right:  Second mapping.
        config: Diff parameters. Defaults to ``DiffConfig()`` when None.

    Returns:
        True if ``count_differences(left, right, config) == 0``.
    """
    return count_differences(left, right, config=config) == 0
