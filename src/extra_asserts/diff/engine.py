"""StructuralDiffEngine: recursive diff of two nested mappings.

The engine walks two nested mappings in a single recursive pass and
produces the number of differing entries, a pruned tree holding only the
differing keys, and the JSON Pointer paths of those keys.

Comparison rules:
- Key order never matters; only key sets and values do.
- Two values are equal only when they have the same runtime type AND
  compare equal (``1``, ``1.0``, ``True`` and ``"1"`` are all distinct).
- When both values under a key are mappings the engine recurses; a
  mapping facing a scalar is a plain value difference.
- Values in the diff tree come from the left operand, except right-only
  keys in ``KeyCoverage.BIDIRECTIONAL`` mode which carry the right value.

Known limitation of ``KeyCoverage.LEFT_DRIVEN`` (the default):
right-only keys are only seen through a size correction (``len(right) -
len(left)`` when right is larger), so they never appear in the diff tree
or the paths.  The count itself stays symmetric (each level contributes
the differing common values plus the larger of the two one-sided key
counts) but the tree does not: it only ever holds left-side keys.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from extra_asserts.diff.config import DiffConfig, KeyCoverage
from extra_asserts.result import DiffReport

__all__ = ["StructuralDiffEngine", "strictly_equal"]

logger = logging.getLogger(__name__)


def strictly_equal(a: Any, b: Any) -> bool:
    """Return True when ``a`` and ``b`` share a runtime type and compare equal.

    Identity short-circuits first so a value always equals itself (this
    keeps ``count_differences(m, m) == 0`` true even for NaN leaves).
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    return bool(a == b)


def _pointer(path: str, key: Any) -> str:
    """Append ``key`` to a JSON Pointer path, escaping ``~`` and ``/``.

    Non-string keys render through ``str()``, so ``1`` and ``"1"`` share the
    token ``1``: in a mapping mixing both, a path alone does not say which
    key differed.  The diff tree keeps the original key objects.
    """
    token = str(key).replace("~", "~0").replace("/", "~1")
    return f"{path}/{token}"


@dataclass(slots=True)
class _Walk:
    """Accumulator for one level of the recursive walk."""

    count: int = 0
    tree: dict[Any, Any] = field(default_factory=dict)
    paths: list[str] = field(default_factory=list)

    def record(self, key: Any, value: Any, path: str) -> None:
        self.count += 1
        self.tree[key] = value
        self.paths.append(path)


class StructuralDiffEngine:
    """Recursive structural comparison of nested mappings.

    Example::

        engine = StructuralDiffEngine()
        engine.count_differences({"a": 1, "b": {"c": 2}}, {"b": {"c": 3}, "a": 1})
        # 1
        engine.diff_tree({"a": 1, "b": {"c": 2}}, {"b": {"c": 3}, "a": 1})
        # {"b": {"c": 2}}
    """

    def __init__(self, config: DiffConfig | None = None) -> None:
        self._config: DiffConfig = config if config is not None else DiffConfig()

    @property
    def config(self) -> DiffConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def count_differences(self, left: Mapping[Any, Any], right: Mapping[Any, Any]) -> int:
        """Return the number of entries on which ``left`` and ``right`` disagree."""
        return self._walk_root(left, right).count

    def equals(self, left: Mapping[Any, Any], right: Mapping[Any, Any]) -> bool:
        """Return True when the two mappings have no differences at all."""
        return self.count_differences(left, right) == 0

    def diff_tree(self, left: Mapping[Any, Any], right: Mapping[Any, Any]) -> dict[Any, Any]:
        """Return a mapping holding only the differing keys, recursively.

        Nested mappings whose own diff is empty are pruned from the result.
        """
        return self._walk_root(left, right).tree

    def compare(self, left: Mapping[Any, Any], right: Mapping[Any, Any]) -> DiffReport:
        """Compare two mappings and return a ``DiffReport``.

        Args:
            left:  The reference ("expected") mapping.
            right: The mapping compared against it ("actual").

        Returns:
            A ``DiffReport`` with count, tree, paths and timing populated.

        Raises:
            TypeError: If either operand is not a mapping.
        """
        t0 = time.perf_counter()
        walk = self._walk_root(left, right)
        elapsed_ms = (time.perf_counter() - t0) * 1000.0

        logger.debug(
            "structural diff: %d difference(s), %d reported path(s), coverage=%s",
            walk.count,
            len(walk.paths),
            self._config.key_coverage,
        )
        return DiffReport(
            count=walk.count,
            tree=walk.tree,
            paths=walk.paths,
            computation_time_ms=elapsed_ms,
        )

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def _walk_root(self, left: Any, right: Any) -> _Walk:
        for name, operand in (("left", left), ("right", right)):
            if not isinstance(operand, Mapping):
                raise TypeError(
                    f"{name} operand must be a mapping, got {type(operand).__name__}"
                )
        return self._walk(left, right, "")

    def _walk(self, left: Mapping[Any, Any], right: Mapping[Any, Any], path: str) -> _Walk:
        ignored = self._config.ignored_keys
        walk = _Walk()

        left_keys = [k for k in left if k not in ignored]
        right_keys = [k for k in right if k not in ignored]

        if self._config.key_coverage is KeyCoverage.LEFT_DRIVEN:
            # Right-only keys are invisible to the left-driven loop below.
            if len(right_keys) > len(left_keys):
                walk.count += len(right_keys) - len(left_keys)

        for key in left_keys:
            value = left[key]
            key_path = _pointer(path, key)

            if key not in right:
                walk.record(key, value, key_path)
                continue

            other = right[key]
            if isinstance(value, Mapping) and isinstance(other, Mapping):
                sub = self._walk(value, other, key_path)
                walk.count += sub.count
                walk.paths.extend(sub.paths)
                if sub.tree:
                    walk.tree[key] = sub.tree
            elif not strictly_equal(value, other):
                walk.record(key, value, key_path)

        if self._config.key_coverage is KeyCoverage.BIDIRECTIONAL:
            for key in right_keys:
                if key not in left:
                    walk.record(key, right[key], _pointer(path, key))

        return walk
