"""diff subpackage — public API for the structural diff engine.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from extra_asserts.diff import DiffConfig, KeyCoverage, StructuralDiffEngine

    engine = StructuralDiffEngine(DiffConfig(key_coverage=KeyCoverage.BIDIRECTIONAL))
    engine.count_differences({"a": 1}, {"a": 1, "b": 2})
    # 1
"""

from __future__ import annotations

from extra_asserts.diff.config import DiffConfig, KeyCoverage
from extra_asserts.diff.engine import StructuralDiffEngine, strictly_equal

__all__ = ["DiffConfig", "KeyCoverage", "StructuralDiffEngine", "strictly_equal"]
