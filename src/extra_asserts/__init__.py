"""Extra asserts - structural diff and test-support helpers for pytest."""

from __future__ import annotations

from extra_asserts.api import compare, count_differences, diff_tree, equals
from extra_asserts.bridge import MemberAccessBridge
from extra_asserts.diff.config import DiffConfig, KeyCoverage
from extra_asserts.diff.engine import StructuralDiffEngine
from extra_asserts.exceptions import InvalidTypeError
from extra_asserts.generator import RandomValueSource
from extra_asserts.kinds import Kind
from extra_asserts.result import DiffReport
from extra_asserts.timestamps import is_rfc3339
from extra_asserts.validator import assert_is_type

__version__: str = "0.1.0"
__all__: list[str] = [
    "DiffConfig",
    "DiffReport",
    "InvalidTypeError",
    "Kind",
    "KeyCoverage",
    "MemberAccessBridge",
    "RandomValueSource",
    "StructuralDiffEngine",
    "assert_is_type",
    "compare",
    "count_differences",
    "diff_tree",
    "equals",
    "is_rfc3339",
]
