"""Integration tests for the public API surface.

All imports are from the top-level ``extra_asserts`` package — never from
internal submodules.  Covers the worked examples of the library: structural
diff, kind validation, RFC3339 checks and range generators.
"""

from __future__ import annotations

import pytest

from extra_asserts import (
    DiffReport,
    InvalidTypeError,
    Kind,
    RandomValueSource,
    StructuralDiffEngine,
    assert_is_type,
    compare,
    count_differences,
    diff_tree,
    equals,
    is_rfc3339,
)


class TestStructuralDiffScenario:
    LEFT = {"a": 1, "b": {"c": 2, "d": 3}}
    RIGHT = {"a": 1, "b": {"c": 2, "d": 4}}

    def test_diff_tree(self) -> None:
        assert diff_tree(self.LEFT, self.RIGHT) == {"b": {"d": 3}}

    def test_count(self) -> None:
        assert count_differences(self.LEFT, self.RIGHT) == 1

    def test_equals(self) -> None:
        assert equals(self.LEFT, self.RIGHT) is False
        assert equals(self.LEFT, dict(reversed(list(self.LEFT.items())))) is True

    def test_compare_returns_report(self) -> None:
        report = compare(self.LEFT, self.RIGHT)
        assert isinstance(report, DiffReport)
        assert report.paths == ["/b/d"]

    def test_result_is_frozen(self) -> None:
        report = compare(self.LEFT, self.RIGHT)
        with pytest.raises((AttributeError, TypeError)):
            report.count = 0  # type: ignore[misc]

    def test_engine_matches_functions(self) -> None:
        engine = StructuralDiffEngine()
        assert engine.count_differences(self.LEFT, self.RIGHT) == count_differences(
            self.LEFT, self.RIGHT
        )


class TestTypeValidation:
    def test_integer_passes(self) -> None:
        assert_is_type(42, {Kind.INTEGER})

    def test_string_expected(self) -> None:
        with pytest.raises(InvalidTypeError) as exc_info:
            assert_is_type(42, {Kind.STRING})
        assert exc_info.value.found == "integer"
        assert "string" in exc_info.value.expected


class TestTimestamps:
    @pytest.mark.parametrize(
        ("stamp", "valid"),
        [
            ("2022-01-01T10:00:00Z", True),
            ("2022-01-01T10:00:00+02:00", True),
            ("2022-01-01", False),
            ("not-a-date", False),
        ],
    )
    def test_examples(self, stamp: str, valid: bool) -> None:
        assert is_rfc3339(stamp) is valid


class TestGenerators:
    def test_swapped_int_range(self) -> None:
        source = RandomValueSource()
        for _ in range(100):
            assert 1 <= source.random_int(10, 1) <= 10
