"""Tests for DiffConfig frozen dataclass and KeyCoverage StrEnum.

Covers:
- Default values (LEFT_DRIVEN coverage, no ignored keys)
- Immutability (FrozenInstanceError on assignment)
- Coercion of string coverage values and iterable ignored keys
- Validation errors for unknown coverage and bare-string ignored keys
- KeyCoverage has exactly two values: left_driven, bidirectional
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from extra_asserts.diff.config import DiffConfig, KeyCoverage

# ---------------------------------------------------------------------------
# KeyCoverage
# ---------------------------------------------------------------------------


class TestKeyCoverage:
    def test_has_exactly_two_members(self) -> None:
        assert len(list(KeyCoverage)) == 2

    def test_left_driven_value(self) -> None:
        assert KeyCoverage.LEFT_DRIVEN == "left_driven"

    def test_bidirectional_value(self) -> None:
        assert KeyCoverage.BIDIRECTIONAL == "bidirectional"

    def test_is_str_subclass(self) -> None:
        assert isinstance(KeyCoverage.LEFT_DRIVEN, str)


# ---------------------------------------------------------------------------
# DiffConfig
# ---------------------------------------------------------------------------


class TestDiffConfigDefaults:
    def test_default_coverage(self) -> None:
        assert DiffConfig().key_coverage is KeyCoverage.LEFT_DRIVEN

    def test_default_ignored_keys_empty(self) -> None:
        assert DiffConfig().ignored_keys == frozenset()

    def test_defaults_compare_equal(self) -> None:
        assert DiffConfig() == DiffConfig()


class TestDiffConfigImmutability:
    def test_cannot_set_coverage(self) -> None:
        config = DiffConfig()
        with pytest.raises(FrozenInstanceError):
            config.key_coverage = KeyCoverage.BIDIRECTIONAL  # type: ignore[misc]

    def test_is_hashable(self) -> None:
        assert hash(DiffConfig(ignored_keys={"a"})) == hash(DiffConfig(ignored_keys={"a"}))


class TestDiffConfigCoercion:
    def test_string_coverage_coerced(self) -> None:
        config = DiffConfig(key_coverage="bidirectional")  # type: ignore[arg-type]
        assert config.key_coverage is KeyCoverage.BIDIRECTIONAL

    def test_list_of_ignored_keys_frozen(self) -> None:
        config = DiffConfig(ignored_keys=["a", "b", "a"])  # type: ignore[arg-type]
        assert config.ignored_keys == frozenset({"a", "b"})
        assert isinstance(config.ignored_keys, frozenset)


class TestDiffConfigValidation:
    def test_unknown_coverage_raises(self) -> None:
        with pytest.raises(ValueError, match="key_coverage"):
            DiffConfig(key_coverage="sideways")  # type: ignore[arg-type]

    def test_bare_string_ignored_keys_raises(self) -> None:
        with pytest.raises(ValueError, match="ignored_keys"):
            DiffConfig(ignored_keys="updated_at")  # type: ignore[arg-type]
