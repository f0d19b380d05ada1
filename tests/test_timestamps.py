"""Tests for RFC3339 timestamp validation."""

from __future__ import annotations

import pytest

from extra_asserts.exceptions import NotStringError
from extra_asserts.timestamps import is_rfc3339


class TestValidStamps:
    @pytest.mark.parametrize(
        "stamp",
        [
            "2022-01-01T10:00:00Z",
            "2022-01-01T10:00:00+02:00",
            "2022-01-01T10:00:00-05:30",
            "2022-01-01T10:00:00.1Z",
            "2022-01-01T10:00:00.123+00:00",
            "2022-01-01t10:00:00z",
        ],
    )
    def test_accepted(self, stamp: str) -> None:
        assert is_rfc3339(stamp) is True


class TestInvalidStamps:
    @pytest.mark.parametrize(
        "stamp",
        [
            "2022-01-01",
            "not-a-date",
            "",
            "2022-01-01T10:00:00",
            "2022-01-01 10:00:00Z",
            "2022-01-01T10:00:00.1234Z",
            "2022-01-01T10:00:00+0200",
            "2022-01-01T10:00:00Z\n",
            " 2022-01-01T10:00:00Z",
            "٢٠٢٢-01-01T10:00:00Z",
        ],
    )
    def test_rejected(self, stamp: str) -> None:
        assert is_rfc3339(stamp) is False


class TestNonString:
    def test_non_string_raises(self) -> None:
        with pytest.raises(NotStringError, match="'integer' provided"):
            is_rfc3339(20220101)  # type: ignore[arg-type]
