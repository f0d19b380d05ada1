"""DiffConfig and KeyCoverage for structural diff configuration.

DiffConfig is a frozen (immutable) dataclass holding the comparison
parameters.  KeyCoverage selects how keys that exist only in the right
operand are accounted for: through a size correction driven by the left
operand's keys, or by enumerating both key sets.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum, auto


class KeyCoverage(StrEnum):
    """How the diff engine walks the key sets of the two operands.

    - LEFT_DRIVEN:   Traverse the left keys only.  Right-only keys are counted
                     through an aggregate size correction at each level and
                     never appear in the diff tree.
    - BIDIRECTIONAL: Traverse both key sets.  Every right-only key is counted
                     once and reported in the diff tree with the right value.
    """

    LEFT_DRIVEN = auto()
    BIDIRECTIONAL = auto()


@dataclass(frozen=True, slots=True)
class DiffConfig:
    """Immutable configuration for the structural diff engine.

    Attributes:
        key_coverage: How right-only keys are detected.  Defaults to
            ``KeyCoverage.LEFT_DRIVEN``.
        ignored_keys: Keys skipped at every depth on both sides, as if they
            never existed.  Any iterable of strings is accepted and frozen.
    """

    key_coverage: KeyCoverage = KeyCoverage.LEFT_DRIVEN
    ignored_keys: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.key_coverage, KeyCoverage):
            try:
                coverage = KeyCoverage(self.key_coverage)
            except ValueError:
                msg = f"key_coverage must be a KeyCoverage, got {self.key_coverage!r}"
                raise ValueError(msg) from None
            object.__setattr__(self, "key_coverage", coverage)

        ignored: Iterable[str] = self.ignored_keys
        if isinstance(ignored, str):
            msg = "ignored_keys must be an iterable of keys, not a single string"
            raise ValueError(msg)
        object.__setattr__(self, "ignored_keys", frozenset(ignored))
