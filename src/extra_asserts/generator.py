"""RandomValueSource: random fixture values backed by a numpy Generator.

A ``RandomValueSource`` owns its own ``numpy.random.Generator``; passing a
seed makes every draw reproducible.  The module-level functions create a
fresh, OS-seeded source per call, so they never share state between calls.

Range helpers accept their bounds in either order (``random_int(10, 1)``
draws from ``[1, 10]``).  Probabilities are drawn with three-digit
precision and must lie in ``[0, 1]``.  A probability is the threshold a
draw must clear, so a higher value makes ``True`` (or a string) rarer.
"""

from __future__ import annotations

import numpy as np

__all__ = [
    "LATITUDE_MAX",
    "LATITUDE_MIN",
    "LONGITUDE_MAX",
    "LONGITUDE_MIN",
    "RandomValueSource",
    "random_bool",
    "random_float",
    "random_int",
    "random_latitude",
    "random_longitude",
    "random_string",
    "random_string_or_none",
]

LATITUDE_MIN: float = -90.0
LATITUDE_MAX: float = 90.0
LONGITUDE_MIN: float = -180.0
LONGITUDE_MAX: float = 180.0

# Minimum number of random characters left after a prefix.
_PREFIX_MARGIN = 3


def _check_probability(probability: float) -> None:
    if not 0.0 <= probability <= 1.0:
        msg = f"probability must be in [0, 1], got {probability}"
        raise ValueError(msg)


class RandomValueSource:
    """Random strings, numbers, booleans and coordinates for test fixtures.

    Example::

        source = RandomValueSource(seed=1234)
        source.random_string("user")      # "user_3f9a0c..." (24 chars)
        source.random_int(10, 1)          # value in [1, 10]
        source.random_bool(0.9)           # True roughly 10% of the time
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng: np.random.Generator = np.random.default_rng(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def random_string(
        self,
        prefix: str | None = None,
        length: int = 24,
        separator: str = "_",
    ) -> str:
        """Return a random lowercase hex string of exactly ``length`` characters.

        Args:
            prefix:    Optional prefix, joined to the random part by ``separator``.
            length:    Total length of the returned string, prefix included.
            separator: Text placed between the prefix and the random part.

        Raises:
            ValueError: If ``length < 1``, if a prefix leaves fewer than three
                characters of room, or if prefix and separator together leave
                no room for a random character.
        """
        if length < 1:
            raise ValueError("Length must be greater than 0")

        head = ""
        if prefix is not None:
            if length < len(prefix) + _PREFIX_MARGIN:
                msg = f"String length cannot be smaller than prefix length + {_PREFIX_MARGIN} chars"
                raise ValueError(msg)
            head = f"{prefix}{separator}"
            if length <= len(head):
                msg = f"String length {length} leaves no room after prefix {head!r}"
                raise ValueError(msg)

        body_length = max(0, length - len(head))
        body = self._rng.bytes((body_length + 1) // 2).hex()[:body_length]
        return (head + body)[:length]

    def random_string_or_none(
        self,
        prefix: str | None = None,
        length: int = 24,
        separator: str = "_",
        probability: float = 0.5,
    ) -> str | None:
        """Return a random string when a draw clears ``probability``, else None."""
        _check_probability(probability)
        if self._draw() >= probability:
            return self.random_string(prefix, length, separator)
        return None

    # ------------------------------------------------------------------
    # Numbers and booleans
    # ------------------------------------------------------------------

    def random_int(self, min: int = 0, max: int = 100) -> int:  # noqa: A002
        """Return a random integer from ``[min, max]`` (both inclusive)."""
        low, high = (max, min) if min > max else (min, max)
        return int(self._rng.integers(low, high, endpoint=True))

    def random_float(self, min: float, max: float, digits: int = 0) -> float:  # noqa: A002
        """Return a random float from ``[min, max]``.

        Args:
            min:    One bound of the range.
            max:    The other bound; the two are swapped when given reversed.
            digits: Decimal digits to round to.  0 (default) means no rounding.
        """
        low, high = (max, min) if min > max else (min, max)
        result = float(self._rng.uniform(low, high))
        if digits > 0:
            # rounding may step just past a bound
            result = float(np.clip(round(result, digits), low, high))
        return result

    def random_bool(self, probability: float = 0.5) -> bool:
        """Return True when a draw exceeds ``probability``."""
        _check_probability(probability)
        return self._draw() > probability

    def random_latitude(
        self,
        min: float = LATITUDE_MIN,  # noqa: A002
        max: float = LATITUDE_MAX,  # noqa: A002
        digits: int = 0,
    ) -> float:
        """Return a random latitude from ``[min, max]`` within [-90, 90]."""
        return self._random_coordinate(min, max, digits, LATITUDE_MIN, LATITUDE_MAX, "latitude")

    def random_longitude(
        self,
        min: float = LONGITUDE_MIN,  # noqa: A002
        max: float = LONGITUDE_MAX,  # noqa: A002
        digits: int = 0,
    ) -> float:
        """Return a random longitude from ``[min, max]`` within [-180, 180]."""
        return self._random_coordinate(
            min, max, digits, LONGITUDE_MIN, LONGITUDE_MAX, "longitude"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _draw(self) -> float:
        """Draw a value from {0.000, 0.001, ..., 0.999}."""
        return int(self._rng.integers(0, 1000)) / 1000

    def _random_coordinate(
        self,
        a: float,
        b: float,
        digits: int,
        lowest: float,
        highest: float,
        label: str,
    ) -> float:
        for bound in (a, b):
            if not lowest <= bound <= highest:
                msg = f"{label} bound must be in [{lowest}, {highest}], got {bound}"
                raise ValueError(msg)
        return self.random_float(a, b, digits)


# ----------------------------------------------------------------------
# Module-level helpers: a fresh source per call, no shared state
# ----------------------------------------------------------------------


def random_string(prefix: str | None = None, length: int = 24, separator: str = "_") -> str:
    return RandomValueSource().random_string(prefix, length, separator)


def random_string_or_none(
    prefix: str | None = None,
    length: int = 24,
    separator: str = "_",
    probability: float = 0.5,
) -> str | None:
    return RandomValueSource().random_string_or_none(prefix, length, separator, probability)


def random_int(min: int = 0, max: int = 100) -> int:  # noqa: A002
    return RandomValueSource().random_int(min, max)


def random_float(min: float, max: float, digits: int = 0) -> float:  # noqa: A002
    return RandomValueSource().random_float(min, max, digits)


def random_bool(probability: float = 0.5) -> bool:
    return RandomValueSource().random_bool(probability)


def random_latitude(
    min: float = LATITUDE_MIN,  # noqa: A002
    max: float = LATITUDE_MAX,  # noqa: A002
    digits: int = 0,
) -> float:
    return RandomValueSource().random_latitude(min, max, digits)


def random_longitude(
    min: float = LONGITUDE_MIN,  # noqa: A002
    max: float = LONGITUDE_MAX,  # noqa: A002
    digits: int = 0,
) -> float:
    return RandomValueSource().random_longitude(min, max, digits)
