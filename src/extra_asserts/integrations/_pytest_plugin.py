"""pytest plugin for extra-asserts.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Configuration:
    ``--extra-asserts-seed=N`` on the command line, or ``extra_asserts_seed = N``
    in the ini file, seeds the ``random_values`` fixture.  Without a seed one is
    drawn per test and logged, so a failing test can be replayed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import logging
import secrets
from typing import TYPE_CHECKING, Any

import pytest

from extra_asserts.api import compare
from extra_asserts.asserts import format_mapping
from extra_asserts.bridge import MemberAccessBridge
from extra_asserts.diff.config import DiffConfig
from extra_asserts.generator import RandomValueSource

if TYPE_CHECKING:
    from extra_asserts.protocols import MemberAccess

logger = logging.getLogger(__name__)

_SEED_OPTION = "--extra-asserts-seed"
_SEED_INI = "extra_asserts_seed"


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("extra-asserts")
    group.addoption(
        _SEED_OPTION,
        action="store",
        type=int,
        default=None,
        dest="extra_asserts_seed",
        help="seed for the random_values fixture (default: random per test)",
    )
    parser.addini(_SEED_INI, help="seed for the random_values fixture", default="")


def _configured_seed(config: pytest.Config) -> int | None:
    seed = config.getoption("extra_asserts_seed")
    if seed is not None:
        return int(seed)
    raw = str(config.getini(_SEED_INI)).strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise pytest.UsageError(f"{_SEED_INI} must be an integer, got {raw!r}") from None


def pytest_configure(config: pytest.Config) -> None:
    # fail at startup, not in the first test that asks for random_values
    _configured_seed(config)


@pytest.fixture(scope="session")
def assert_mappings_equivalent() -> Any:
    """Fixture that returns a callable structural-equivalence asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to compare() which creates a fresh StructuralDiffEngine per call).

    Usage in tests::

        def test_payload(assert_mappings_equivalent):
            assert_mappings_equivalent({"b": 2, "a": 1}, {"a": 1, "b": 2})

        def test_one_change(assert_mappings_equivalent):
            assert_mappings_equivalent({"a": 1}, {"a": "1"}, differences=1)

    Returns:
        A callable ``_assert(actual, expected, differences=0, config=None) -> None``
        that raises ``AssertionError`` when the difference count is not
        ``differences``.
    """

    def _assert(
        actual: Any,
        expected: Any,
        differences: int = 0,
        config: DiffConfig | None = None,
    ) -> None:
        """Assert two mappings differ by exactly ``differences`` entries.

        Args:
            actual:      The mapping produced by the code under test.
            expected:    The reference mapping.
            differences: Expected number of differing entries.  Defaults to 0.
            config:      Optional DiffConfig for key coverage / ignored keys.

        Raises:
            AssertionError: When the count does not match, with a message
                including the count, the differing paths and the diff tree.
        """
        report = compare(expected, actual, config=config)
        if report.count != differences:
            raise AssertionError(
                f"Mappings not equivalent: "
                f"differences={report.count} (expected {differences})\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}\n"
                f"  paths: {report.paths}\n"
                f"  diff:\n{format_mapping(report.tree, indent=1)}"
            )

    return _assert


@pytest.fixture
def random_values(request: pytest.FixtureRequest) -> RandomValueSource:
    """Per-test RandomValueSource, seeded from configuration when given."""
    seed = _configured_seed(request.config)
    if seed is None:
        seed = secrets.randbits(32)
    logger.info("%s: random_values seed=%d", request.node.nodeid, seed)
    return RandomValueSource(seed=seed)


@pytest.fixture(scope="session")
def member_bridge() -> MemberAccess:
    """Session-wide MemberAccessBridge (stateless), typed as the MemberAccess protocol."""
    return MemberAccessBridge()
