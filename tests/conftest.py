"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.contrasting.models import ItemPair  # noqa: E402


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


def _table_distance(table: dict[tuple[str, str], int]):
    """Build a symmetric distance function from a lookup table."""
    lookup = {}
    for (a, b), value in table.items():
        lookup[(a, b)] = value
        lookup[(b, a)] = value

    def distance(a: str, b: str) -> int:
        if a == b:
            return 0
        return lookup[(a, b)]

    return distance


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def table_distance():
    """Factory for symmetric distance functions backed by a lookup table."""
    return _table_distance


@pytest.fixture
def abcd_pairs():
    """Four pairs whose distances from A are 1, 5 and 9."""
    return [
        ItemPair("a-source", "A"),
        ItemPair("b-source", "B"),
        ItemPair("c-source", "C"),
        ItemPair("d-source", "D"),
    ]


@pytest.fixture
def abcd_distance():
    """Distances giving A normalized neighbours B=0, C=0.5, D=1."""
    return _table_distance({
        ("A", "B"): 1,
        ("A", "C"): 5,
        ("A", "D"): 9,
        ("B", "C"): 4,
        ("B", "D"): 8,
        ("C", "D"): 4,
    })


@pytest.fixture
def dutch_pairs():
    """A small Dutch vocabulary with several near-homographs."""
    return [
        ItemPair("house", "huis"),
        ItemPair("mouse", "muis"),
        ItemPair("louse", "luis"),
        ItemPair("cheese", "kaas"),
        ItemPair("chair", "stoel"),
        ItemPair("table", "tafel"),
        ItemPair("window", "raam"),
    ]
