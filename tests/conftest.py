# tests/conftest.py
import pytest

from gridpath.core.grid import Grid
from gridpath.utils import observer


SCENARIO_A = [1, 1, 1, 1, 0, 1, 0, 1, 0, 1, 1, 1]
SCENARIO_B = [0, 0, 1, 0, 1, 1, 1, 0, 1]


@pytest.fixture
def scenario_a() -> Grid:
    return Grid(SCENARIO_A, 4, 3)


@pytest.fixture
def scenario_b() -> Grid:
    return Grid(SCENARIO_B, 3, 3)


@pytest.fixture
def open_grid() -> Grid:
    return Grid([1] * 35, 7, 5)


@pytest.fixture(autouse=True)
def _reset_observer():
    observer.clear_history()
    yield
    observer.clear_history()
