"""Shared test fixtures for the Social Media Share Dashboard tests."""

import matplotlib

matplotlib.use("Agg")

import pytest

from share_dashboard.csv_parser import parse_csv_text
from share_dashboard.state import DashboardController, DashboardState


SAMPLE_CSV = (
    '"Date","Facebook","Twitter","Pinterest"\n'
    "2009-03,70.00,10.00,0\n"
    "2009-04,60.00,20.00,0\n"
    "2010-02,45.00,30.00,6.00\n"
    "2010-01,50.00,30.00,5.00\n"
)


@pytest.fixture
def csv_text():
    """Small export: two months of 2009, two of 2010 (out of order)."""
    return SAMPLE_CSV


@pytest.fixture
def rows(csv_text):
    """Parsed records of the sample export."""
    return parse_csv_text(csv_text)


@pytest.fixture
def state():
    """Fresh selection state."""
    return DashboardState()


@pytest.fixture
def controller(state):
    """Controller wired to the ``state`` fixture."""
    return DashboardController(state)


@pytest.fixture
def recorder(state):
    """List of field names notified by ``state``, in order."""
    changes = []
    state.subscribe(changes.append)
    return changes
