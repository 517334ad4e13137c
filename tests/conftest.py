"""
Shared fixtures for roster tests
"""

import logging

import pytest

from roster.core import config


def view_row(**value):
    """Wrap person fields the way the flight_pairings view returns them"""
    return {"key": ["SSHF-Nov2024", value.get("id", ""), 0], "value": value}


@pytest.fixture
def make_row():
    return view_row


@pytest.fixture
def flight_doc():
    return {
        "_id": "flight-123",
        "_rev": "3-abc",
        "type": "Flight",
        "name": "SSHF-Nov2024",
        "capacity": 100,
        "flight_date": "2024-11-05"
    }


@pytest.fixture
def mixed_rows():
    """
    A realistic flight:
    - g1 escorts v1 and v2 (the view repeats g1 once per veteran)
    - g2 escorts v3 but rides a different bus
    - v4 claims a guardian who is not on the flight
    - v5 has no guardian, g3 has no veteran on the flight
    """
    return [
        view_row(type="Veteran", id="v1", bus="Alpha1", pairing="g1", confirmed=""),
        view_row(type="Veteran", id="v2", bus="Alpha1", pairing="g1", nofly="nofly"),
        view_row(type="Guardian", id="g1", bus="Alpha1", pairing="v1", training_complete="true"),
        view_row(type="Guardian", id="g1", bus="Alpha1", pairing="v2", training_complete="true"),
        view_row(type="Veteran", id="v3", bus="Bravo2", pairing="g2"),
        view_row(type="Guardian", id="g2", bus="Bravo3", pairing="v3"),
        view_row(type="Veteran", id="v4", bus="Alpha2", pairing="g-missing"),
        view_row(type="Veteran", id="v5", bus=" Bravo1 ", pairing=""),
        view_row(type="Guardian", id="g3", bus="InvalidBus", pairing=""),
    ]


@pytest.fixture
def clean_settings(monkeypatch):
    """Fresh settings from a clean environment, restored logging afterwards"""
    for name in ("ROSTER_ENVIRONMENT", "ROSTER_LOG_LEVEL", "ROSTER_LOG_JSON", "ROSTER_DEBUG"):
        monkeypatch.delenv(name, raising=False)

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level

    yield config.reload_settings()

    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    config._settings = None
