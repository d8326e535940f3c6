"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by all test packages.
"""

import pytest

from tennisgame.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def recorded_events():
    """Collect every event published on the bus as (event_name, data) tuples."""
    events = []
    EventBus.get_instance().on_any(events.append)
    return events
