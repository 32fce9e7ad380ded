"""Shared fixtures: a fresh descriptor table and a deterministic clock."""

from datetime import datetime, timedelta, timezone

import pytest

from clock import Clock
from descriptors import init_resource_descriptors

# Zone used for "local" time attributes in tests
TEST_ZONE = timezone(timedelta(hours=2))


class StepClock(Clock):
    """Clock that advances one second every time it is read."""

    def __init__(self, zone=TEST_ZONE, start=datetime(2021, 6, 1, 12, 0, 0, tzinfo=timezone.utc)):
        super().__init__(zone)
        self.current = start

    def now(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture(autouse=True)
def resource_descriptors():
    init_resource_descriptors()
    yield


@pytest.fixture
def step_clock():
    return StepClock()
