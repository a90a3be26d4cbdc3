"""Shared fixtures: a controllable clock and a storage engine bound to it."""

import pytest

from miniredis.router import CommandRouter
from miniredis.storage.engine import Storage


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, t=1_000_000):
        self.t = t

    def now(self):
        return self.t

    def advance(self, ms):
        self.t += ms


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def storage(clock):
    return Storage(clock=clock.now)


@pytest.fixture()
def router(storage):
    return CommandRouter(storage)
