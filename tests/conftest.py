"""Shared fixtures: a clock we can move by hand and an actor that counts dirty signals."""

import pytest

from camp_registry import Actor, CampRegistry

START = 1_700_000_000


class FakeClock:
    def __init__(self, now: int = START) -> None:
        self.now = now

    def __call__(self) -> float:
        return float(self.now)

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def actor():
    return Actor(guid=0x50000001, name="Tester")


@pytest.fixture
def registry(actor, clock):
    return CampRegistry(actor, clock=clock)
