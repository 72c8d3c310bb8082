import random

import pytest
from fastapi.testclient import TestClient

from app import create_app
from backend import RoomStore
from rooms import RoomManager


class FixedRandom(random.Random):
    """Random source whose randint always returns the same draw."""

    def __init__(self, draw: int):
        super().__init__(0)
        self.draw = draw

    def randint(self, a, b):
        return self.draw


class StepClock:
    """Clock that advances one second per call."""

    def __init__(self, start: int = 1_700_000_000):
        self.now = start

    def __call__(self) -> float:
        current = self.now
        self.now += 1
        return float(current)


@pytest.fixture()
def store() -> RoomStore:
    return RoomStore()


@pytest.fixture()
def manager(store) -> RoomManager:
    return RoomManager(store=store, rng=random.Random(1234), clock=StepClock())


@pytest.fixture()
def client(manager):
    with TestClient(create_app(manager)) as test_client:
        yield test_client


@pytest.fixture()
def fixed_random():
    return FixedRandom
