"""Pytest configuration for cacheproxy tests."""

from dataclasses import dataclass, field
from typing import Any

import pytest

from cacheproxy import InMemoryCacheStore


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@dataclass
class CountingProducer:
    """Producer that records how often it was called."""

    value: Any = None
    calls: int = 0
    error: Exception | None = None
    results: list[Any] = field(default_factory=list)

    def __call__(self) -> Any:
        self.calls += 1
        if self.error is not None:
            raise self.error
        if self.results:
            return self.results.pop(0)
        return self.value


@pytest.fixture
def clock() -> FakeClock:
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryCacheStore:
    """Create an in-memory store driven by the fake clock."""
    return InMemoryCacheStore(maxsize=100, timer=clock)


@pytest.fixture
def producer() -> CountingProducer:
    """Create a producer returning a list of cities."""
    return CountingProducer(
        value=[
            {"name": "London", "id": 100, "active": 1},
            {"name": "Paris", "id": 101, "active": "f"},
        ]
    )
