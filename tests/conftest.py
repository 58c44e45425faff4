"""
Pytest configuration and fixtures
"""
import asyncio
import os

import pytest

# Never talk to Groq from unit tests
os.environ["GROQ_API_KEY"] = ""

from app.errors import FactUnavailableError
from app.models import DogFactOutput


class FakeFactProvider:
    """Fact provider that returns a fixed fact or raises."""

    def __init__(self, fact="Dogs have about 1,700 taste buds.", error=None):
        self.fact = fact
        self.error = error
        self.calls = 0

    async def fetch_fact(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return DogFactOutput(fact=self.fact)


class GatedFactProvider:
    """Fact provider whose calls block until released by the test."""

    def __init__(self):
        self.started = asyncio.Event()
        self.gates = []

    async def fetch_fact(self):
        gate = asyncio.get_running_loop().create_future()
        self.gates.append(gate)
        self.started.set()
        return await gate

    async def wait_started(self, timeout=1):
        await asyncio.wait_for(self.started.wait(), timeout)

    def resolve(self, index, fact):
        self.gates[index].set_result(DogFactOutput(fact=fact))

    def fail(self, index, error=None):
        self.gates[index].set_exception(error or FactUnavailableError("boom"))


class SlowFactProvider:
    async def fetch_fact(self):
        await asyncio.sleep(10)
        return DogFactOutput(fact="too late")


@pytest.fixture
def fact_provider():
    return FakeFactProvider()


@pytest.fixture
def failing_provider():
    return FakeFactProvider(error=FactUnavailableError("Groq is down"))


@pytest.fixture
def gated_provider():
    return GatedFactProvider()


@pytest.fixture
def slow_provider():
    return SlowFactProvider()
