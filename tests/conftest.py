"""Shared fakes for asyncsamsungac tests."""

import asyncio
import copy

import pytest


def make_device(power="Off", current=26, desired=24, modes=None, options=None, speed=2, device_id="0"):
    """Build one element of the ``Devices`` list as the unit reports it."""
    return {
        "Id": device_id,
        "Operation": {"power": power},
        "Temperatures": [{"current": current, "desired": desired, "name": None}],
        "Mode": {
            "modes": ["Cool"] if modes is None else modes,
            "options": ["Comode_Off", "Autoclean_Off"] if options is None else options,
        },
        "Wind": {"speedLevel": speed},
    }


class FakeTransport:
    """In-memory transport recording every call."""

    def __init__(self, devices=None):
        self.devices = devices if devices is not None else [make_device()]
        self.fetch_calls = 0
        self.fetches_in_flight = 0
        self.max_fetches_in_flight = 0
        self.writes = []
        self.fetch_error = None
        self.write_error = None
        self.fetch_gate = None
        self.write_gate = None
        self.on_write = None
        self.closed = False

    async def fetch_all(self):
        self.fetch_calls += 1
        self.fetches_in_flight += 1
        self.max_fetches_in_flight = max(self.max_fetches_in_flight, self.fetches_in_flight)
        try:
            if self.fetch_gate is not None:
                await self.fetch_gate.wait()
            if self.fetch_error is not None:
                raise self.fetch_error
            return copy.deepcopy(self.devices)
        finally:
            self.fetches_in_flight -= 1

    async def write(self, path, payload):
        self.writes.append((path, payload))
        if self.write_gate is not None:
            await self.write_gate.wait()
        if self.write_error is not None:
            raise self.write_error
        if self.on_write is not None:
            self.on_write(path, payload)

    async def close(self):
        self.closed = True


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


async def settle(rounds=5):
    """Let freshly created tasks run up to their first suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def clock():
    return FakeClock()
