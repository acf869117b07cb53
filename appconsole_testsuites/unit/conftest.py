"""Fixtures for framework unit tests (fake driver, manual clock, log capture)."""

from typing import List

import pytest
from loguru import logger

from appconsole_testsuites.ui_testing.framework.wait_engine import WaitEngine
from appconsole_testsuites.unit.fakes import FakeClock, FakeDriver


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def driver(clock: FakeClock) -> FakeDriver:
    return FakeDriver(clock)


@pytest.fixture
def engine(driver: FakeDriver, clock: FakeClock) -> WaitEngine:
    return WaitEngine(
        driver,
        default_timeout=10,
        poll_interval=0.5,
        clock=clock,
        sleep=clock.sleep,
    )


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
