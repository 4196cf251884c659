"""Test configuration and fixtures."""
import io
import random

import pytest

from consoletools.modules import config as cfg


@pytest.fixture(autouse=True)
def restore_config():
    """Restore process-wide config between tests."""
    original_rng = cfg.get_random()
    original_attempts = cfg.get_menu_max_attempts()

    yield

    cfg.set_random(original_rng)
    cfg.set_menu_max_attempts(original_attempts)


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


class FakeClock:
    """Monotonic clock that only advances when sleep is called."""

    def __init__(self) -> None:
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
