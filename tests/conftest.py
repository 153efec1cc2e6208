import logging

import pytest


class FakeClock:
    """Manually advanced time source; sleep() moves it forward."""

    def __init__(self, start=1_000):
        self.t = start
        self.sleeps = []

    def __call__(self):
        return self.t

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.t += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def _drop_tss_handlers():
    # setup_logging() binds handlers to the stream of the current test
    yield
    tss_logger = logging.getLogger("tss")
    for handler in list(tss_logger.handlers):
        tss_logger.removeHandler(handler)
