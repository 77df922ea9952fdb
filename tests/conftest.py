"""
Pytest fixtures for arcball tests.

Loop tests never sleep and never touch the real terminal: animations are
built with an io.StringIO writer and a sleep stub that records its calls.
"""

import io

import pytest
from hypothesis import HealthCheck, settings
from loguru import logger

from arcball import Animation, AnimationConfig, LineWriter, make_curve


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("ci")


class SleepRecorder:
    """Stand-in for time.sleep that records requested delays."""

    def __init__(self, on_call=None):
        self.calls = []
        self.on_call = on_call

    def __call__(self, seconds: float):
        self.calls.append(seconds)
        if self.on_call is not None:
            self.on_call(len(self.calls))


@pytest.fixture(autouse=True)
def _reset_logging():
    """Leave loguru the way the library configures it on import."""
    yield
    logger.remove()
    logger.disable("arcball")


@pytest.fixture
def log_messages():
    """Capture arcball log messages at DEBUG and above."""
    messages = []
    logger.enable("arcball")
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def make_animation(stream):
    """Factory for animations writing to an in-memory stream."""

    def _make(kind: str = "ellipse", params=None, sleep=None, **overrides):
        config = AnimationConfig(**overrides)
        writer = LineWriter(stream, redraw=config.redraw)
        return Animation(
            make_curve(kind, params),
            config,
            writer=writer,
            sleep=sleep if sleep is not None else SleepRecorder(),
        )

    return _make


@pytest.fixture
def sleep_recorder():
    """The SleepRecorder class, for tests that need their own stub."""
    return SleepRecorder
