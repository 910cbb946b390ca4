"""Shared fixtures: in-memory writer output, exit recorder, recording error reporter."""

from __future__ import annotations

import io
from typing import Callable

import orjson
import pytest

from ctxlog import JsonRenderer, Level, Writer, clear_settings_cache, reset_logging

# 2024-01-03T10:30:45.123456789Z
FIXED_NS = 1_704_277_845_123_456_789


class RecordingReporter:
    """In-memory error reporter; satisfies the ErrorReporter protocol."""

    def __init__(self) -> None:
        self.captured: list[BaseException] = []

    def capture_exception(self, error: BaseException) -> None:
        self.captured.append(error)

    @property
    def messages(self) -> list[str]:
        return [str(e) for e in self.captured]


@pytest.fixture(autouse=True)
def clean_logging() -> object:
    """Reset the default writer and cached settings around each test."""
    reset_logging()
    clear_settings_cache()
    yield
    reset_logging()
    clear_settings_cache()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def exits() -> list[int]:
    """Exit codes passed to the writer's exit function."""
    return []


@pytest.fixture
def writer(output: io.StringIO, exits: list[int]) -> Writer:
    return Writer(renderer=JsonRenderer(output=output), level=Level.DEBUG,
                  exit_func=exits.append, clock=lambda: FIXED_NS)


@pytest.fixture
def records(output: io.StringIO) -> Callable[[], list[dict[str, object]]]:
    """Parse the JSON lines written so far."""
    return lambda: [orjson.loads(line) for line in output.getvalue().splitlines()]


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
