"""Tests for the error-reporter bridge."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ctxlog import HUB_KEY, Context, ErrorReporter, LoggedError, report_errors
from ctxlog.runtime.observability.reporting import find_reporter

if TYPE_CHECKING:
    from conftest import RecordingReporter


def test_recording_reporter_satisfies_protocol(reporter: RecordingReporter) -> None:
    assert isinstance(reporter, ErrorReporter)


def test_no_context_is_noop() -> None:
    report_errors(None, "boom", {"error": ValueError("x")})


def test_context_without_reporter() -> None:
    assert find_reporter(Context()) is None
    assert find_reporter({HUB_KEY: Context()}) is None
    report_errors(Context(), "boom", {})


def test_message_is_reported_as_logged_error(reporter: RecordingReporter) -> None:
    report_errors(Context().with_hub(reporter), "boom", {})

    assert len(reporter.captured) == 1
    assert isinstance(reporter.captured[0], LoggedError)
    assert reporter.messages == ["boom"]


def test_empty_message_not_reported(reporter: RecordingReporter) -> None:
    report_errors(Context().with_hub(reporter), "", {"n": 1})
    assert reporter.captured == []


def test_each_error_field_is_reported(reporter: RecordingReporter) -> None:
    """Exception values are forwarded as-is; other values are ignored."""
    first, second = ValueError("bad value"), KeyError("missing")
    report_errors(Context().with_hub(reporter), "msg",
                  {"error": first, "cause": second, "text": "bad value", "n": 3})

    assert reporter.captured[0].args == ("msg",)
    assert reporter.captured[1:] == [first, second]


def test_dict_context_with_reporter(reporter: RecordingReporter) -> None:
    report_errors({HUB_KEY: reporter}, "boom", {})
    assert reporter.messages == ["boom"]
