"""Tests for call-site resolution."""

import sys
from typing import Callable

from ctxlog import Writer, get_logger
from ctxlog.runtime.observability.logging import UNKNOWN_CALLER, resolve_caller


def test_resolve_caller_describes_direct_caller() -> None:
    line = sys._getframe().f_lineno + 1
    caller = resolve_caller()

    assert caller == f"test_caller.py:{line} test_resolve_caller_describes_direct_caller"


def test_resolve_caller_skip() -> None:
    """skip=1 describes the caller's caller."""
    def helper() -> str:
        return resolve_caller(1)

    line = sys._getframe().f_lineno + 1
    assert helper() == f"test_caller.py:{line} test_resolve_caller_skip"


def test_resolve_caller_nested_function_uses_qualname() -> None:
    def inner() -> str:
        return resolve_caller()

    assert inner().endswith(" test_resolve_caller_nested_function_uses_qualname.<locals>.inner")


def test_resolve_caller_too_deep_falls_back() -> None:
    assert resolve_caller(10_000) == UNKNOWN_CALLER
    assert UNKNOWN_CALLER == "unknown:? unknown"


def test_logger_reports_application_call_site(writer: Writer, records: Callable[[], list[dict]]) -> None:
    """The caller field points at the line calling the level method, not at ctxlog."""
    log = get_logger(writer=writer).with_values("k", "v")
    line = sys._getframe().f_lineno + 1
    log.info("here")

    assert records()[0]["caller"] == f"test_caller.py:{line} test_logger_reports_application_call_site"


def test_every_level_reports_same_depth(writer: Writer, records: Callable[[], list[dict]]) -> None:
    log = get_logger(writer=writer)
    for method in (log.debug, log.info, log.warn, log.warning, log.error):
        method("msg")

    callers = {r["caller"] for r in records()}
    assert len(callers) == 1
    assert callers.pop().endswith(" test_every_level_reports_same_depth")


def test_report_caller_disabled(writer: Writer, records: Callable[[], list[dict]]) -> None:
    writer.report_caller = False
    get_logger(writer=writer).info("no caller")

    assert "caller" not in records()[0]
