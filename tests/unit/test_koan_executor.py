"""Tests for the koan executor.

Koan bodies here must raise plain AssertionErrors, so:
PYTEST_DONT_REWRITE
"""
import pytest

from src.engine.executor import KoanExecutor
from src.koans.models import Koan, KoanStatus


def _koan(body, expected_failure=False, name="example"):
    return Koan(
        topic="Hashes",
        ordinal=1,
        name=name,
        body=body,
        expected_failure=expected_failure,
    )


def passing():
    assert {"one": "uno"} == {"one": "uno"}


def failing_with_message():
    assert "uno" == "eins", "expected 'eins'"


def failing_bare():
    hash_ = {"one": "uno"}
    assert len(hash_) == 2


def erroring():
    return {}["doesnt_exist"]


def exiting():
    raise SystemExit(3)


def interrupting():
    raise KeyboardInterrupt


class TestKoanExecutor:
    def test_passed(self):
        result = KoanExecutor().execute_koan(_koan(passing))
        assert result.status == KoanStatus.PASSED
        assert result.reason == ""
        assert result.topic == "Hashes"
        assert result.ordinal == 1
        assert result.duration_seconds >= 0

    def test_failed_keeps_assertion_message(self):
        result = KoanExecutor().execute_koan(_koan(failing_with_message))
        assert result.status == KoanStatus.FAILED
        assert result.reason == "expected 'eins'"
        assert result.error_type == "AssertionError"
        assert result.location.startswith("File 'test_koan_executor.py', line ")
        assert "AssertionError" in result.traceback

    def test_bare_assert_reason_uses_source_line(self):
        result = KoanExecutor().execute_koan(_koan(failing_bare))
        assert result.status == KoanStatus.FAILED
        assert result.reason == "assert len(hash_) == 2"

    def test_errored_is_distinct_from_failed(self):
        result = KoanExecutor().execute_koan(_koan(erroring))
        assert result.status == KoanStatus.ERRORED
        assert result.error_type == "KeyError"
        assert "doesnt_exist" in result.reason
        assert "KeyError" in result.traceback
        assert result.unresolved

    def test_system_exit_is_recorded(self):
        result = KoanExecutor().execute_koan(_koan(exiting))
        assert result.status == KoanStatus.ERRORED
        assert result.error_type == "SystemExit"

    def test_keyboard_interrupt_propagates(self):
        with pytest.raises(KeyboardInterrupt):
            KoanExecutor().execute_koan(_koan(interrupting))

    def test_body_runs_exactly_once(self):
        calls = []
        KoanExecutor().execute_koan(_koan(lambda: calls.append(1)))
        assert calls == [1]

    def test_expected_failure_that_fails_passes(self):
        result = KoanExecutor().execute_koan(_koan(failing_bare, expected_failure=True))
        assert result.status == KoanStatus.PASSED
        assert result.reason == "expected failure"

    def test_expected_failure_that_succeeds_fails(self):
        result = KoanExecutor().execute_koan(_koan(passing, expected_failure=True))
        assert result.status == KoanStatus.FAILED
        assert result.reason == "unexpected success"

    def test_expected_failure_that_errors_still_errors(self):
        result = KoanExecutor().execute_koan(_koan(erroring, expected_failure=True))
        assert result.status == KoanStatus.ERRORED
