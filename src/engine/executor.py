"""Koan executor -- runs one koan body and captures its outcome.

For every :class:`Koan` the :class:`KoanExecutor`:

1. Calls the body exactly once.
2. Classifies the outcome: an ``AssertionError`` is a *failure*, any other
   exception is an *error*.
3. Applies the koan's ``expected_failure`` flag.
4. Returns an immutable :class:`KoanResult`.

Exceptions raised by a body never leave :meth:`KoanExecutor.execute_koan`;
``KeyboardInterrupt`` is the one exception, so a learner can abort a run.
"""

from __future__ import annotations

import sys
import time
import traceback
from pathlib import Path

from src.koans.models import Koan, KoanResult, KoanStatus
from src.utils.logging import get_logger


class KoanExecutor:
    """Execute individual koans and turn their outcome into results."""

    def __init__(self) -> None:
        self.logger = get_logger("engine.executor")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute_koan(self, koan: Koan) -> KoanResult:
        """Run *koan* and return its :class:`KoanResult`."""
        start = time.monotonic()
        self.logger.debug("koan_start", topic=koan.topic, ordinal=koan.ordinal, koan=koan.name)

        try:
            koan.body()

        except AssertionError as exc:
            if koan.expected_failure:
                return self._pass(koan, start, reason="expected failure")
            return self._fail(koan, start, exc)

        except (Exception, SystemExit) as exc:
            return self._error(koan, start, exc)

        if koan.expected_failure:
            return self._result(
                koan,
                KoanStatus.FAILED,
                start,
                reason="unexpected success",
            )
        return self._pass(koan, start)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _pass(self, koan: Koan, start: float, reason: str = "") -> KoanResult:
        result = self._result(koan, KoanStatus.PASSED, start, reason=reason)
        self.logger.debug(
            "koan_passed",
            topic=koan.topic,
            ordinal=koan.ordinal,
            duration=result.duration_seconds,
        )
        return result

    def _fail(self, koan: Koan, start: float, exc: AssertionError) -> KoanResult:
        location, source_line = _locate(koan, exc)
        reason = str(exc)
        if not reason:
            # Bare ``assert`` carries no message; show the failing line instead.
            reason = f"assert {_strip_assert(source_line)}" if source_line else "assertion failed"
        result = self._result(
            koan,
            KoanStatus.FAILED,
            start,
            reason=reason,
            error_type=type(exc).__name__,
            traceback="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            location=location,
        )
        self.logger.info(
            "koan_failed",
            topic=koan.topic,
            ordinal=koan.ordinal,
            reason=reason,
            location=location,
        )
        return result

    def _error(self, koan: Koan, start: float, exc: BaseException) -> KoanResult:
        location, _ = _locate(koan, exc)
        tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        result = self._result(
            koan,
            KoanStatus.ERRORED,
            start,
            reason=str(exc),
            error_type=type(exc).__name__,
            traceback=tb,
            location=location,
        )
        self.logger.warning(
            "koan_errored",
            topic=koan.topic,
            ordinal=koan.ordinal,
            error_type=result.error_type,
            error=result.reason,
            location=location,
        )
        return result

    def _result(self, koan: Koan, status: KoanStatus, start: float, **fields) -> KoanResult:
        duration = time.monotonic() - start
        return KoanResult(
            topic=koan.topic,
            ordinal=koan.ordinal,
            name=koan.name,
            status=status,
            duration_seconds=round(duration, 4),
            **fields,
        )


def _locate(koan: Koan, exc: BaseException) -> tuple[str, str]:
    """Find the innermost traceback frame inside the koan's own module.

    Returns ``("File 'about_x.py', line N", source_line)`` or empty strings
    when the body's module cannot be matched (e.g. it raised from a builtin).
    """
    frames = traceback.extract_tb(exc.__traceback__)
    if not frames:
        return "", ""

    module = sys.modules.get(getattr(koan.body, "__module__", "") or "")
    module_file = getattr(module, "__file__", None)

    chosen = None
    if module_file:
        for frame in frames:
            if Path(frame.filename) == Path(module_file):
                chosen = frame
    if chosen is None:
        chosen = frames[-1]

    location = f"File '{Path(chosen.filename).name}', line {chosen.lineno}"
    return location, (chosen.line or "").strip()


def _strip_assert(source_line: str) -> str:
    return source_line.removeprefix("assert").strip()
