"""Result reporter -- aggregates koan results and formats them for the learner.

:func:`summarize` is a pure function over the runner's output; the
:class:`Reporter` turns results plus summary into the text printed by the
CLI.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from colorama import Fore, Style
from pydantic import BaseModel

from src.engine.runner import first_failure
from src.koans.models import KoanPointer, KoanResult, KoanStatus

Results = Mapping[str, Sequence[KoanResult]]

# Rotated through by pass count, so the line changes as the learner advances.
_ZEN: tuple[str, ...] = (
    "Beautiful is better than ugly.",
    "Explicit is better than implicit.",
    "Simple is better than complex.",
    "Complex is better than complicated.",
    "Flat is better than nested.",
    "Sparse is better than dense.",
    "Readability counts.",
    "Special cases aren't special enough to break the rules.",
    "Although practicality beats purity.",
    "Errors should never pass silently.",
    "Unless explicitly silenced.",
    "In the face of ambiguity, refuse the temptation to guess.",
    "There should be one-- and preferably only one --obvious way to do it.",
    "Now is better than never.",
    "If the implementation is hard to explain, it's a bad idea.",
    "Namespaces are one honking great idea -- let's do more of those!",
)

_MARKERS: dict[KoanStatus, tuple[str, str]] = {
    KoanStatus.PASSED: ("[PASS]", Fore.GREEN),
    KoanStatus.FAILED: ("[FAIL]", Fore.RED),
    KoanStatus.ERRORED: ("[ERROR]", Fore.MAGENTA),
    KoanStatus.NOT_RUN: ("[SKIP]", Fore.YELLOW),
}


class Summary(BaseModel):
    """Counts and pointers derived from one run.

    Attributes:
        passed / failed / errored / not_run / total: Result counts.
        failing_topics: Topic -> lowest failed or errored ordinal.
        completed_topics: Topics whose every koan passed.
        next_to_fix: First unresolved koan overall, or ``None``.
    """

    passed: int = 0
    failed: int = 0
    errored: int = 0
    not_run: int = 0
    total: int = 0
    failing_topics: dict[str, int] = {}
    completed_topics: list[str] = []
    next_to_fix: KoanPointer | None = None

    @property
    def all_passed(self) -> bool:
        return self.failed == 0 and self.errored == 0


def summarize(results: Results) -> Summary:
    """Aggregate *results* (topic -> ordered results) into a :class:`Summary`.

    Topics are visited in mapping order, so the first unresolved koan of the
    first failing topic becomes ``next_to_fix``.
    """
    counts = {status: 0 for status in KoanStatus}
    failing_topics: dict[str, int] = {}
    completed_topics: list[str] = []
    next_to_fix: KoanPointer | None = None

    for topic, topic_results in results.items():
        for result in topic_results:
            counts[result.status] += 1

        failing = first_failure(topic_results)
        if failing is not None:
            failing_topics[topic] = failing.ordinal
            if next_to_fix is None:
                next_to_fix = KoanPointer(
                    topic=topic,
                    ordinal=failing.ordinal,
                    name=failing.name,
                )
        elif topic_results and all(r.status is KoanStatus.PASSED for r in topic_results):
            completed_topics.append(topic)

    return Summary(
        passed=counts[KoanStatus.PASSED],
        failed=counts[KoanStatus.FAILED],
        errored=counts[KoanStatus.ERRORED],
        not_run=counts[KoanStatus.NOT_RUN],
        total=sum(counts.values()),
        failing_topics=failing_topics,
        completed_topics=completed_topics,
        next_to_fix=next_to_fix,
    )


class Reporter:
    """Render results and a summary as learner-facing text.

    Parameters
    ----------
    color:
        Wrap markers and headings in ANSI colors via ``colorama``.
    show_traceback:
        Append the full traceback of the next koan to fix.
    """

    def __init__(self, color: bool = True, show_traceback: bool = False) -> None:
        self.color = color
        self.show_traceback = show_traceback

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render(self, results: Results, summary: Summary) -> str:
        lines: list[str] = []

        for topic, topic_results in results.items():
            lines.append("")
            lines.append(self._paint(f"Thinking {topic}", Style.BRIGHT))
            for result in topic_results:
                marker, color = _MARKERS[result.status]
                lines.append(
                    f"  {self._paint(marker, color)} {result.ordinal:>3} {result.name}"
                )

        lines.extend(self._detail(results, summary))
        lines.append("")
        lines.extend(self._progress(results, summary))
        lines.append("")
        lines.append(self._paint(self.zen(summary), Fore.CYAN))
        lines.append("")
        lines.append(self.summary_line(summary))
        return "\n".join(lines)

    def summary_line(self, summary: Summary) -> str:
        line = (
            f"{summary.passed} passed, {summary.failed} failed, "
            f"{summary.errored} errored, {summary.not_run} not run."
        )
        pointer = summary.next_to_fix
        if pointer is None:
            return f"{line} Next to fix: nothing"
        return f"{line} Next to fix: {pointer.topic} #{pointer.ordinal} {pointer.name}"

    @staticmethod
    def zen(summary: Summary) -> str:
        if summary.all_passed:
            return "Nobody ever expects the Spanish Inquisition."
        return _ZEN[summary.passed % len(_ZEN)]

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _detail(self, results: Results, summary: Summary) -> list[str]:
        pointer = summary.next_to_fix
        if pointer is None:
            return []

        result = next(
            r for r in results[pointer.topic] if r.ordinal == pointer.ordinal
        )

        if result.status is KoanStatus.ERRORED:
            verdict = f"{result.name} has raised {result.error_type}."
        else:
            verdict = f"{result.name} has damaged your karma."

        lines = [
            "",
            self._paint(verdict, Fore.RED),
            "",
            "You have not yet reached enlightenment ...",
            self._paint(f"  {result.reason}", Fore.RED) if result.reason else "",
        ]
        if result.location:
            lines.append("")
            lines.append("Please meditate on the following code:")
            lines.append(self._paint(f"  {result.location}", Fore.YELLOW))
        if self.show_traceback and result.traceback:
            lines.append("")
            lines.append(result.traceback.rstrip())
        return lines

    def _progress(self, results: Results, summary: Summary) -> list[str]:
        lines = [
            f"You have completed {summary.passed} koans and "
            f"{len(summary.completed_topics)} topics."
        ]
        if not summary.all_passed:
            koans_left = summary.total - summary.passed
            topics_left = len(results) - len(summary.completed_topics)
            lines.append(
                f"You are now {koans_left} koans and {topics_left} topics away "
                "from reaching enlightenment."
            )
        return lines

    def _paint(self, text: str, *styles: str) -> str:
        if not self.color:
            return text
        return f"{''.join(styles)}{text}{Style.RESET_ALL}"
