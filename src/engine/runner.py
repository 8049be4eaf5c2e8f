"""Ordered runner -- executes koans topic by topic in fix order.

The :class:`KoanRunner` walks the registry and:

1. Iterates topics in declaration order; each topic is isolated, so a
   failure in one never stops the next.
2. Within a topic, executes koans one at a time in increasing ordinal order.
3. Keeps going after a failure (koans are independent) unless ``fail_fast``
   is set, in which case the rest of the topic is recorded as ``not_run``.
"""

from __future__ import annotations

from typing import Iterable

from src.engine.executor import KoanExecutor
from src.koans.models import Koan, KoanResult, KoanStatus
from src.koans.registry import KoanRegistry
from src.utils.exceptions import KoanNotFoundError
from src.utils.logging import get_logger


class KoanRunner:
    """Top-level orchestrator for running the koan suite.

    Parameters
    ----------
    registry:
        The populated :class:`KoanRegistry`.
    executor:
        Optional :class:`KoanExecutor`; one is created automatically when not
        provided.
    fail_fast:
        Skip the remainder of a topic after its first failure or error.
    """

    def __init__(
        self,
        registry: KoanRegistry,
        executor: KoanExecutor | None = None,
        fail_fast: bool = False,
    ) -> None:
        self.registry = registry
        self.executor = executor or KoanExecutor()
        self.fail_fast = fail_fast
        self.logger = get_logger("engine.runner")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, topic: str, only: int | None = None) -> list[KoanResult]:
        """Execute every koan of *topic* in ordinal order.

        When *only* is given, just the koan at that ordinal runs and every
        other koan is recorded as ``not_run``.  Raises
        :class:`TopicNotFoundError` for an unknown topic and
        :class:`KoanNotFoundError` for an unknown ordinal.
        """
        resolved = self.registry.get_topic(topic)
        koans = resolved.koans

        if only is not None and not any(k.ordinal == only for k in koans):
            raise KoanNotFoundError(resolved.name, only)

        self.logger.info(
            "topic_start",
            topic=resolved.name,
            koans=len(koans),
            only=only,
            fail_fast=self.fail_fast,
        )

        results: list[KoanResult] = []
        halted = False

        for koan in koans:
            if halted or (only is not None and koan.ordinal != only):
                results.append(_not_run(koan))
                continue

            result = self.executor.execute_koan(koan)
            results.append(result)

            if result.unresolved and self.fail_fast:
                self.logger.info(
                    "topic_halted",
                    topic=resolved.name,
                    ordinal=koan.ordinal,
                )
                halted = True

        failing = first_failure(results)
        self.logger.info(
            "topic_complete",
            topic=resolved.name,
            passed=sum(1 for r in results if r.status is KoanStatus.PASSED),
            failing_at=failing.ordinal if failing else None,
        )
        return results

    def run_all(self, topics: Iterable[str] | None = None) -> dict[str, list[KoanResult]]:
        """Run every topic (or just *topics*) and map topic name -> results.

        The mapping preserves declaration order.
        """
        if topics is None:
            names = self.registry.topic_names()
        else:
            names = [self.registry.get_topic(name).name for name in topics]

        self.logger.info("run_start", topics=len(names), koans=len(self.registry))

        outcomes: dict[str, list[KoanResult]] = {}
        for name in names:
            outcomes[name] = self.run(name)

        self.logger.info("run_complete", topics=len(outcomes))
        return outcomes


def first_failure(results: Iterable[KoanResult]) -> KoanResult | None:
    """Return the lowest-ordinal failed or errored result, if any."""
    unresolved = [r for r in results if r.unresolved]
    if not unresolved:
        return None
    return min(unresolved, key=lambda r: r.ordinal)


def _not_run(koan: Koan) -> KoanResult:
    return KoanResult(
        topic=koan.topic,
        ordinal=koan.ordinal,
        name=koan.name,
        status=KoanStatus.NOT_RUN,
    )
