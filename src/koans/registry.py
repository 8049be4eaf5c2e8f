"""Central registry that stores koans grouped by topic."""

from __future__ import annotations

from typing import Any, Callable

from pydantic import ValidationError

from src.koans.models import Koan, Topic
from src.utils.exceptions import (
    DuplicateOrdinalError,
    InvalidKoanError,
    RegistryFrozenError,
    TopicNotFoundError,
)
from src.utils.logging import get_logger

logger = get_logger(__name__)


class KoanRegistry:
    """Ordered registry for every koan in the suite.

    Typical lifecycle::

        registry = KoanRegistry()
        registry.register("AboutHashes", 1, "creating_hashes", creating_hashes)
        registry.freeze()
        for topic in registry.all_topics():
            ...

    Topics keep declaration order (the order their first koan was
    registered).  Within a topic koans are ordered by ordinal.
    """

    def __init__(self) -> None:
        self._topics: dict[str, dict[int, Koan]] = {}
        self._count = 0
        self._frozen = False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        topic: str,
        ordinal: int,
        name: str,
        body: Callable[[], Any],
        expected_failure: bool = False,
    ) -> Koan:
        """Add a koan under *topic* at position *ordinal*.

        Raises :class:`DuplicateOrdinalError` if *topic* already holds a koan
        at *ordinal*, :class:`InvalidKoanError` for a malformed koan and
        :class:`RegistryFrozenError` once :meth:`freeze` has been called.
        """
        if self._frozen:
            raise RegistryFrozenError(topic, name)

        try:
            koan = Koan(
                topic=topic,
                ordinal=ordinal,
                name=name,
                body=body,
                expected_failure=expected_failure,
                sequence=self._count,
            )
        except ValidationError as exc:
            detail = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise InvalidKoanError(topic, name, detail) from exc

        # Key on the validated ordinal so "1" and 1 collide.
        koans = self._topics.get(topic, {})
        existing = koans.get(koan.ordinal)
        if existing is not None:
            raise DuplicateOrdinalError(topic, koan.ordinal, existing.name)

        self._topics.setdefault(topic, koans)[koan.ordinal] = koan
        self._count += 1
        logger.debug("koan_registered", topic=topic, ordinal=koan.ordinal, koan=name)
        return koan

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True
        logger.debug("registry_frozen", topics=len(self._topics), koans=self._count)

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def all_topics(self) -> list[Topic]:
        """Return every topic in declaration order."""
        return [self._build_topic(name) for name in self._topics]

    def get_topic(self, name: str) -> Topic:
        """Return the topic called *name*.

        An exact match wins; otherwise a case-insensitive match is tried.
        Raises :class:`TopicNotFoundError` when neither finds anything.
        """
        if name in self._topics:
            return self._build_topic(name)

        wanted = name.lower().strip()
        for candidate in self._topics:
            if candidate.lower() == wanted:
                return self._build_topic(candidate)

        raise TopicNotFoundError(name)

    def topic_names(self) -> list[str]:
        return list(self._topics)

    def _build_topic(self, name: str) -> Topic:
        koans = sorted(self._topics[name].values(), key=lambda k: k.sort_key)
        return Topic(name=name, koans=tuple(koans))

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._count

    def __contains__(self, topic: str) -> bool:
        return topic in self._topics
