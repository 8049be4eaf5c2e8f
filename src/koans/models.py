"""Data models for koans and their execution results."""

from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field


class Koan(BaseModel):
    """A single exercise, identified by ``(topic, ordinal)``."""

    model_config = ConfigDict(frozen=True)

    topic: str
    ordinal: int = Field(ge=1)
    name: str = Field(min_length=1)
    body: Callable[[], Any]
    expected_failure: bool = False
    sequence: int = 0  # registration index; breaks ordinal ties

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.ordinal, self.sequence)


class Topic(BaseModel):
    """A named group of koans, sorted in fix order."""

    model_config = ConfigDict(frozen=True)

    name: str
    koans: tuple[Koan, ...] = ()

    def __len__(self) -> int:
        return len(self.koans)


class KoanStatus(str, Enum):
    NOT_RUN = "not_run"
    PASSED = "passed"
    FAILED = "failed"
    ERRORED = "errored"


class KoanResult(BaseModel):
    """Outcome of one koan in one run.

    ``reason`` holds the assertion message for ``failed`` and the exception
    message for ``errored``; ``error_type``, ``traceback`` and ``location`` are
    only set when the body raised.
    """

    model_config = ConfigDict(frozen=True)

    topic: str
    ordinal: int
    name: str
    status: KoanStatus = KoanStatus.NOT_RUN
    reason: str = ""
    error_type: str = ""
    traceback: str = ""
    location: str = ""
    duration_seconds: float = 0.0

    @property
    def unresolved(self) -> bool:
        return self.status in (KoanStatus.FAILED, KoanStatus.ERRORED)


class KoanPointer(BaseModel):
    """Points the learner at the koan to fix next."""

    model_config = ConfigDict(frozen=True)

    topic: str
    ordinal: int
    name: str
