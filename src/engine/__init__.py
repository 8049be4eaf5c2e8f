"""Execution engine -- runs koans in order and reports the outcome.

Public API::

    from src.engine import (
        KoanExecutor,
        KoanRunner,
        Reporter,
        Summary,
        first_failure,
        summarize,
    )
"""

from src.engine.executor import KoanExecutor
from src.engine.reporter import Reporter, Summary, summarize
from src.engine.runner import KoanRunner, first_failure

__all__ = [
    "KoanExecutor",
    "KoanRunner",
    "Reporter",
    "Summary",
    "first_failure",
    "summarize",
]
