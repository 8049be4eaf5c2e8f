"""Koans subsystem -- models, registry and loader for the exercise suite."""

from src.koans.loader import (
    build_registry,
    load_topics,
    load_topics_from_directory,
    register_module,
)
from src.koans.models import Koan, KoanPointer, KoanResult, KoanStatus, Topic
from src.koans.registry import KoanRegistry

__all__ = [
    "Koan",
    "KoanPointer",
    "KoanResult",
    "KoanStatus",
    "Topic",
    "KoanRegistry",
    "build_registry",
    "load_topics",
    "load_topics_from_directory",
    "register_module",
]
