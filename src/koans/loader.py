"""Koan loader -- reads the declarative ``KOANS`` tables of topic modules.

A topic module looks like::

    TOPIC = "AboutHashes"

    def creating_hashes():
        ...

    KOANS = [
        (1, creating_hashes),
    ]

    EXPECTED_FAILURES = {4}   # optional

Nothing is discovered by reflection: only the rows listed in ``KOANS`` are
registered, under the function's ``__name__``.
"""

import hashlib
import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Iterable

from src.koans.registry import KoanRegistry
from src.utils.exceptions import KoanLoadError
from src.utils.logging import get_logger

logger = get_logger(__name__)


def _module_name_for(path: Path) -> str:
    """Derive a unique, deterministic module name from a file path."""
    digest = hashlib.sha1(str(path).encode("utf-8")).hexdigest()[:8]
    return f"_koans_dynamic_.{path.stem}_{digest}"


def register_module(registry: KoanRegistry, module: ModuleType) -> int:
    """Register every row of *module*'s ``KOANS`` table.

    Returns the number of koans registered.  Raises :class:`KoanLoadError`
    when the module does not declare ``TOPIC`` and ``KOANS`` or a row is not
    an ``(ordinal, function)`` pair.
    """
    source = getattr(module, "__file__", None) or module.__name__

    topic = getattr(module, "TOPIC", None)
    if not isinstance(topic, str) or not topic:
        raise KoanLoadError(source, "module does not declare a TOPIC name")

    table = getattr(module, "KOANS", None)
    if table is None:
        raise KoanLoadError(source, "module does not declare a KOANS table")

    if isinstance(table, (str, bytes)) or not isinstance(table, Iterable):
        raise KoanLoadError(source, f"KOANS must be a list of rows, got {table!r}")

    declared = getattr(module, "EXPECTED_FAILURES", ())
    try:
        expected_failures = set(declared)
    except TypeError as exc:
        raise KoanLoadError(
            source, f"EXPECTED_FAILURES must be a collection of ordinals, got {declared!r}"
        ) from exc

    count = 0
    for row in table:
        try:
            ordinal, body = row
        except (TypeError, ValueError) as exc:
            raise KoanLoadError(
                source, f"KOANS rows must be (ordinal, function) pairs, got {row!r}"
            ) from exc

        if isinstance(ordinal, bool) or not isinstance(ordinal, int):
            raise KoanLoadError(source, f"ordinal must be an int, got {ordinal!r}")

        name = getattr(body, "__name__", "")
        registry.register(
            topic,
            ordinal,
            name,
            body,
            expected_failure=ordinal in expected_failures,
        )
        count += 1

    logger.info("topic_loaded", topic=topic, koans=count, source=source)
    return count


def load_topics(registry: KoanRegistry, module_names: Iterable[str]) -> int:
    """Import each dotted module name in order and register its koans.

    The order of *module_names* becomes the topic declaration order.
    """
    count = 0
    for module_name in module_names:
        try:
            module = importlib.import_module(module_name)
        except (Exception, SystemExit) as exc:
            raise KoanLoadError(module_name, f"{type(exc).__name__}: {exc}") from exc
        count += register_module(registry, module)
    return count


def load_topics_from_directory(registry: KoanRegistry, directory: str | Path) -> int:
    """Import every ``about_*.py`` file in *directory* (sorted by filename)
    and register its koans.

    Raises :class:`KoanLoadError` when the directory is missing or a file
    cannot be imported; a learner's syntax error is reported, not skipped.
    """
    directory = Path(directory)

    if not directory.is_dir():
        raise KoanLoadError(str(directory), "not a directory")

    count = 0
    for filepath in sorted(directory.glob("about_*.py")):
        count += register_module(registry, _import_file(filepath))

    if count == 0:
        logger.warning("koans_directory_empty", path=str(directory))
    return count


def _import_file(filepath: Path) -> ModuleType:
    module_name = _module_name_for(filepath)

    spec = importlib.util.spec_from_file_location(module_name, str(filepath))
    if spec is None or spec.loader is None:
        raise KoanLoadError(str(filepath), "cannot build an import spec")

    module = importlib.util.module_from_spec(spec)

    # Register in sys.modules so intra-module imports work.
    sys.modules[module_name] = module

    try:
        spec.loader.exec_module(module)
    except (Exception, SystemExit) as exc:
        sys.modules.pop(module_name, None)
        raise KoanLoadError(str(filepath), f"{type(exc).__name__}: {exc}") from exc

    return module


def build_registry(koans_dir: str | Path = "") -> KoanRegistry:
    """Populate a registry from *koans_dir* (or the bundled topics) and
    freeze it."""
    from src.topics import PATH_TO_ENLIGHTENMENT

    registry = KoanRegistry()
    if koans_dir:
        load_topics_from_directory(registry, koans_dir)
    else:
        load_topics(registry, PATH_TO_ENLIGHTENMENT)
    registry.freeze()
    return registry
