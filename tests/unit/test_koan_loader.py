"""Tests for loading koan tables from modules and directories."""
import types
from pathlib import Path

import pytest

from src.koans.loader import (
    _module_name_for,
    build_registry,
    load_topics,
    load_topics_from_directory,
    register_module,
)
from src.koans.registry import KoanRegistry
from src.utils.exceptions import DuplicateOrdinalError, KoanLoadError


def _module(**attrs):
    module = types.ModuleType("about_testing")
    for key, value in attrs.items():
        setattr(module, key, value)
    return module


def first():
    pass


def second():
    assert False


class TestRegisterModule:
    def test_registers_table(self):
        registry = KoanRegistry()
        module = _module(TOPIC="AboutTesting", KOANS=[(2, second), (1, first)])
        assert register_module(registry, module) == 2
        topic = registry.get_topic("AboutTesting")
        assert [(k.ordinal, k.name) for k in topic.koans] == [(1, "first"), (2, "second")]

    def test_expected_failures(self):
        registry = KoanRegistry()
        module = _module(
            TOPIC="AboutTesting",
            KOANS=[(1, first), (2, second)],
            EXPECTED_FAILURES={2},
        )
        register_module(registry, module)
        flags = [k.expected_failure for k in registry.get_topic("AboutTesting").koans]
        assert flags == [False, True]

    def test_missing_topic(self):
        with pytest.raises(KoanLoadError):
            register_module(KoanRegistry(), _module(KOANS=[(1, first)]))

    def test_missing_table(self):
        with pytest.raises(KoanLoadError):
            register_module(KoanRegistry(), _module(TOPIC="AboutTesting"))

    def test_malformed_row(self):
        with pytest.raises(KoanLoadError):
            register_module(KoanRegistry(), _module(TOPIC="AboutTesting", KOANS=[first]))

    def test_duplicate_ordinal_in_table(self):
        module = _module(TOPIC="AboutTesting", KOANS=[(1, first), (1, second)])
        with pytest.raises(DuplicateOrdinalError):
            register_module(KoanRegistry(), module)

    @pytest.mark.parametrize(
        "attrs",
        [
            {"KOANS": 5},
            {"KOANS": "creating_hashes"},
            {"KOANS": [([1], first)]},
            {"KOANS": [("1", first)]},
            {"KOANS": [(True, first)]},
            {"KOANS": [(1, first)], "EXPECTED_FAILURES": 3},
            {"KOANS": [(1, first)], "EXPECTED_FAILURES": [[1]]},
        ],
    )
    def test_malformed_table(self, attrs):
        registry = KoanRegistry()
        with pytest.raises(KoanLoadError):
            register_module(registry, _module(TOPIC="AboutTesting", **attrs))
        assert len(registry) == 0


class TestLoadTopics:
    def test_bundled_topics(self):
        registry = KoanRegistry()
        count = load_topics(
            registry, ["src.topics.about_hashes", "src.topics.about_strings"]
        )
        assert count == 30
        assert registry.topic_names() == ["AboutHashes", "AboutStrings"]

    def test_unknown_module(self):
        with pytest.raises(KoanLoadError):
            load_topics(KoanRegistry(), ["src.topics.about_nothing"])

    def test_build_registry_is_frozen(self):
        registry = build_registry()
        assert registry.frozen
        assert registry.topic_names() == ["AboutHashes", "AboutStrings"]


class TestLoadFromDirectory:
    def test_sorted_by_filename(self, koans_dir):
        registry = KoanRegistry()
        assert load_topics_from_directory(registry, koans_dir) == 5
        assert registry.topic_names() == ["AboutHashes", "AboutStrings"]

    def test_ignores_other_files(self, koans_dir):
        (koans_dir / "helpers.py").write_text("TOPIC = 'Helpers'\nKOANS = []\n")
        registry = KoanRegistry()
        load_topics_from_directory(registry, koans_dir)
        assert "Helpers" not in registry

    def test_missing_directory(self, tmp_path):
        with pytest.raises(KoanLoadError):
            load_topics_from_directory(KoanRegistry(), tmp_path / "missing")

    def test_syntax_error_is_reported(self, tmp_path):
        (tmp_path / "about_broken.py").write_text("def broken(:\n    pass\n")
        with pytest.raises(KoanLoadError) as excinfo:
            load_topics_from_directory(KoanRegistry(), tmp_path)
        assert "about_broken.py" in str(excinfo.value)
        assert "SyntaxError" in str(excinfo.value)

    def test_build_registry_from_directory(self, koans_dir):
        registry = build_registry(koans_dir)
        assert registry.frozen
        assert len(registry) == 5

    def test_exit_at_import_is_reported(self, tmp_path):
        (tmp_path / "about_exit.py").write_text("import sys\nsys.exit(1)\n")
        with pytest.raises(KoanLoadError) as excinfo:
            load_topics_from_directory(KoanRegistry(), tmp_path)
        assert "SystemExit" in str(excinfo.value)

    def test_module_names_are_stable(self, tmp_path):
        path = tmp_path / "about_hashes.py"
        assert _module_name_for(path) == _module_name_for(tmp_path / "about_hashes.py")
        assert _module_name_for(path) != _module_name_for(tmp_path / "about_strings.py")
        # Independent of the per-process hash seed.
        assert _module_name_for(Path("/koans/about_hashes.py")) == "_koans_dynamic_.about_hashes_a17b2526"
