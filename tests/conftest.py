import textwrap

import pytest

from src.koans.registry import KoanRegistry


def passing():
    assert 1 + 1 == 2


def failing():
    assert "uno" == "eins", "expected 'eins'"


def bare_failing():
    value = 3
    assert value == 4


def erroring():
    return {}["missing"]


@pytest.fixture
def registry():
    """Two topics: Hashes (pass, fail, error) declared before Strings (fail, pass)."""
    reg = KoanRegistry()
    reg.register("Hashes", 1, "creating_hashes", passing)
    reg.register("Hashes", 2, "accessing_hashes", failing)
    reg.register("Hashes", 3, "combining_hashes", erroring)
    reg.register("Strings", 1, "strings_are_immutable", bare_failing)
    reg.register("Strings", 2, "strings_can_be_split", passing)
    return reg


@pytest.fixture
def passing_registry():
    reg = KoanRegistry()
    reg.register("Hashes", 1, "creating_hashes", passing)
    reg.register("Hashes", 2, "hash_literals", passing)
    reg.register("Strings", 1, "strings_can_be_split", passing)
    return reg


def write_topic(directory, filename, source):
    path = directory / filename
    path.write_text(textwrap.dedent(source))
    return path


@pytest.fixture
def koans_dir(tmp_path):
    """A learner's koans directory with one solved and one unsolved topic."""
    directory = tmp_path / "koans"
    directory.mkdir()
    write_topic(
        directory,
        "about_hashes.py",
        """
        TOPIC = "AboutHashes"

        def creating_hashes():
            assert len({}) == 0

        def hash_literals():
            assert len({"one": "uno"}) == 1

        KOANS = [
            (1, creating_hashes),
            (2, hash_literals),
        ]
        """,
    )
    write_topic(
        directory,
        "about_strings.py",
        """
        TOPIC = "AboutStrings"

        def strings_can_be_split():
            assert "a b".split() == ["a", "b"]

        def strings_are_immutable():
            greeting = "Hello, "
            assert greeting + "World" == "Hello, "

        def escape_characters():
            return len(None)

        KOANS = [
            (1, strings_can_be_split),
            (2, strings_are_immutable),
            (3, escape_characters),
        ]
        """,
    )
    return directory


@pytest.fixture
def solved_koans_dir(tmp_path):
    directory = tmp_path / "solved"
    directory.mkdir()
    write_topic(
        directory,
        "about_hashes.py",
        """
        TOPIC = "AboutHashes"

        def creating_hashes():
            assert type(dict()) is dict

        KOANS = [(1, creating_hashes)]
        """,
    )
    return directory
