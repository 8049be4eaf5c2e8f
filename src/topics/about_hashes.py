"""Dictionaries, Python's hashtable."""

from src.topics import __

TOPIC = "AboutHashes"


def creating_hashes():
    hash_ = dict()
    assert __ == type(hash_)
    assert __ == len(hash_)


def hash_literals():
    hash_ = {"one": "uno", "two": "dos"}
    assert __ == len(hash_)


def accessing_hashes():
    hash_ = {"one": "uno", "two": "dos"}
    assert __ == hash_["one"]
    assert __ == hash_["two"]
    assert __ == hash_.get("doesnt_exist")


def changing_hashes():
    hash_ = {"one": "uno", "two": "dos"}
    hash_["one"] = "eins"

    expected = {"one": "eins", "two": "dos"}
    assert __ == (expected == hash_)


def hash_is_unordered():
    hash1 = {"one": "uno", "two": "dos"}
    hash2 = {"two": "dos", "one": "uno"}
    assert __ == (hash1 == hash2)


def hash_keys_and_values():
    hash_ = {"one": "uno", "two": "dos"}
    assert __ == sorted(hash_.keys())
    assert __ == sorted(hash_.values())


def combining_hashes():
    hash_ = {"jim": 53, "amy": 20, "dan": 23}

    # Reading a key that is not there raises.
    try:
        hash_["jenny"]
    except KeyError as ex:
        assert __ == type(ex)

    # update() merges another dict in, overwriting shared keys.
    hash_.update({"jim": 54, "jenny": 26})

    assert __ == hash_["jim"]
    assert __ == hash_["jenny"]
    assert __ == hash_["amy"]


KOANS = [
    (1, creating_hashes),
    (2, hash_literals),
    (3, accessing_hashes),
    (4, changing_hashes),
    (5, hash_is_unordered),
    (6, hash_keys_and_values),
    (7, combining_hashes),
]
