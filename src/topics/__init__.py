"""Bundled koans.

Each ``about_*`` module declares a ``TOPIC`` and a ``KOANS`` table.  Replace
every ``__`` with the value that makes the assertion true, then run
``koans`` again.
"""

__ = "-=> FILL ME IN! <=-"

# Topic declaration order: the order in which koans should be fixed.
PATH_TO_ENLIGHTENMENT = (
    "src.topics.about_hashes",
    "src.topics.about_strings",
)
