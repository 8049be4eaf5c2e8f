"""Strings: quoting, immutability, formatting and splitting.

One of the longest topics, and one of the most important.
"""

import math
import re

from src.topics import __

TOPIC = "AboutStrings"


def double_quoted_strings_are_strings():
    string = "Hello, World"
    assert __ == isinstance(string, str)


def single_quoted_strings_are_also_strings():
    string = 'H'
    assert __ == isinstance(string, str)


def use_single_quotes_to_create_string_with_double_quotes():
    string = 'Hello, "World"'
    assert __ == len(string)


def another_way_to_create_a_string_with_double_quotes():
    string = "Hello, \"World\""
    assert __ == len(string)


def triple_quoted_strings_handle_flexible_quoting():
    a = """Triple quoted strings can handle both ' and " characters"""
    b = "Triple quoted strings can handle both ' and \" characters"
    assert __ == (a == b)


def triple_quoted_strings_can_span_lines():
    string = """I
am a
broken line"""
    assert __ == len(string)


def line_endings_in_source_are_always_newlines():
    literal = "I" + "\n" + "am a" + "\n" + "broken line"
    multiline = """I
am a
broken line"""
    assert __ == (literal == multiline)


def plus_will_concatenate_two_strings():
    string = "Hello, " + "World"
    assert __ == string


def plus_concatenation_will_not_modify_original_strings():
    hi = "Hello, "
    there = "World"
    string = hi + there
    assert __ == hi
    assert __ == there


def plus_equals_rebinds_the_target_name():
    hi = "Hello, "
    there = "World"
    hi += there
    assert __ == hi
    assert __ == there


def strings_are_really_immutable():
    original = "Hello, "
    hi = original
    there = "World"
    hi += there
    assert __ == original


def join_is_the_better_way_to_concatenate_lots_of_strings():
    string = "".join("a" for _ in range(100))
    assert __ == len(string)


def escape_characters_are_interpreted():
    string = "\n"
    assert __ == len(string)


def raw_strings_do_not_interpret_escape_characters():
    string = r"\n"
    assert __ == len(string)


def raw_strings_still_do_not_interpret_escape_characters():
    string = r"\\\t"
    assert __ == len(string)


def you_do_not_need_concatenation_to_insert_values():
    world = "World"
    string = "Hello, {0}".format(world)
    assert __ == string


def any_expression_can_be_used_in_an_f_string():
    string = f"The square root of 9 is {math.sqrt(9)}"
    assert __ == string


def you_can_get_a_substring_from_a_string():
    string = "Bacon, lettuce and tomato"
    assert __ == string[19:]
    assert __ == string[7:10]


def you_can_get_a_single_character_from_a_string():
    string = "Bacon, lettuce and tomato"
    assert __ == string[0]


def single_characters_have_code_points():
    assert __ == ord("a")
    assert __ == ord("b")
    assert __ == (chr(ord("a") + 1) == "b")


def strings_can_be_split():
    string = "Sausage Egg Cheese"
    words = string.split()
    assert __ == words


def strings_can_be_split_on_a_separator():
    string = "the:rain:in:spain"
    words = string.split(":")
    assert __ == words


def strings_can_be_split_with_regular_expressions():
    string = "the:rain:in:spain"
    words = re.split(r":", string)
    assert __ == words


KOANS = [
    (1, double_quoted_strings_are_strings),
    (2, single_quoted_strings_are_also_strings),
    (3, use_single_quotes_to_create_string_with_double_quotes),
    (4, another_way_to_create_a_string_with_double_quotes),
    (5, triple_quoted_strings_handle_flexible_quoting),
    (6, triple_quoted_strings_can_span_lines),
    (7, line_endings_in_source_are_always_newlines),
    (8, plus_will_concatenate_two_strings),
    (9, plus_concatenation_will_not_modify_original_strings),
    (10, plus_equals_rebinds_the_target_name),
    (11, strings_are_really_immutable),
    (12, join_is_the_better_way_to_concatenate_lots_of_strings),
    (13, escape_characters_are_interpreted),
    (14, raw_strings_do_not_interpret_escape_characters),
    (15, raw_strings_still_do_not_interpret_escape_characters),
    (16, you_do_not_need_concatenation_to_insert_values),
    (17, any_expression_can_be_used_in_an_f_string),
    (18, you_can_get_a_substring_from_a_string),
    (19, you_can_get_a_single_character_from_a_string),
    (20, single_characters_have_code_points),
    (21, strings_can_be_split),
    (22, strings_can_be_split_on_a_separator),
    (23, strings_can_be_split_with_regular_expressions),
]
