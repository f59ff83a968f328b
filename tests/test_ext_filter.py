# tests/test_ext_filter.py
# Purpose: Parsing of include/exclude extension lists

import pytest

from sample_dir.ext_filter import (
    MODE_EXCLUDE,
    MODE_INCLUDE,
    MODE_NONE,
    NO_EXTENSION,
    parse_extension_filter,
)


@pytest.mark.parametrize("ext_list", ["", None])
def test_empty_list_allows_everything(ext_list):
    f = parse_extension_filter(ext_list)
    assert f.mode == MODE_NONE
    assert f.extensions == frozenset()
    assert f.allows("csv")
    assert f.allows(NO_EXTENSION)


def test_include_list():
    f = parse_extension_filter("csv,txt")
    assert f.mode == MODE_INCLUDE
    assert f.extensions == {"csv", "txt"}
    assert f.allows("csv")
    assert not f.allows("log")
    assert not f.allows(NO_EXTENSION)


def test_leading_bang_switches_whole_list_to_exclude():
    f = parse_extension_filter("!log,tmp")
    assert f.mode == MODE_EXCLUDE
    assert f.extensions == {"log", "tmp"}
    assert not f.allows("log")
    assert not f.allows("tmp")
    assert f.allows("csv")
    assert f.allows(NO_EXTENSION)


def test_bang_only_counts_on_first_token_but_is_stripped_everywhere():
    f = parse_extension_filter("csv,!txt")
    assert f.mode == MODE_INCLUDE
    assert f.extensions == {"csv", "txt"}

    assert parse_extension_filter("!log,!tmp") == parse_extension_filter("!log,tmp")


def test_empty_tokens_are_dropped():
    f = parse_extension_filter("csv,,!,txt,")
    assert f.extensions == {"csv", "txt"}
    assert "" not in f.extensions

    bare = parse_extension_filter("!")
    assert bare.mode == MODE_EXCLUDE
    assert bare.extensions == frozenset()
    assert bare.allows("anything")


def test_extensions_are_case_sensitive():
    f = parse_extension_filter("CSV")
    assert f.allows("CSV")
    assert not f.allows("csv")
