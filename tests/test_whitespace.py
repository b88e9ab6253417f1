"""Tests for whitespace normalization."""

from wrapping.whitespace import normalize
from wrapping.wrap_config import WrapConfig


def test_tab_expands_to_next_stop():
    assert normalize("a\tb", WrapConfig()) == "a" + " " * 7 + "b"


def test_tab_expansion_uses_column_within_line():
    config = WrapConfig(tab_size=4, replace_whitespace=False)
    assert normalize("abcdefghij\tk", config) == "abcdefghij  k"
    assert normalize("abc\n\tx", config) == "abc\n    x"


def test_tab_size_zero_removes_tabs():
    assert normalize("a\tb", WrapConfig(tab_size=0)) == "ab"


def test_unexpanded_tab_becomes_single_space():
    config = WrapConfig(expand_tabs=False)
    assert normalize("a\tb", config) == "a b"


def test_keep_tabs_when_nothing_is_replaced():
    config = WrapConfig(expand_tabs=False, replace_whitespace=False)
    assert normalize("a\tb\nc", config) == "a\tb\nc"


def test_all_whitespace_kinds_become_spaces():
    assert normalize("a\nb\x0bc\x0cd\re", WrapConfig()) == "a b c d e"


def test_other_unicode_spaces_are_left_alone():
    assert normalize("a\u00a0b", WrapConfig()) == "a\u00a0b"
