"""Tests for dedent() and indent()."""

import pytest

from utils.string_utils import dedent, indent


class TestDedent:

    def test_trailing_whitespace_line(self):
        assert dedent("    hello\n      world\n    ") == "hello\n  world\n"

    @pytest.mark.parametrize("text, expected", [
        ("    hello\n    world", "hello\nworld"),
        ("  hello\n    world", "hello\n  world"),
        ("hello\n  world", "hello\n  world"),
        ("\thello\n\t\tworld", "hello\n\tworld"),
        ("    hello\n\n    world", "hello\n\nworld"),
        ("    hello\n   \n    world", "hello\n\nworld"),
        ("  \thello\n  world", "\thello\nworld"),
        ("  \thello\n   world", "\thello\n world"),
    ])
    def test_common_margin_removed(self, text, expected):
        assert dedent(text) == expected

    def test_tabs_and_spaces_differ(self):
        assert dedent("\thello\n    world") == "\thello\n    world"

    def test_empty(self):
        assert dedent("") == ""

    def test_whitespace_only_lines_are_emptied(self):
        assert dedent("  a\n  \n\t\n") == "a\n\n\n"

    @pytest.mark.parametrize("text", ["  \n\t\n", "   \n  ", "\t", "\n\n"])
    def test_blank_text_returned_unchanged(self, text):
        assert dedent(text) == text

    @pytest.mark.parametrize("text", [
        "    hello\n      world\n    ",
        "  \thello\n   world",
        "\n\n  a\n\n    b\n",
        "no indent at all",
    ])
    def test_idempotent(self, text):
        once = dedent(text)
        assert dedent(once) == once


class TestIndent:

    def test_blank_lines_not_prefixed(self):
        assert indent("hello\n\n \nworld", " ") == " hello\n\n \n world"

    def test_predicate_for_all_lines(self):
        assert indent("a\n\nb", "> ", lambda line: True) == "> a\n> \n> b"

    def test_predicate_sees_trailing_newline(self):
        seen = []

        def predicate(line):
            seen.append(line)
            return False

        assert indent("a\nb", "#", predicate) == "a\nb"
        assert seen == ["a\n", "b\n"]

    def test_line_breaks_normalized(self):
        assert indent("a\r\nb\rc", "-") == "-a\n-b\n-c"

    def test_trailing_newline_preserved(self):
        assert indent("a\n", "  ") == "  a\n"

    def test_empty(self):
        assert indent("", "x") == ""
