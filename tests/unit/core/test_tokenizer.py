"""Tests for argument tokenizing."""

import pytest

from argbind.core.tokenizer import split_arguments


class TestSplitArguments:
    """Test split_arguments."""

    @pytest.mark.parametrize("text", ["", " ", "   ", "\t", " \n "])
    def test_empty_or_whitespace(self, text):
        """Test that blank input yields no tokens."""
        assert list(split_arguments(text)) == []

    def test_simple_words(self):
        """Test splitting on spaces."""
        assert list(split_arguments("a b c")) == ["a", "b", "c"]

    def test_consecutive_spaces_keep_empty_tokens(self):
        """Test that double spaces produce an empty token."""
        assert list(split_arguments("a  b")) == ["a", "", "b"]

    def test_quoted_group(self):
        """Test that quotes group words into one token."""
        assert list(split_arguments('a "b c" d')) == ["a", "b c", "d"]

    def test_single_quoted_word(self):
        """Test a quoted word without spaces."""
        assert list(split_arguments('"hello" world')) == ["hello", "world"]

    def test_empty_quotes(self):
        """Test that a pair of quotes is an empty token."""
        assert list(split_arguments('a "" b')) == ["a", "", "b"]

    def test_escaped_quote_inside_group(self):
        """Test that a backslash-quote does not close the group."""
        assert list(split_arguments('a "b\\" c" d')) == ["a", 'b" c', "d"]

    def test_escaped_quote_mid_group(self):
        """Test an escaped quote on a word inside an open group."""
        assert list(split_arguments('"one two\\" three"')) == ['one two" three']

    def test_long_quoted_group(self):
        """Test a group spanning several words."""
        assert list(split_arguments('say "this is a sentence" now')) == [
            "say",
            "this is a sentence",
            "now",
        ]

    def test_unterminated_quote_is_dropped(self):
        """Test that an open quote at the end yields nothing for its fragment."""
        assert list(split_arguments('a "b c')) == ["a"]

    def test_backslash_elsewhere_is_literal(self):
        """Test that backslashes not before a closing quote are kept."""
        assert list(split_arguments("a\\b c\\")) == ["a\\b", "c\\"]

    def test_quote_in_middle_of_word_is_literal(self):
        """Test that quotes inside a word are not delimiters."""
        assert list(split_arguments('it"s fine')) == ['it"s', "fine"]

    def test_is_lazy_and_restartable(self):
        """Test that each call produces a fresh generator."""
        first = split_arguments("x y")
        assert next(first) == "x"

        second = split_arguments("x y")
        assert list(second) == ["x", "y"]
        assert list(first) == ["y"]
