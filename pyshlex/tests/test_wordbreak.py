#!/usr/bin/env python3
"""
Word-break Classification Tests

Run with: python -m pytest pyshlex/tests -v
Or: python pyshlex/tests/test_wordbreak.py

Author: YSNRFD
Version: 1.0.0
"""

import json
import os
import sys
import threading
import unittest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from pyshlex.exceptions import UnknownCategoryError, WordbreakException
from pyshlex.shell import (
    BASH_WORDBREAKS,
    OPERATORS,
    Token,
    TokenType,
    WordbreakCategory,
    classify,
    is_pipeline_delimiter,
    is_redirect,
    spelling,
)


EXPECTED = {
    "<": ("WORDBREAK_REDIRECT_INPUT", WordbreakCategory.REDIRECT_INPUT),
    ">": ("WORDBREAK_REDIRECT_OUTPUT", WordbreakCategory.REDIRECT_OUTPUT),
    ">>": ("WORDBREAK_REDIRECT_OUTPUT_APPEND", WordbreakCategory.REDIRECT_OUTPUT_APPEND),
    "&>": ("WORDBREAK_REDIRECT_OUTPUT_BOTH", WordbreakCategory.REDIRECT_OUTPUT_BOTH),
    ">&": ("WORDBREAK_REDIRECT_OUTPUT_BOTH", WordbreakCategory.REDIRECT_OUTPUT_BOTH),
    "&>>": ("WORDBREAK_REDIRECT_OUTPUT_BOTH_APPEND", WordbreakCategory.REDIRECT_OUTPUT_BOTH_APPEND),
    "<<<": ("WORDBREAK_REDIRECT_INPUT_STRING", WordbreakCategory.REDIRECT_INPUT_STRING),
    "<&": ("WORDBREAK_REDIRECT_INPUT_DUPLICATE", WordbreakCategory.REDIRECT_INPUT_DUPLICATE),
    "<>": ("WORDBREAK_REDIRECT_INPUT_OUTPUT", WordbreakCategory.REDIRECT_INPUT_OUTPUT),
    "|": ("WORDBREAK_PIPE", WordbreakCategory.PIPE),
    "|&": ("WORDBREAK_PIPE_WITH_STDERR", WordbreakCategory.PIPE_WITH_STDERR),
    "&": ("WORDBREAK_LIST_ASYNC", WordbreakCategory.LIST_ASYNC),
    ";": ("WORDBREAK_LIST_SEQUENTIAL", WordbreakCategory.LIST_SEQUENTIAL),
    "&&": ("WORDBREAK_LIST_AND", WordbreakCategory.LIST_AND),
    "||": ("WORDBREAK_LIST_OR", WordbreakCategory.LIST_OR),
}


class TestClassify(unittest.TestCase):
    """Test classification of operator tokens."""

    def test_operator_table(self):
        """Every known operator maps to its category and name."""
        for raw, (name, category) in EXPECTED.items():
            with self.subTest(raw=raw):
                result = classify(Token.wordbreak(raw))
                self.assertIs(result, category)
                self.assertEqual(result.value, name)

        self.assertEqual(set(OPERATORS), set(EXPECTED))

    def test_unknown_fallthrough(self):
        """Anything outside the table is UNKNOWN."""
        for raw in ["", " ", "\t", "&&&", "<<", "|||", ">>>", "ls", "=", "(", "& &", "AND"]:
            with self.subTest(raw=raw):
                self.assertIs(classify(Token.wordbreak(raw)), WordbreakCategory.UNKNOWN)

    def test_matches_raw_value_only(self):
        """Classification reads the raw text, not the unquoted value."""
        quoted = Token.word("&&", raw_value="'&&'")
        self.assertIs(classify(quoted), WordbreakCategory.UNKNOWN)

        token = Token(value="ignored", raw_value="||", type=TokenType.WORD)
        self.assertIs(classify(token), WordbreakCategory.LIST_OR)

    def test_synonyms(self):
        """&> and >& both redirect stdout and stderr."""
        self.assertIs(classify(Token.wordbreak("&>")), classify(Token.wordbreak(">&")))
        self.assertIs(classify(Token.wordbreak(">&")), WordbreakCategory.REDIRECT_OUTPUT_BOTH)

    def test_never_custom(self):
        """The fixed table never yields CUSTOM."""
        for raw in list(EXPECTED) + [":", "@", "", "custom"]:
            self.assertIsNot(classify(Token.wordbreak(raw)), WordbreakCategory.CUSTOM)

    def test_idempotent(self):
        """Repeated calls give the same result."""
        for raw in list(EXPECTED) + ["", "&&&"]:
            token = Token.wordbreak(raw)
            self.assertIs(classify(token), classify(token))

    def test_token_property(self):
        """Token.wordbreak_type delegates to classify."""
        self.assertIs(Token.wordbreak("|&", index=4).wordbreak_type, WordbreakCategory.PIPE_WITH_STDERR)
        self.assertIs(Token.word("echo").wordbreak_type, WordbreakCategory.UNKNOWN)

    def test_concurrent_classification(self):
        """Classification is safe to call from many threads."""
        errors = []

        def worker():
            for raw, (_, category) in EXPECTED.items():
                if classify(Token.wordbreak(raw)) is not category:
                    errors.append(raw)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(errors, [])


class TestPredicates(unittest.TestCase):
    """Test the pipeline-delimiter and redirect predicates."""

    PIPELINE = {
        WordbreakCategory.PIPE,
        WordbreakCategory.PIPE_WITH_STDERR,
        WordbreakCategory.LIST_ASYNC,
        WordbreakCategory.LIST_SEQUENTIAL,
        WordbreakCategory.LIST_AND,
        WordbreakCategory.LIST_OR,
    }

    def test_pipeline_delimiters(self):
        for category in WordbreakCategory:
            with self.subTest(category=category):
                self.assertEqual(is_pipeline_delimiter(category), category in self.PIPELINE)
                self.assertEqual(category.is_pipeline_delimiter, category in self.PIPELINE)

    def test_redirects(self):
        redirects = {c for c in WordbreakCategory if c.name.startswith("REDIRECT_")}
        self.assertEqual(len(redirects), 8)

        for category in WordbreakCategory:
            with self.subTest(category=category):
                self.assertEqual(is_redirect(category), category in redirects)
                self.assertEqual(category.is_redirect, category in redirects)

    def test_mutually_exclusive(self):
        """No category is both a delimiter and a redirect."""
        for category in WordbreakCategory:
            self.assertFalse(is_pipeline_delimiter(category) and is_redirect(category))

    def test_unknown_and_custom(self):
        for category in (WordbreakCategory.UNKNOWN, WordbreakCategory.CUSTOM):
            self.assertFalse(is_pipeline_delimiter(category))
            self.assertFalse(is_redirect(category))


class TestSerialization(unittest.TestCase):
    """Test the external representation of categories."""

    def test_names_unique(self):
        names = [category.value for category in WordbreakCategory]
        self.assertEqual(len(names), 16)
        self.assertEqual(len(set(names)), 16)
        for name in names:
            self.assertTrue(name.startswith("WORDBREAK_"))
            self.assertEqual(name, name.upper())

    def test_to_json(self):
        self.assertEqual(WordbreakCategory.LIST_AND.to_json(), '"WORDBREAK_LIST_AND"')
        self.assertEqual(json.loads(WordbreakCategory.CUSTOM.to_json()), "WORDBREAK_CUSTOM")

    def test_from_name(self):
        for category in WordbreakCategory:
            self.assertIs(WordbreakCategory.from_name(category.value), category)
            self.assertIs(WordbreakCategory.from_json(category.to_json()), category)

    def test_from_name_unknown(self):
        with self.assertRaises(UnknownCategoryError) as ctx:
            WordbreakCategory.from_name("WORDBREAK_HEREDOC")
        self.assertEqual(ctx.exception.name, "WORDBREAK_HEREDOC")
        self.assertIn("3001", str(ctx.exception))

        with self.assertRaises(WordbreakException):
            WordbreakCategory.from_json("not json")
        with self.assertRaises(WordbreakException):
            WordbreakCategory.from_json("42")

    def test_round_trip_through_spelling(self):
        """Name -> category -> spelling -> category recovers the category."""
        for category in WordbreakCategory:
            raw = spelling(category)
            if category in (WordbreakCategory.UNKNOWN, WordbreakCategory.CUSTOM):
                self.assertIsNone(raw)
                continue
            parsed = WordbreakCategory.from_name(category.value)
            self.assertIs(classify(Token.wordbreak(raw)), parsed)

        self.assertEqual(spelling(WordbreakCategory.REDIRECT_OUTPUT_BOTH), "&>")


class TestWordbreakCharacters(unittest.TestCase):
    """Test the default word-break character set."""

    def test_contents(self):
        self.assertEqual(BASH_WORDBREAKS, " \t\r\n\"'><=;|&(")
        self.assertEqual(len(set(BASH_WORDBREAKS)), len(BASH_WORDBREAKS))

    def test_operators_built_from_breaks(self):
        """Every operator is spelled with break characters only."""
        for raw in OPERATORS:
            self.assertTrue(all(char in BASH_WORDBREAKS for char in raw), raw)


if __name__ == '__main__':
    unittest.main()
