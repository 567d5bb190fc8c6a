"""
Word-break Classification

Classifies shell operator tokens (redirections, pipes and list
separators) and answers whether an operator ends a command or
attaches a redirection to it.

References:
    https://www.gnu.org/software/bash/manual/html_node/Redirections.html
    https://www.gnu.org/software/bash/manual/html_node/Pipelines.html
    https://www.gnu.org/software/bash/manual/html_node/Lists.html

Author: YSNRFD
Version: 1.0.0
"""

import json
from enum import Enum
from types import MappingProxyType
from typing import Optional

from pyshlex.exceptions import UnknownCategoryError
from .tokens import Token


# Characters that end a bare word.
BASH_WORDBREAKS = " \t\r\n" + "\"'><=;|&("


class WordbreakCategory(Enum):
    """Semantic category of an operator token."""
    UNKNOWN = "WORDBREAK_UNKNOWN"
    # redirections
    REDIRECT_INPUT = "WORDBREAK_REDIRECT_INPUT"
    REDIRECT_OUTPUT = "WORDBREAK_REDIRECT_OUTPUT"
    REDIRECT_OUTPUT_APPEND = "WORDBREAK_REDIRECT_OUTPUT_APPEND"
    REDIRECT_OUTPUT_BOTH = "WORDBREAK_REDIRECT_OUTPUT_BOTH"
    REDIRECT_OUTPUT_BOTH_APPEND = "WORDBREAK_REDIRECT_OUTPUT_BOTH_APPEND"
    REDIRECT_INPUT_STRING = "WORDBREAK_REDIRECT_INPUT_STRING"
    REDIRECT_INPUT_DUPLICATE = "WORDBREAK_REDIRECT_INPUT_DUPLICATE"
    REDIRECT_INPUT_OUTPUT = "WORDBREAK_REDIRECT_INPUT_OUTPUT"
    # pipelines
    PIPE = "WORDBREAK_PIPE"
    PIPE_WITH_STDERR = "WORDBREAK_PIPE_WITH_STDERR"
    # lists
    LIST_ASYNC = "WORDBREAK_LIST_ASYNC"
    LIST_SEQUENTIAL = "WORDBREAK_LIST_SEQUENTIAL"
    LIST_AND = "WORDBREAK_LIST_AND"
    LIST_OR = "WORDBREAK_LIST_OR"
    # caller-supplied break characters (COMP_WORDBREAKS)
    CUSTOM = "WORDBREAK_CUSTOM"

    @property
    def is_pipeline_delimiter(self) -> bool:
        return self in _PIPELINE_DELIMITERS

    @property
    def is_redirect(self) -> bool:
        return self in _REDIRECTS

    def to_json(self) -> str:
        """Serialize as the JSON string of the category name."""
        return json.dumps(self.value)

    @classmethod
    def from_name(cls, name: str) -> 'WordbreakCategory':
        """
        Look up a category by its serialized name.

        Raises:
            UnknownCategoryError: If ``name`` is not a category name
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownCategoryError(name) from None

    @classmethod
    def from_json(cls, data: str) -> 'WordbreakCategory':
        """Parse a category from its JSON string form."""
        try:
            name = json.loads(data)
        except json.JSONDecodeError:
            raise UnknownCategoryError(data) from None
        if not isinstance(name, str):
            raise UnknownCategoryError(data)
        return cls.from_name(name)


_PIPELINE_DELIMITERS = frozenset({
    WordbreakCategory.PIPE,
    WordbreakCategory.PIPE_WITH_STDERR,
    WordbreakCategory.LIST_ASYNC,
    WordbreakCategory.LIST_SEQUENTIAL,
    WordbreakCategory.LIST_AND,
    WordbreakCategory.LIST_OR,
})

_REDIRECTS = frozenset({
    WordbreakCategory.REDIRECT_INPUT,
    WordbreakCategory.REDIRECT_OUTPUT,
    WordbreakCategory.REDIRECT_OUTPUT_APPEND,
    WordbreakCategory.REDIRECT_OUTPUT_BOTH,
    WordbreakCategory.REDIRECT_OUTPUT_BOTH_APPEND,
    WordbreakCategory.REDIRECT_INPUT_STRING,
    WordbreakCategory.REDIRECT_INPUT_DUPLICATE,
    WordbreakCategory.REDIRECT_INPUT_OUTPUT,
})

OPERATORS = MappingProxyType({
    "<": WordbreakCategory.REDIRECT_INPUT,
    ">": WordbreakCategory.REDIRECT_OUTPUT,
    ">>": WordbreakCategory.REDIRECT_OUTPUT_APPEND,
    "&>": WordbreakCategory.REDIRECT_OUTPUT_BOTH,
    ">&": WordbreakCategory.REDIRECT_OUTPUT_BOTH,
    "&>>": WordbreakCategory.REDIRECT_OUTPUT_BOTH_APPEND,
    "<<<": WordbreakCategory.REDIRECT_INPUT_STRING,
    "<&": WordbreakCategory.REDIRECT_INPUT_DUPLICATE,
    "<>": WordbreakCategory.REDIRECT_INPUT_OUTPUT,
    "|": WordbreakCategory.PIPE,
    "|&": WordbreakCategory.PIPE_WITH_STDERR,
    "&": WordbreakCategory.LIST_ASYNC,
    ";": WordbreakCategory.LIST_SEQUENTIAL,
    "&&": WordbreakCategory.LIST_AND,
    "||": WordbreakCategory.LIST_OR,
})

# First spelling wins, so REDIRECT_OUTPUT_BOTH maps back to "&>".
_SPELLINGS = MappingProxyType({
    category: raw for raw, category in reversed(list(OPERATORS.items()))
})


def classify(token: Token) -> WordbreakCategory:
    """
    Classify an operator token by its raw text.

    Matching is exact and case-sensitive; anything outside the operator
    table, including the empty string, is ``UNKNOWN``. ``CUSTOM`` is
    never returned here.
    """
    return OPERATORS.get(token.raw_value, WordbreakCategory.UNKNOWN)


def is_pipeline_delimiter(category: WordbreakCategory) -> bool:
    """True for pipes and list separators."""
    return category in _PIPELINE_DELIMITERS


def is_redirect(category: WordbreakCategory) -> bool:
    """True for the redirection operators."""
    return category in _REDIRECTS


def spelling(category: WordbreakCategory) -> Optional[str]:
    """Canonical source spelling of a category, if it has one."""
    return _SPELLINGS.get(category)
