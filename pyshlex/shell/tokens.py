"""
Lexer Tokens

Value types handed over by the tokenizer.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .wordbreak import WordbreakCategory


class TokenType(Enum):
    """Token types produced by the tokenizer."""
    WORD = "word"
    WORDBREAK = "wordbreak"


@dataclass(frozen=True)
class Token:
    """
    A lexed unit of shell input.

    Attributes:
        value: Word value with quoting removed
        raw_value: Literal text as it appeared in the input
        index: Offset of the token in the input line
        type: Whether the token is a word or an operator
    """
    value: str
    raw_value: str
    index: int = 0
    type: TokenType = TokenType.WORD

    @classmethod
    def word(cls, value: str, raw_value: Optional[str] = None, index: int = 0) -> 'Token':
        return cls(value, value if raw_value is None else raw_value, index, TokenType.WORD)

    @classmethod
    def wordbreak(cls, raw_value: str, index: int = 0) -> 'Token':
        return cls(raw_value, raw_value, index, TokenType.WORDBREAK)

    @property
    def wordbreak_type(self) -> 'WordbreakCategory':
        from .wordbreak import classify
        return classify(self)
