"""
pyshlex Shell Module

Operator classification for shell command lines:
- Lexer token types
- Word-break categories and predicates
- Configurable break characters
- Pipeline grouping
"""

from .tokens import Token, TokenType
from .wordbreak import (
    BASH_WORDBREAKS,
    OPERATORS,
    WordbreakCategory,
    classify,
    is_pipeline_delimiter,
    is_redirect,
    spelling,
)
from .classifier import WordbreakClassifier
from .parser import PipelineParser, ParsedCommand, Redirection

__all__ = [
    'Token',
    'TokenType',
    'BASH_WORDBREAKS',
    'OPERATORS',
    'WordbreakCategory',
    'classify',
    'is_pipeline_delimiter',
    'is_redirect',
    'spelling',
    'WordbreakClassifier',
    'PipelineParser',
    'ParsedCommand',
    'Redirection',
]
