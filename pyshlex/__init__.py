"""
pyshlex - Shell operator classification

Classifies the operator tokens of a shell command line (redirections,
pipes and list separators) and tells a command-line parser where one
command ends and the next begins. Pure Python, standard library only.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .shell.tokens import Token, TokenType
from .shell.wordbreak import (
    BASH_WORDBREAKS,
    WordbreakCategory,
    classify,
    is_pipeline_delimiter,
    is_redirect,
)
from .shell.classifier import WordbreakClassifier
from .shell.parser import PipelineParser

__all__ = [
    'Token',
    'TokenType',
    'BASH_WORDBREAKS',
    'WordbreakCategory',
    'classify',
    'is_pipeline_delimiter',
    'is_redirect',
    'WordbreakClassifier',
    'PipelineParser',
]
