"""
Configurable Word-break Classifier

Extends the fixed operator table with caller-supplied break
characters, in the spirit of bash's ``COMP_WORDBREAKS``. Tokens made
up only of such characters are classified as ``CUSTOM``.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional

from pyshlex.core.config_loader import LexerConfig, get_config
from pyshlex.logger import get_logger
from .tokens import Token
from .wordbreak import BASH_WORDBREAKS, WordbreakCategory, classify


class WordbreakClassifier:
    """
    Classifier with an optional set of extra break characters.

    The fixed operator table always wins; extra characters only turn
    what would otherwise be ``UNKNOWN`` into ``CUSTOM``. Instances
    hold no mutable state after construction.

    Example:
        >>> classifier = WordbreakClassifier(custom_wordbreaks=":@")
        >>> classifier.classify(Token.wordbreak(":")).value
        'WORDBREAK_CUSTOM'
        >>> classifier.classify(Token.wordbreak("&&")).value
        'WORDBREAK_LIST_AND'
    """

    def __init__(
        self,
        custom_wordbreaks: Optional[str] = None,
        config: Optional[LexerConfig] = None
    ):
        self._logger = get_logger('classifier')

        if custom_wordbreaks is None:
            lexer_config = config or get_config().lexer
            custom_wordbreaks = lexer_config.resolve_custom_wordbreaks()

        custom = []
        for char in custom_wordbreaks:
            if char not in BASH_WORDBREAKS and char not in custom:
                custom.append(char)
        self._custom = "".join(custom)

        if self._custom:
            self._logger.debug(
                "Custom word-break characters enabled",
                context={'custom': repr(self._custom)}
            )

    @property
    def custom_wordbreaks(self) -> str:
        return self._custom

    @property
    def wordbreaks(self) -> str:
        """Default break characters followed by the custom ones."""
        return BASH_WORDBREAKS + self._custom

    def is_wordbreak(self, char: str) -> bool:
        """Check whether a single character ends a bare word."""
        return len(char) == 1 and char in self.wordbreaks

    def classify(self, token: Token) -> WordbreakCategory:
        """Classify a token, falling back to ``CUSTOM`` for extra break characters."""
        category = classify(token)
        if category is not WordbreakCategory.UNKNOWN:
            return category

        raw = token.raw_value
        if self._custom and raw and all(char in self._custom for char in raw):
            return WordbreakCategory.CUSTOM
        return category
