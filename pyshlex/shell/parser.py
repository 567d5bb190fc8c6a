"""
Pipeline Parser Module

Groups already-lexed tokens into commands using the word-break
categories. Raw input text is never looked at here.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List

from pyshlex.logger import get_logger
from .classifier import WordbreakClassifier
from .tokens import Token, TokenType
from .wordbreak import WordbreakCategory


@dataclass
class Redirection:
    """A redirection attached to a command."""
    category: WordbreakCategory
    target: Optional[str] = None  # None while the target is not typed yet


@dataclass
class ParsedCommand:
    """One command of a command line."""
    args: List[str] = field(default_factory=list)
    redirections: List[Redirection] = field(default_factory=list)
    terminator: Optional[WordbreakCategory] = None
    background: bool = False

    @property
    def command(self) -> str:
        return self.args[0] if self.args else ""

    @property
    def piped(self) -> bool:
        """Whether stdout feeds the next command."""
        return self.terminator in (
            WordbreakCategory.PIPE,
            WordbreakCategory.PIPE_WITH_STDERR,
        )


class PipelineParser:
    """
    Splits a token list into commands.

    Handles:
    - Pipes (|, |&)
    - Lists (;, &, &&, ||)
    - Redirections (<, >, >>, &>, >&, &>>, <<<, <&, <>)

    Example:
        >>> parser = PipelineParser()
        >>> tokens = [Token.word("ls"), Token.wordbreak("|"), Token.word("wc")]
        >>> [cmd.command for cmd in parser.parse(tokens)]
        ['ls', 'wc']
    """

    def __init__(self, classifier: Optional[WordbreakClassifier] = None):
        self._classifier = classifier or WordbreakClassifier()
        self._logger = get_logger('parser')

    @property
    def classifier(self) -> WordbreakClassifier:
        return self._classifier

    def _category(self, token: Token) -> WordbreakCategory:
        if token.type is not TokenType.WORDBREAK:
            return WordbreakCategory.UNKNOWN
        return self._classifier.classify(token)

    def parse(self, tokens: List[Token]) -> List[ParsedCommand]:
        """
        Parse tokens into commands.

        Args:
            tokens: Tokens as produced by the tokenizer

        Returns:
            Commands in input order. Only commands holding an
            argument or a redirection are included.
        """
        commands: List[ParsedCommand] = []
        current = ParsedCommand()
        i = 0

        while i < len(tokens):
            token = tokens[i]
            category = self._category(token)

            if category.is_pipeline_delimiter:
                # a leading or repeated delimiter has no command to end
                if current.args or current.redirections:
                    current.terminator = category
                    current.background = category is WordbreakCategory.LIST_ASYNC
                    commands.append(current)
                    current = ParsedCommand()

            elif category.is_redirect:
                target = None
                if i + 1 < len(tokens) and self._category(tokens[i + 1]) is WordbreakCategory.UNKNOWN:
                    target = tokens[i + 1].value
                    i += 1
                current.redirections.append(Redirection(category, target))

            else:
                # UNKNOWN and CUSTOM operators are ordinary arguments
                current.args.append(token.value)

            i += 1

        if current.args or current.redirections:
            commands.append(current)

        self._logger.debug(
            "Parsed token list",
            context={'tokens': len(tokens), 'commands': len(commands)}
        )
        return commands

    def current_pipeline(self, tokens: List[Token]) -> List[Token]:
        """
        Return the tokens after the last pipeline delimiter.

        This is the command context a completer works in.
        """
        for i in range(len(tokens) - 1, -1, -1):
            if self._category(tokens[i]).is_pipeline_delimiter:
                return tokens[i + 1:]
        return list(tokens)
