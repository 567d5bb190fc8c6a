"""
pyshlex Exceptions

Exceptions raised by the configuration layer and by the parsing of
serialized word-break categories.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ShlexException(Exception):
    """
    Base exception for all pyshlex errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error

    Example:
        >>> raise ShlexException("Lexer failure", error_code=1000)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class ConfigException(ShlexException):
    """Base exception for configuration errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 2000, context=context)


class ConfigValidationError(ConfigException):
    """
    Raised when configuration cannot be loaded or validated.

    Covers unreadable or malformed files as well as unknown keys and
    values of the wrong type.

    Example:
        >>> raise ConfigValidationError("Invalid configuration key", key="lexer.foo")
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if key is not None:
            ctx["key"] = key
        super().__init__(message, error_code=2001, context=ctx)
        self.key = key


class WordbreakException(ShlexException):
    """Base exception for word-break category errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 3000, context=context)


class UnknownCategoryError(WordbreakException):
    """
    Raised when a serialized category name is not a known category.

    Example:
        >>> raise UnknownCategoryError("WORDBREAK_HEREDOC")
    """

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown word-break category: {name!r}",
            error_code=3001,
            context={"name": name}
        )
        self.name = name
