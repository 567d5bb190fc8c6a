"""
pyshlex Exception Hierarchy

Classification itself never raises. These exceptions cover the layers
around it: configuration and the serialized form of categories.

Architecture:
    ShlexException (Base)
    ├── ConfigException
    │   └── ConfigValidationError
    └── WordbreakException
        └── UnknownCategoryError
"""

from .shlex_exceptions import (
    ShlexException,
    ConfigException,
    ConfigValidationError,
    WordbreakException,
    UnknownCategoryError,
)

__all__ = [
    'ShlexException',
    'ConfigException',
    'ConfigValidationError',
    'WordbreakException',
    'UnknownCategoryError',
]
