"""
pyshlex Core Module

Configuration shared by the lexer layers.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    LexerConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'LexerConfig',
    'LoggingConfig',
    'get_config',
]
