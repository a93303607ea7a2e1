"""
Lexer module for the Go to Flow transpiler.

This module provides tokenization of Go source code.
"""

from .tokens import TokenType, Token, KEYWORDS, TWO_CHAR_OPS, SINGLE_CHAR_OPS
from .lexer import Lexer

__all__ = [
    'TokenType',
    'Token',
    'KEYWORDS',
    'TWO_CHAR_OPS',
    'SINGLE_CHAR_OPS',
    'Lexer',
]
