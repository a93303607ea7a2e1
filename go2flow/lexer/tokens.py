"""
Token definitions for the Go lexer.

This module contains the TokenType enum, Token dataclass, and
constant mappings for keywords and operators.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the Go lexer."""

    # Keywords
    BREAK = auto()
    CASE = auto()
    CHAN = auto()
    CONST = auto()
    CONTINUE = auto()
    DEFAULT = auto()
    DEFER = auto()
    ELSE = auto()
    FALLTHROUGH = auto()
    FOR = auto()
    FUNC = auto()
    GO = auto()
    GOTO = auto()
    IF = auto()
    IMPORT = auto()
    INTERFACE = auto()
    MAP = auto()
    PACKAGE = auto()
    RANGE = auto()
    RETURN = auto()
    SELECT = auto()
    STRUCT = auto()
    SWITCH = auto()
    TYPE = auto()
    VAR = auto()

    # Operators
    STAR = auto()
    AMPERSAND = auto()
    PLUS_PLUS = auto()
    MINUS_MINUS = auto()
    ARROW = auto()  # <-
    DEFINE = auto()  # :=
    ELLIPSIS = auto()
    EQ = auto()
    OPERATOR = auto()  # any operator the parser never inspects
    TILDE = auto()
    PIPE = auto()

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    SEMICOLON = auto()
    COMMA = auto()
    DOT = auto()
    COLON = auto()

    # Literals
    NUMBER = auto()
    STRING_LITERAL = auto()  # "interpreted"
    RAW_STRING = auto()  # `raw`
    CHAR_LITERAL = auto()
    IDENTIFIER = auto()

    # Special
    EOF = auto()


@dataclass
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    line: int
    column: int


# Keyword to TokenType mapping
KEYWORDS = {
    'break': TokenType.BREAK,
    'case': TokenType.CASE,
    'chan': TokenType.CHAN,
    'const': TokenType.CONST,
    'continue': TokenType.CONTINUE,
    'default': TokenType.DEFAULT,
    'defer': TokenType.DEFER,
    'else': TokenType.ELSE,
    'fallthrough': TokenType.FALLTHROUGH,
    'for': TokenType.FOR,
    'func': TokenType.FUNC,
    'go': TokenType.GO,
    'goto': TokenType.GOTO,
    'if': TokenType.IF,
    'import': TokenType.IMPORT,
    'interface': TokenType.INTERFACE,
    'map': TokenType.MAP,
    'package': TokenType.PACKAGE,
    'range': TokenType.RANGE,
    'return': TokenType.RETURN,
    'select': TokenType.SELECT,
    'struct': TokenType.STRUCT,
    'switch': TokenType.SWITCH,
    'type': TokenType.TYPE,
    'var': TokenType.VAR,
}

# Three-character operators
THREE_CHAR_OPS = {
    '...': TokenType.ELLIPSIS,
    '<<=': TokenType.OPERATOR,
    '>>=': TokenType.OPERATOR,
    '&^=': TokenType.OPERATOR,
}

# Two-character operators
TWO_CHAR_OPS = {
    '++': TokenType.PLUS_PLUS,
    '--': TokenType.MINUS_MINUS,
    '<-': TokenType.ARROW,
    ':=': TokenType.DEFINE,
    '&&': TokenType.OPERATOR,
    '||': TokenType.OPERATOR,
    '==': TokenType.OPERATOR,
    '!=': TokenType.OPERATOR,
    '<=': TokenType.OPERATOR,
    '>=': TokenType.OPERATOR,
    '<<': TokenType.OPERATOR,
    '>>': TokenType.OPERATOR,
    '&^': TokenType.OPERATOR,
    '+=': TokenType.OPERATOR,
    '-=': TokenType.OPERATOR,
    '*=': TokenType.OPERATOR,
    '/=': TokenType.OPERATOR,
    '%=': TokenType.OPERATOR,
    '&=': TokenType.OPERATOR,
    '|=': TokenType.OPERATOR,
    '^=': TokenType.OPERATOR,
}

# Single-character operators and delimiters
SINGLE_CHAR_OPS = {
    '*': TokenType.STAR,
    '&': TokenType.AMPERSAND,
    '=': TokenType.EQ,
    '~': TokenType.TILDE,
    '|': TokenType.PIPE,
    '+': TokenType.OPERATOR,
    '-': TokenType.OPERATOR,
    '/': TokenType.OPERATOR,
    '%': TokenType.OPERATOR,
    '^': TokenType.OPERATOR,
    '<': TokenType.OPERATOR,
    '>': TokenType.OPERATOR,
    '!': TokenType.OPERATOR,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ';': TokenType.SEMICOLON,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    ':': TokenType.COLON,
}

# A newline after one of these ends the statement (Go's semicolon insertion rule)
SEMICOLON_TRIGGERS = frozenset({
    TokenType.IDENTIFIER,
    TokenType.NUMBER,
    TokenType.STRING_LITERAL,
    TokenType.RAW_STRING,
    TokenType.CHAR_LITERAL,
    TokenType.BREAK,
    TokenType.CONTINUE,
    TokenType.FALLTHROUGH,
    TokenType.RETURN,
    TokenType.PLUS_PLUS,
    TokenType.MINUS_MINUS,
    TokenType.RPAREN,
    TokenType.RBRACKET,
    TokenType.RBRACE,
})
