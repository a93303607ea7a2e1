"""
Lexer implementation for Go source code.

The Lexer tokenizes Go source code into a stream of tokens that can be
consumed by the parser. Go terminates statements with newlines, so the
lexer performs the language's automatic semicolon insertion: a newline
that follows an identifier, literal, closing delimiter or one of a few
keywords is emitted as a SEMICOLON token.
"""

from typing import List, Optional

from .tokens import (
    Token,
    TokenType,
    KEYWORDS,
    THREE_CHAR_OPS,
    TWO_CHAR_OPS,
    SINGLE_CHAR_OPS,
    SEMICOLON_TRIGGERS,
)


class Lexer:
    """
    Lexer for Go source code.

    Converts source text into a list of tokens for parsing.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

    def peek(self, offset: int = 0) -> str:
        """Look ahead in the source without consuming."""
        pos = self.pos + offset
        if pos >= len(self.source):
            return ''
        return self.source[pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def last_type(self) -> Optional[TokenType]:
        """Type of the most recently emitted token, if any."""
        if not self.tokens:
            return None
        return self.tokens[-1].type

    def newline(self) -> None:
        """Insert a semicolon if the previous token can end a statement."""
        if self.last_type() in SEMICOLON_TRIGGERS:
            self.tokens.append(Token(TokenType.SEMICOLON, '\n', self.line, self.column))

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters, honouring line ends."""
        ch = self.peek()
        while ch and ch in ' \t\r\n':
            if ch == '\n':
                self.newline()
            self.advance()
            ch = self.peek()

    def skip_comment(self) -> None:
        """Skip over single-line and multi-line comments."""
        if self.peek() == '/' and self.peek(1) == '/':
            # The terminating newline is left for skip_whitespace
            while self.peek() and self.peek() != '\n':
                self.advance()
        elif self.peek() == '/' and self.peek(1) == '*':
            self.advance()  # skip /
            self.advance()  # skip *
            saw_newline = False
            while self.peek():
                if self.peek() == '*' and self.peek(1) == '/':
                    self.advance()  # skip *
                    self.advance()  # skip /
                    break
                if self.peek() == '\n':
                    saw_newline = True
                self.advance()
            # A general comment spanning lines acts like a newline
            if saw_newline:
                self.newline()

    def read_string(self) -> str:
        """Read an interpreted string or rune literal including its quotes."""
        quote = self.advance()
        result = quote
        while self.peek() and self.peek() != quote and self.peek() != '\n':
            if self.peek() == '\\':
                result += self.advance()
            result += self.advance()
        if self.peek() == quote:
            result += self.advance()
        return result

    def read_raw_string(self) -> str:
        """Read a back-quoted raw string literal including its quotes."""
        result = self.advance()
        while self.peek() and self.peek() != '`':
            result += self.advance()
        if self.peek() == '`':
            result += self.advance()
        return result

    def read_number(self) -> str:
        """Read a numeric literal (decimal, hex, octal, binary, float, imaginary)."""
        result = ''
        while self.peek():
            ch = self.peek()
            if ch.isalnum() or ch == '_':
                result += self.advance()
                # Exponent signs: 1e+9, 0x1p-2
                if self.peek() in ('+', '-'):
                    is_hex = result[:2] in ('0x', '0X')
                    if (ch in 'eE' and not is_hex) or ch in 'pP':
                        result += self.advance()
            elif ch == '.' and self.peek(1) != '.':
                result += self.advance()
            else:
                break
        return result

    def read_identifier(self) -> str:
        """Read an identifier or keyword."""
        result = ''
        while self.peek() and (self.peek().isalnum() or self.peek() == '_'):
            result += self.advance()
        return result

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source and return a list of tokens.

        Returns:
            List of Token objects, ending with an EOF token.
        """
        while self.pos < len(self.source):
            self.skip_whitespace()

            if self.pos >= len(self.source):
                break

            # Skip comments
            if self.peek() == '/' and self.peek(1) in ('/', '*'):
                self.skip_comment()
                continue

            start_line = self.line
            start_col = self.column
            ch = self.peek()

            # String and rune literals
            if ch == '"':
                value = self.read_string()
                self.tokens.append(Token(TokenType.STRING_LITERAL, value, start_line, start_col))
                continue
            if ch == '\'':
                value = self.read_string()
                self.tokens.append(Token(TokenType.CHAR_LITERAL, value, start_line, start_col))
                continue
            if ch == '`':
                value = self.read_raw_string()
                self.tokens.append(Token(TokenType.RAW_STRING, value, start_line, start_col))
                continue

            # Numbers, including ones written as .5
            if ch.isdigit() or (ch == '.' and self.peek(1).isdigit()):
                value = self.read_number()
                self.tokens.append(Token(TokenType.NUMBER, value, start_line, start_col))
                continue

            # Identifiers and keywords
            if ch.isalpha() or ch == '_':
                value = self.read_identifier()
                token_type = KEYWORDS.get(value, TokenType.IDENTIFIER)
                self.tokens.append(Token(token_type, value, start_line, start_col))
                continue

            # Multi-character operators
            two_char = self.peek() + self.peek(1)
            three_char = two_char + self.peek(2)

            if three_char in THREE_CHAR_OPS:
                self.advance()
                self.advance()
                self.advance()
                self.tokens.append(Token(THREE_CHAR_OPS[three_char], three_char, start_line, start_col))
                continue

            if two_char in TWO_CHAR_OPS:
                self.advance()
                self.advance()
                self.tokens.append(Token(TWO_CHAR_OPS[two_char], two_char, start_line, start_col))
                continue

            # Single-character operators and delimiters
            if ch in SINGLE_CHAR_OPS:
                self.advance()
                self.tokens.append(Token(SINGLE_CHAR_OPS[ch], ch, start_line, start_col))
                continue

            # Unknown character - skip
            self.advance()

        # A file may end without a trailing newline
        self.newline()
        self.tokens.append(Token(TokenType.EOF, '', self.line, self.column))
        return self.tokens
