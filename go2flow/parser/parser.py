"""
Go parser implementation.

The Parser converts a stream of tokens from the Lexer into a SourceFile
holding the file's top-level type declarations. Everything else in the
file (imports, functions, vars, consts) is skipped over without being
parsed.
"""

from typing import List, Optional, Union

from ..lexer import Token, TokenType
from .ast_nodes import (
    SourceFile,
    TypeSpec,
    SkippedDeclaration,
    SkippedField,
    TypeNode,
    Identifier,
    PointerType,
    ArrayType,
    MapType,
    StructType,
    FieldDeclaration,
)


class UnsupportedTypeError(SyntaxError):
    """Raised for a Go type construct that has no place in the TypeNode union."""

    def __init__(self, construct: str, token: Token):
        super().__init__(
            f"Unsupported type construct: {construct} "
            f"at line {token.line}, column {token.column}"
        )
        self.construct = construct
        self.lineno = token.line
        self.offset = token.column


class Parser:
    """
    Recursive descent parser for Go type declarations.

    Parses a stream of tokens into a SourceFile AST.
    """

    OPENERS = (TokenType.LPAREN, TokenType.LBRACE, TokenType.LBRACKET)
    CLOSERS = (TokenType.RPAREN, TokenType.RBRACE, TokenType.RBRACKET)

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0) -> Token:
        """Look ahead in the token stream without consuming."""
        pos = self.pos + offset
        if pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[pos]

    def current(self) -> Token:
        """Return the current token."""
        return self.peek()

    def advance(self) -> Token:
        """Consume and return the current token."""
        token = self.current()
        self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current().type in types

    def expect(self, token_type: TokenType, message: str = '') -> Token:
        """Consume the current token if it matches, otherwise raise an error."""
        if self.current().type != token_type:
            raise SyntaxError(
                f"Expected {token_type.name} but got {self.current().type.name} "
                f"at line {self.current().line}, column {self.current().column}: {message}"
            )
        return self.advance()

    def skip_balanced(self) -> None:
        """Skip a bracketed group, including everything nested inside it."""
        depth = 0
        while not self.match(TokenType.EOF):
            if self.match(*self.OPENERS):
                depth += 1
            elif self.match(*self.CLOSERS):
                depth -= 1
            self.advance()
            if depth <= 0:
                return

    # =========================================================================
    # TOP-LEVEL PARSING
    # =========================================================================

    def parse(self) -> SourceFile:
        """Parse the entire source file into a SourceFile AST."""
        unit = SourceFile()

        while not self.match(TokenType.EOF):
            if self.match(TokenType.PACKAGE):
                self.advance()
                unit.package = self.expect(TokenType.IDENTIFIER, 'package name').value
            elif self.match(TokenType.TYPE):
                self.parse_type_declaration(unit)
            elif self.match(*self.OPENERS):
                # Function bodies, import/var/const groups, receivers
                self.skip_balanced()
            else:
                self.advance()  # Skip tokens outside type declarations

        return unit

    def parse_type_declaration(self, unit: SourceFile) -> None:
        """Parse `type X T` or a grouped `type ( ... )` declaration."""
        self.expect(TokenType.TYPE)

        if not self.match(TokenType.LPAREN):
            self.parse_type_spec_into(unit)
            return

        self.advance()
        while not self.match(TokenType.RPAREN, TokenType.EOF):
            if self.match(TokenType.SEMICOLON):
                self.advance()
                continue
            self.parse_type_spec_into(unit)
        self.expect(TokenType.RPAREN)

    def parse_type_spec_into(self, unit: SourceFile) -> None:
        """Parse one type spec, recording it as skipped if it is unsupported."""
        name_token = self.expect(TokenType.IDENTIFIER, 'type name')
        start = self.pos
        try:
            unit.type_specs.append(self.parse_type_spec(name_token))
        except UnsupportedTypeError as e:
            unit.skipped.append(SkippedDeclaration(
                name=name_token.value,
                reason=e.construct,
                line=name_token.line,
            ))
            self.pos = start
            self.skip_to_end()

    def skip_to_end(self) -> Optional[str]:
        """Skip to the end of the current type spec or struct field.

        Stops before the terminating semicolon, or before a closing
        delimiter of the enclosing group or struct.

        Returns:
            The trailing string literal (a field's tag), if the skipped
            tokens end with one
        """
        depth = 0
        trailing = None
        while not self.match(TokenType.EOF):
            if self.match(*self.OPENERS):
                depth += 1
            elif self.match(*self.CLOSERS):
                if depth == 0:
                    break
                depth -= 1
            elif self.match(TokenType.SEMICOLON) and depth == 0:
                break
            token = self.advance()
            literal = token.type in (TokenType.STRING_LITERAL, TokenType.RAW_STRING)
            trailing = token.value if literal and depth == 0 else None
        return trailing

    def parse_type_spec(self, name_token: Token) -> TypeSpec:
        """Parse the remainder of a type spec after its name."""
        if self.match(TokenType.LBRACKET) and self.is_type_parameter_list():
            raise UnsupportedTypeError('type parameters', self.current())

        is_alias = False
        if self.match(TokenType.EQ):
            self.advance()
            is_alias = True

        type_node = self.parse_type()
        return TypeSpec(
            name=name_token.value,
            type_node=type_node,
            is_alias=is_alias,
            line=name_token.line,
        )

    def is_type_parameter_list(self) -> bool:
        """Tell `type L[T any] ...` apart from `type A [N]int`."""
        if self.peek(1).type != TokenType.IDENTIFIER:
            return False
        return self.peek(2).type not in (
            TokenType.RBRACKET,
            TokenType.DOT,
            TokenType.OPERATOR,
            TokenType.STAR,
            TokenType.LPAREN,
        )

    # =========================================================================
    # TYPE PARSING
    # =========================================================================

    def parse_type(self) -> TypeNode:
        """Parse a type expression into one of the TypeNode variants."""
        token = self.current()

        if self.match(TokenType.IDENTIFIER):
            return self.parse_type_name()
        if self.match(TokenType.STAR):
            self.advance()
            return PointerType(inner=self.parse_type())
        if self.match(TokenType.LBRACKET):
            return self.parse_array_type()
        if self.match(TokenType.MAP):
            return self.parse_map_type()
        if self.match(TokenType.STRUCT):
            return self.parse_struct_type()
        if self.match(TokenType.INTERFACE):
            return self.parse_interface_type()
        if self.match(TokenType.LPAREN):
            self.advance()
            inner = self.parse_type()
            self.expect(TokenType.RPAREN)
            return inner
        if self.match(TokenType.FUNC):
            raise UnsupportedTypeError('func type', token)
        if self.match(TokenType.CHAN, TokenType.ARROW):
            raise UnsupportedTypeError('channel type', token)

        raise SyntaxError(
            f"Expected a type but got {token.type.name} "
            f"at line {token.line}, column {token.column}"
        )

    def parse_type_name(self) -> Identifier:
        """Parse a plain or package-qualified type name."""
        first = self.expect(TokenType.IDENTIFIER)
        if self.match(TokenType.DOT):
            self.advance()
            name = self.expect(TokenType.IDENTIFIER, 'qualified type name')
            ident = Identifier(name=name.value, qualifier=first.value)
        else:
            ident = Identifier(name=first.value)

        if self.match(TokenType.LBRACKET):
            raise UnsupportedTypeError('generic type instantiation', self.current())
        return ident

    def parse_array_type(self) -> ArrayType:
        """Parse a slice ([]T) or array ([N]T) type."""
        self.expect(TokenType.LBRACKET)

        length: Optional[str] = None
        if self.match(TokenType.RBRACKET):
            self.advance()
        else:
            parts = []
            depth = 0
            while not self.match(TokenType.EOF):
                if self.match(TokenType.LBRACKET):
                    depth += 1
                elif self.match(TokenType.RBRACKET):
                    if depth == 0:
                        break
                    depth -= 1
                parts.append(self.advance().value)
            self.expect(TokenType.RBRACKET)
            length = ''.join(parts)

        return ArrayType(element=self.parse_type(), length=length)

    def parse_map_type(self) -> MapType:
        """Parse a map[K]V type."""
        self.expect(TokenType.MAP)
        self.expect(TokenType.LBRACKET)
        key = self.parse_type()
        self.expect(TokenType.RBRACKET)
        value = self.parse_type()
        return MapType(key=key, value=value)

    def parse_interface_type(self) -> Identifier:
        """Parse interface{}; any other interface is unsupported."""
        token = self.expect(TokenType.INTERFACE)
        self.expect(TokenType.LBRACE)
        while self.match(TokenType.SEMICOLON):
            self.advance()
        if not self.match(TokenType.RBRACE):
            raise UnsupportedTypeError('non-empty interface', token)
        self.advance()
        # interface{} and any are the same type
        return Identifier(name='any')

    # =========================================================================
    # STRUCT PARSING
    # =========================================================================

    def parse_struct_type(self) -> StructType:
        """Parse a struct type and its field list."""
        self.expect(TokenType.STRUCT)
        self.expect(TokenType.LBRACE)

        struct = StructType()
        while not self.match(TokenType.RBRACE, TokenType.EOF):
            if self.match(TokenType.SEMICOLON):
                self.advance()
                continue
            parsed = self.parse_field()
            if isinstance(parsed, SkippedField):
                struct.skipped_fields.append(parsed)
            else:
                struct.fields.append(parsed)

        self.expect(TokenType.RBRACE)
        return struct

    def parse_field(self) -> Union[FieldDeclaration, SkippedField]:
        """Parse a named field list or an embedded field, with its tag.

        A field whose type is unsupported is returned as a SkippedField so
        the rest of the struct can still be translated.
        """
        line = self.current().line
        names: List[str] = []

        if not self.is_embedded_field():
            names.append(self.expect(TokenType.IDENTIFIER, 'field name').value)
            while self.match(TokenType.COMMA):
                self.advance()
                names.append(self.expect(TokenType.IDENTIFIER, 'field name').value)

        start = self.pos
        try:
            type_node = self.parse_type()
        except UnsupportedTypeError as e:
            self.pos = start
            tag = self.skip_to_end()
            return SkippedField(reason=e.construct, names=names, tag=tag, line=line)

        tag = None
        if self.match(TokenType.STRING_LITERAL, TokenType.RAW_STRING):
            tag = self.advance().value

        if not self.match(TokenType.RBRACE):
            self.expect(TokenType.SEMICOLON, 'end of field')

        return FieldDeclaration(type_node=type_node, names=names, tag=tag, line=line)

    def is_embedded_field(self) -> bool:
        """Check whether the upcoming field is embedded (no field name)."""
        if self.match(TokenType.STAR):
            return True
        if not self.match(TokenType.IDENTIFIER):
            return False
        return self.peek(1).type in (
            TokenType.DOT,
            TokenType.SEMICOLON,
            TokenType.RBRACE,
            TokenType.STRING_LITERAL,
            TokenType.RAW_STRING,
        )
