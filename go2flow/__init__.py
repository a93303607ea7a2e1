"""
Go to Flow Transpiler

This package converts Go type declarations into Flow type definitions.

Module Structure:
- lexer/: Tokenization (TokenType, Token, Lexer)
- parser/: AST nodes and parsing (Parser, SourceFile, TypeSpec, type nodes)
- type_system/: Go to Flow primitive mappings
- codegen/: Code generation (FlowCodeGenerator, TypeConverter, diagnostics)
- go2flow.py: File/directory driver and command line

Usage:
    from go2flow import Lexer, Parser, FlowCodeGenerator

    ast = Parser(Lexer(source).tokenize()).parse()
    flow = FlowCodeGenerator().generate(ast)
"""

# Re-export main classes for convenience
from .go2flow import GoToFlowTranspiler
from .lexer import Lexer
from .parser import Parser
from .codegen import FlowCodeGenerator, CodeGenerationContext

__all__ = [
    'GoToFlowTranspiler',
    'FlowCodeGenerator',
    'CodeGenerationContext',
    'Lexer',
    'Parser',
]
