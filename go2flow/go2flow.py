#!/usr/bin/env python3
"""
Go to Flow Transpiler

This transpiler converts the exported type declarations of Go source files
into Flow type definitions, so that a JavaScript client can type the JSON
a Go service sends it.

Key features:
- Struct fields named by their `json` tag; untagged fields are dropped
- `omitempty` fields become optional properties (name?: T)
- Pointer fields become maybe types (name: ?T)
- Embedded structs become intersection types (A & B & {...})
- Slices and maps become Array<T> and {[K]: V}

Usage:
    python -m go2flow.go2flow models/ -o flow-types/

The package is laid out as:
- lexer: Tokenization (tokens.py, lexer.py)
- parser: AST nodes and parsing (ast_nodes.py, parser.py)
- type_system: Go to Flow primitive mappings (mappings.py)
- codegen: Code generation (generator.py + specialized generators)
"""

import json
import sys
from pathlib import Path
from typing import Optional, List, Dict

from .lexer import Lexer
from .parser import Parser, SourceFile
from .codegen import CodeGenerationContext, FlowCodeGenerator, TranspilerDiagnostics


CONFIG_FILENAME = 'go2flow.json'
DEFAULT_OUTPUT_EXTENSION = '.js'


class GoToFlowTranspiler:
    """Main transpiler class that orchestrates the conversion process."""

    def __init__(
        self,
        source_dir: str = '.',
        output_dir: str = './flow-output',
        config_path: Optional[str] = None,
        tag_key: Optional[str] = None,
        header: Optional[str] = None,
        verbose: bool = False,
    ):
        self.source_dir = Path(source_dir)
        self.output_dir = Path(output_dir)
        self.parsed_files: Dict[str, SourceFile] = {}
        self.diagnostics = TranspilerDiagnostics(verbose=verbose)
        self.ctx = CodeGenerationContext(diagnostics=self.diagnostics)
        self.output_extension = DEFAULT_OUTPUT_EXTENSION
        self.exclude: List[str] = []

        self._load_config(config_path)

        # Command line settings win over the config file
        if tag_key:
            self.ctx.tag_key = tag_key
        if header is not None:
            self.ctx.header = header

    def _load_config(self, config_path: Optional[str]) -> None:
        """Load the go2flow.json configuration file, if there is one."""
        path = Path(config_path) if config_path else self.source_dir / CONFIG_FILENAME

        if not path.is_file():
            if config_path:
                print(f"Warning: Config file {path} not found, using defaults")
            return

        try:
            with open(path, 'r') as f:
                config = json.load(f)
            self.ctx.tag_key = config.get('tagKey', self.ctx.tag_key)
            self.ctx.indent_str = config.get('indent', self.ctx.indent_str)
            self.ctx.header = config.get('header', self.ctx.header)
            self.output_extension = config.get('outputExtension', self.output_extension)
            self.exclude = list(config.get('exclude', []))
        except (json.JSONDecodeError, AttributeError, TypeError) as e:
            print(f"Warning: Failed to load {path}: {e}")

    def _relative_path(self, filepath: str) -> str:
        """Path of a source file relative to the source directory, for messages."""
        try:
            return Path(filepath).resolve().relative_to(self.source_dir.resolve()).as_posix()
        except ValueError:
            return Path(filepath).as_posix()

    def parse_source(self, source: str) -> SourceFile:
        """Tokenize and parse Go source text."""
        lexer = Lexer(source)
        tokens = lexer.tokenize()
        parser = Parser(tokens)
        return parser.parse()

    def transpile_source(self, source: str, file_path: str = '') -> str:
        """Transpile Go source text to Flow."""
        ast = self.parse_source(source)
        generator = FlowCodeGenerator(self.ctx)
        return generator.generate(ast, file_path)

    def transpile_file(self, filepath: str) -> str:
        """Transpile a single Go file to Flow."""
        with open(filepath, 'r', encoding='utf-8') as f:
            source = f.read()

        ast = self.parse_source(source)
        self.parsed_files[filepath] = ast

        generator = FlowCodeGenerator(self.ctx)
        return generator.generate(ast, self._relative_path(filepath))

    def find_sources(self, pattern: str = '**/*.go') -> List[Path]:
        """List the Go files to transpile, leaving out tests and excludes."""
        sources = []
        for go_file in sorted(self.source_dir.glob(pattern)):
            if go_file.name.endswith('_test.go'):
                continue
            rel_path = go_file.relative_to(self.source_dir)
            if any(rel_path.match(excluded) for excluded in self.exclude):
                continue
            sources.append(go_file)
        return sources

    def transpile_directory(self, pattern: str = '**/*.go') -> Dict[str, str]:
        """Transpile all Go files matching the pattern.

        Files without exported declarations produce no entry.
        """
        results = {}
        for go_file in self.find_sources(pattern):
            try:
                flow_code = self.transpile_file(str(go_file))
            except (SyntaxError, OSError, UnicodeDecodeError) as e:
                print(f"Error transpiling {go_file}: {e}")
                continue
            if not flow_code:
                continue
            rel_path = go_file.relative_to(self.source_dir)
            flow_path = self.output_dir / rel_path.with_suffix(self.output_extension)
            results[str(flow_path)] = flow_code
        return results

    def write_output(self, results: Dict[str, str]) -> None:
        """Write transpiled Flow files to disk."""
        for filepath, content in results.items():
            path = Path(filepath)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
            print(f"Written: {filepath}")


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> None:
    import argparse

    parser = argparse.ArgumentParser(description='Go to Flow type transpiler')
    parser.add_argument('input', help='Input Go file or directory')
    parser.add_argument('-o', '--output', default='flow-output', help='Output directory')
    parser.add_argument('--stdout', action='store_true', help='Print to stdout instead of file')
    parser.add_argument('-c', '--config', metavar='PATH',
                        help=f'Config file (default: {CONFIG_FILENAME} in the input directory)')
    parser.add_argument('--tag-key', metavar='KEY',
                        help='Struct tag key holding serialized field names (default: json)')
    parser.add_argument('--no-header', action='store_true',
                        help='Do not write the // @flow header')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='List every diagnostic, not just the summary')

    args = parser.parse_args(argv)

    input_path = Path(args.input)
    header = '' if args.no_header else None

    if input_path.is_file():
        transpiler = GoToFlowTranspiler(
            source_dir=str(input_path.parent),
            output_dir=args.output,
            config_path=args.config,
            tag_key=args.tag_key,
            header=header,
            verbose=args.verbose,
        )

        try:
            flow_code = transpiler.transpile_file(str(input_path))
        except SyntaxError as e:
            print(f"Error transpiling {input_path}: {e}")
            sys.exit(1)

        if args.stdout:
            print(flow_code, end='')
        elif flow_code:
            output_path = Path(args.output) / input_path.with_suffix(transpiler.output_extension).name
            transpiler.write_output({str(output_path): flow_code})

    elif input_path.is_dir():
        transpiler = GoToFlowTranspiler(
            source_dir=str(input_path),
            output_dir=args.output,
            config_path=args.config,
            tag_key=args.tag_key,
            header=header,
            verbose=args.verbose,
        )

        results = transpiler.transpile_directory()
        if args.stdout:
            for flow_code in results.values():
                print(flow_code, end='')
        else:
            transpiler.write_output(results)
    else:
        print(f"Error: {args.input} is not a valid file or directory")
        sys.exit(1)

    transpiler.diagnostics.print_summary()


if __name__ == '__main__':
    main()
