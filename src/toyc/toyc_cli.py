"""
toyc CLI Entrypoint.

This module provides the command-line interface for checking toy-language programs.

Features:
    - Read programs from `.toy` files or inline strings.
    - Lex and parse each program, building its symbol table.
    - Keep going after a failing program so every input gets a verdict.
    - Optionally print the parse tree (indented or JSON) and the final symbol table.
    - Load extra keyword spellings from a JSON alias file and list the active table.

Example usage:
    toyc program.toy other.toy
    toyc -s "begin x := 1 end" --symbols
    toyc program.toy --tree
    toyc program.toy --keywords dialect.json
    toyc --list-keywords --keywords dialect.json

Functions:
    check_source(source, name="<string>", keywords=None, trace_stream=None) -> CheckResult
    check_file(path, keywords=None, trace_stream=None) -> CheckResult
    main(argv=None) -> int
"""

import argparse
import json
import os
import sys
from dataclasses import dataclass, field
from typing import TextIO

from toyc.emitters.tree_emitter import TreeEmitter
from toyc.toyc_errors import CompilationError
from toyc.toyc_keywords import KEYWORDS_ENV, KeywordMapper, MappingError
from toyc.toyc_lexer import CharacterStream, KeywordTable, Lexer
from toyc.toyc_parser import Parser
from toyc.toyc_symbols import Variable


@dataclass
class CheckResult:
    """Outcome of checking one program.

    Attributes:
        name: File path or "<string>" for inline programs.
        emitter: The emitter that recorded the parse, complete or partial.
        error: The error that stopped the parse, or None on success.
        globals: Variables left in the global scope after a successful parse.
    """

    name: str
    emitter: TreeEmitter
    error: CompilationError | None = None
    globals: list[Variable] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def verdict(self) -> str:
        return f"{self.name}: OK" if self.ok else f"{self.name}: {self.error}"


def check_source(
    source: str,
    name: str = "<string>",
    keywords: KeywordTable | None = None,
    trace_stream: TextIO | None = None,
) -> CheckResult:
    """
    Lex and parse one program.

    Args:
        source: The program text.
        name: Label used in the verdict line.
        keywords: Keyword table for the lexer; canonical keywords when None.
        trace_stream: Where the diagnostic trace goes on error; stderr when None.

    Returns:
        A CheckResult. Compilation errors are captured in it, never raised.
    """
    emitter = TreeEmitter()
    lexer = Lexer(CharacterStream(source, 0, 1, 1), keywords)
    parser = Parser(lexer, emitter, trace_stream=trace_stream)
    try:
        global_vars = parser.parse()
    except CompilationError as e:
        return CheckResult(name, emitter, error=e)
    return CheckResult(name, emitter, globals=global_vars)


def check_file(
    path: str,
    keywords: KeywordTable | None = None,
    trace_stream: TextIO | None = None,
) -> CheckResult:
    """
    Read a `.toy` file and check it.

    Raises:
        ValueError: If the path does not end with '.toy'.
        OSError: If the file cannot be read.
    """
    if not path.endswith(".toy"):
        raise ValueError("Only .toy files are supported.")
    with open(path, encoding="utf-8") as f:
        source = f.read()
    return check_source(source, name=path, keywords=keywords, trace_stream=trace_stream)


def load_keywords(path: str | None) -> KeywordMapper | None:
    """Builds the keyword table from `path`, or from $TOYC_KEYWORDS when path is None."""
    path = path or os.getenv(KEYWORDS_ENV)
    if not path:
        return None
    mapper = KeywordMapper.from_canonical()
    mapper.load_from_json(path)
    return mapper


def print_result(
    result: CheckResult, tree: bool = False, as_json: bool = False, symbols: bool = False
) -> None:
    print(result.verdict())
    if tree:
        print(result.emitter.get_output())
    if as_json and result.emitter.root is not None:
        print(json.dumps(result.emitter.root.to_dict(), indent=2))
    if symbols:
        for variable in result.emitter.symbols:
            print(f"    {variable}")


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the toyc CLI.

    Every source is checked, even after a failure. Returns 0 when all programs
    pass and 1 otherwise; argparse exits with 2 on usage errors.
    """
    parser = argparse.ArgumentParser(prog="toyc")
    parser.add_argument(
        "sources", nargs="*", help="Program files (or raw programs with -s)"
    )
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret sources as literal programs"
    )
    parser.add_argument(
        "--tree", action="store_true", help="Print the indented parse events"
    )
    parser.add_argument(
        "--json", dest="as_json", action="store_true", help="Print the parse tree as JSON"
    )
    parser.add_argument(
        "--symbols", action="store_true", help="Print the final symbol table"
    )
    parser.add_argument(
        "--keywords",
        metavar="FILE",
        help=f"JSON keyword alias file (default: ${KEYWORDS_ENV})",
    )
    parser.add_argument(
        "--list-keywords",
        action="store_true",
        help="Print the active keyword table and exit if no sources are given",
    )
    args = parser.parse_args(argv)
    if not args.sources and not args.list_keywords:
        parser.error("the following arguments are required: sources")

    try:
        keywords = load_keywords(args.keywords)
    except MappingError as e:
        print(f"toyc: {e}", file=sys.stderr)
        for conflict in e.conflicts:
            print(f" - {conflict}", file=sys.stderr)
        return 2

    if args.list_keywords:
        print((keywords or KeywordMapper.from_canonical()).report())

    failures = 0
    for source in args.sources:
        try:
            if args.string:
                result = check_source(source, keywords=keywords)
            else:
                result = check_file(source, keywords=keywords)
        except (OSError, ValueError) as e:
            print(f"{source}: {e}", file=sys.stderr)
            failures += 1
            continue

        print_result(result, tree=args.tree, as_json=args.as_json, symbols=args.symbols)
        if not result.ok:
            failures += 1

    return 1 if failures else 0


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    sys.exit(main())
