import io
from collections.abc import Callable

import pytest

from toyc.emitters.tree_emitter import TreeEmitter
from toyc.toyc_lexer import CharacterStream, Lexer
from toyc.toyc_parser import Parser

ParseFn = Callable[[str], tuple[Parser, TreeEmitter]]


@pytest.fixture  # type: ignore[misc]
def trace_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture  # type: ignore[misc]
def parse_program(trace_buffer: io.StringIO) -> ParseFn:
    """Returns a function that parses a program and hands back parser and emitter.

    Errors propagate; the diagnostic trace lands in `trace_buffer`.
    """

    def _parse(source: str) -> tuple[Parser, TreeEmitter]:
        emitter = TreeEmitter()
        parser = Parser(
            Lexer(CharacterStream(source)), emitter, trace_stream=trace_buffer
        )
        parser.parse()
        return parser, emitter

    return _parse
