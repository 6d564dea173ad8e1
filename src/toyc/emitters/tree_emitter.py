"""
Records the parser's events as a parse tree, an event log, and a symbol table.

This module defines the `TreeEmitter` class, the concrete emitter used by the
command-line driver and the test suite. It turns the flat stream of
begin/end/accept calls into a nested `ParseNode` tree, keeps the symbol table
the parser declares into, and renders an indented trace of everything that
happened.

Behavior:
    - `begin_rule` opens a rule node under the innermost open node.
    - `accept_token` appends a terminal leaf to the innermost open node.
    - `end_rule` closes the innermost rule node; its name must match.
    - The first rule opened becomes the tree root.
    - `error` raises the requested `CompilationError` subclass.

Raises:
    - `RuntimeError`: If `end_rule` does not match the innermost open rule.
"""

from typing import NoReturn

from toyc.toyc_constants import describe_kind
from toyc.toyc_errors import CompilationError
from toyc.toyc_lexer import Token
from toyc.toyc_symbols import SymbolTable, Variable
from toyc.toyc_tree import ParseNode


class TreeEmitter:
    """Builds a parse tree and symbol table from parser events.

    Attributes:
        symbols (SymbolTable): Variables currently visible to the program.
        events (list[str]): One line per event, e.g. "begin Factor", "declare x:NUMBER".
        lines (list[str]): Indented rendering of the events.
        root (ParseNode | None): The outermost rule node, once one was opened.
        indent (int): Current nesting depth of open rules.
    """

    def __init__(self) -> None:
        self.symbols = SymbolTable()
        self.events: list[str] = []
        self.lines: list[str] = []
        self.root: ParseNode | None = None
        self.indent = 0
        self._open: list[ParseNode] = []

    def indent_str(self) -> str:
        return "    " * self.indent

    def _record(self, event: str) -> None:
        self.events.append(event)
        self.lines.append(f"{self.indent_str()}{event}")

    def begin_rule(self, name: str) -> None:
        # position is filled in from the first child when the rule closes
        node = ParseNode(name)
        if self._open:
            self._open[-1].children.append(node)
        elif self.root is None:
            self.root = node
        self._open.append(node)
        self._record(f"begin {name}")
        self.indent += 1

    def end_rule(self, name: str) -> None:
        if not self._open or self._open[-1].kind != name:
            current = self._open[-1].kind if self._open else None
            raise RuntimeError(f"end_rule({name!r}) does not close open rule {current!r}")
        node = self._open.pop()
        if node.children:
            node.line = node.children[0].line
            node.col = node.children[0].col
        self.indent -= 1
        self._record(f"end {name}")

    def accept_token(self, token: Token) -> None:
        leaf = ParseNode(token.type, token.value, line=token.line, col=token.col)
        if self._open:
            self._open[-1].children.append(leaf)
        self._record(f"accept {token.type} {token.value!r}")

    def declare_variable(self, variable: Variable) -> None:
        self.symbols.add(variable)
        self._record(f"declare {variable}")

    def undeclare_variable(self, variable: Variable) -> None:
        self.symbols.remove(variable)
        self._record(f"undeclare {variable}")

    def lookup_variable(self, identifier: str) -> Variable | None:
        return self.symbols.get(identifier)

    def error(
        self, token: Token, message: str, kind: type[CompilationError]
    ) -> NoReturn:
        self._record(f"error at {describe_kind(token.type)} {token.value!r}: {message}")
        raise kind(message, token)

    def get_output(self) -> str:
        return "\n".join(self.lines)
