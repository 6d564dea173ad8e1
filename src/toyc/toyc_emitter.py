"""
The emitter interface the parser reports to.

The parser never stores results itself. For every grammar rule it enters and
leaves, every terminal it accepts, and every variable it declares or retires,
it calls the emitter; symbol lookups and error reporting go through the
emitter as well. `toyc.emitters.tree_emitter.TreeEmitter` is the concrete
implementation used by the command-line driver.

Classes:
    Emitter (Protocol): The operations the parser requires.
"""

from typing import NoReturn, Protocol

from toyc.toyc_errors import CompilationError
from toyc.toyc_lexer import Token
from toyc.toyc_symbols import Variable


class Emitter(Protocol):  # pragma: no cover
    """Protocol for everything the parser reports to.

    Methods:
        begin_rule(name): A grammar rule is about to be parsed.
        end_rule(name): The grammar rule finished successfully.
        accept_token(token): A terminal matched and was consumed.
        declare_variable(variable): A variable was assigned.
        undeclare_variable(variable): A loop-local variable went out of scope.
        lookup_variable(identifier): Returns the visible Variable or None.
        error(token, message, kind): Raises `kind(message, token)`; never returns.
    """

    def begin_rule(self, name: str) -> None: ...

    def end_rule(self, name: str) -> None: ...

    def accept_token(self, token: Token) -> None: ...

    def declare_variable(self, variable: Variable) -> None: ...

    def undeclare_variable(self, variable: Variable) -> None: ...

    def lookup_variable(self, identifier: str) -> Variable | None: ...

    def error(
        self, token: Token, message: str, kind: type[CompilationError]
    ) -> NoReturn: ...
