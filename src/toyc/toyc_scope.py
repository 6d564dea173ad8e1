"""
Scope management for variable declarations.

The language has one global scope that lives for the whole program and one
loop scope per `for` construct currently open. Assignments outside any loop
declare global variables. Assignments inside a loop declare loop-local variables
in the innermost loop scope, unless the identifier is already visible there or
globally, in which case the assignment re-uses the existing variable and gives
it the new type. Closing a loop retires every variable of its scope from the
emitter's symbol table.

Every declaration is forwarded to the emitter, whichever scope records it.
"""

from toyc.toyc_emitter import Emitter
from toyc.toyc_symbols import Variable, VarType


class ScopeManager:
    """Tracks the global scope and the stack of open loop scopes.

    Attributes:
        emitter (Emitter): Receives every declare/undeclare call.
        global_scope (dict[str, Variable]): Variables declared outside any loop.
        loop_scopes (list[dict[str, Variable]]): One scope per open loop, innermost last.
    """

    def __init__(self, emitter: Emitter) -> None:
        self.emitter = emitter
        self.global_scope: dict[str, Variable] = {}
        self.loop_scopes: list[dict[str, Variable]] = []

    @property
    def inside_loop(self) -> bool:
        return bool(self.loop_scopes)

    def declare(self, identifier: str, type_: VarType) -> Variable:
        """Records an assignment to `identifier` and returns the declared Variable."""
        variable = Variable(identifier, type_)
        self.emitter.declare_variable(variable)

        if not self.inside_loop:
            self.global_scope[identifier] = variable
        elif self.is_shadowed(identifier) and identifier not in self.loop_scopes[-1]:
            # re-used global takes the new type
            self.global_scope[identifier] = variable
        else:
            self.loop_scopes[-1][identifier] = variable
        return variable

    def is_shadowed(self, identifier: str) -> bool:
        """True if `identifier` exists in the innermost loop scope or the global scope."""
        if self.loop_scopes and identifier in self.loop_scopes[-1]:
            return True
        return identifier in self.global_scope

    def open_loop_scope(self) -> None:
        self.loop_scopes.append({})

    def close_loop_scope(self) -> list[Variable]:
        """Retires the innermost loop scope and returns the variables removed."""
        if not self.loop_scopes:
            raise RuntimeError("close_loop_scope() called with no open loop scope")
        retired = list(self.loop_scopes[-1].values())
        for variable in retired:
            self.emitter.undeclare_variable(variable)
        self.loop_scopes.pop()
        return retired

    def global_variables(self) -> list[Variable]:
        return [self.global_scope[name] for name in sorted(self.global_scope)]
