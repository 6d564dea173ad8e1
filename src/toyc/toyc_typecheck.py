"""
Number/string compatibility checking inside expressions.

Strings may only be joined with `+`. While an expression is parsed the checker
is in one of three states:

    CLEAN       no string operand and no restricted operator seen yet
    STRING_SEEN a string-typed variable has been used as an operand
    RESTRICTED  a `-`, `*` or `/` has been used

Moving from STRING_SEEN to RESTRICTED, or from RESTRICTED to STRING_SEEN, is an
illegal string operation. Finishing any (sub-)expression lifts the restriction;
a seen string stays seen until the whole right-hand side is done, which is why
the parser creates a fresh checker for every assignment.
"""

from enum import Enum

from toyc.toyc_emitter import Emitter
from toyc.toyc_errors import (
    ILLEGAL_STRING_OPERAND,
    IllegalStringOperation,
    illegal_operator_message,
)
from toyc.toyc_lexer import Token


class TypeContext(Enum):
    CLEAN = "clean"
    STRING_SEEN = "string-seen"
    RESTRICTED = "operator-restricted"


class ExpressionTypeChecker:
    """Holds the type context of one top-level expression.

    Attributes:
        emitter (Emitter): Used to report illegal string operations.
        state (TypeContext): The current context.
    """

    def __init__(self, emitter: Emitter) -> None:
        self.emitter = emitter
        self.state = TypeContext.CLEAN

    def guard_operator(self, token: Token) -> None:
        """Called with a `-`, `*` or `/` token before it is accepted."""
        if self.state is TypeContext.STRING_SEEN:
            self.emitter.error(
                token, illegal_operator_message(token.value), IllegalStringOperation
            )
        self.state = TypeContext.RESTRICTED

    def string_operand(self, token: Token) -> None:
        """Called with an identifier token whose variable is STRING-typed."""
        if self.state is TypeContext.RESTRICTED:
            self.emitter.error(token, ILLEGAL_STRING_OPERAND, IllegalStringOperation)
        self.state = TypeContext.STRING_SEEN

    def end_expression(self) -> None:
        if self.state is TypeContext.RESTRICTED:
            self.state = TypeContext.CLEAN
