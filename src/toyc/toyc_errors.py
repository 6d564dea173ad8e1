"""
Compilation errors raised while checking a toy-language program.

Every error is fatal to the program under analysis: the first one aborts the
parse and propagates unchanged to the top-level entry point.

Classes:
    CompilationError: Base class; carries the offending token and message.
    UnexpectedSymbol: A token is misplaced, malformed or missing.
    UninitialisedVariable: An identifier is used before it was assigned.
    IllegalStringOperation: A string value is combined with `-`, `*` or `/`.
    LexicalError: The token stream could not produce a token.

Message catalog:
    UNEXPECTED_SYMBOL, UNINITIALISED_VARIABLE, ILLEGAL_STRING_OPERAND and
    illegal_operator_message(op) hold the exact diagnostic wording.
"""

from typing import Any

UNEXPECTED_SYMBOL = (
    "Unexpected symbol. A token is either incorrectly formed, misplaced, or missing."
)

UNINITIALISED_VARIABLE = (
    "Uninitialised variable. A variable must first be initialised before it can be used."
)

ILLEGAL_STRING_OPERAND = (
    "Illegal String operation. String types are not compatible with number types "
    "or '/', '-'. and '*' operators."
)


def illegal_operator_message(operator: str) -> str:
    """Builds the diagnostic for a `-`, `*` or `/` applied after a string operand."""
    return (
        f"Illegal String operation. The '{operator}' operator cannot used used "
        "with String types."
    )


class CompilationError(Exception):
    """Base exception for a failed program check.

    Attributes:
        message (str): The catalog message describing the failure.
        token (Any): The token that was current when the error was detected, if any.
        line (int | None): Source line of the offending token.
    """

    def __init__(self, message: str, token: Any = None):
        super().__init__(message)
        self.message = message
        self.token = token
        self.line: int | None = getattr(token, "line", None)

    def __str__(self) -> str:
        if self.token is None:
            return self.message
        return f"{self.message} (line {self.line}, found {self.token.value!r})"


class UnexpectedSymbol(CompilationError):
    pass


class UninitialisedVariable(CompilationError):
    pass


class IllegalStringOperation(CompilationError):
    pass


class LexicalError(CompilationError):
    """Raised by the lexer for input it cannot turn into a token.

    Lexical errors are detected before a token exists, so the position is kept
    as plain line/column numbers instead.
    """

    def __init__(self, message: str, line: int, col: int):
        super().__init__(message)
        self.line = line
        self.col = col

    def __str__(self) -> str:
        return f"{self.message} at line {self.line}, col {self.col}"
