"""
Toy Language Parser

Checks a toy-language token stream against the language grammar while keeping
a scoped symbol table and checking number/string compatibility in expressions.

The parser is a plain recursive-descent engine. Each grammar rule is one method;
each method reports its start and end to the emitter and keeps a diagnostic
trace frame on the stack while it runs. Terminals are matched with
`accept_terminal`, which reports the token to the emitter and pulls the next one
from the token stream.

Grammar
-------
    StatementPart       ::= begin StatementList end
    StatementList       ::= Statement { ; Statement }
    Statement           ::= AssignmentStatement | IfStatement | WhileStatement
                          | ProcedureStatement | UntilStatement | ForStatement
    AssignmentStatement ::= identifier := ( stringConstant | Expression )
    IfStatement         ::= if Condition then StatementList [ else StatementList ] end if
    WhileStatement      ::= while Condition loop StatementList end loop
    ProcedureStatement  ::= call identifier ( ArgumentList )
    UntilStatement      ::= do StatementList until Condition
    ForStatement        ::= for ( AssignmentStatement ; Condition ; AssignmentStatement )
                            do StatementList end loop
    ArgumentList        ::= identifier { , identifier }
    Condition           ::= identifier ConditionalOperator
                            ( identifier | numberConstant | stringConstant )
    ConditionalOperator ::= > | >= | = | <> | < | <=
    Expression          ::= Term { ( + | - ) Term }
    Term                ::= Factor { ( * | / ) Factor }
    Factor              ::= identifier | numberConstant | ( Expression )

StatementList, ArgumentList, Expression and Term are right-recursive in the
grammar. They are parsed with loops, but still open one rule (and one trace
frame) per repetition so the emitted events match the recursive form.

Parser Behavior
---------------
- Fail-fast: the first error aborts the program; there is no recovery.
- Errors are raised through `Emitter.error` and propagate unchanged.
- `statement_part()` prints the diagnostic trace before re-raising.

Raises
------
CompilationError
    UnexpectedSymbol, UninitialisedVariable or IllegalStringOperation from the
    parser, LexicalError from the token stream.
"""

from __future__ import annotations

import re
import sys
from typing import NoReturn, TextIO

from toyc.toyc_constants import (
    CONDITION_OPERANDS,
    CONDITIONAL_OPERATORS,
    IDENT,
    NUMBER,
    STRING,
)
from toyc.toyc_emitter import Emitter
from toyc.toyc_errors import (
    UNEXPECTED_SYMBOL,
    UNINITIALISED_VARIABLE,
    CompilationError,
    UnexpectedSymbol,
    UninitialisedVariable,
)
from toyc.toyc_lexer import Token, TokenStream
from toyc.toyc_scope import ScopeManager
from toyc.toyc_symbols import Variable, VarType
from toyc.toyc_trace import DiagnosticTrace
from toyc.toyc_typecheck import ExpressionTypeChecker


def rule_label(rule: str) -> str:
    """Turns a rule name into its trace label, e.g. `IfStatement` → `If Statement`."""
    return re.sub(r"(?<!^)(?=[A-Z])", " ", rule)


class Parser:
    """
    Toy Language Parser Class

    Attributes
    ----------
    tokens : TokenStream
        Source of tokens, pulled one at a time.
    emitter : Emitter
        Receives rule/terminal/variable events and raises errors.
    scopes : ScopeManager
        Global and loop-local variable scopes.
    trace : DiagnosticTrace
        Frames of the rules currently being parsed.
    trace_stream : TextIO | None
        Where the trace is printed on error; `sys.stderr` when None.
    current : Token | None
        The lookahead token; None until the first token is read.
    """

    def __init__(
        self,
        tokens: TokenStream,
        emitter: Emitter,
        trace_stream: TextIO | None = None,
    ) -> None:
        self.tokens = tokens
        self.emitter = emitter
        self.scopes = ScopeManager(emitter)
        self.trace = DiagnosticTrace()
        self.trace_stream = trace_stream
        self.current: Token | None = None

        self._statements = {
            IDENT: self.assignment_statement,
            "IF": self.if_statement,
            "WHILE": self.while_statement,
            "CALL": self.procedure_statement,
            "DO": self.until_statement,
            "FOR": self.for_statement,
        }

    def parse(self) -> list[Variable]:
        """Checks a whole program and returns the variables left in the global scope."""
        self.statement_part()
        return self.scopes.global_variables()

    def lookahead(self) -> Token:
        if self.current is None:
            self.current = self.tokens.next_token()
        return self.current

    def begin(self, rule: str) -> None:
        self.emitter.begin_rule(rule)
        self.trace.push(rule_label(rule), self.lookahead().line)

    def finish(self, rule: str) -> None:
        self.trace.pop()
        self.emitter.end_rule(rule)

    def unexpected(self) -> NoReturn:
        self.emitter.error(self.lookahead(), UNEXPECTED_SYMBOL, UnexpectedSymbol)

    def accept_terminal(self, kind: str, advance: bool = True) -> Token:
        """
        Accepts the lookahead if it is of `kind`, otherwise reports an unexpected symbol.

        With `advance=False` the next token is left in the stream until something
        asks for it.
        """
        tok = self.lookahead()
        if tok.type != kind:
            self.unexpected()
        self.emitter.accept_token(tok)
        self.current = self.tokens.next_token() if advance else None
        return tok

    def statement_part(self) -> None:
        try:
            self.begin("StatementPart")
            self.accept_terminal("BEGIN")
            self.statement_list()
            self.accept_terminal("END", advance=False)
        except CompilationError:
            self.trace.dump(self.trace_stream or sys.stderr)
            self.trace.clear()
            raise
        self.finish("StatementPart")

    def statement_list(self) -> None:
        depth = 0
        while True:
            self.begin("StatementList")
            depth += 1
            self.statement()
            if self.lookahead().type != "SEMICOLON":
                break
            self.accept_terminal("SEMICOLON")
        for _ in range(depth):
            self.finish("StatementList")

    def statement(self) -> None:
        self.begin("Statement")
        handler = self._statements.get(self.lookahead().type)
        if handler is None:
            self.unexpected()
        else:
            handler()
        self.finish("Statement")

    def assignment_statement(self) -> None:
        self.begin("AssignmentStatement")
        identifier = self.accept_terminal(IDENT).value
        self.accept_terminal("BECOMES")

        if self.lookahead().type == STRING:
            self.accept_terminal(STRING)
            self.scopes.declare(identifier, VarType.STRING)
        else:
            self.expression(ExpressionTypeChecker(self.emitter))
            self.scopes.declare(identifier, VarType.NUMBER)

        self.finish("AssignmentStatement")

    def if_statement(self) -> None:
        self.begin("IfStatement")
        self.accept_terminal("IF")
        self.condition()
        self.accept_terminal("THEN")
        self.statement_list()

        # anything but `end` must start an else branch
        if self.lookahead().type != "END":
            self.accept_terminal("ELSE")
            self.statement_list()

        if self.lookahead().type == "END":
            self.accept_terminal("END")
            self.accept_terminal("IF")

        self.finish("IfStatement")

    def while_statement(self) -> None:
        self.begin("WhileStatement")
        self.accept_terminal("WHILE")
        self.condition()
        self.accept_terminal("LOOP")
        self.statement_list()
        self.accept_terminal("END")
        self.accept_terminal("LOOP")
        self.finish("WhileStatement")

    def procedure_statement(self) -> None:
        self.begin("ProcedureStatement")
        self.accept_terminal("CALL")
        self.accept_terminal(IDENT)
        self.accept_terminal("LPAREN")
        self.argument_list()
        self.accept_terminal("RPAREN")
        self.finish("ProcedureStatement")

    def until_statement(self) -> None:
        self.begin("UntilStatement")
        self.accept_terminal("DO")
        self.statement_list()
        self.accept_terminal("UNTIL")
        self.condition()
        self.finish("UntilStatement")

    def for_statement(self) -> None:
        self.begin("ForStatement")
        self.accept_terminal("FOR")
        self.accept_terminal("LPAREN")
        self.scopes.open_loop_scope()

        self.assignment_statement()
        self.accept_terminal("SEMICOLON")
        self.condition()
        self.accept_terminal("SEMICOLON")
        self.assignment_statement()
        self.accept_terminal("RPAREN")
        self.accept_terminal("DO")

        self.statement_list()
        self.accept_terminal("END")
        self.accept_terminal("LOOP")

        self.scopes.close_loop_scope()
        self.finish("ForStatement")

    def argument_list(self) -> None:
        depth = 0
        while True:
            self.begin("ArgumentList")
            depth += 1
            self.accept_terminal(IDENT)
            if self.lookahead().type != "COMMA":
                break
            self.accept_terminal("COMMA")
        for _ in range(depth):
            self.finish("ArgumentList")

    def condition(self) -> None:
        self.begin("Condition")
        self.accept_terminal(IDENT)
        self.conditional_operator()

        kind = self.lookahead().type
        if kind in CONDITION_OPERANDS:
            self.accept_terminal(kind)
        else:
            self.unexpected()

        self.finish("Condition")

    def conditional_operator(self) -> None:
        self.begin("ConditionalOperator")
        kind = self.lookahead().type
        if kind in CONDITIONAL_OPERATORS:
            self.accept_terminal(kind)
        else:
            self.unexpected()
        self.finish("ConditionalOperator")

    def expression(self, checker: ExpressionTypeChecker) -> None:
        depth = 0
        while True:
            self.begin("Expression")
            depth += 1
            self.term(checker)

            kind = self.lookahead().type
            if kind == "PLUS":
                self.accept_terminal("PLUS")
            elif kind == "MINUS":
                checker.guard_operator(self.lookahead())
                self.accept_terminal("MINUS")
            else:
                break

        for _ in range(depth):
            checker.end_expression()
            self.finish("Expression")

    def term(self, checker: ExpressionTypeChecker) -> None:
        depth = 0
        while True:
            self.begin("Term")
            depth += 1
            self.factor(checker)

            kind = self.lookahead().type
            if kind not in ("TIMES", "DIVIDE"):
                break
            checker.guard_operator(self.lookahead())
            self.accept_terminal(kind)

        for _ in range(depth):
            self.finish("Term")

    def factor(self, checker: ExpressionTypeChecker) -> None:
        self.begin("Factor")
        tok = self.lookahead()

        if tok.type == IDENT:
            variable = self.emitter.lookup_variable(tok.value)
            if variable is None:
                self.emitter.error(tok, UNINITIALISED_VARIABLE, UninitialisedVariable)
            elif variable.type is VarType.STRING:
                checker.string_operand(tok)
            self.accept_terminal(IDENT)
        elif tok.type == NUMBER:
            self.accept_terminal(NUMBER)
        elif tok.type == "LPAREN":
            self.accept_terminal("LPAREN")
            self.expression(checker)
            self.accept_terminal("RPAREN")
        else:
            self.unexpected()

        self.finish("Factor")
