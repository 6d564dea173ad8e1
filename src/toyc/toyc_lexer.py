"""
Lexical analyzer for the toy language.

This module turns raw program text into the token stream consumed by the parser:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Represents a single token with kind, text, and source location.
    TokenStream: Protocol for anything that hands out tokens one at a time.
    Lexer: Converts a CharacterStream into a sequence of tokens.
    TokenList: Replays a prepared list of tokens through the TokenStream contract.

Features:
    - Skips whitespace and single-line comments (`#`)
    - Longest-match recognition of operators (`:=`, `>=`, `<>`, ...)
    - Keywords resolved through a configurable keyword table
    - Recognizes identifiers, numbers (integer or decimal) and double-quoted strings

Raises:
    LexicalError: If an unterminated string or malformed number is encountered.

Example:
    >>> lexer = Lexer(CharacterStream("begin x := 1 end"))
    >>> lexer.next_token()
    Token(BEGIN, begin)
"""

from collections.abc import Iterable
from typing import Any, Protocol

from toyc.toyc_constants import EOF, ERROR, IDENT, NUMBER, STRING, token_hashmap
from toyc.toyc_errors import LexicalError


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def current(self) -> str | None:
        return self.source[self.position] if self.position < len(self.source) else None

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token.

    Attributes:
        type (str): The canonical token kind (e.g. 'IDENT', 'BECOMES', 'EOF').
        value (str): The literal text of the token.
        line (int): The 1-based line number where the token appears.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, type_: str, value: str, line: int = 0, col: int = 0):
        self.type = type_
        self.value = value
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.line, self.col))


class TokenStream(Protocol):  # pragma: no cover
    """Anything the parser can pull tokens from."""

    def next_token(self) -> Token: ...


class KeywordTable(Protocol):  # pragma: no cover
    """Resolves a word to a keyword kind, or None for plain identifiers."""

    def resolve(self, word: str) -> str | None: ...


class Lexer:
    """Lexical analyzer for the toy language.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
        keywords (KeywordTable | None): Keyword lookup; the canonical lowercase
            keywords are used when None.
    """

    def __init__(
        self, stream: CharacterStream, keywords: KeywordTable | None = None
    ) -> None:
        self.stream = stream
        self.keywords = keywords

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips all whitespace and comments in the stream."""
        while not self.stream.end_of_file():
            if self.peek() in " \t\r\n":
                self.advance()
            elif self.peek() == "#":
                self.skip_comment()
            else:
                break

    def skip_comment(self) -> None:
        while not self.stream.end_of_file() and self.peek() != "\n":
            self.advance()

    def resolve_word(self, word: str) -> str:
        """Returns the keyword kind for `word`, or IDENT."""
        if self.keywords is not None:
            return self.keywords.resolve(word) or IDENT
        kind = token_hashmap.get(word)
        return kind if kind is not None and word.isalpha() else IDENT

    def match_operator(self) -> Token | None:
        """Attempts to match the longest operator or punctuation spelling.

        Returns:
            Token | None: A Token if a match is found, otherwise None.
        """
        line, col = self.stream.line, self.stream.column
        max_token = None
        match_len = 0
        candidate = ""

        for i in range(2):  # longest spelling is two characters
            ch = self.stream.peek(i)
            if ch == "" or ch.isalnum():
                break
            candidate += ch
            if candidate in token_hashmap:
                max_token = candidate
                match_len = i + 1

        if max_token:
            for _ in range(match_len):
                self.advance()
            return Token(token_hashmap[max_token], max_token, line, col)

        return None

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Raises:
            LexicalError: If a malformed token is encountered.
        """
        self.skip_whitespace()

        if self.stream.end_of_file():
            return Token(EOF, EOF, self.stream.line, self.stream.column)

        ch = self.peek()
        line, col = self.stream.line, self.stream.column

        # 1. Identifier or keyword
        if ch.isalpha():
            word = ""
            while not self.stream.end_of_file() and (
                self.peek().isalnum() or self.peek() == "_"
            ):
                word += self.advance()
            return Token(self.resolve_word(word), word, line, col)

        # 2. Number
        if ch.isdigit():
            num = ""
            while self.peek().isdigit():
                num += self.advance()
            if self.peek() == "." and self.stream.peek(1).isdigit():
                num += self.advance()
                while self.peek().isdigit():
                    num += self.advance()
            if self.peek() == "." or self.peek().isalpha() or self.peek() == "_":
                raise LexicalError(f"Malformed number '{num}{self.peek()}'", line, col)
            return Token(NUMBER, num, line, col)

        # 3. String
        if ch == '"':
            self.advance()
            val = ""
            while not self.stream.end_of_file() and self.peek() not in ('"', "\n"):
                val += self.advance()
            if self.peek() == '"':
                self.advance()
                return Token(STRING, val, line, col)
            raise LexicalError("Unterminated string", line, col)

        # 4. Operator or punctuation
        token = self.match_operator()
        if token:
            return token

        # 5. Unknown character; the parser reports it as an unexpected symbol
        return Token(ERROR, self.advance(), line, col)


class TokenList:
    """Hands out a prepared sequence of tokens, then EOF forever after."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self.tokens: list[Token] = list(tokens)
        self.position = 0

    def next_token(self) -> Token:
        if self.position < len(self.tokens):
            tok = self.tokens[self.position]
            self.position += 1
            return tok
        last_line = self.tokens[-1].line if self.tokens else 0
        return Token(EOF, EOF, last_line, 0)


def tokenize(source: str, keywords: KeywordTable | None = None) -> list[Token]:
    """Lexes `source` completely; the returned list ends with the EOF token."""
    lexer = Lexer(CharacterStream(source), keywords)
    tokens = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.type == EOF:
            break
    return tokens


__all__ = [
    "CharacterStream",
    "KeywordTable",
    "Lexer",
    "Token",
    "TokenList",
    "TokenStream",
    "token_hashmap",
    "tokenize",
]
