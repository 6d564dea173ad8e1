"""
Token vocabulary for the toy language.

Every fixed spelling the lexer recognises is listed in `token_hashmap`, which maps
the spelling to its canonical token kind. Kinds without a fixed spelling
(identifiers, number and string constants, and the stream sentinels) are declared
as plain names below.

Exports:
    - token_hashmap: spelling → canonical kind
    - CANONICAL_TOKENS: every canonical kind, in a stable order
    - KEYWORD_TOKENS: the subset of kinds spelled as reserved words
    - CONDITIONAL_OPERATORS, CONDITION_OPERANDS: groupings used by the parser
    - describe_kind(): human-readable rendering of a kind
"""

IDENT = "IDENT"
NUMBER = "NUMBER"
STRING = "STRING"
EOF = "EOF"
ERROR = "ERROR"

token_hashmap: dict[str, str] = {
    # Keywords
    "begin": "BEGIN",
    "end": "END",
    "if": "IF",
    "then": "THEN",
    "else": "ELSE",
    "while": "WHILE",
    "loop": "LOOP",
    "call": "CALL",
    "do": "DO",
    "until": "UNTIL",
    "for": "FOR",
    # Operators
    ":=": "BECOMES",
    "+": "PLUS",
    "-": "MINUS",
    "*": "TIMES",
    "/": "DIVIDE",
    ">": "GT",
    ">=": "GE",
    "=": "EQ",
    "<>": "NE",
    "<": "LT",
    "<=": "LE",
    # Punctuation
    "(": "LPAREN",
    ")": "RPAREN",
    ",": "COMMA",
    ";": "SEMICOLON",
}

KEYWORD_TOKENS: tuple[str, ...] = tuple(
    kind for spelling, kind in token_hashmap.items() if spelling.isalpha()
)

CANONICAL_TOKENS: tuple[str, ...] = (IDENT, NUMBER, STRING) + tuple(
    token_hashmap.values()
)

CONDITIONAL_OPERATORS: tuple[str, ...] = ("GT", "GE", "EQ", "NE", "LT", "LE")

CONDITION_OPERANDS: tuple[str, ...] = (IDENT, NUMBER, STRING)

_spellings: dict[str, str] = {kind: spelling for spelling, kind in token_hashmap.items()}

_descriptions: dict[str, str] = {
    IDENT: "identifier",
    NUMBER: "number constant",
    STRING: "string constant",
    EOF: "end of input",
    ERROR: "unrecognised character",
}


def describe_kind(kind: str) -> str:
    """Returns a readable name for a token kind, e.g. `BECOMES` → `':='`."""
    if kind in _spellings:
        return f"'{_spellings[kind]}'"
    return _descriptions.get(kind, kind)
