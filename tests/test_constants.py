from toyc.toyc_constants import (
    CANONICAL_TOKENS,
    CONDITION_OPERANDS,
    CONDITIONAL_OPERATORS,
    KEYWORD_TOKENS,
    describe_kind,
    token_hashmap,
)


def test_canonical_tokens_are_unique() -> None:
    assert len(CANONICAL_TOKENS) == len(set(CANONICAL_TOKENS))
    assert set(token_hashmap.values()) <= set(CANONICAL_TOKENS)


def test_keyword_tokens() -> None:
    assert KEYWORD_TOKENS == (
        "BEGIN",
        "END",
        "IF",
        "THEN",
        "ELSE",
        "WHILE",
        "LOOP",
        "CALL",
        "DO",
        "UNTIL",
        "FOR",
    )


def test_groupings_are_canonical() -> None:
    assert set(CONDITIONAL_OPERATORS) <= set(CANONICAL_TOKENS)
    assert set(CONDITION_OPERANDS) <= set(CANONICAL_TOKENS)


def test_describe_kind() -> None:
    assert describe_kind("BECOMES") == "':='"
    assert describe_kind("WHILE") == "'while'"
    assert describe_kind("IDENT") == "identifier"
    assert describe_kind("EOF") == "end of input"
    assert describe_kind("SOMETHING") == "SOMETHING"
