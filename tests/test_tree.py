from typing import Any

import hypothesis.strategies as st
from hypothesis import given

from toyc.toyc_tree import ParseNode


def test_parsenode_repr() -> None:
    node = ParseNode("IDENT", "x")
    assert repr(node) == "ParseNode(IDENT, value='x')"


def test_parsenode_repr_truncates_children() -> None:
    node = ParseNode("StatementList", children=[ParseNode("Statement")] * 4)
    assert repr(node).endswith(", ...])")


def test_parsenode_eq() -> None:
    n1 = ParseNode("Factor", children=[ParseNode("NUMBER", "1", line=1, col=2)])
    n2 = ParseNode("Factor", children=[ParseNode("NUMBER", "1", line=1, col=2)])
    assert n1 == n2
    assert n1 != ParseNode("Factor", children=[ParseNode("NUMBER", "2", line=1, col=2)])
    assert n1 != "Factor"


def test_is_terminal() -> None:
    assert ParseNode("IDENT", "x").is_terminal
    assert not ParseNode("Factor").is_terminal


def test_find_all_and_terminals() -> None:
    tree = ParseNode(
        "Expression",
        children=[
            ParseNode("Term", children=[ParseNode("Factor", children=[ParseNode("IDENT", "a")])]),
            ParseNode("PLUS", "+"),
            ParseNode("Expression", children=[ParseNode("Term", children=[ParseNode("NUMBER", "1")])]),
        ],
    )
    assert len(tree.find_all("Expression")) == 2
    assert [leaf.value for leaf in tree.terminals()] == ["a", "+", "1"]


def test_to_dict() -> None:
    node = ParseNode("Factor", children=[ParseNode("NUMBER", "1", line=3, col=4)], line=3, col=4)
    d = node.to_dict()
    assert d == {
        "kind": "Factor",
        "value": None,
        "line": 3,
        "col": 4,
        "children": [
            {"kind": "NUMBER", "value": "1", "line": 3, "col": 4, "children": []}
        ],
    }


@given(st.text(min_size=1), st.text(), st.integers(), st.integers())  # type: ignore[misc]
def test_to_dict_preserves_fields(kind: str, value: str, line: int, col: int) -> None:
    d: Any = ParseNode(kind, value, line=line, col=col).to_dict()
    assert (d["kind"], d["value"], d["line"], d["col"]) == (kind, value, line, col)
