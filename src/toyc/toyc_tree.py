"""
Defines the parse tree recorded while a program is checked.

Classes:
    ParseNode:
        A node of the concrete parse tree. Rule nodes carry the grammar rule name
        as `kind` and have children; terminal leaves carry the token kind and the
        token text as `value`.

    ParseDict:
        TypedDict representation of a ParseNode for JSON output.

Example:
    node = ParseNode("AssignmentStatement", children=[ParseNode("IDENT", "x", line=1, col=7)])
"""

from typing import Any, TypedDict


class ParseDict(TypedDict, total=False):
    """Serialized form of a ParseNode.

    Fields:
        kind (str): Grammar rule name or token kind.
        value (str | None): Token text for terminals, None for rule nodes.
        line (int): Source line where the node starts.
        col (int): Source column where the node starts.
        children (list[ParseDict]): Child nodes in source order.
    """

    kind: str
    value: str | None
    line: int
    col: int
    children: list["ParseDict"]


class ParseNode:
    """A node of the parse tree.

    Args:
        kind (str): Rule name (e.g. "IfStatement") or token kind (e.g. "IDENT").
        value (str, optional): Token text for terminal leaves.
        children (list[ParseNode], optional): Child nodes in source order.
        line (int): Source line number (default is 0).
        col (int): Source column number (default is 0).
    """

    def __init__(
        self,
        kind: str,
        value: str | None = None,
        children: list["ParseNode"] | None = None,
        line: int = 0,
        col: int = 0,
    ):
        self.kind = kind
        self.value = value
        self.children: list["ParseNode"] = children or []
        self.line = line
        self.col = col

    @property
    def is_terminal(self) -> bool:
        return self.value is not None

    def __repr__(self) -> str:
        parts = [f"{self.kind}"]
        if self.value is not None:
            parts.append(f"value={repr(self.value)}")
        if self.children:
            preview = ", ".join(repr(c) for c in self.children[:3])
            if len(self.children) > 3:
                preview += ", ..."
            parts.append(f"children=[{preview}]")
        return f"ParseNode({', '.join(parts)})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParseNode):
            return False
        return (
            self.kind == other.kind
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
            and self.children == other.children
        )

    def find_all(self, kind: str) -> list["ParseNode"]:
        """Returns every node of the given kind in pre-order, including self."""
        found = [self] if self.kind == kind else []
        for child in self.children:
            found.extend(child.find_all(kind))
        return found

    def terminals(self) -> list["ParseNode"]:
        """Returns the terminal leaves below this node, left to right."""
        if self.is_terminal:
            return [self]
        leaves: list["ParseNode"] = []
        for child in self.children:
            leaves.extend(child.terminals())
        return leaves

    def to_dict(self) -> ParseDict:
        return {
            "kind": self.kind,
            "value": self.value,
            "line": self.line,
            "col": self.col,
            "children": [c.to_dict() for c in self.children],
        }
