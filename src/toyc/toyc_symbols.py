"""
Variables and the symbol table kept by emitters.

Classes:
    VarType: The two value types of the language, NUMBER and STRING.
    Variable: An identifier together with its declared type.
    SymbolTable: Identifier-keyed store of the variables currently visible.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class VarType(Enum):
    NUMBER = "NUMBER"
    STRING = "STRING"


@dataclass(frozen=True)
class Variable:
    identifier: str
    type: VarType

    def __str__(self) -> str:
        return f"{self.identifier}:{self.type.value}"


class SymbolTable:
    """Holds at most one Variable per identifier.

    Adding a variable whose identifier is already present replaces the entry, so
    the most recently declared type wins. Removing goes by identifier.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Variable] = {}

    def add(self, variable: Variable) -> None:
        self._entries[variable.identifier] = variable

    def remove(self, variable: Variable) -> None:
        self._entries.pop(variable.identifier, None)

    def get(self, identifier: str) -> Variable | None:
        return self._entries.get(identifier)

    def variables(self) -> list[Variable]:
        """Returns every entry, sorted by identifier."""
        return [self._entries[name] for name in sorted(self._entries)]

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self.variables())
