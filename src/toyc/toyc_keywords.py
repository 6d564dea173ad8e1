"""
Provides the `KeywordMapper` class for configuring keyword spellings of the toy language.

Programs written for other dialects of the language sometimes spell keywords
differently (`BEGIN`, `endif`-style aliases, localized words). The mapper lets a
caller register extra spellings for the canonical keyword kinds without touching
the lexer.

Classes:
    - KeywordMapper: Maps alias spellings to canonical keyword kinds.
    - MappingError: Raised when configuration or alias conflicts occur.

Features:
    - Dict-mode configuration (alias or alias group → canonical kind)
    - Conflict detection across the current table and the new configuration
    - Loading from JSON files whose keys are comma-separated alias groups
    - Plain-text report of the active table

Usage:
    >>> mapper = KeywordMapper.from_canonical()
    >>> mapper.configure({("BEGIN", "start"): "BEGIN"})
    >>> mapper.resolve("start")
    'BEGIN'
"""

import json
from typing import Any

from toyc.toyc_constants import CANONICAL_TOKENS, KEYWORD_TOKENS, token_hashmap

KEYWORDS_ENV = "TOYC_KEYWORDS"


class MappingError(Exception):
    """Raised when a keyword alias configuration is invalid.

    Attributes:
        conflicts (list[str]): Descriptions of the conflicting aliases, if any.
    """

    def __init__(self, message: str, conflicts: list[str] | None = None):
        super().__init__(message)
        self.conflicts = conflicts or []


class KeywordMapper:
    """Manages alias-to-keyword mappings used by the lexer.

    Attributes:
        token_map (dict[str, str]): Maps alias spellings to canonical keyword kinds.
    """

    def __init__(self) -> None:
        self.token_map: dict[str, str] = {}

    def resolve(self, word: str) -> str | None:
        """Returns the keyword kind for `word`, or None if it is not a keyword."""
        return self.token_map.get(word)

    def report(self) -> str:
        """Renders the table as `alias → KIND` lines, sorted by alias."""
        return "\n".join(
            f"{alias:>12} → {kind}" for alias, kind in sorted(self.token_map.items())
        )

    def _extract_aliases(self, entry: Any) -> list[str]:
        if entry is None:
            return []
        if isinstance(entry, str):
            return [entry]
        if isinstance(entry, (list, tuple, set)):
            aliases: list[str] = []
            for item in entry:
                aliases.extend(self._extract_aliases(item))
            return aliases
        return [str(entry)]

    @classmethod
    def from_canonical(cls) -> "KeywordMapper":
        """Constructs a mapper preloaded with the canonical lowercase keywords."""
        instance = cls()
        instance.configure(
            {
                spelling: kind
                for spelling, kind in token_hashmap.items()
                if kind in KEYWORD_TOKENS
            }
        )
        return instance

    def load_from_json(self, path: str) -> None:
        """
        Loads alias groups from a JSON file and applies them via `configure`.

        Example JSON structure:
            {
                "BEGIN,start": "BEGIN",
                "END,finish": "END"
            }

        Raises:
            MappingError: If the file cannot be read or the configuration is invalid.
        """
        try:
            with open(path, encoding="utf-8") as f:
                raw_cfg = json.load(f)
        except (OSError, ValueError) as e:
            raise MappingError(f"Failed to load keyword file: {e}") from e

        if not isinstance(raw_cfg, dict):
            raise MappingError("Keyword file must contain a JSON object")

        parsed_cfg: dict[tuple[str, ...], Any] = {}
        for key, value in raw_cfg.items():
            aliases = tuple(alias.strip() for alias in key.split(",") if alias.strip())
            parsed_cfg[aliases] = value
        self.configure(parsed_cfg)

    def configure(self, cfg: dict[Any, Any]) -> None:
        """
        Applies a new alias-to-keyword configuration.

        Args:
            cfg: Maps aliases (a string or a group of strings) to a keyword kind.

        Raises:
            MappingError: If any of the following occur:
                - The configuration is not a dict
                - A kind is unknown or not a keyword kind
                - An alias is not a single word
                - An alias maps to multiple conflicting kinds
        """
        if not isinstance(cfg, dict):
            raise MappingError("Configuration must be a dict")

        new_token_map: dict[str, str] = {}
        conflicts: list[str] = []

        for alias_group, kind in cfg.items():
            if kind not in CANONICAL_TOKENS:
                raise MappingError(f"Unknown token kind: {kind}")
            if kind not in KEYWORD_TOKENS:
                raise MappingError(f"Not a keyword kind: {kind}")
            for alias in self._extract_aliases(alias_group):
                if not alias.isalpha():
                    raise MappingError(f"Keyword alias must be a single word: {alias!r}")
                existing = new_token_map.get(alias, self.token_map.get(alias))
                if existing is not None and existing != kind:
                    conflicts.append(
                        f"'{alias}' → conflict between {existing} and {kind}"
                    )
                else:
                    new_token_map[alias] = kind

        if conflicts:
            raise MappingError("Alias collision(s) detected", conflicts)

        self.token_map.update(new_token_map)
