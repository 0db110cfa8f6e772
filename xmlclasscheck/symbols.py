"""Symbol table contract and an in-memory implementation."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, MutableMapping, Protocol

import yaml

from .config import ConfigError
from .models import FileContext
from .names import InvalidNameError, SymbolIdentifier, parse_fully_qualified_name


class SymbolTable(Protocol):
    """What the check needs from the host's registry of declared classes."""

    def exists(self, identifier: SymbolIdentifier) -> bool:
        """Return True when ``identifier`` names a declared class."""

    def record_reference(self, identifier: SymbolIdentifier, context: FileContext) -> None:
        """Record that ``identifier`` is used from ``context``."""


class InMemorySymbolTable:
    """Dictionary-backed symbol table keyed case-insensitively."""

    def __init__(self, identifiers: Iterable[SymbolIdentifier] = ()) -> None:
        self._declared: Dict[str, SymbolIdentifier] = {}
        self._references: MutableMapping[str, List[FileContext]] = defaultdict(list)
        for identifier in identifiers:
            self.declare(identifier)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "InMemorySymbolTable":
        return cls(parse_fully_qualified_name(name) for name in names)

    def declare(self, identifier: SymbolIdentifier) -> None:
        self._declared[identifier.key] = identifier

    def exists(self, identifier: SymbolIdentifier) -> bool:
        return identifier.key in self._declared

    def record_reference(self, identifier: SymbolIdentifier, context: FileContext) -> None:
        self._references[identifier.key].append(context)

    def references(self, identifier: SymbolIdentifier) -> List[FileContext]:
        return list(self._references.get(identifier.key, []))

    def __len__(self) -> int:
        return len(self._declared)


def load_symbol_table(path: Path) -> InMemorySymbolTable:
    """Load declared class names from a text or YAML file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read symbols file {path}: {exc}") from exc

    if path.suffix.lower() in {".yml", ".yaml"}:
        entries = list(enumerate(_yaml_names(path, text), start=1))
    else:
        entries = list(_text_names(text))

    table = InMemorySymbolTable()
    for position, name in entries:
        try:
            table.declare(parse_fully_qualified_name(name))
        except InvalidNameError as exc:
            raise ConfigError(f"{path.name}:{position}: invalid class name '{name}': {exc.reason}") from exc
    return table


def _text_names(text: str) -> Iterable[tuple[int, str]]:
    for number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split("#", 1)[0].strip()
        if line:
            yield number, line


def _yaml_names(path: Path, text: str) -> List[str]:
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    if isinstance(data, dict):
        data = data.get("classes")
    if data is None:
        return []
    if not isinstance(data, list):
        raise ConfigError(f"{path.name} must contain a list of class names")
    return [str(item) for item in data if item is not None]


__all__ = ["InMemorySymbolTable", "SymbolTable", "load_symbol_table"]
