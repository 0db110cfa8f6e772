"""Syntactic validation of fully qualified class names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

_IDENTIFIER = re.compile(r"[A-Za-z_\u0080-\U0010FFFF][A-Za-z0-9_\u0080-\U0010FFFF]*")
_ALTERNATE_ID = re.compile(r"[0-9]+")
_SEPARATOR = "\\"


class InvalidNameError(ValueError):
    """Raised when text is not a well-formed fully qualified class name."""

    def __init__(self, reason: str, text: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.text = text


@dataclass(frozen=True)
class SymbolIdentifier:
    """A validated fully qualified class name such as ``\\App\\Model\\User``."""

    namespace: Tuple[str, ...]
    name: str
    alternate_id: int = 0

    def __str__(self) -> str:
        rendered = _SEPARATOR + _SEPARATOR.join((*self.namespace, self.name))
        if self.alternate_id:
            rendered += f",{self.alternate_id}"
        return rendered

    @property
    def key(self) -> str:
        """Case-insensitive lookup key; class names are not case sensitive."""
        return str(self).lower()


def parse_fully_qualified_name(text: str) -> SymbolIdentifier:
    """Parse ``text`` into a `SymbolIdentifier` or raise `InvalidNameError`.

    A single leading backslash is optional. An optional ``,N`` suffix selects an
    alternate declaration of the same name. Whitespace is not stripped.

    This is stricter than the analyzer's own lenient parsing: a non-numeric
    ``,N`` suffix or an empty namespace segment (``Foo\\\\Bar``) is rejected
    rather than coerced or dropped.
    """
    fqsen, comma, alternate = text.partition(",")
    alternate_id = 0
    if comma:
        if not _ALTERNATE_ID.fullmatch(alternate):
            raise InvalidNameError(f"The alternate id ,{alternate} is invalid", text)
        alternate_id = int(alternate)

    if fqsen.startswith(_SEPARATOR):
        fqsen = fqsen[1:]
    parts = fqsen.split(_SEPARATOR)
    name = parts.pop()
    if not name:
        raise InvalidNameError("The name cannot be empty", text)

    namespace = tuple(parts)
    if not all(_IDENTIFIER.fullmatch(segment) for segment in namespace):
        rendered = _SEPARATOR + _SEPARATOR.join(namespace)
        raise InvalidNameError(f"The namespace {rendered} is invalid", text)
    if not _IDENTIFIER.fullmatch(name):
        raise InvalidNameError(f"The name {name} is invalid", text)

    return SymbolIdentifier(namespace=namespace, name=name, alternate_id=alternate_id)


__all__ = ["InvalidNameError", "SymbolIdentifier", "parse_fully_qualified_name"]
