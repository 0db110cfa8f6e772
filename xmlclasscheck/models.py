"""Core data models shared across xmlclasscheck components."""

import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

INVALID_CLASS_NODE = "InvalidClassNode"
UNDECLARED_CLASS_REFERENCE = "UndeclaredClassReference"
INVALID_XML_FILE = "InvalidXMLFile"

_PLACEHOLDER_PATTERN = re.compile(r"\{[A-Z_]+\}")


@dataclass(frozen=True)
class ClassReferenceNode:
    """A `<class>` element found in an XML document."""

    text: str
    child_count: int
    line: int
    markup: str


@dataclass(frozen=True)
class FileContext:
    """Location handed to the symbol table when a reference is recorded."""

    file: str
    line: Optional[int] = None


@dataclass(frozen=True)
class Diagnostic:
    """A located issue destined for the host's issue sink."""

    kind: str
    file: str
    line: int
    template: str
    args: Tuple[object, ...] = ()

    @property
    def message(self) -> str:
        return render_message(self.template, self.args)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "file": self.file,
            "line": self.line,
            "message": self.message,
        }


def render_message(template: str, args: Sequence[object]) -> str:
    """Substitute `{NAME}` placeholders in order with the given arguments."""
    values = iter(args)

    def _replace(match: re.Match[str]) -> str:
        try:
            return str(next(values))
        except StopIteration:
            return match.group(0)

    return _PLACEHOLDER_PATTERN.sub(_replace, template)
