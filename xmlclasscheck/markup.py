"""Extraction of class reference elements from XML markup."""

from __future__ import annotations

from typing import Iterator, List, Optional

from lxml import etree

from .models import ClassReferenceNode

CLASS_ELEMENT = "class"


class MarkupParseError(ValueError):
    """Raised when a document cannot be parsed as XML."""

    def __init__(self, message: str, line: Optional[int] = None) -> None:
        super().__init__(message)
        self.line = line


def parse_markup(contents: bytes) -> etree._Element:
    """Parse raw XML bytes and return the document's root element."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        return etree.fromstring(contents, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise MarkupParseError(exc.msg or str(exc), line=exc.lineno) from exc


def find_elements(root: etree._Element, tag: str) -> Iterator[etree._Element]:
    """Yield every element named ``tag`` at any depth, in document order."""
    return root.iter(tag)


def extract_class_nodes(contents: bytes, tag: str = CLASS_ELEMENT) -> List[ClassReferenceNode]:
    """Return the class reference nodes found in ``contents``.

    Empty input yields no nodes. Malformed input raises `MarkupParseError`.
    """
    if not contents:
        return []
    root = parse_markup(contents)
    return [_to_node(element) for element in find_elements(root, tag)]


def _to_node(element: etree._Element) -> ClassReferenceNode:
    # Comments, processing instructions and entity references are not elements.
    child_count = sum(1 for child in element if isinstance(child.tag, str))
    return ClassReferenceNode(
        text=_direct_text(element),
        child_count=child_count,
        line=element.sourceline or 0,
        markup=etree.tostring(element, encoding="unicode", with_tail=False),
    )


def _direct_text(element: etree._Element) -> str:
    parts = [element.text or ""]
    parts.extend(child.tail or "" for child in element)
    return "".join(parts)


__all__ = [
    "CLASS_ELEMENT",
    "MarkupParseError",
    "extract_class_nodes",
    "find_elements",
    "parse_markup",
]
