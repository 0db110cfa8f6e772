"""The XML class reference check, driven by the host's before-analyze hook."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .config import ConfigError, PluginConfig, require_xml_dir
from .discovery import discover_xml_files
from .logging import get_logger
from .markup import MarkupParseError, extract_class_nodes
from .models import INVALID_CLASS_NODE, INVALID_XML_FILE, ClassReferenceNode
from .names import InvalidNameError, parse_fully_qualified_name
from .reporting import DiagnosticReporter, IssueSink
from .resolver import ReferenceResolver
from .symbols import SymbolTable

CHILD_NODES_TEMPLATE = (
    "Invalid <class> node {CODE}, expected a string instead of child nodes, got {CODE} child node(s)"
)
INVALID_NAME_TEMPLATE = "Invalid <class> node, expected a valid class name, got {CODE}: {DETAILS}"
INVALID_XML_TEMPLATE = "Could not parse XML file: {DETAILS}"

_LOGGER = get_logger("plugin")


@dataclass
class ScanSummary:
    """Counts gathered during one pass over the XML directory."""

    files: int = 0
    nodes: int = 0
    references: int = 0
    diagnostics: int = 0
    skipped: int = 0


class XMLClassReferencePlugin:
    """Checks that classes named by ``<class>`` elements in XML files exist."""

    def __init__(self, config: PluginConfig, symbols: SymbolTable, sink: IssueSink) -> None:
        self._xml_dir = require_xml_dir(config)
        self._report_parse_errors = config.report_parse_errors
        self._reporter = DiagnosticReporter(sink, config.project_root)
        self._resolver = ReferenceResolver(symbols, self._reporter)

    @property
    def xml_dir(self) -> Path:
        return self._xml_dir

    def before_analyze(self) -> ScanSummary:
        """Scan every XML file once, before the host starts its analysis."""
        summary = ScanSummary()
        emitted_before = self._reporter.emitted
        for file in discover_xml_files(self._xml_dir):
            self.check_file(file, summary)
        summary.diagnostics = self._reporter.emitted - emitted_before
        _LOGGER.info(
            "Checked %d class reference(s) in %d XML file(s): %d diagnostic(s)",
            summary.nodes,
            summary.files,
            summary.diagnostics,
        )
        return summary

    def check_file(self, file: str, summary: Optional[ScanSummary] = None) -> None:
        summary = summary if summary is not None else ScanSummary()
        try:
            contents = Path(file).read_bytes()
        except OSError as exc:
            _LOGGER.warning("Unable to read file %s: %s", file, exc.strerror or exc)
            summary.skipped += 1
            return
        if not contents:
            return

        try:
            nodes = extract_class_nodes(contents)
        except MarkupParseError as exc:
            _LOGGER.warning("Skipping %s: could not parse XML: %s", file, exc)
            summary.skipped += 1
            if self._report_parse_errors:
                self._reporter.emit(INVALID_XML_FILE, file, exc.line or 1, INVALID_XML_TEMPLATE, [str(exc)])
            return

        summary.files += 1
        for node in nodes:
            summary.nodes += 1
            if self.check_class_node(file, node):
                summary.references += 1

    def check_class_node(self, file: str, node: ClassReferenceNode) -> bool:
        """Validate and resolve one node; return True when it names a known class."""
        if node.child_count != 0:
            self._reporter.emit(
                INVALID_CLASS_NODE,
                file,
                node.line,
                CHILD_NODES_TEMPLATE,
                [node.markup, node.child_count],
            )
            return False

        try:
            identifier = parse_fully_qualified_name(node.text)
        except InvalidNameError as exc:
            self._reporter.emit(
                INVALID_CLASS_NODE,
                file,
                node.line,
                INVALID_NAME_TEMPLATE,
                [node.text, exc.reason],
            )
            return False

        return self._resolver.resolve(identifier, file, node.line)


def create_plugin(
    config: PluginConfig,
    symbols: SymbolTable,
    sink: IssueSink,
    *,
    stderr: Optional[TextIO] = None,
) -> XMLClassReferencePlugin:
    """Build the plugin for a host, terminating the process on bad configuration."""
    try:
        return XMLClassReferencePlugin(config, symbols, sink)
    except ConfigError as exc:
        print(exc, file=stderr if stderr is not None else sys.stderr)
        raise SystemExit(1) from exc


__all__ = [
    "CHILD_NODES_TEMPLATE",
    "INVALID_NAME_TEMPLATE",
    "INVALID_XML_TEMPLATE",
    "ScanSummary",
    "XMLClassReferencePlugin",
    "create_plugin",
]
