"""Check class names referenced from XML files against declared classes."""

from .config import ConfigError, PluginConfig, load_config
from .models import Diagnostic, FileContext
from .names import InvalidNameError, SymbolIdentifier, parse_fully_qualified_name
from .plugin import ScanSummary, XMLClassReferencePlugin, create_plugin
from .reporting import CollectingSink, DiagnosticReporter, StreamSink
from .symbols import InMemorySymbolTable, SymbolTable, load_symbol_table

__all__ = [
    "CollectingSink",
    "ConfigError",
    "Diagnostic",
    "DiagnosticReporter",
    "FileContext",
    "InMemorySymbolTable",
    "InvalidNameError",
    "PluginConfig",
    "ScanSummary",
    "StreamSink",
    "SymbolIdentifier",
    "SymbolTable",
    "XMLClassReferencePlugin",
    "create_plugin",
    "load_config",
    "load_symbol_table",
    "parse_fully_qualified_name",
]
