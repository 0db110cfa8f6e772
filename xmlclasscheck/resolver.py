"""Resolution of validated class names against the symbol table."""

from __future__ import annotations

from .models import UNDECLARED_CLASS_REFERENCE, FileContext
from .names import SymbolIdentifier
from .reporting import DiagnosticReporter
from .symbols import SymbolTable

UNDECLARED_CLASS_TEMPLATE = "Invalid <class> node, could not find class {CLASS}"


class ReferenceResolver:
    """Records usages of known classes and reports unknown ones."""

    def __init__(self, symbols: SymbolTable, reporter: DiagnosticReporter) -> None:
        self._symbols = symbols
        self._reporter = reporter

    def resolve(self, identifier: SymbolIdentifier, file: str, line: int) -> bool:
        """Return True when ``identifier`` is declared; report it otherwise."""
        if self._symbols.exists(identifier):
            context = FileContext(file=self._reporter.relative_path(file))
            self._symbols.record_reference(identifier, context)
            return True
        self._reporter.emit(UNDECLARED_CLASS_REFERENCE, file, line, UNDECLARED_CLASS_TEMPLATE, [identifier])
        return False


__all__ = ["ReferenceResolver", "UNDECLARED_CLASS_TEMPLATE"]
