"""Diagnostic construction and issue sinks."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, TextIO

from .logging import get_logger
from .models import Diagnostic, render_message

_LOGGER = get_logger("reporting")


class IssueSink(Protocol):
    """Receives every diagnostic produced by the check."""

    def report(
        self,
        kind: str,
        file: str,
        line: int,
        template: str,
        args: Sequence[object],
    ) -> None:
        """Accept a single issue."""


class CollectingSink:
    """Keeps reported diagnostics in memory, in emission order."""

    def __init__(self) -> None:
        self.diagnostics: List[Diagnostic] = []

    def report(self, kind: str, file: str, line: int, template: str, args: Sequence[object]) -> None:
        self.diagnostics.append(Diagnostic(kind=kind, file=file, line=line, template=template, args=tuple(args)))

    def kinds(self) -> List[str]:
        return [diagnostic.kind for diagnostic in self.diagnostics]


class StreamSink:
    """Writes diagnostics to a text stream as lines or as a JSON document."""

    def __init__(self, stream: TextIO, *, fmt: str = "text") -> None:
        if fmt not in {"text", "json"}:
            raise ValueError(f"Unsupported output format: {fmt}")
        self._stream = stream
        self._fmt = fmt
        self._pending: List[Diagnostic] = []
        self.count = 0

    def report(self, kind: str, file: str, line: int, template: str, args: Sequence[object]) -> None:
        self.count += 1
        if self._fmt == "json":
            self._pending.append(Diagnostic(kind=kind, file=file, line=line, template=template, args=tuple(args)))
            return
        self._stream.write(f"{file}:{line} {kind} {render_message(template, args)}\n")

    def flush(self) -> None:
        if self._fmt == "json":
            payload = [diagnostic.to_dict() for diagnostic in self._pending]
            self._stream.write(json.dumps(payload, indent=2) + "\n")
            self._pending = []
        self._stream.flush()


class DiagnosticReporter:
    """Builds located diagnostics and forwards each one to the sink exactly once."""

    def __init__(self, sink: IssueSink, project_root: Optional[Path] = None) -> None:
        self._sink = sink
        self._project_root = os.path.abspath(project_root if project_root is not None else os.getcwd())
        self.emitted = 0

    def relative_path(self, path: str) -> str:
        """Return ``path`` relative to the project root when it lives below it."""
        absolute = os.path.abspath(path)
        prefix = self._project_root.rstrip(os.sep) + os.sep
        if absolute.startswith(prefix):
            return absolute[len(prefix):]
        return path

    def emit(
        self,
        kind: str,
        file: str,
        line: int,
        template: str,
        args: Sequence[object] = (),
    ) -> Diagnostic:
        diagnostic = Diagnostic(
            kind=kind,
            file=self.relative_path(file),
            line=line,
            template=template,
            args=tuple(args),
        )
        self.emitted += 1
        _LOGGER.debug("%s:%d %s", diagnostic.file, diagnostic.line, diagnostic.kind)
        self._sink.report(
            diagnostic.kind,
            diagnostic.file,
            diagnostic.line,
            diagnostic.template,
            diagnostic.args,
        )
        return diagnostic


__all__ = ["CollectingSink", "DiagnosticReporter", "IssueSink", "StreamSink"]
