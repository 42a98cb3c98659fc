"""Diagnostics sinks — where rejected accesses are reported.

The core only depends on the :class:`DiagnosticSink` protocol. The default
sink forwards to structlog; :class:`CollectingSink` keeps diagnostics in
memory for callers (and tests) that want to inspect them.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from objfacade.domain.descriptors import Diagnostic
from objfacade.domain.types import Severity

DIAGNOSTICS_LOGGER = "objfacade.diagnostics"


class DiagnosticSink(Protocol):
    """Receives one call per diagnostic. Return value is ignored."""

    def emit(self, severity: str, message: str, subject: str) -> None: ...


class StructlogSink:
    """Log diagnostics through structlog at their own severity.

    *message* is a ``%s`` template rendered with *subject*; the subject is
    also bound as a structured field.
    """

    def __init__(self, logger_name: str = DIAGNOSTICS_LOGGER) -> None:
        self._log = structlog.get_logger(logger_name)

    def emit(self, severity: str, message: str, subject: str) -> None:
        event = message % subject
        if severity == Severity.ERROR:
            self._log.error(event, subject=subject, severity=str(severity))
        else:
            self._log.warning(event, subject=subject, severity=str(severity))


class CollectingSink:
    """Record diagnostics in memory, optionally forwarding them.

    Usage::

        sink = CollectingSink()
        facade = ObjectFacade(obj, sink=sink)
        facade.write_field("_secret", 1)
        sink.errors  # [Diagnostic(severity=<Severity.ERROR: 'error'>, ...)]
    """

    def __init__(self, forward: DiagnosticSink | None = None) -> None:
        self.diagnostics: list[Diagnostic] = []
        self._forward = forward

    def emit(self, severity: str, message: str, subject: str) -> None:
        self.diagnostics.append(
            Diagnostic(severity=Severity(severity), template=message, subject=subject)
        )
        if self._forward is not None:
            self._forward.emit(severity, message, subject)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == Severity.WARNING]

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()
