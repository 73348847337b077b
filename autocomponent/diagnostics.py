"""Append-only diagnostics collection for extraction runs."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .logging import get_logger
from .models import Declaration

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """A single problem found while extracting a declaration."""

    site: Optional[Declaration]
    message: str
    severity: str = SEVERITY_ERROR

    def __str__(self) -> str:
        location = self.site.name if self.site is not None else "<unknown>"
        return f"{location}: {self.message}"


class DiagnosticsError(RuntimeError):
    """Raised by the host when accumulated diagnostics fail a run."""

    def __init__(self, message: str, diagnostics: Sequence[Diagnostic]) -> None:
        super().__init__(message)
        self.diagnostics = list(diagnostics)


class ExtractionError(RuntimeError):
    """Raised when a directive cannot be read at all for a declaration."""

    def __init__(self, message: str, site: Optional[Declaration] = None) -> None:
        super().__init__(message)
        self.site = site


class DiagnosticsCollector:
    """Accumulates diagnostics keyed by declaration site.

    Entries are only ever appended; concurrent appends from extractors running
    on separate threads are serialised by a lock. Ordering across declarations
    is whatever order the appends arrive in.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: List[Diagnostic] = []
        self.logger = get_logger("diagnostics")

    def add_invalid(self, site: Optional[Declaration], message: str) -> None:
        self._append(Diagnostic(site=site, message=message, severity=SEVERITY_ERROR))

    def add_warning(self, site: Optional[Declaration], message: str) -> None:
        self._append(Diagnostic(site=site, message=message, severity=SEVERITY_WARNING))

    def for_site(self, site: Declaration) -> "ElementErrors":
        """Return a handle that attributes messages to ``site``."""
        return ElementErrors(self, site)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        with self._lock:
            return list(self._entries)

    @property
    def errors(self) -> List[Diagnostic]:
        return [entry for entry in self.diagnostics if entry.severity == SEVERITY_ERROR]

    @property
    def warnings(self) -> List[Diagnostic]:
        return [entry for entry in self.diagnostics if entry.severity == SEVERITY_WARNING]

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def raise_if_invalid(self) -> None:
        errors = self.errors
        if errors:
            raise DiagnosticsError(f"{len(errors)} invalid declaration(s) found", errors)

    def _append(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self._entries.append(diagnostic)
        if diagnostic.severity == SEVERITY_ERROR:
            self.logger.error("%s", diagnostic)
        else:
            self.logger.warning("%s", diagnostic)


class ElementErrors:
    """Diagnostics handle bound to the declaration currently being processed."""

    def __init__(self, parent: DiagnosticsCollector, site: Declaration) -> None:
        self._parent = parent
        self.site = site

    @property
    def parent(self) -> DiagnosticsCollector:
        return self._parent

    def add_invalid(self, message: str) -> None:
        self._parent.add_invalid(self.site, message)

    def add_warning(self, message: str) -> None:
        self._parent.add_warning(self.site, message)


__all__ = [
    "Diagnostic",
    "DiagnosticsCollector",
    "DiagnosticsError",
    "ElementErrors",
    "ExtractionError",
    "SEVERITY_ERROR",
    "SEVERITY_WARNING",
]
