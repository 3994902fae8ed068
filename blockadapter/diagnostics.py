"""Diagnostic messages for batch event-to-blocks conversion.

This module provides error and warning reporting while converting many events
or markup documents, tracking issues like malformed top-level blocks that were
dropped and events skipped because they were not block creation events.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DiagnosticLevel(Enum):
    """Severity level for diagnostic messages."""
    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    level: DiagnosticLevel
    message: str
    source: str
    block_id: Optional[str] = None
    event_index: Optional[int] = None

    def __str__(self) -> str:
        loc = f"'{self.source}'"
        if self.event_index is not None:
            loc += f" event {self.event_index}"
        if self.block_id is not None:
            loc += f" block '{self.block_id}'"
        return f"{self.level.value}: {self.message}: {loc}"


@dataclass
class DiagnosticContext:
    """Context for collecting diagnostics while converting one source."""
    source: str = "<markup>"
    current_event: Optional[int] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def set_event(self, event_index: Optional[int]) -> None:
        """Set the current event index for subsequent diagnostics."""
        self.current_event = event_index

    def add(self, level: DiagnosticLevel, message: str, block_id: Optional[str] = None) -> None:
        """Add a diagnostic message."""
        self.diagnostics.append(Diagnostic(
            level=level,
            message=message,
            source=self.source,
            block_id=block_id,
            event_index=self.current_event,
        ))

    def error(self, message: str, block_id: Optional[str] = None) -> None:
        self.add(DiagnosticLevel.ERROR, message, block_id)

    def warning(self, message: str, block_id: Optional[str] = None) -> None:
        self.add(DiagnosticLevel.WARNING, message, block_id)

    def info(self, message: str, block_id: Optional[str] = None) -> None:
        self.add(DiagnosticLevel.INFO, message, block_id)

    def has_errors(self) -> bool:
        """Check if any error diagnostics have been recorded."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.diagnostics)

    def get_errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == DiagnosticLevel.ERROR]

    def get_warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == DiagnosticLevel.WARNING]

    def summary(self) -> str:
        return summarize(self.diagnostics)


class DiagnosticCollector:
    """Collector for diagnostics across multiple sources."""

    def __init__(self) -> None:
        self.all_diagnostics: List[Diagnostic] = []

    def add_context_diagnostics(self, ctx: DiagnosticContext) -> None:
        """Add all diagnostics from a context."""
        self.all_diagnostics.extend(ctx.diagnostics)

    def has_errors(self) -> bool:
        return any(d.level == DiagnosticLevel.ERROR for d in self.all_diagnostics)

    def has_warnings(self) -> bool:
        return any(d.level == DiagnosticLevel.WARNING for d in self.all_diagnostics)

    def reportable(self, include_info: bool = False) -> List[Diagnostic]:
        """Diagnostics worth showing to a user; INFO entries only on request."""
        if include_info:
            return list(self.all_diagnostics)
        return [d for d in self.all_diagnostics if d.level != DiagnosticLevel.INFO]

    def summary(self) -> str:
        return summarize(self.all_diagnostics)


def summarize(diagnostics: List[Diagnostic]) -> str:
    """Return a summary like '1 error, 2 warnings', or 'No issues'."""
    errors = sum(1 for d in diagnostics if d.level == DiagnosticLevel.ERROR)
    warnings = sum(1 for d in diagnostics if d.level == DiagnosticLevel.WARNING)
    parts = []
    if errors:
        parts.append(f"{errors} error{'s' if errors != 1 else ''}")
    if warnings:
        parts.append(f"{warnings} warning{'s' if warnings != 1 else ''}")
    return ", ".join(parts) if parts else "No issues"
