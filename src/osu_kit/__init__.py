# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    Diagnostic,
    DiagnosticKind,
    Document,
    DocumentParser,
    GameMode,
    OsuParser,
    OverlayPosition,
    SampleSet,
    SectionSelector,
)

# Retention
from .retention import InvalidDocumentError, critical_files, critical_files_for_many

__all__ = [
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Diagnostic",
    "DiagnosticKind",
    "Document",
    "DocumentParser",
    "GameMode",
    "OsuParser",
    "OverlayPosition",
    "SampleSet",
    "SectionSelector",
    # Retention
    "InvalidDocumentError",
    "critical_files",
    "critical_files_for_many",
]
