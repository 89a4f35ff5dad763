# src/osu_kit/parsers/diagnostics.py

from dataclasses import dataclass
from enum import Enum


class FieldValueError(ValueError):
    """A single field could not be coerced to its declared type.

    Raised by the coercion helpers and caught at the field boundary by the
    section handlers, where it becomes an INVALID_VALUE diagnostic.
    """


class DiagnosticKind(str, Enum):
    INVALID_VERSION = "invalid_version"
    MALFORMED_LINE = "malformed_line"
    UNKNOWN_KEY = "unknown_key"
    INVALID_VALUE = "invalid_value"
    UNKNOWN_SECTION = "unknown_section"
    UNEXPECTED_LINE = "unexpected_line"

    @property
    def is_fatal(self) -> bool:
        return self is DiagnosticKind.INVALID_VERSION


@dataclass(frozen=True)
class Diagnostic:
    """A parse issue tied to one input line.

    Only INVALID_VERSION stops a parse; everything else is recorded and the
    parser moves on with the affected field left at its default.
    """

    line_number: int
    section: str
    line: str
    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        section = self.section or "<version>"
        return f"line {self.line_number} [{section}] {self.kind.value}: {self.message}"
