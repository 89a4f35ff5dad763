# src/osu_kit/parsers/osu_parser.py

import io
import logging
from functools import partial
from pathlib import Path
from time import monotonic

from osu_kit.observability import names
from osu_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser, LineSource
from .config import SectionSelector
from .diagnostics import Diagnostic, DiagnosticKind
from .fields import is_version_line
from .models import Document
from .sections import SectionHandler, default_handlers

logger = logging.getLogger(__name__)

_WARNING_KINDS = frozenset(
    {
        DiagnosticKind.INVALID_VERSION,
        DiagnosticKind.MALFORMED_LINE,
        DiagnosticKind.INVALID_VALUE,
        DiagnosticKind.UNEXPECTED_LINE,
    }
)


class OsuParser(DocumentParser):
    """
    Line-driven parser for the .osu beatmap format.
    - One pass, top to bottom
    - The active section header picks the handler for each line
    - Only a missing version header is fatal
    """

    def __init__(
        self,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
        handlers: dict[str, SectionHandler] | None = None,
    ) -> None:
        self.metrics_hook = metrics_hook
        self._handlers = handlers if handlers is not None else default_handlers()

    def parse(
        self, source: LineSource, config: SectionSelector | None = None
    ) -> Document:
        start = monotonic()
        config = config or SectionSelector()
        document = Document()

        line_count = self._run(source, config, document)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSER_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(
            names.PARSER_DOCUMENTS_TOTAL,
            labels={"valid": "true" if document.is_valid else "false"},
        )
        self.metrics_hook.increment(names.PARSER_LINES_TOTAL, line_count)
        if document.diagnostics:
            self.metrics_hook.increment(
                names.PARSER_DIAGNOSTICS_TOTAL, len(document.diagnostics)
            )

        logger.debug(
            "Parsed %d lines: version=%r valid=%s diagnostics=%d",
            line_count,
            document.version,
            document.is_valid,
            len(document.diagnostics),
        )
        return document

    def parse_file(
        self, path: str | Path, config: SectionSelector | None = None
    ) -> Document:
        logger.debug("Parsing beatmap file: %s", path)
        # utf-8-sig drops the byte order mark many editors write
        with open(path, encoding="utf-8-sig", errors="replace") as f:
            return self.parse(f, config)

    def parse_text(self, text: str, config: SectionSelector | None = None) -> Document:
        # split like a file does: \n, \r and \r\n only
        return self.parse(io.StringIO(text, newline=""), config)

    def _run(
        self, source: LineSource, config: SectionSelector, document: Document
    ) -> int:
        """Drive the section state machine. Returns the number of lines read."""
        active = {
            name: handler
            for name, handler in self._handlers.items()
            if not name or config.enabled(name)
        }
        context = ""
        line_number = 0

        for line_number, raw in enumerate(source, start=1):
            line = _clean_line(raw)
            if not line or line.startswith("//"):
                continue

            report = partial(self._record, document, line_number, context, line)

            if not document.version:
                if not is_version_line(line):
                    report(
                        DiagnosticKind.INVALID_VERSION,
                        "first line is not an 'osu file format' header",
                    )
                    return line_number
                document.version = line
                document.is_valid = True
                continue

            if line.startswith("[") and line.endswith("]"):
                heading = line[1:-1].strip().lower()
                if not heading:
                    continue
                context = heading
                if context not in self._handlers:
                    self._record(
                        document,
                        line_number,
                        context,
                        line,
                        DiagnosticKind.UNKNOWN_SECTION,
                        f"no handler for section {heading!r}, skipping it",
                    )
                continue

            handler = active.get(context)
            if handler is None:
                # disabled or unknown section: read past it
                continue
            handler.handle(line, document, report)

        if not document.version:
            self._record(
                document,
                line_number,
                "",
                "",
                DiagnosticKind.INVALID_VERSION,
                "input has no 'osu file format' header",
            )
        return line_number

    @staticmethod
    def _record(
        document: Document,
        line_number: int,
        section: str,
        line: str,
        kind: DiagnosticKind,
        message: str,
    ) -> None:
        diagnostic = Diagnostic(
            line_number=line_number,
            section=section,
            line=line,
            kind=kind,
            message=message,
        )
        document.diagnostics.append(diagnostic)
        if kind in _WARNING_KINDS:
            logger.warning("Beatmap parse issue: %s", diagnostic)
        else:
            logger.debug("Beatmap parse issue: %s", diagnostic)


def _clean_line(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    return raw.lstrip("\ufeff").strip()
