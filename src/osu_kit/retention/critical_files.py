import logging
from collections.abc import Iterable
from time import monotonic

from osu_kit.observability import names
from osu_kit.observability.base import MetricsHook, NoOpMetricsHook
from osu_kit.parsers.models import Document

logger = logging.getLogger(__name__)


class InvalidDocumentError(ValueError):
    """Raised when file selection is asked of a document that failed to parse."""


def critical_files(
    document: Document,
    *,
    include_video: bool = False,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[str]:
    """Media files a beatmap's directory has to keep.

    Names are returned exactly as the beatmap writes them (relative to the
    beatmap's directory), audio first, then background, then video.
    """
    start = monotonic()
    if not document.is_valid:
        raise InvalidDocumentError("cannot select files from an invalid document")

    candidates = [document.general.audio_file_name]
    if document.events.background.exists:
        candidates.append(document.events.background.file_name)
    if include_video and document.events.video.exists:
        candidates.append(document.events.video.file_name)

    files = _unique(candidates)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.RETENTION_SELECTION_DURATION, elapsed_ms)
    metrics_hook.record_gauge(names.RETENTION_FILES_SELECTED, len(files))
    return files


def critical_files_for_many(
    documents: Iterable[Document],
    *,
    include_video: bool = False,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[str]:
    """Union of critical files over every difficulty of one mapset.

    Invalid documents are skipped; first-seen order is kept.
    """
    selected: list[str] = []
    for document in documents:
        if not document.is_valid:
            logger.warning(
                "Skipping invalid beatmap document (%d diagnostics)",
                len(document.diagnostics),
            )
            continue
        selected.extend(
            critical_files(
                document, include_video=include_video, metrics_hook=metrics_hook
            )
        )
    return _unique(selected)


def _unique(names_: Iterable[str]) -> list[str]:
    # empty names mean "not set" in the beatmap
    return list(dict.fromkeys(name for name in names_ if name))
