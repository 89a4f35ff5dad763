import pytest

from osu_kit.observability import names
from osu_kit.parsers.models import Background, Document, Video
from osu_kit.retention.critical_files import (
    InvalidDocumentError,
    critical_files,
    critical_files_for_many,
)


def make_document(
    audio: str = "audio.mp3",
    background: str | None = "bg.jpg",
    video: str | None = None,
    valid: bool = True,
) -> Document:
    document = Document(version="osu file format v14", is_valid=valid)
    document.general.audio_file_name = audio
    if background is not None:
        document.events.background = Background(exists=True, file_name=background)
    if video is not None:
        document.events.video = Video(exists=True, file_name=video)
    return document


class GaugeRecorder:
    def __init__(self) -> None:
        self.gauges: list[tuple[str, float]] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self.gauges.append((name, value))


class TestCriticalFiles:
    def test_audio_and_background(self) -> None:
        assert critical_files(make_document()) == ["audio.mp3", "bg.jpg"]

    def test_video_only_when_asked(self) -> None:
        document = make_document(video="intro.mp4")

        assert critical_files(document) == ["audio.mp3", "bg.jpg"]
        assert critical_files(document, include_video=True) == [
            "audio.mp3",
            "bg.jpg",
            "intro.mp4",
        ]

    def test_missing_background_is_skipped(self) -> None:
        assert critical_files(make_document(background=None)) == ["audio.mp3"]

    def test_empty_audio_name_is_skipped(self) -> None:
        assert critical_files(make_document(audio="")) == ["bg.jpg"]

    def test_same_file_listed_once(self) -> None:
        """A file used as both background and video is listed once."""
        document = make_document(background="cover.jpg", video="cover.jpg")
        assert critical_files(document, include_video=True) == [
            "audio.mp3",
            "cover.jpg",
        ]

    def test_invalid_document_raises(self) -> None:
        with pytest.raises(InvalidDocumentError, match="invalid document"):
            critical_files(make_document(valid=False))

    def test_invalid_document_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            critical_files(Document())

    def test_records_selection_gauge(self) -> None:
        hook = GaugeRecorder()
        critical_files(make_document(), metrics_hook=hook)
        assert hook.gauges == [(names.RETENTION_FILES_SELECTED, 2)]


class TestCriticalFilesForMany:
    def test_union_keeps_first_seen_order(self) -> None:
        documents = [
            make_document(background="easy.jpg"),
            make_document(background="hard.jpg"),
            make_document(background="easy.jpg"),
        ]

        assert critical_files_for_many(documents) == [
            "audio.mp3",
            "easy.jpg",
            "hard.jpg",
        ]

    def test_invalid_documents_are_skipped(self) -> None:
        documents = [make_document(valid=False, audio="broken.mp3"), make_document()]
        assert critical_files_for_many(documents) == ["audio.mp3", "bg.jpg"]

    def test_no_documents(self) -> None:
        assert critical_files_for_many([]) == []
