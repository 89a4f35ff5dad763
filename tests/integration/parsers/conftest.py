from pathlib import Path

import pytest

from osu_kit.parsers.config import SectionSelector
from osu_kit.parsers.models import Document
from osu_kit.parsers.osu_parser import OsuParser

NORMAL_LINES = [
    "osu file format v14",
    "",
    "[General]",
    "AudioFilename: audio.mp3",
    "AudioLeadIn: 0",
    "PreviewTime: 40000",
    "SampleSet: Normal",
    "Mode: 0",
    "",
    "[Metadata]",
    "Title:Sample Song",
    "Artist:Sample Artist",
    "Creator:tester",
    "Version:Normal",
    "Tags:test sample",
    "BeatmapID:1",
    "BeatmapSetID:10",
    "",
    "[Events]",
    "//Background and Video events",
    '0,0,"background.jpg",0,0',
    '1,0,"video.mp4"',
    "//Break Periods",
    "2,10000,15000",
    "//Storyboard Layer 0 (Background)",
    'Sprite,Background,Centre,"sb/bg layer.png",320,240',
    " F,0,0,1000,0,1",
    "",
    "[TimingPoints]",
    "0,500,4,1,0,100,1,0",
    "8000,-100,4,1,0,80,0,1",
    "",
    "[Colours]",
    "Combo1 : 255,128,0",
    "Combo2 : 0,128,255",
    "",
    "[HitObjects]",
    "256,192,500,1,0,0:0:0:0:",
    "128,96,1000,2,0,L|200:96,1,70,0|0,0:0|0:0,0:0:0:0:",
    "256,192,2000,12,0,4000,0:0:0:0:",
]

HARD_LINES = [
    "osu file format v14",
    "[General]",
    "AudioFilename: audio.mp3",
    "[Events]",
    '0,0,"hard-bg.jpg",0,0',
]

BROKEN_LINES = [
    "this is not a beatmap",
    "[General]",
    "AudioFilename: stolen.mp3",
]

LEGACY_LINES = [
    "osu file format v3",
    "[General]",
    "AudioFilename: old.mp3",
    "Mode: 7",
    "OverlayPosition: Sideways",
    "[Events]",
    "0,0,old.png",
    "[TimingPoints]",
    "1200,400",
    "oops",
]


def _write_beatmap(path: Path, lines: list[str], *, bom: bool = False) -> None:
    """Write lines the way the editor does: CRLF endings, optional BOM."""
    text = "\r\n".join(lines) + "\r\n"
    encoding = "utf-8-sig" if bom else "utf-8"
    path.write_bytes(text.encode(encoding))


@pytest.fixture(scope="module")
def mapset_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """One mapset directory holding several difficulties."""
    dir_path: Path = tmp_path_factory.mktemp("mapset")

    _write_beatmap(
        dir_path / "Artist - Song (tester) [Normal].osu", NORMAL_LINES, bom=True
    )
    _write_beatmap(dir_path / "Artist - Song (tester) [Hard].osu", HARD_LINES)
    _write_beatmap(dir_path / "broken.osu", BROKEN_LINES)
    _write_beatmap(dir_path / "legacy.osu", LEGACY_LINES)

    return dir_path


@pytest.fixture(scope="module")
def parsed_normal(mapset_dir: Path) -> Document:
    """Parse the full difficulty once, with every section enabled."""
    parser = OsuParser()
    return parser.parse_file(
        mapset_dir / "Artist - Song (tester) [Normal].osu",
        SectionSelector.everything(),
    )


@pytest.fixture(scope="module")
def parsed_legacy(mapset_dir: Path) -> Document:
    parser = OsuParser()
    return parser.parse_file(mapset_dir / "legacy.osu", SectionSelector.everything())
