# src/osu_kit/parsers/__init__.py

"""Beatmap parsing for osu-kit.

Turns a .osu file into a typed Document in a single forward pass.

Design principles:
- Best effort: recoverable problems become diagnostics, not exceptions
- One fatal condition: the first line must be the format version header
- Opt-in sections: timing points and hit objects are skipped by default

Example:
    >>> from osu_kit.parsers import OsuParser, SectionSelector
    >>>
    >>> parser = OsuParser()
    >>> document = parser.parse_file("Songs/1 Artist - Title/map.osu")
    >>> if document.is_valid:
    ...     print(document.general.audio_file_name)
"""

from .base import DocumentParser, LineSource
from .config import SectionSelector
from .diagnostics import Diagnostic, DiagnosticKind, FieldValueError
from .enums import GameMode, OverlayPosition, SampleSet
from .models import (
    Background,
    BreakPeriod,
    Colour,
    ColoursSection,
    ComboColour,
    DifficultySection,
    Document,
    EditorSection,
    EventsSection,
    GeneralSection,
    HitObject,
    HitObjectType,
    MetadataSection,
    TimingPoint,
    Video,
)
from .osu_parser import OsuParser

__all__ = [
    # Parser
    "DocumentParser",
    "LineSource",
    "OsuParser",
    # Config
    "SectionSelector",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "FieldValueError",
    # Enums
    "GameMode",
    "OverlayPosition",
    "SampleSet",
    # Document
    "Document",
    "GeneralSection",
    "EditorSection",
    "MetadataSection",
    "DifficultySection",
    "EventsSection",
    "Background",
    "Video",
    "BreakPeriod",
    "TimingPoint",
    "ColoursSection",
    "Colour",
    "ComboColour",
    "HitObject",
    "HitObjectType",
]
