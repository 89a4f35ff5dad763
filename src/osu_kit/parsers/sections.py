# src/osu_kit/parsers/sections.py

"""Line handlers, one per section of a beatmap.

Key-value sections are driven by lookup tables from the lower-cased key
to the target attribute and its coercion; CSV sections by tables from
token position to attribute and coercion. Handlers write straight into
the Document owned by the running parse and report problems through the
callback they are given, never by raising.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any

from .diagnostics import DiagnosticKind, FieldValueError
from .fields import (
    Coercer,
    as_bool,
    as_byte,
    as_file_name,
    as_float,
    as_game_mode,
    as_int,
    as_overlay_position,
    as_sample_set,
    as_str,
    as_uint,
    split_csv,
    split_key_value,
    token_at,
)
from .models import (
    Background,
    BreakPeriod,
    Colour,
    ComboColour,
    Document,
    HitObject,
    HitObjectType,
    TimingPoint,
    Video,
)

Report = Callable[[DiagnosticKind, str], None]

FieldTable = dict[str, tuple[str, Coercer]]
PositionalTable = Sequence[tuple[int, str, Coercer]]


class SectionHandler(ABC):
    """Interprets the lines of one section."""

    #: lower-cased section name as it appears between the brackets
    name: str

    @abstractmethod
    def handle(self, line: str, document: Document, report: Report) -> None:
        raise NotImplementedError


def assign_tokens(
    target: Any, tokens: Sequence[str], table: PositionalTable, report: Report
) -> None:
    """Copy CSV tokens onto ``target`` by position.

    Missing trailing tokens leave their fields alone. A token that fails to
    coerce is reported and skipped; later tokens are still assigned.
    """
    for index, attr, coerce in table:
        raw = token_at(tokens, index)
        if raw is None:
            continue
        try:
            setattr(target, attr, coerce(raw))
        except FieldValueError as exc:
            report(DiagnosticKind.INVALID_VALUE, f"{attr} (token {index}): {exc}")


class VersionHandler(SectionHandler):
    """Owns the empty context before the first section header.

    The version line itself is checked by the parser loop, since failing it
    ends the parse; anything that shows up here afterwards is stray.
    """

    name = ""

    def handle(self, line: str, document: Document, report: Report) -> None:
        report(DiagnosticKind.UNEXPECTED_LINE, "content before the first section")


class KeyValueHandler(SectionHandler):
    def __init__(
        self,
        name: str,
        fields: FieldTable,
        target: Callable[[Document], Any],
    ) -> None:
        self.name = name
        self.fields = fields
        self.target = target

    def handle(self, line: str, document: Document, report: Report) -> None:
        pair = split_key_value(line)
        if pair is None:
            report(DiagnosticKind.MALFORMED_LINE, "expected a 'key: value' pair")
            return

        key, value = pair
        entry = self.fields.get(key.lower())
        if entry is None:
            report(DiagnosticKind.UNKNOWN_KEY, f"unknown key {key!r}")
            return

        attr, coerce = entry
        try:
            converted = coerce(value)
        except FieldValueError as exc:
            report(DiagnosticKind.INVALID_VALUE, f"{key}: {exc}")
            return

        # repeated keys: the last occurrence wins
        setattr(self.target(document), attr, converted)


GENERAL_FIELDS: FieldTable = {
    "audiofilename": ("audio_file_name", as_str),
    "audioleadin": ("audio_lead_in", as_int),
    "previewtime": ("preview_time", as_int),
    "countdown": ("countdown", as_uint),
    "sampleset": ("sample_set", as_sample_set),
    "stackleniency": ("stack_leniency", as_float),
    "mode": ("mode", as_game_mode),
    "letterboxinbreaks": ("letterbox_in_breaks", as_bool),
    "useskinsprites": ("use_skin_sprites", as_bool),
    "overlayposition": ("overlay_position", as_overlay_position),
    "skinpreference": ("skin_preference", as_str),
    "epilepsywarning": ("epilepsy_warning", as_bool),
    "countdownoffset": ("countdown_offset", as_uint),
    "specialstyle": ("special_style", as_bool),
    "widescreenstoryboard": ("widescreen_storyboard", as_bool),
    "samplesmatchplaybackrate": ("samples_match_playback_rate", as_bool),
}

EDITOR_FIELDS: FieldTable = {
    "bookmarks": ("bookmarks", as_str),
    "distancespacing": ("distance_spacing", as_float),
    "beatdivisor": ("beat_divisor", as_float),
    "gridsize": ("grid_size", as_uint),
    "timelinezoom": ("timeline_zoom", as_float),
}

METADATA_FIELDS: FieldTable = {
    "title": ("title", as_str),
    "titleunicode": ("title_unicode", as_str),
    "artist": ("artist", as_str),
    "artistunicode": ("artist_unicode", as_str),
    "creator": ("creator", as_str),
    "version": ("version", as_str),
    "source": ("source", as_str),
    "tags": ("tags", as_str),
    "beatmapid": ("beatmap_id", as_int),
    "beatmapsetid": ("beatmap_set_id", as_int),
}

DIFFICULTY_FIELDS: FieldTable = {
    "hpdrainrate": ("hp_drain_rate", as_float),
    "circlesize": ("circle_size", as_float),
    "overalldifficulty": ("overall_difficulty", as_float),
    "approachrate": ("approach_rate", as_float),
    "slidermultiplier": ("slider_multiplier", as_float),
    "slidertickrate": ("slider_tick_rate", as_float),
}


def parse_colour(value: str) -> Colour:
    parts = value.split(",")
    if len(parts) != 3:
        raise FieldValueError(f"expected 'r,g,b', got {value!r}")
    red, green, blue = (as_byte(part) for part in parts)
    return Colour(red, green, blue)


class ColoursHandler(SectionHandler):
    name = "colours"

    def handle(self, line: str, document: Document, report: Report) -> None:
        pair = split_key_value(line)
        if pair is None:
            report(DiagnosticKind.MALFORMED_LINE, "expected a 'key: value' pair")
            return

        key, value = pair
        lowered = key.lower()
        section = document.colours

        try:
            if lowered.startswith("combo"):
                index = as_int(key[len("combo") :])
                colour = parse_colour(value)
                section.combo_colours.append(
                    ComboColour(index, colour.red, colour.green, colour.blue)
                )
            elif lowered == "sliderborder":
                section.slider_border = parse_colour(value)
            elif lowered == "slidertrackoverride":
                section.slider_track_override = parse_colour(value)
            else:
                report(DiagnosticKind.UNKNOWN_KEY, f"unknown key {key!r}")
        except FieldValueError as exc:
            report(DiagnosticKind.INVALID_VALUE, f"{key}: {exc}")


BACKGROUND_TOKENS: PositionalTable = (
    (3, "x_offset", as_int),
    (4, "y_offset", as_int),
)

VIDEO_TOKENS: PositionalTable = (
    (1, "start_time", as_int),
    (3, "x_offset", as_int),
    (4, "y_offset", as_int),
)

BREAK_TOKENS: PositionalTable = (
    (1, "start", as_int),
    (2, "end", as_int),
)

_BACKGROUND_KINDS = frozenset({"0", "background"})
_VIDEO_KINDS = frozenset({"1", "video"})
_BREAK_KINDS = frozenset({"2", "break", "breaks"})


class EventsHandler(SectionHandler):
    """Backgrounds, videos and breaks.

    Every other event kind is storyboard scripting and is dropped without
    a diagnostic.
    """

    name = "events"

    def handle(self, line: str, document: Document, report: Report) -> None:
        tokens = split_csv(line)
        kind = tokens[0].strip().lower()

        if kind in _BACKGROUND_KINDS:
            if len(tokens) < 3:
                report(DiagnosticKind.MALFORMED_LINE, "background needs a file name")
                return
            background = Background(exists=True, file_name=as_file_name(tokens[2]))
            assign_tokens(background, tokens, BACKGROUND_TOKENS, report)
            document.events.background = background

        elif kind in _VIDEO_KINDS:
            if len(tokens) < 3:
                report(DiagnosticKind.MALFORMED_LINE, "video needs a file name")
                return
            video = Video(exists=True, file_name=as_file_name(tokens[2]))
            assign_tokens(video, tokens, VIDEO_TOKENS, report)
            document.events.video = video

        elif kind in _BREAK_KINDS:
            if len(tokens) < 3:
                report(DiagnosticKind.MALFORMED_LINE, "break needs a start and an end")
                return
            period = BreakPeriod()
            assign_tokens(period, tokens, BREAK_TOKENS, report)
            document.events.breaks.append(period)


TIMING_POINT_TOKENS: PositionalTable = (
    (0, "time", as_float),
    (1, "beat_length", as_float),
    (2, "meter", as_int),
    (3, "sample_set", as_sample_set),
    (4, "sample_index", as_int),
    (5, "volume", as_int),
    (6, "uninherited", as_bool),
    (7, "effects", as_int),
)


class TimingPointsHandler(SectionHandler):
    name = "timingpoints"

    def handle(self, line: str, document: Document, report: Report) -> None:
        tokens = split_csv(line)
        if len(tokens) < 2:
            report(
                DiagnosticKind.MALFORMED_LINE,
                "timing point needs a time and a beat length",
            )
            return
        point = TimingPoint()
        assign_tokens(point, tokens, TIMING_POINT_TOKENS, report)
        document.timing_points.append(point)


HIT_OBJECT_TOKENS: PositionalTable = (
    (0, "x", as_int),
    (1, "y", as_int),
    (2, "time", as_int),
    (3, "type", as_uint),
    (4, "hit_sound", as_byte),
)

# position of the hit sample among the tokens after hitSound
_SAMPLE_POSITION = (
    (HitObjectType.SLIDER, 5),
    (HitObjectType.SPINNER, 1),
    (HitObjectType.CIRCLE, 0),
)


def split_object_params(type_bits: int, extra: Sequence[str]) -> tuple[str, str]:
    """Separate the type-specific parameters from the trailing hit sample.

    Returns ``(params, hit_sample)``; both are the raw text of the file.
    Mania holds glue the sample onto their end time with a colon.
    """
    if not extra:
        return "", ""

    if type_bits & HitObjectType.MANIA_HOLD:
        end_time, _, sample = extra[0].partition(":")
        return ",".join([end_time, *extra[1:]]), sample

    for bit, position in _SAMPLE_POSITION:
        if type_bits & bit:
            if position < len(extra):
                params = [*extra[:position], *extra[position + 1 :]]
                return ",".join(params), extra[position]
            break

    return ",".join(extra), ""


class HitObjectsHandler(SectionHandler):
    name = "hitobjects"

    def handle(self, line: str, document: Document, report: Report) -> None:
        tokens = split_csv(line)
        if len(tokens) < 5:
            report(
                DiagnosticKind.MALFORMED_LINE,
                "hit object needs x, y, time, type and hitSound",
            )
            return
        hit_object = HitObject()
        assign_tokens(hit_object, tokens, HIT_OBJECT_TOKENS, report)
        hit_object.params, hit_object.hit_sample = split_object_params(
            hit_object.type, tokens[5:]
        )
        document.hit_objects.append(hit_object)


def default_handlers() -> dict[str, SectionHandler]:
    """The handler table keyed by lower-cased section name."""
    handlers: list[SectionHandler] = [
        VersionHandler(),
        KeyValueHandler("general", GENERAL_FIELDS, lambda doc: doc.general),
        KeyValueHandler("editor", EDITOR_FIELDS, lambda doc: doc.editor),
        KeyValueHandler("metadata", METADATA_FIELDS, lambda doc: doc.metadata),
        KeyValueHandler("difficulty", DIFFICULTY_FIELDS, lambda doc: doc.difficulty),
        EventsHandler(),
        TimingPointsHandler(),
        ColoursHandler(),
        HitObjectsHandler(),
    ]
    return {handler.name: handler for handler in handlers}
