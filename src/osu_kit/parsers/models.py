# src/osu_kit/parsers/models.py

from dataclasses import dataclass, field

from .diagnostics import Diagnostic
from .enums import GameMode, OverlayPosition, SampleSet


@dataclass
class GeneralSection:
    audio_file_name: str = ""
    audio_lead_in: int = 0
    preview_time: int = -1
    countdown: int = 1
    sample_set: SampleSet = SampleSet.NORMAL
    stack_leniency: float = 0.7
    mode: GameMode = GameMode.OSU
    letterbox_in_breaks: bool = False
    use_skin_sprites: bool = False
    overlay_position: OverlayPosition = OverlayPosition.NO_CHANGE
    skin_preference: str = ""
    epilepsy_warning: bool = False
    countdown_offset: int = 0
    special_style: bool = False
    widescreen_storyboard: bool = False
    samples_match_playback_rate: bool = False


@dataclass
class EditorSection:
    bookmarks: str = ""  # comma-separated millisecond offsets, kept verbatim
    distance_spacing: float = 1.0
    beat_divisor: float = 4.0
    grid_size: int = 4
    timeline_zoom: float = 1.0


@dataclass
class MetadataSection:
    title: str = ""
    title_unicode: str = ""
    artist: str = ""
    artist_unicode: str = ""
    creator: str = ""
    version: str = ""
    source: str = ""
    tags: str = ""
    beatmap_id: int = 0
    beatmap_set_id: int = -1


@dataclass
class DifficultySection:
    hp_drain_rate: float = 5.0
    circle_size: float = 5.0
    overall_difficulty: float = 5.0
    approach_rate: float = 5.0
    slider_multiplier: float = 1.4
    slider_tick_rate: float = 1.0


@dataclass
class Background:
    exists: bool = False
    file_name: str = ""
    x_offset: int = 0
    y_offset: int = 0


@dataclass
class Video:
    exists: bool = False
    start_time: int = 0
    file_name: str = ""
    x_offset: int = 0
    y_offset: int = 0


@dataclass
class BreakPeriod:
    start: int = 0
    end: int = 0


@dataclass
class EventsSection:
    background: Background = field(default_factory=Background)
    video: Video = field(default_factory=Video)
    breaks: list[BreakPeriod] = field(default_factory=list)


@dataclass
class TimingPoint:
    """One row of [TimingPoints].

    Uninherited points set the beat length in milliseconds; inherited ones
    carry a negative inverse slider velocity multiplier instead.
    """

    time: float = 0.0
    beat_length: float = 0.0
    meter: int = 4
    sample_set: SampleSet = SampleSet.NONE
    sample_index: int = 0
    volume: int = 100
    uninherited: bool = True
    effects: int = 0

    @property
    def bpm(self) -> float | None:
        if not self.uninherited or self.beat_length <= 0:
            return None
        return 60_000 / self.beat_length

    @property
    def kiai(self) -> bool:
        return bool(self.effects & 1)


@dataclass(frozen=True)
class Colour:
    red: int
    green: int
    blue: int

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)


@dataclass(frozen=True)
class ComboColour:
    index: int
    red: int
    green: int
    blue: int

    @property
    def colour(self) -> Colour:
        return Colour(self.red, self.green, self.blue)


@dataclass
class ColoursSection:
    combo_colours: list[ComboColour] = field(default_factory=list)
    slider_border: Colour | None = None
    slider_track_override: Colour | None = None


class HitObjectType:
    """Bits of the hit object ``type`` field."""

    CIRCLE = 1 << 0
    SLIDER = 1 << 1
    NEW_COMBO = 1 << 2
    SPINNER = 1 << 3
    MANIA_HOLD = 1 << 7


@dataclass
class HitObject:
    """One row of [HitObjects].

    ``params`` and ``hit_sample`` are kept as the raw text of the file;
    nothing downstream needs slider curves or custom sample banks.
    """

    x: int = 0
    y: int = 0
    time: int = 0
    type: int = 0
    hit_sound: int = 0
    params: str = ""
    hit_sample: str = ""

    @property
    def is_circle(self) -> bool:
        return bool(self.type & HitObjectType.CIRCLE)

    @property
    def is_slider(self) -> bool:
        return bool(self.type & HitObjectType.SLIDER)

    @property
    def is_spinner(self) -> bool:
        return bool(self.type & HitObjectType.SPINNER)

    @property
    def is_mania_hold(self) -> bool:
        return bool(self.type & HitObjectType.MANIA_HOLD)


@dataclass
class Document:
    """Typed result of a single parse.

    Check ``is_valid`` before trusting any field: an invalid document
    failed the version check and holds nothing but defaults.

    The parser never touches a document after returning it. Treat it as
    read-only and rebuild with ``dataclasses.replace`` to change a field,
    e.g. ``replace(doc, general=replace(doc.general, mode=GameMode.TAIKO))``.
    """

    version: str = ""
    is_valid: bool = False
    general: GeneralSection = field(default_factory=GeneralSection)
    editor: EditorSection = field(default_factory=EditorSection)
    metadata: MetadataSection = field(default_factory=MetadataSection)
    difficulty: DifficultySection = field(default_factory=DifficultySection)
    events: EventsSection = field(default_factory=EventsSection)
    timing_points: list[TimingPoint] = field(default_factory=list)
    colours: ColoursSection = field(default_factory=ColoursSection)
    hit_objects: list[HitObject] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)
