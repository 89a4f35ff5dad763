# src/osu_kit/parsers/config.py

from pydantic import BaseModel, ConfigDict


class SectionSelector(BaseModel):
    """Which sections a parse materializes.

    Immutable. Explicit. Timing points and hit objects are by far the
    largest sections of a beatmap and most callers never look at them,
    so they are opt-in. A disabled section is still read past, line by
    line; only its handler is skipped.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    parse_general: bool = True
    parse_editor: bool = True
    parse_metadata: bool = True
    parse_difficulty: bool = True
    parse_events: bool = True
    parse_timing_points: bool = False
    parse_colours: bool = True
    parse_hit_objects: bool = False

    @classmethod
    def everything(cls) -> "SectionSelector":
        return cls(parse_timing_points=True, parse_hit_objects=True)

    def enabled(self, section: str) -> bool:
        """Look up a flag by the lower-cased section name used in headers.

        Sections without a flag of their own are always enabled.
        """
        flag = _FLAG_BY_SECTION.get(section)
        if flag is None:
            return True
        return bool(getattr(self, flag))


_FLAG_BY_SECTION = {
    "general": "parse_general",
    "editor": "parse_editor",
    "metadata": "parse_metadata",
    "difficulty": "parse_difficulty",
    "events": "parse_events",
    "timingpoints": "parse_timing_points",
    "colours": "parse_colours",
    "hitobjects": "parse_hit_objects",
}
