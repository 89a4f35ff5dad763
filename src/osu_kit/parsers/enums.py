# src/osu_kit/parsers/enums.py

from enum import Enum, IntEnum

from .diagnostics import FieldValueError


class GameMode(IntEnum):
    """Ruleset a beatmap is played with."""

    UNKNOWN = -1
    OSU = 0
    TAIKO = 1
    CATCH = 2
    MANIA = 3

    @classmethod
    def from_code(cls, code: int) -> "GameMode":
        """Map a numeric mode code. Codes outside 0..3 map to UNKNOWN."""
        if 0 <= code <= 3:
            return cls(code)
        return cls.UNKNOWN


class SampleSet(str, Enum):
    """Hit sound bank.

    NONE doubles as the sentinel for "use the beatmap default", which is
    what timing points with code 0 and unrecognized names resolve to.
    """

    NONE = "none"
    NORMAL = "normal"
    SOFT = "soft"
    DRUM = "drum"

    @classmethod
    def from_name(cls, name: str) -> "SampleSet":
        """Permissive lookup: unknown names never raise."""
        lowered = name.strip().lower()
        if lowered == "none":
            # the General section spells the default bank as "None"
            return cls.NORMAL
        for member in (cls.NORMAL, cls.SOFT, cls.DRUM):
            if member.value == lowered:
                return member
        return cls.NONE

    @classmethod
    def from_code(cls, code: int) -> "SampleSet":
        return _SAMPLE_SET_CODES.get(code, cls.NONE)

    @classmethod
    def coerce(cls, value: str) -> "SampleSet":
        """Accept either a numeric code or a name."""
        text = value.strip()
        if text.isdecimal():
            return cls.from_code(int(text))
        return cls.from_name(text)


_SAMPLE_SET_CODES = {
    0: SampleSet.NONE,
    1: SampleSet.NORMAL,
    2: SampleSet.SOFT,
    3: SampleSet.DRUM,
}


class OverlayPosition(str, Enum):
    """Draw order of hit circle overlays relative to numbers."""

    NO_CHANGE = "nochange"
    BELOW = "below"
    ABOVE = "above"

    @classmethod
    def from_name(cls, name: str) -> "OverlayPosition":
        """Strict lookup: there is no sentinel to fall back to."""
        lowered = name.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise FieldValueError(f"unknown overlay position: {name!r}")
