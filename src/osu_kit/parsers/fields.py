# src/osu_kit/parsers/fields.py

"""Line tokenizers and scalar coercions shared by the section handlers.

Every coercion takes the raw token text and either returns a typed value
or raises FieldValueError. Nothing here logs or records diagnostics; that
happens one level up, where the section and line are known.
"""

import math
from collections.abc import Callable, Sequence
from typing import Any

from .diagnostics import FieldValueError
from .enums import GameMode, OverlayPosition, SampleSet

Coercer = Callable[[str], Any]

VERSION_MARKER = "osu file format"


def split_key_value(line: str) -> tuple[str, str] | None:
    """Split a ``key: value`` line on its first colon.

    Colons after the first belong to the value, so timestamps and URLs
    survive intact. Returns None when the line has no colon at all.
    """
    key, sep, value = line.partition(":")
    if not sep:
        return None
    return key.strip(), value.strip()


def split_csv(line: str) -> list[str]:
    return line.split(",")


def token_at(tokens: Sequence[str], index: int) -> str | None:
    """Positional lookup that treats a short row as missing trailing fields."""
    if index < len(tokens):
        return tokens[index]
    return None


def is_version_line(line: str) -> bool:
    return VERSION_MARKER in line


def as_str(value: str) -> str:
    return value


def _numeric_text(value: str) -> str:
    # int() and float() also read digit separators like "1_000"
    text = value.strip()
    if "_" in text:
        raise FieldValueError(f"expected a number, got {value!r}")
    return text


def as_int(value: str) -> int:
    text = _numeric_text(value)
    try:
        return int(text)
    except ValueError:
        pass
    # older beatmaps write some integer fields with a fractional part
    try:
        number = float(text)
    except ValueError:
        raise FieldValueError(f"expected an integer, got {value!r}") from None
    if not number.is_integer():
        raise FieldValueError(f"expected an integer, got {value!r}")
    return int(number)


def as_uint(value: str) -> int:
    number = as_int(value)
    if number < 0:
        raise FieldValueError(f"expected a non-negative integer, got {value!r}")
    return number


def as_byte(value: str) -> int:
    number = as_uint(value)
    if number > 255:
        raise FieldValueError(f"expected a value in 0..255, got {value!r}")
    return number


def as_float(value: str) -> float:
    try:
        number = float(_numeric_text(value))
    except ValueError:
        raise FieldValueError(f"expected a number, got {value!r}") from None
    if not math.isfinite(number):
        raise FieldValueError(f"expected a finite number, got {value!r}")
    return number


def as_bool(value: str) -> bool:
    return value.strip() == "1"


def as_game_mode(value: str) -> GameMode:
    return GameMode.from_code(as_uint(value))


def as_sample_set(value: str) -> SampleSet:
    return SampleSet.coerce(value)


def as_overlay_position(value: str) -> OverlayPosition:
    return OverlayPosition.from_name(value)


def as_file_name(value: str) -> str:
    return value.replace('"', "").strip()
