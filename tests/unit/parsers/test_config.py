import pytest
from pydantic import ValidationError

from osu_kit.parsers.config import SectionSelector


def test_defaults_skip_timing_points_and_hit_objects() -> None:
    selector = SectionSelector()

    assert selector.parse_general
    assert selector.parse_editor
    assert selector.parse_metadata
    assert selector.parse_difficulty
    assert selector.parse_events
    assert selector.parse_colours
    assert not selector.parse_timing_points
    assert not selector.parse_hit_objects


def test_everything_enables_all_sections() -> None:
    selector = SectionSelector.everything()
    assert all(selector.model_dump().values())


def test_enabled_by_section_name() -> None:
    selector = SectionSelector(parse_events=False)

    assert selector.enabled("general")
    assert not selector.enabled("events")
    assert not selector.enabled("timingpoints")


def test_unknown_flag_is_rejected() -> None:
    with pytest.raises(ValidationError):
        SectionSelector(parse_storyboard=True)


def test_selector_is_frozen() -> None:
    selector = SectionSelector()
    with pytest.raises(ValidationError):
        selector.parse_general = False


def test_sections_without_a_flag_are_enabled() -> None:
    assert SectionSelector(parse_general=False).enabled("fonts")
