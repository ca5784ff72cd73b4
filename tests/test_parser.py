from __future__ import annotations

import pytest

from confusables_gen.parser import (
    CONFUSABLE_LINE_RE,
    format_code_points,
    is_allowed,
    parse_confusables,
)
from tests.testlib.upstream import (
    CHAINED_DOTLESS_I,
    CYRILLIC_A,
    EN_QUAD,
    GREEK_TO_CYRILLIC,
    HEADER_LINES,
    HEBREW_VAV,
    LATIN_A,
    LIGATURE_OE,
)


@pytest.mark.parametrize("confusable", ["\u0430a", "\u200eו\u200e", "ab", "\U0001d6a4ı"])
def test_multi_code_point_confusable_is_rejected(confusable: str) -> None:
    assert not is_allowed(confusable, "a")
    assert not is_allowed(confusable, " ")


@pytest.mark.parametrize("confusable", ["!", "A", "z", "0", "~"])
def test_basic_latin_confusable_is_rejected(confusable: str) -> None:
    assert not is_allowed(confusable, "a")


@pytest.mark.parametrize("target", ["г", "é", "ı", "\x7f", ""])
def test_target_without_basic_latin_or_space_is_rejected(target: str) -> None:
    assert not is_allowed("γ", target)


@pytest.mark.parametrize(
    "confusable, target",
    [
        ("\u0430", "a"),
        ("\u2000", " "),
        ("\u3000", "\t"),
        ("œ", "oe"),
        ("\U0001d6a4", "i"),
        (" ", "a"),
        ("\x7f", "~"),
        ("ℓ", "ıl"),
    ],
)
def test_non_basic_latin_confusable_with_latin_target_is_allowed(
    confusable: str, target: str
) -> None:
    assert is_allowed(confusable, target)


def test_format_code_points() -> None:
    assert format_code_points("1F600") == "\\U0001F600"
    assert format_code_points("41 42") == "\\U00000041\\U00000042"
    assert format_code_points("0430") == "\\U00000430"
    assert format_code_points("") == ""


def test_line_pattern_captures_first_and_last_rendered_characters() -> None:
    m = CONFUSABLE_LINE_RE.match(CHAINED_DOTLESS_I)
    assert m is not None
    assert m.group("confusable_ids") == "1D6A4"
    assert m.group("target_ids") == "0069"
    assert m.group("confusable_char") == "\U0001d6a4"
    assert m.group("target_char") == "i"


def test_line_pattern_keeps_whitespace_target() -> None:
    m = CONFUSABLE_LINE_RE.match(EN_QUAD)
    assert m is not None
    assert m.group("confusable_char") == "\u2000"
    assert m.group("target_char") == " "


def test_line_pattern_multi_id_target() -> None:
    m = CONFUSABLE_LINE_RE.match(LIGATURE_OE)
    assert m is not None
    assert m.group("target_ids") == "006F 0065"
    assert m.group("target_char") == "oe"


def test_non_matching_lines_are_skipped() -> None:
    assert parse_confusables(HEADER_LINES + ["garbage", "0430 ; 0061"]) == {}


def test_cyrillic_a_maps_to_latin_a() -> None:
    assert parse_confusables([CYRILLIC_A]) == {"\\U00000430": "\\U00000061"}


def test_basic_latin_line_is_rejected() -> None:
    assert parse_confusables([LATIN_A]) == {}


def test_parse_filters_a_mixed_feed() -> None:
    table = parse_confusables(
        HEADER_LINES
        + [CYRILLIC_A, LATIN_A, CHAINED_DOTLESS_I, EN_QUAD, HEBREW_VAV, GREEK_TO_CYRILLIC, LIGATURE_OE]
    )
    assert table == {
        "\\U00000430": "\\U00000061",
        "\\U0001D6A4": "\\U00000069",
        "\\U00002000": "\\U00000020",
        "\\U00000153": "\\U0000006F\\U00000065",
    }


def test_upstream_overwrites_existing_entries() -> None:
    existing = {"\\U00000430": "\\U00000041", "\\U00000100": "A"}
    result = parse_confusables([CYRILLIC_A], existing)
    assert result is existing
    assert result == {"\\U00000430": "\\U00000061", "\\U00000100": "A"}


def test_later_upstream_line_wins() -> None:
    later = CYRILLIC_A.replace("0061 ;", "0041 ;")
    assert parse_confusables([CYRILLIC_A, later]) == {"\\U00000430": "\\U00000041"}
