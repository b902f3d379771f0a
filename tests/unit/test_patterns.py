from __future__ import annotations

import pytest

from trim_exactly.patterns import CharPattern, Matcher, SubstringPattern, as_pattern


def test_auto_kind_picks_char_for_single_units() -> None:
    assert as_pattern("t") == CharPattern("t")
    assert as_pattern(b"t") == CharPattern(b"t")
    assert as_pattern(116) == CharPattern(b"t")
    assert as_pattern("not ") == SubstringPattern("not ")
    assert as_pattern("") == SubstringPattern("")


def test_explicit_kinds() -> None:
    assert as_pattern("t", "substring") == SubstringPattern("t")
    assert as_pattern("t", "char") == CharPattern("t")
    with pytest.raises(ValueError, match="exactly one character"):
        as_pattern("tt", "char")
    with pytest.raises(TypeError):
        as_pattern(116, "substring")
    with pytest.raises(ValueError, match="Unsupported pattern kind"):
        as_pattern("t", "regex")


def test_matchers_pass_through() -> None:
    pattern = SubstringPattern("ab")
    assert as_pattern(pattern) is pattern
    assert isinstance(pattern, Matcher)


def test_char_pattern_rejects_bad_values() -> None:
    with pytest.raises(ValueError):
        CharPattern("")
    with pytest.raises(ValueError):
        CharPattern(256)
    with pytest.raises(TypeError):
        CharPattern(1.5)  # type: ignore[arg-type]


def test_unsupported_pattern_type() -> None:
    with pytest.raises(TypeError, match="Unsupported pattern type"):
        as_pattern(["a"])  # type: ignore[arg-type]


def test_unit_length_at_left_and_right() -> None:
    pattern = SubstringPattern("ab")
    assert pattern.unit_length_at("abxab", 0, "left") == 2
    assert pattern.unit_length_at("abxab", 2, "left") is None
    assert pattern.unit_length_at("abxab", 5, "right") == 2
    assert pattern.unit_length_at("abxab", 3, "right") is None
    assert CharPattern("x").unit_length_at("abxab", 2, "left") == 1
    assert CharPattern("x").unit_length_at("abxab", 3, "right") == 1


def test_empty_substring_never_matches() -> None:
    pattern = SubstringPattern("")
    assert pattern.unit_length_at("abc", 0, "left") is None
    assert pattern.unit_length_at("", 0, "right") is None


def test_custom_matcher_drives_trimming() -> None:
    from trim_exactly import trim_left_matches_exactly

    class Digit:
        def unit_length_at(self, text: str, anchor: int, side: str) -> int | None:
            index = anchor if side == "left" else anchor - 1
            if 0 <= index < len(text) and text[index].isdigit():
                return 1
            return None

    assert trim_left_matches_exactly("42abc", Digit(), 2).unwrap() == "abc"
    assert not trim_left_matches_exactly("421abc", Digit(), 2).ok


class _AlwaysOne:
    def unit_length_at(self, text: str, anchor: int, side: str) -> int | None:
        return 1


class _Overlong:
    def unit_length_at(self, text: str, anchor: int, side: str) -> int | None:
        return len(text) + 1


class _Backwards:
    def unit_length_at(self, text: str, anchor: int, side: str) -> int | None:
        return -1


def test_scan_stops_at_text_boundary_for_always_matching_matcher() -> None:
    from trim_exactly import count_run, trim_left_matches_exactly, trim_right_matches_exactly

    assert count_run("ab", _AlwaysOne(), "left") == 2
    assert count_run("ab", _AlwaysOne(), "right") == 2
    assert trim_left_matches_exactly("ab", _AlwaysOne(), 2).unwrap() == ""
    assert trim_right_matches_exactly("ab", _AlwaysOne(), 2).unwrap() == ""
    result = trim_left_matches_exactly("ab", _AlwaysOne(), 3)
    assert not result.ok
    assert result.error.observed == 2  # type: ignore[union-attr]


def test_units_longer_than_remaining_text_or_non_positive_do_not_count() -> None:
    from trim_exactly import count_run, trim_left_matches_exactly

    assert count_run("ab", _Overlong(), "left") == 0
    assert count_run("ab", _Overlong(), "right") == 0
    assert count_run("ab", _Backwards(), "left") == 0
    assert trim_left_matches_exactly("ab", _Backwards(), 0).unwrap() == "ab"
