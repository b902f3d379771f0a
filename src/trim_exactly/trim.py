from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from trim_exactly.constants import SIDE_LEFT, SIDE_RIGHT, VALID_SIDES
from trim_exactly.errors import ExactCountMismatch, ExactCountMismatchError, Side
from trim_exactly.patterns import (
    CharPattern,
    Matcher,
    PatternLike,
    SubstringPattern,
    Text,
    as_pattern,
)


def _jsonable(text: Text) -> str:
    if isinstance(text, bytes):
        return text.decode("utf-8", errors="replace")
    return text


@dataclass(slots=True, frozen=True)
class TrimOk:
    text: Text
    removed: int

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Text:
        return self.text

    def unwrap_or_original(self) -> Text:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        return {"ok": True, "text": _jsonable(self.text), "removed": self.removed}


@dataclass(slots=True, frozen=True)
class TrimErr:
    text: Text
    error: ExactCountMismatch

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Text:
        raise ExactCountMismatchError(self.error, self.text)

    def unwrap_or_original(self) -> Text:
        return self.text

    def to_dict(self) -> dict[str, Any]:
        return {"ok": False, "text": _jsonable(self.text), "error": self.error.to_dict()}


TrimResult = TrimOk | TrimErr


def _validate_count(count: int) -> None:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")
    if count < 0:
        raise ValueError("count must be >= 0")


def _scan(text: Text, matcher: Matcher, side: str, stop_at: int) -> tuple[int, int]:
    """Return the anchored run length and the anchor after the ``stop_at``-th unit."""
    run = 0
    anchor = 0 if side == SIDE_LEFT else len(text)
    cut = anchor
    while True:
        remaining = len(text) - anchor if side == SIDE_LEFT else anchor
        unit = matcher.unit_length_at(text, anchor, side)
        if unit is None or unit <= 0 or unit > remaining:
            return run, cut
        anchor = anchor + unit if side == SIDE_LEFT else anchor - unit
        run += 1
        if run == stop_at:
            cut = anchor


def _describe(matcher: Matcher) -> dict[str, Any]:
    details: dict[str, Any] = {"matcher": type(matcher).__name__}
    if isinstance(matcher, CharPattern):
        details["pattern"] = _jsonable(matcher.char)
    elif isinstance(matcher, SubstringPattern):
        details["pattern"] = _jsonable(matcher.value)
    return details


def count_run(text: Text, pattern: PatternLike, side: str = SIDE_LEFT) -> int:
    if side not in VALID_SIDES:
        raise ValueError(f"side must be one of {', '.join(VALID_SIDES)}, got {side!r}")
    run, _ = _scan(text, as_pattern(pattern), side, stop_at=0)
    return run


def trim(text: Text, pattern: PatternLike, count: int, side: Side) -> TrimResult:
    """Strip ``pattern`` from one end of ``text`` when it occurs there exactly ``count`` times.

    Occurrences are counted greedily and without overlap, starting at the
    anchored end. Finding fewer or more than ``count`` is a mismatch and the
    original text is handed back untouched inside ``TrimErr``.
    """
    if side not in VALID_SIDES:
        raise ValueError(f"side must be one of {', '.join(VALID_SIDES)}, got {side!r}")
    _validate_count(count)
    matcher = as_pattern(pattern)

    run, cut = _scan(text, matcher, side, stop_at=count)
    if run != count:
        mismatch = ExactCountMismatch(
            side=side, expected=count, observed=run, details=_describe(matcher)
        )
        return TrimErr(text=text, error=mismatch)
    if count == 0:
        return TrimOk(text=text, removed=0)

    remaining = text[cut:] if side == SIDE_LEFT else text[:cut]
    return TrimOk(text=remaining, removed=count)


def trim_left_matches_exactly(text: Text, pattern: PatternLike, count: int) -> TrimResult:
    return trim(text, pattern, count, SIDE_LEFT)


def trim_right_matches_exactly(text: Text, pattern: PatternLike, count: int) -> TrimResult:
    return trim(text, pattern, count, SIDE_RIGHT)


__all__ = [
    "TrimErr",
    "TrimOk",
    "TrimResult",
    "count_run",
    "trim",
    "trim_left_matches_exactly",
    "trim_right_matches_exactly",
]
