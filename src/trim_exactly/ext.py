"""String-like types carrying the exact trimming methods directly."""
from __future__ import annotations

from trim_exactly.patterns import PatternLike
from trim_exactly.trim import TrimResult, trim_left_matches_exactly, trim_right_matches_exactly


class ExactStr(str):
    __slots__ = ()

    def trim_left_matches_exactly(self, pattern: PatternLike, count: int) -> TrimResult:
        return trim_left_matches_exactly(str(self), pattern, count)

    def trim_right_matches_exactly(self, pattern: PatternLike, count: int) -> TrimResult:
        return trim_right_matches_exactly(str(self), pattern, count)


class ExactBytes(bytes):
    __slots__ = ()

    def trim_left_matches_exactly(self, pattern: PatternLike, count: int) -> TrimResult:
        return trim_left_matches_exactly(bytes(self), pattern, count)

    def trim_right_matches_exactly(self, pattern: PatternLike, count: int) -> TrimResult:
        return trim_right_matches_exactly(bytes(self), pattern, count)


__all__ = ["ExactBytes", "ExactStr"]
