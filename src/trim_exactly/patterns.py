"""Unit-match primitives shared by left and right trimming.

A pattern answers a single question: does one occurrence of it sit right
against ``anchor`` on the given side of ``text``, and if so how long is it.
The trimmer builds the run count out of repeated answers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from trim_exactly.constants import (
    PATTERN_KIND_AUTO,
    PATTERN_KIND_CHAR,
    PATTERN_KIND_SUBSTRING,
    SIDE_LEFT,
    VALID_PATTERN_KINDS,
)

Text = Union[str, bytes]


@runtime_checkable
class Matcher(Protocol):
    def unit_length_at(self, text: Text, anchor: int, side: str) -> int | None: ...


def _check_text_type(text: Text, unit: Text) -> None:
    if not isinstance(text, (str, bytes)):
        raise TypeError(f"text must be str or bytes, got {type(text).__name__}")
    if isinstance(text, str) != isinstance(unit, str):
        raise TypeError(
            f"pattern of type {type(unit).__name__} cannot match text of type {type(text).__name__}"
        )


def _matches_at(text: Text, unit: Text, anchor: int, side: str) -> bool:
    if side == SIDE_LEFT:
        return text.startswith(unit, anchor)  # type: ignore[arg-type]
    return text.endswith(unit, 0, anchor)  # type: ignore[arg-type]


@dataclass(slots=True, frozen=True)
class CharPattern:
    char: Text

    def __init__(self, char: str | bytes | int) -> None:
        if isinstance(char, int) and not isinstance(char, bool):
            if not 0 <= char <= 255:
                raise ValueError(f"byte value out of range: {char}")
            char = bytes([char])
        if not isinstance(char, (str, bytes)):
            raise TypeError(f"char pattern must be str, bytes or int, got {type(char).__name__}")
        if len(char) != 1:
            raise ValueError(f"char pattern must be exactly one character, got {char!r}")
        object.__setattr__(self, "char", char)

    def unit_length_at(self, text: Text, anchor: int, side: str) -> int | None:
        _check_text_type(text, self.char)
        return 1 if _matches_at(text, self.char, anchor, side) else None


@dataclass(slots=True, frozen=True)
class SubstringPattern:
    value: Text

    def __post_init__(self) -> None:
        if not isinstance(self.value, (str, bytes)):
            raise TypeError(f"substring pattern must be str or bytes, got {type(self.value).__name__}")

    def unit_length_at(self, text: Text, anchor: int, side: str) -> int | None:
        _check_text_type(text, self.value)
        # An empty pattern would match zero-width forever; it never counts.
        if not self.value:
            return None
        return len(self.value) if _matches_at(text, self.value, anchor, side) else None


PatternLike = Union[Matcher, str, bytes, int]


def as_pattern(value: PatternLike, kind: str = PATTERN_KIND_AUTO) -> Matcher:
    if kind not in VALID_PATTERN_KINDS:
        supported = ", ".join(VALID_PATTERN_KINDS)
        raise ValueError(f"Unsupported pattern kind: {kind}. Supported: {supported}")
    if isinstance(value, Matcher):
        return value
    if kind == PATTERN_KIND_CHAR:
        return CharPattern(value)  # type: ignore[arg-type]
    if kind == PATTERN_KIND_SUBSTRING:
        if isinstance(value, int):
            raise TypeError("substring pattern cannot be built from an int")
        return SubstringPattern(value)  # type: ignore[arg-type]
    if isinstance(value, int) and not isinstance(value, bool):
        return CharPattern(value)
    if isinstance(value, (str, bytes)):
        if len(value) == 1:
            return CharPattern(value)
        return SubstringPattern(value)
    raise TypeError(f"Unsupported pattern type: {type(value).__name__}")


__all__ = [
    "CharPattern",
    "Matcher",
    "PatternLike",
    "SubstringPattern",
    "Text",
    "as_pattern",
]
