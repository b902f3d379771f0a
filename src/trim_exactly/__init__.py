"""Trim a pattern off the start or end of a string only when it repeats an exact number of times."""
from __future__ import annotations

from trim_exactly.errors import ExactCountMismatch, ExactCountMismatchError
from trim_exactly.ext import ExactBytes, ExactStr
from trim_exactly.patterns import CharPattern, SubstringPattern, as_pattern
from trim_exactly.trim import (
    TrimErr,
    TrimOk,
    TrimResult,
    count_run,
    trim,
    trim_left_matches_exactly,
    trim_right_matches_exactly,
)

__version__ = "0.1.0"

__all__ = [
    "CharPattern",
    "ExactBytes",
    "ExactCountMismatch",
    "ExactCountMismatchError",
    "ExactStr",
    "SubstringPattern",
    "TrimErr",
    "TrimOk",
    "TrimResult",
    "__version__",
    "as_pattern",
    "count_run",
    "trim",
    "trim_left_matches_exactly",
    "trim_right_matches_exactly",
]
