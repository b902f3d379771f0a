from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Side = Literal["left", "right"]

ERROR_CODE_EXACT_COUNT_MISMATCH = "EXACT_COUNT_MISMATCH"


@dataclass(slots=True, frozen=True)
class ExactCountMismatch:
    side: Side
    expected: int
    observed: int
    code: str = ERROR_CODE_EXACT_COUNT_MISMATCH
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return (
            f"expected exactly {self.expected} match(es) at the {self.side} end, "
            f"found {self.observed}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "side": self.side,
            "expected": self.expected,
            "observed": self.observed,
            "details": self.details,
        }


class ExactCountMismatchError(ValueError):
    """Raised when an unsuccessful trim result is unwrapped."""

    def __init__(self, mismatch: ExactCountMismatch, text: str | bytes) -> None:
        super().__init__(mismatch.message)
        self.mismatch = mismatch
        self.text = text


__all__ = [
    "ERROR_CODE_EXACT_COUNT_MISMATCH",
    "ExactCountMismatch",
    "ExactCountMismatchError",
    "Side",
]
