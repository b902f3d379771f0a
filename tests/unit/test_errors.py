from __future__ import annotations

from trim_exactly.errors import (
    ERROR_CODE_EXACT_COUNT_MISMATCH,
    ExactCountMismatch,
    ExactCountMismatchError,
)


def test_error_code_is_stable() -> None:
    assert ERROR_CODE_EXACT_COUNT_MISMATCH == "EXACT_COUNT_MISMATCH"


def test_mismatch_to_dict_includes_required_fields() -> None:
    mismatch = ExactCountMismatch(side="left", expected=2, observed=3, details={"pattern": "t"})

    payload = mismatch.to_dict()
    assert payload["code"] == "EXACT_COUNT_MISMATCH"
    assert payload["side"] == "left"
    assert payload["expected"] == 2
    assert payload["observed"] == 3
    assert payload["details"] == {"pattern": "t"}
    assert payload["message"] == "expected exactly 2 match(es) at the left end, found 3"


def test_mismatch_error_is_a_value_error() -> None:
    mismatch = ExactCountMismatch(side="right", expected=1, observed=0)
    error = ExactCountMismatchError(mismatch, "text")
    assert isinstance(error, ValueError)
    assert str(error) == mismatch.message
    assert error.text == "text"
