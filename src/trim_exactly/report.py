from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from trim_exactly.trim import TrimOk, TrimResult


def result_to_dict(name: str, result: TrimResult) -> dict[str, Any]:
    return {"name": name, **result.to_dict()}


def render_json(results: Sequence[tuple[str, TrimResult]]) -> str:
    payload = {
        "ok": all(result.ok for _, result in results),
        "results": [result_to_dict(name, result) for name, result in results],
    }
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=True)


def render_text(results: Sequence[tuple[str, TrimResult]]) -> str:
    lines: list[str] = []
    for name, result in results:
        if isinstance(result, TrimOk):
            lines.append(f"- {name}: trimmed {result.removed} -> {result.text!r}")
        else:
            lines.append(f"- {name}: MISMATCH ({result.error.message}) -> {result.text!r}")
    passed = sum(1 for _, result in results if result.ok)
    lines.append(f"{passed}/{len(results)} job(s) trimmed")
    return "\n".join(lines)


__all__ = ["render_json", "render_text", "result_to_dict"]
