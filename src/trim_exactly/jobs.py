from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from trim_exactly.constants import (
    EXIT_MISMATCH,
    EXIT_SUCCESS,
    JOBS_SCHEMA_VERSION,
    PATTERN_KIND_AUTO,
    SIDE_LEFT,
    VALID_PATTERN_KINDS,
    VALID_SIDES,
)
from trim_exactly.patterns import as_pattern
from trim_exactly.trim import TrimResult, trim


@dataclass(slots=True)
class TrimJob:
    name: str
    text: str
    pattern: str
    count: int
    side: str = SIDE_LEFT
    kind: str = PATTERN_KIND_AUTO


@dataclass(slots=True)
class BatchOutcome:
    exit_code: int
    results: list[tuple[str, TrimResult]] = field(default_factory=list)

    @property
    def mismatches(self) -> list[str]:
        return [name for name, result in self.results if not result.ok]


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in jobs file {path}: {exc}") from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Jobs file must be a mapping: {path}")
    return loaded


def _require_str(raw: dict[str, Any], key: str, label: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{label}: '{key}' must be a string")
    return value


def _parse_job(raw: Any, index: int) -> TrimJob:
    if not isinstance(raw, dict):
        raise ValueError(f"job #{index + 1} must be a mapping")
    name = raw.get("name", f"job-{index + 1}")
    if not isinstance(name, str) or not name:
        raise ValueError(f"job #{index + 1}: 'name' must be a non-empty string")
    label = f"job '{name}'"

    text = _require_str(raw, "text", label)
    pattern = _require_str(raw, "pattern", label)

    count = raw.get("count")
    if isinstance(count, bool) or not isinstance(count, int) or count < 0:
        raise ValueError(f"{label}: 'count' must be an integer >= 0")

    side = raw.get("side", SIDE_LEFT)
    if side not in VALID_SIDES:
        raise ValueError(f"{label}: 'side' must be one of {', '.join(VALID_SIDES)}")

    kind = raw.get("kind", PATTERN_KIND_AUTO)
    if kind not in VALID_PATTERN_KINDS:
        raise ValueError(f"{label}: 'kind' must be one of {', '.join(VALID_PATTERN_KINDS)}")
    try:
        as_pattern(pattern, kind)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{label}: {exc}") from exc

    return TrimJob(name=name, text=text, pattern=pattern, count=count, side=side, kind=kind)


def parse_jobs(data: dict[str, Any]) -> list[TrimJob]:
    version = str(data.get("schema_version", JOBS_SCHEMA_VERSION))
    if version != JOBS_SCHEMA_VERSION:
        raise ValueError(f"Unsupported jobs schema_version: {version}")
    raw_jobs = data.get("jobs", [])
    if not isinstance(raw_jobs, list):
        raise ValueError("'jobs' must be a list")

    jobs = [_parse_job(raw, index) for index, raw in enumerate(raw_jobs)]
    seen: set[str] = set()
    for job in jobs:
        if job.name in seen:
            raise ValueError(f"Duplicate job name: {job.name}")
        seen.add(job.name)
    return jobs


def load_jobs(path: Path) -> list[TrimJob]:
    return parse_jobs(_load_yaml(path))


def run_job(job: TrimJob) -> TrimResult:
    return trim(job.text, as_pattern(job.pattern, job.kind), job.count, job.side)  # type: ignore[arg-type]


def run_jobs(jobs: list[TrimJob]) -> BatchOutcome:
    outcome = BatchOutcome(exit_code=EXIT_SUCCESS)
    for job in jobs:
        outcome.results.append((job.name, run_job(job)))
    if outcome.mismatches:
        outcome.exit_code = EXIT_MISMATCH
    return outcome


__all__ = [
    "BatchOutcome",
    "TrimJob",
    "load_jobs",
    "parse_jobs",
    "run_job",
    "run_jobs",
]
