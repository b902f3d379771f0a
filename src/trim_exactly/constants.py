from __future__ import annotations

# Anchors.
SIDE_LEFT = "left"
SIDE_RIGHT = "right"
VALID_SIDES = (SIDE_LEFT, SIDE_RIGHT)

# Pattern kinds accepted when coercing raw values.
PATTERN_KIND_AUTO = "auto"
PATTERN_KIND_CHAR = "char"
PATTERN_KIND_SUBSTRING = "substring"
VALID_PATTERN_KINDS = (PATTERN_KIND_AUTO, PATTERN_KIND_CHAR, PATTERN_KIND_SUBSTRING)

JOBS_SCHEMA_VERSION = "1"

EXIT_SUCCESS = 0
EXIT_MISMATCH = 1
EXIT_INTERNAL_ERROR = 2
