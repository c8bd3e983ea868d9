"""Lenient limit/offset parsing for list endpoints."""

from __future__ import annotations

import re
from dataclasses import dataclass

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
# SQLite INTEGER is a signed 64-bit value
_MAX_INT = 2**63 - 1


def parse_int(value: str | None) -> int | None:
    """Parse the leading integer of a string, or return None when there is none.

    "2" -> 2, " 3" -> 3, "2abc" -> 2, "1.9" -> 1, "abc" -> None, "" -> None.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def _clamp(value: int) -> int:
    return max(-_MAX_INT, min(value, _MAX_INT))


@dataclass(frozen=True, slots=True)
class LimitOffset:
    """Pagination window; limit None means every row (and offset is then unused)."""

    limit: int | None = None
    offset: int = 0

    @classmethod
    def from_query(cls, limit: str | None, offset: str | None) -> LimitOffset:
        """Build a window from raw query values, ignoring values that are not numbers.

        Numbers beyond the range of a SQLite INTEGER are clamped to it.
        """
        parsed_limit = parse_int(limit)
        parsed_offset = parse_int(offset)
        return cls(
            limit=_clamp(parsed_limit) if parsed_limit is not None else None,
            offset=_clamp(parsed_offset) if parsed_offset is not None else 0,
        )
