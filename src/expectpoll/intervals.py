"""Wait schedule between failed poll attempts."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_INTERVALS_MS: tuple[int, ...] = (100, 250, 500, 1000)


def resolve_intervals(intervals_ms: Sequence[int] | None) -> tuple[int, ...]:
    if not intervals_ms:
        return DEFAULT_INTERVALS_MS
    return tuple(intervals_ms)


def next_interval(attempt_index: int, intervals_ms: Sequence[int] | None = None) -> int:
    """Return the wait after ``attempt_index`` failed attempts (0-based).

    Walks the schedule and then holds at its last entry.
    """
    if attempt_index < 0:
        raise ValueError(f"attempt_index must be >= 0, got {attempt_index}")
    schedule = resolve_intervals(intervals_ms)
    return schedule[min(attempt_index, len(schedule) - 1)]
