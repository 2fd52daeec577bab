from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from expectpoll.intervals import DEFAULT_INTERVALS_MS, next_interval

_SCHEDULES = st.lists(st.integers(min_value=0, max_value=60_000), min_size=1, max_size=20)
_ATTEMPTS = st.integers(min_value=0, max_value=1_000)


@given(_SCHEDULES, _ATTEMPTS)
def test_next_interval_clamps_index_to_schedule(schedule: list[int], attempt: int) -> None:
    assert next_interval(attempt, schedule) == schedule[min(attempt, len(schedule) - 1)]


@given(_ATTEMPTS)
def test_next_interval_uses_default_schedule_when_empty(attempt: int) -> None:
    expected = DEFAULT_INTERVALS_MS[min(attempt, len(DEFAULT_INTERVALS_MS) - 1)]

    assert next_interval(attempt, []) == expected
    assert next_interval(attempt, None) == expected


@given(_SCHEDULES, _ATTEMPTS)
def test_next_interval_is_stable_across_calls(schedule: list[int], attempt: int) -> None:
    assert next_interval(attempt, schedule) == next_interval(attempt, list(schedule))
