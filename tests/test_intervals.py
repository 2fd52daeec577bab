from __future__ import annotations

import pytest

from expectpoll.intervals import DEFAULT_INTERVALS_MS, next_interval, resolve_intervals


def test_default_schedule_is_used_when_none_configured() -> None:
    assert [next_interval(i) for i in range(6)] == [100, 250, 500, 1000, 1000, 1000]


def test_empty_schedule_falls_back_to_default() -> None:
    assert resolve_intervals([]) == DEFAULT_INTERVALS_MS
    assert next_interval(2, []) == 500


def test_custom_schedule_holds_last_entry() -> None:
    schedule = [1000, 200, 2000]

    assert next_interval(0, schedule) == 1000
    assert next_interval(1, schedule) == 200
    assert next_interval(2, schedule) == 2000
    assert next_interval(50, schedule) == 2000


def test_single_entry_schedule_is_constant() -> None:
    assert {next_interval(i, [50]) for i in range(10)} == {50}


def test_zero_interval_is_allowed() -> None:
    assert next_interval(3, [0]) == 0


def test_negative_attempt_index_is_rejected() -> None:
    with pytest.raises(ValueError):
        next_interval(-1, [100])
