"""Poll options and XDG config loading."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover
    import tomli as tomllib

from expectpoll.errors import InvalidConfigurationError

DEFAULT_CONFIG_PATH = Path("~/.config/expectpoll/config.toml").expanduser()
DEFAULT_TIMEOUT_MS = 5_000
TIMEOUT_ENV = "EXPECTPOLL_TIMEOUT_MS"
INTERVALS_ENV = "EXPECTPOLL_INTERVALS_MS"


class PollOptions(BaseModel):
    """Deadline and wait schedule for one poll operation.

    ``timeout_ms == 0`` disables the deadline. An empty ``intervals_ms`` selects the
    default schedule.
    """

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, ge=0, alias="timeoutMs")
    intervals_ms: list[int] = Field(default_factory=list, alias="intervalsMs")

    @field_validator("intervals_ms")
    @classmethod
    def _validate_intervals(cls, value: list[int]) -> list[int]:
        for item in value:
            if item < 0:
                raise ValueError(f"Invalid interval: {item}")
        return value


def build_options(
    timeout_ms: int | None = None,
    intervals_ms: Sequence[int] | None = None,
    *,
    base: PollOptions | None = None,
) -> PollOptions:
    resolved = base or PollOptions()
    payload = resolved.model_dump()
    if timeout_ms is not None:
        payload["timeout_ms"] = timeout_ms
    if intervals_ms is not None:
        payload["intervals_ms"] = list(intervals_ms)
    try:
        return PollOptions.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigurationError(
            "Invalid poll options.",
            hint="timeout_ms and every interval must be non-negative integers",
        ) from exc


def get_config_path(path: str | Path | None = None) -> Path:
    if path is None:
        return DEFAULT_CONFIG_PATH
    return Path(path).expanduser()


def _parse_timeout(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    if isinstance(value, int) and value >= 0:
        return value
    return None


def _parse_intervals(value: object) -> list[int] | None:
    if isinstance(value, str):
        parts = [part.strip() for part in value.split(",") if part.strip()]
        try:
            value = [int(part) for part in parts]
        except ValueError:
            return None
    if not isinstance(value, list):
        return None
    if not all(isinstance(item, int) and not isinstance(item, bool) and item >= 0 for item in value):
        return None
    return list(value)


def _sanitize(raw: dict[str, object]) -> PollOptions:
    options = PollOptions()

    timeout_ms = _parse_timeout(raw.get("timeout_ms", options.timeout_ms))
    if timeout_ms is not None:
        options.timeout_ms = timeout_ms
    env_timeout = _parse_timeout(os.getenv(TIMEOUT_ENV, ""))
    if env_timeout is not None:
        options.timeout_ms = env_timeout

    intervals_ms = _parse_intervals(raw.get("intervals_ms", options.intervals_ms))
    if intervals_ms is not None:
        options.intervals_ms = intervals_ms
    env_intervals = _parse_intervals(os.getenv(INTERVALS_ENV, ""))
    if env_intervals:
        options.intervals_ms = env_intervals

    return options


def load_options(path: str | Path | None = None) -> PollOptions:
    resolved = get_config_path(path)
    raw: object = {}
    if resolved.exists():
        try:
            with resolved.open("rb") as handle:
                raw = tomllib.load(handle).get("poll", {})
        except (tomllib.TOMLDecodeError, OSError):
            raw = {}
    if not isinstance(raw, dict):
        raw = {}
    return _sanitize(raw)
