"""Error model for poll assertions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ExpectPollError(Exception):
    message: str
    hint: str = ""

    def __post_init__(self) -> None:
        self.args = (self.message, self.hint)

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message} Hint: {self.hint}"
        return self.message


class MatchTimeoutError(ExpectPollError, TimeoutError):
    """Deadline elapsed before the polled value matched."""

    def __init__(self, timeout_ms: int) -> None:
        super().__init__(timeout_message(timeout_ms))
        self.timeout_ms = timeout_ms
        self.args = (timeout_ms,)


class InvalidConfigurationError(ExpectPollError, ValueError):
    """Rejected before polling starts."""


def timeout_message(timeout_ms: int) -> str:
    return f"Timeout of {timeout_ms}ms exceeded"
