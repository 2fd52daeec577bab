"""Assertion entry points built on the polling loop."""

from __future__ import annotations

from typing import Generic, TypeVar

from expectpoll.config import PollOptions
from expectpoll.errors import InvalidConfigurationError
from expectpoll.poller import Evaluation, Matcher, equals_matcher, poll

T = TypeVar("T")


class PollAssertions(Generic[T]):
    """Assertions that retry ``poll_function`` until they hold."""

    def __init__(self, poll_function: Evaluation[T]) -> None:
        if poll_function is None or not callable(poll_function):
            raise InvalidConfigurationError(
                "Poll function must be callable.",
                hint="Pass a function or coroutine function taking no arguments",
            )
        self._poll_function = poll_function

    async def to_be(self, expected: T | None, options: PollOptions | None = None) -> None:
        await poll(self._poll_function, equals_matcher(expected), options)

    async def to_satisfy(self, predicate: Matcher[T], options: PollOptions | None = None) -> None:
        if predicate is None or not callable(predicate):
            raise InvalidConfigurationError("Predicate must be callable.")
        await poll(self._poll_function, predicate, options)


class Poller:
    def poll(self, poll_function: Evaluation[T]) -> PollAssertions[T]:
        return PollAssertions(poll_function)


def expect_poll(poll_function: Evaluation[T]) -> PollAssertions[T]:
    return PollAssertions(poll_function)
