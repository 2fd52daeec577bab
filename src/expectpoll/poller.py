"""Poll an evaluation function until its value matches or the deadline passes."""

from __future__ import annotations

import asyncio
import contextvars
import inspect
import threading
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any, TypeVar, Union

from expectpoll.config import PollOptions
from expectpoll.errors import InvalidConfigurationError, MatchTimeoutError
from expectpoll.intervals import next_interval, resolve_intervals
from expectpoll.logging import poll_logger

T = TypeVar("T")

Evaluation = Callable[[], Union[T, Awaitable[T]]]
Matcher = Callable[[T], bool]


def equals_matcher(expected: object) -> Matcher[object]:
    """Match by equality of same-typed values; a ``None`` target matches only ``None``.

    ``1`` does not match ``True`` or ``1.0``.
    """

    def matches(actual: object) -> bool:
        if expected is None:
            return actual is None
        return type(actual) is type(expected) and bool(expected == actual)

    return matches


def _resolve(future: asyncio.Future[Any], result: object, error: BaseException | None) -> None:
    if future.done():
        return
    if error is not None:
        future.set_exception(error)
    else:
        future.set_result(result)


def _run_in_daemon_thread(evaluate: Callable[[], Any]) -> asyncio.Future[Any]:
    loop = asyncio.get_running_loop()
    future: asyncio.Future[Any] = loop.create_future()
    context = contextvars.copy_context()

    def _worker() -> None:
        result: object = None
        error: BaseException | None = None
        try:
            result = context.run(evaluate)
        except Exception as exc:
            error = exc
        # The loop may already be closed once the attempt was abandoned.
        with suppress(RuntimeError):
            loop.call_soon_threadsafe(_resolve, future, result, error)

    threading.Thread(target=_worker, name="expectpoll-evaluate", daemon=True).start()
    return future


async def evaluate_once(evaluate: Evaluation[T]) -> T:
    """Run one attempt without blocking the event loop.

    Coroutine functions are awaited in place. Plain callables run on a daemon thread, so an
    abandoned attempt never holds up loop or interpreter shutdown; an awaitable they return
    is awaited as well.
    """
    if inspect.iscoroutinefunction(evaluate):
        return await evaluate()
    result = await _run_in_daemon_thread(evaluate)
    if inspect.isawaitable(result):
        return await result
    return result


def _discard_result(task: asyncio.Future[None]) -> None:
    if not task.cancelled():
        task.exception()


async def poll(
    evaluate: Evaluation[T],
    matches: Matcher[T],
    options: PollOptions | None = None,
) -> None:
    """Retry ``evaluate`` until ``matches`` accepts its value.

    Raises ``MatchTimeoutError`` once ``options.timeout_ms`` elapses; errors raised by
    ``evaluate`` or ``matches`` propagate unchanged on the first occurrence.
    """
    if not callable(evaluate):
        raise InvalidConfigurationError("Poll function must be callable.")
    if not callable(matches):
        raise InvalidConfigurationError("Matcher must be callable.")

    options = options or PollOptions()
    timeout_ms = options.timeout_ms
    intervals = resolve_intervals(options.intervals_ms)
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout_ms / 1000
    logger = poll_logger(timeout_ms)

    async def attempts() -> None:
        attempt = 0
        while True:
            actual = await evaluate_once(evaluate)
            if matches(actual):
                logger.debug("Poll matched attempt=%s", attempt + 1)
                return
            wait_ms = next_interval(attempt, intervals)
            logger.debug("Poll did not match attempt=%s wait_ms=%s", attempt + 1, wait_ms)
            await asyncio.sleep(wait_ms / 1000)
            attempt += 1
            if timeout_ms and loop.time() >= deadline:
                raise MatchTimeoutError(timeout_ms)

    if timeout_ms == 0:
        await attempts()
        return

    task = asyncio.ensure_future(attempts())
    try:
        done, _ = await asyncio.wait({task}, timeout=max(deadline - loop.time(), 0))
    except asyncio.CancelledError:
        task.cancel()
        raise
    if not done:
        task.cancel()
        # The abandoned attempt may still be unwinding; do not wait for it.
        task.add_done_callback(_discard_result)
        raise MatchTimeoutError(timeout_ms)
    task.result()
