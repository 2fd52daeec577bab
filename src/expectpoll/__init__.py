"""Poll a value until it satisfies an assertion or a timeout elapses."""

from .assertions import PollAssertions, Poller, expect_poll
from .config import PollOptions, build_options, load_options
from .errors import ExpectPollError, InvalidConfigurationError, MatchTimeoutError
from .intervals import DEFAULT_INTERVALS_MS, next_interval
from .poller import equals_matcher, poll

__all__ = [
    "build_options",
    "DEFAULT_INTERVALS_MS",
    "equals_matcher",
    "expect_poll",
    "ExpectPollError",
    "InvalidConfigurationError",
    "load_options",
    "MatchTimeoutError",
    "next_interval",
    "poll",
    "PollAssertions",
    "Poller",
    "PollOptions",
]
