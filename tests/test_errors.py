from __future__ import annotations

import pickle

from expectpoll.errors import (
    ExpectPollError,
    InvalidConfigurationError,
    MatchTimeoutError,
    timeout_message,
)


def test_timeout_message_template() -> None:
    assert timeout_message(500) == "Timeout of 500ms exceeded"


def test_match_timeout_error_carries_timeout() -> None:
    error = MatchTimeoutError(250)

    assert error.timeout_ms == 250
    assert str(error) == "Timeout of 250ms exceeded"
    assert isinstance(error, TimeoutError)
    assert isinstance(error, ExpectPollError)


def test_invalid_configuration_error_is_value_error() -> None:
    error = InvalidConfigurationError("Poll function must be callable.", hint="Pass a function")

    assert isinstance(error, ValueError)
    assert str(error) == "Poll function must be callable. Hint: Pass a function"


def test_expect_poll_error_str_without_hint() -> None:
    assert str(ExpectPollError("msg")) == "msg"


def test_errors_survive_pickling() -> None:
    timeout = pickle.loads(pickle.dumps(MatchTimeoutError(250)))
    invalid = pickle.loads(pickle.dumps(InvalidConfigurationError("bad", hint="fix")))

    assert isinstance(timeout, MatchTimeoutError)
    assert timeout.timeout_ms == 250
    assert str(timeout) == "Timeout of 250ms exceeded"
    assert str(invalid) == "bad Hint: fix"


def test_errors_are_hashable() -> None:
    error = MatchTimeoutError(100)

    assert error in {error}
