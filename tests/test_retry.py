from __future__ import annotations

import pytest
import requests

from culturematch.retry import backoff_delay, is_client_error, retry


def test_retries_until_success():
    calls = []

    @retry(max_attempts=3, retryable=(ConnectionError,))
    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise ConnectionError("try again")
        return "ok"

    assert flaky() == "ok"
    assert len(calls) == 3


def test_gives_up_after_max_attempts():
    calls = []

    @retry(max_attempts=2, retryable=(ConnectionError,))
    def down():
        calls.append(1)
        raise ConnectionError("down")

    with pytest.raises(ConnectionError):
        down()
    assert len(calls) == 2


def test_other_errors_are_not_retried():
    calls = []

    @retry(max_attempts=3, retryable=(ConnectionError,))
    def broken():
        calls.append(1)
        raise ValueError("bad input")

    with pytest.raises(ValueError):
        broken()
    assert len(calls) == 1


def _http_error(status: int) -> requests.HTTPError:
    resp = requests.Response()
    resp.status_code = status
    return requests.HTTPError(f"{status} error", response=resp)


@pytest.mark.parametrize(
    "status, expected",
    [(400, True), (403, True), (404, True), (429, False), (408, False), (500, False), (503, False)],
)
def test_is_client_error(status, expected):
    assert is_client_error(_http_error(status)) is expected


def test_errors_without_status_are_not_client_errors():
    assert is_client_error(requests.ConnectionError("reset")) is False
    assert is_client_error(ValueError("bad")) is False


def test_client_error_stops_retrying():
    calls = []

    @retry(max_attempts=3, retryable=(requests.RequestException,), give_up=is_client_error)
    def quota_exhausted():
        calls.append(1)
        raise _http_error(403)

    with pytest.raises(requests.HTTPError):
        quota_exhausted()
    assert len(calls) == 1


def test_server_error_is_retried():
    calls = []

    @retry(max_attempts=3, retryable=(requests.RequestException,), give_up=is_client_error)
    def unavailable():
        calls.append(1)
        raise _http_error(503)

    with pytest.raises(requests.HTTPError):
        unavailable()
    assert len(calls) == 3


def test_backoff_delay_doubles_and_caps():
    assert [backoff_delay(n, 1.0, 5.0, jitter=False) for n in (1, 2, 3, 4)] == [1.0, 2.0, 4.0, 5.0]
