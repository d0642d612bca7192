# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable

import httpx

from taskboard.client import TaskApiClient

Handler = Callable[[httpx.Request], httpx.Response]


def mock_api(handler: Handler) -> TaskApiClient:
    """TaskApiClient whose requests are answered by ``handler``."""
    return TaskApiClient("http://testserver", transport=httpx.MockTransport(handler))


class FlakyHandler:
    """
    Fails the first ``failures`` requests with a connection error, then
    answers every request with ``response_json``.
    """

    def __init__(self, response_json, failures: int = 1) -> None:
        self.response_json = response_json
        self.failures = failures
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        if self.calls <= self.failures:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json=self.response_json)


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def time_out(request: httpx.Request) -> httpx.Response:
    raise httpx.ReadTimeout("too slow", request=request)
