"""Shared fixtures for Kuzzle SDK conformance tests.

Provides an in-process fake Kuzzle server (built on
``httpx.MockTransport``) and clients wired to it through the real
:class:`~kuzzle_sdk.protocols.http.Http` transport.
"""
from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import httpx
import pytest

from kuzzle_sdk.kuzzle import Kuzzle
from kuzzle_sdk.protocols.http import Http
from kuzzle_sdk.protocols.routes import RouteTable, load_routes

BASE_URL = "http://kuzzle.test:7512"


class FakeKuzzleServer:
    """Answers canned replies keyed by ``(method, path)`` and records requests.

    Unknown endpoints answer a 404 Kuzzle error, like the real server.
    """

    def __init__(self) -> None:
        self.replies: dict[tuple[str, str], tuple[int, dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []

    def reply(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        result: Any = None,
        error: dict[str, Any] | None = None,
        **extra: Any,
    ) -> None:
        body = {
            "requestId": f"{method} {path}",
            "status": status,
            "error": error,
            "result": result,
            **extra,
        }
        self.replies[(method, path)] = (status, body)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key not in self.replies:
            return httpx.Response(
                404,
                json={
                    "requestId": "unknown",
                    "status": 404,
                    "error": {"status": 404, "message": f"API URL not found: {key[1]}"},
                    "result": None,
                },
            )
        status, body = self.replies[key]
        return httpx.Response(status, json=body)


@pytest.fixture()
def server() -> FakeKuzzleServer:
    return FakeKuzzleServer()


@pytest.fixture()
def route_table() -> RouteTable:
    return load_routes()


@pytest.fixture()
def http(server: FakeKuzzleServer, route_table: RouteTable) -> Iterator[Http]:
    client = httpx.Client(transport=httpx.MockTransport(server.handle))
    transport = Http(base_url=BASE_URL, routes=route_table, client=client)
    yield transport
    transport.close()
    client.close()


@pytest.fixture()
def kuzzle(http: Http) -> Kuzzle:
    return Kuzzle(http)


@pytest.fixture()
def offline_kuzzle() -> Kuzzle:
    """A client whose transport fails any wire call it is asked to make."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected wire call: {request.method} {request.url}")

    client = httpx.Client(transport=httpx.MockTransport(refuse))
    return Kuzzle(Http(base_url=BASE_URL, client=client))
