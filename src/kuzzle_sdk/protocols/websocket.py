"""WebSocket transport placeholder.

The streaming protocol (persistent connection, offline queue, real-time
notifications) is not implemented yet.  :class:`Websocket` exists so that
code written against :class:`~kuzzle_sdk.protocols.protocol.Protocol`
can already name it; every operation raises
:class:`~kuzzle_sdk.core.errors.UnsupportedOperation`.
"""
from __future__ import annotations

from kuzzle_sdk.core.config import KuzzleOptions, QueryOptions
from kuzzle_sdk.core.types import Request, Response
from kuzzle_sdk.protocols.protocol import Protocol


class Websocket(Protocol):
    """WebSocket transport (not implemented)."""

    def __init__(self, options: KuzzleOptions | None = None) -> None:
        self._options = options or KuzzleOptions()

    @property
    def options(self) -> KuzzleOptions:
        return self._options

    @property
    def url(self) -> str:
        scheme = "wss" if self._options.ssl_connection else "ws"
        return f"{scheme}://{self._options.host}:{self._options.port}"

    def send(self, request: Request, options: QueryOptions | None = None) -> Response:
        raise self._unsupported("send")
