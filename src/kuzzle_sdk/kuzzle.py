"""Kuzzle client -- the SDK entry point.

:class:`Kuzzle` owns one transport and the session token.  Every API call
goes through :meth:`Kuzzle.query`, which hands the request to the active
:class:`~kuzzle_sdk.protocols.protocol.Protocol` and returns its response
unchanged.  Controllers, reached through the client's properties, build
the requests and interpret the responses.

Usage
-----
::

    from kuzzle_sdk import Http, Kuzzle, KuzzleOptions

    with Kuzzle(Http(KuzzleOptions(host="localhost", port=7512))) as kuzzle:
        kuzzle.index.create("nyc-open-data")
        print(kuzzle.index.list())

The session token is a plain attribute.  It is not synchronised: an
application sharing one client across threads must guard updates itself.
"""
from __future__ import annotations

from types import TracebackType

from kuzzle_sdk.controllers import (
    AuthController,
    BulkController,
    CollectionController,
    DocumentController,
    IndexController,
    MemoryStorageController,
    RealtimeController,
    SecurityController,
    ServerController,
)
from kuzzle_sdk.core.config import QueryOptions
from kuzzle_sdk.core.types import Request, Response
from kuzzle_sdk.protocols.protocol import Protocol


class Kuzzle:
    """Client for a Kuzzle server.

    Parameters
    ----------
    protocol:
        The transport used for every call, e.g.
        :class:`~kuzzle_sdk.protocols.http.Http`.
    """

    def __init__(self, protocol: Protocol) -> None:
        self._protocol = protocol
        self._jwt: str | None = None

    @property
    def protocol(self) -> Protocol:
        return self._protocol

    @property
    def jwt(self) -> str | None:
        """Session token sent with every request, if any."""
        return self._jwt

    @jwt.setter
    def jwt(self, jwt: str | None) -> None:
        self._jwt = jwt

    def query(self, request: Request, options: QueryOptions | None = None) -> Response:
        """Send *request* through the active transport.

        The session token is attached when the request carries none.  The
        response is returned as produced by the transport: a failed call
        on the server side is a response whose ``error`` is set, not an
        exception.
        """
        if self._jwt and request.jwt is None:
            request = request.set_jwt(self._jwt)
        return self._protocol.send(request, options)

    def close(self) -> None:
        self._protocol.close()

    def __enter__(self) -> Kuzzle:
        self._protocol.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # -- controllers --------------------------------------------------------

    @property
    def auth(self) -> AuthController:
        return AuthController(self)

    @property
    def bulk(self) -> BulkController:
        return BulkController(self)

    @property
    def collection(self) -> CollectionController:
        return CollectionController(self)

    @property
    def document(self) -> DocumentController:
        return DocumentController(self)

    @property
    def index(self) -> IndexController:
        return IndexController(self)

    @property
    def ms(self) -> MemoryStorageController:
        """Memory storage controller."""
        return MemoryStorageController(self)

    @property
    def realtime(self) -> RealtimeController:
        return RealtimeController(self)

    @property
    def security(self) -> SecurityController:
        return SecurityController(self)

    @property
    def server(self) -> ServerController:
        return ServerController(self)
