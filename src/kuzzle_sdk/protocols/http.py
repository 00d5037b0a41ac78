"""HTTP transport binding for the Kuzzle API.

:class:`Http` resolves each request's ``(controller, action)`` against the
routing table, performs one blocking round trip with ``httpx`` and parses
the reply into a :class:`~kuzzle_sdk.core.types.Response`.

HTTP is stateless: there is no connection to open, no offline queue and
no event to listen to.  ``connect`` is a no-op and the queue/listener
operations raise :class:`~kuzzle_sdk.core.errors.UnsupportedOperation`.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import httpx

from kuzzle_sdk.core.config import KuzzleOptions, QueryOptions
from kuzzle_sdk.core.errors import TransportError
from kuzzle_sdk.core.types import Request, Response
from kuzzle_sdk.protocols.messages import (
    JSON_CONTENT_TYPE,
    encode_query_strings,
    parse_response,
)
from kuzzle_sdk.protocols.protocol import Protocol, ProtocolState
from kuzzle_sdk.protocols.routes import (
    CONTROLLER_ROUTES,
    RouteTable,
    load_routes,
    parse_verb,
)

logger = logging.getLogger(__name__)


class Http(Protocol):
    """HTTP client transport for a Kuzzle server.

    Parameters
    ----------
    options:
        Transport configuration.  Defaults to ``localhost:7512``.
    base_url:
        Overrides the endpoint built from ``options`` (e.g. a test
        server's URL).
    routes:
        A preloaded :class:`RouteTable`, or a path to a routing document.
        Defaults to ``options.routes_path``, then to the bundled routes.
    client:
        An ``httpx.Client`` to use instead of creating one.  An injected
        client is not closed by :meth:`close`.

    Raises
    ------
    RoutingConfigError
        If the routing document cannot be loaded, or if
        ``options.validate_routes`` is set and a route used by the bundled
        controllers is missing.
    """

    def __init__(
        self,
        options: KuzzleOptions | None = None,
        *,
        base_url: str | None = None,
        routes: RouteTable | str | Path | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._options = options or KuzzleOptions()
        self._base_url = (base_url or self._options.base_url).rstrip("/")

        if isinstance(routes, RouteTable):
            self._routes = routes
        else:
            self._routes = load_routes(routes or self._options.routes_path)
        if self._options.validate_routes:
            self._routes.validate(sorted(CONTROLLER_ROUTES))

        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self._options.timeout)
        self._closed = False

    @property
    def options(self) -> KuzzleOptions:
        return self._options

    @property
    def routes(self) -> RouteTable:
        return self._routes

    @property
    def base_url(self) -> str:
        return self._base_url

    def _build_headers(self, request: Request) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": JSON_CONTENT_TYPE}
        if request.jwt:
            headers["Authorization"] = f"Bearer {request.jwt}"
        return headers

    def send(self, request: Request, options: QueryOptions | None = None) -> Response:
        """Send *request* to the Kuzzle server.

        ``options`` is accepted for interface compatibility; HTTP never
        queues, so ``queuable`` has no effect.

        Raises
        ------
        RouteNotFound
            If the request's controller/action has no route.
        InvalidVerb
            If the route declares an invalid HTTP verb.
        TransportError
            If the HTTP call fails.
        MalformedResponse
            If the reply is not a valid Kuzzle response.
        """
        if self._closed:
            raise TransportError(cause="Http.send", message="transport is closed")

        resolved = self._routes.resolve(request)
        method = parse_verb(resolved.verb)
        url = f"{self._base_url}{resolved.path}"

        kwargs: dict[str, Any] = {"headers": self._build_headers(request)}
        if request.body:
            kwargs["json"] = request.body
        if resolved.query_strings:
            kwargs["params"] = encode_query_strings(resolved.query_strings)

        logger.debug(
            "%s %s (%s/%s)", method, resolved.path, request.controller, request.action
        )
        try:
            reply = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(
                cause=f"Http.send({request.controller}/{request.action})",
                message=f"{method} {url} failed: {exc}",
            ) from exc

        return parse_response(reply.content)

    # -- lifecycle ----------------------------------------------------------

    def connect(self) -> None:
        """No-op: HTTP has no persistent connection."""

    def close(self) -> None:
        """Release the underlying HTTP client if this transport created it."""
        if self._owns_client and not self._closed:
            self._client.close()
        self._closed = True

    def state(self) -> ProtocolState:
        return ProtocolState.OFFLINE if self._closed else ProtocolState.READY
