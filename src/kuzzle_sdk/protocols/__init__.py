"""Kuzzle transports -- the protocol capability, HTTP routing and bindings.

* **Protocol** -- the capability every transport implements
  (:mod:`~kuzzle_sdk.protocols.protocol`).
* **Routing** -- ``(controller, action)`` to URL/verb resolution
  (:mod:`~kuzzle_sdk.protocols.routes`).
* **HTTP** -- the stateless ``httpx`` binding
  (:mod:`~kuzzle_sdk.protocols.http`).
* **WebSocket** -- placeholder for the streaming binding
  (:mod:`~kuzzle_sdk.protocols.websocket`).
* **Messages** -- reply parsing and query-string encoding
  (:mod:`~kuzzle_sdk.protocols.messages`).
"""
from __future__ import annotations

from kuzzle_sdk.protocols.http import Http
from kuzzle_sdk.protocols.messages import (
    JSON_CONTENT_TYPE,
    encode_query_strings,
    parse_response,
    serialize_response,
)
from kuzzle_sdk.protocols.protocol import Listener, Protocol, ProtocolState
from kuzzle_sdk.protocols.routes import (
    CONTROLLER_ROUTES,
    ResolvedRoute,
    Route,
    RouteTable,
    load_routes,
    parse_verb,
)
from kuzzle_sdk.protocols.websocket import Websocket

__all__ = [
    # Capability
    "Listener",
    "Protocol",
    "ProtocolState",
    # Routing
    "CONTROLLER_ROUTES",
    "ResolvedRoute",
    "Route",
    "RouteTable",
    "load_routes",
    "parse_verb",
    # Messages
    "JSON_CONTENT_TYPE",
    "encode_query_strings",
    "parse_response",
    "serialize_response",
    # Transports
    "Http",
    "Websocket",
]
