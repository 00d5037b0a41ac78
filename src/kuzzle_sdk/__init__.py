"""Kuzzle SDK -- Python client for the Kuzzle backend.

Requests are addressed by ``(controller, action)`` and sent through a
pluggable transport; replies come back as typed responses.

Layers
------
1. Core types, errors and configuration (:mod:`kuzzle_sdk.core`)
2. Transports and HTTP routing (:mod:`kuzzle_sdk.protocols`)
3. Client facade (:mod:`kuzzle_sdk.kuzzle`)
4. API controllers (:mod:`kuzzle_sdk.controllers`)
"""
from __future__ import annotations

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Controllers
# ---------------------------------------------------------------------------
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

# ---------------------------------------------------------------------------
# Core types, errors, config
# ---------------------------------------------------------------------------
from kuzzle_sdk.core.config import KuzzleOptions, OfflineMode, QueryOptions
from kuzzle_sdk.core.errors import (
    BadRequestError,
    CustomError,
    ForbiddenError,
    GatewayTimeoutError,
    InternalError,
    InvalidVerb,
    KuzzleError,
    KuzzleSdkError,
    MalformedResponse,
    NotFoundError,
    PartialError,
    PreconditionError,
    RouteNotFound,
    RoutingConfigError,
    SdkError,
    ServiceUnavailableError,
    SizeLimitError,
    TransportError,
    UnauthorizedError,
    UnidentifiedError,
    UnsupportedOperation,
    error_from_status,
)
from kuzzle_sdk.core.types import ErrorPayload, Request, Response

# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------
from kuzzle_sdk.kuzzle import Kuzzle

# ---------------------------------------------------------------------------
# Transports
# ---------------------------------------------------------------------------
from kuzzle_sdk.protocols import (
    Http,
    Protocol,
    ProtocolState,
    Route,
    RouteTable,
    Websocket,
    load_routes,
)

__all__ = [
    # Meta
    "__version__",
    # Core types
    "Request",
    "Response",
    "ErrorPayload",
    # Config
    "KuzzleOptions",
    "QueryOptions",
    "OfflineMode",
    # Error hierarchy
    "KuzzleSdkError",
    "KuzzleError",
    "PartialError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "PreconditionError",
    "SizeLimitError",
    "InternalError",
    "ServiceUnavailableError",
    "GatewayTimeoutError",
    "CustomError",
    "UnidentifiedError",
    "SdkError",
    "RoutingConfigError",
    "RouteNotFound",
    "InvalidVerb",
    "UnsupportedOperation",
    "TransportError",
    "MalformedResponse",
    "error_from_status",
    # Transports
    "Protocol",
    "ProtocolState",
    "Route",
    "RouteTable",
    "load_routes",
    "Http",
    "Websocket",
    # Client
    "Kuzzle",
    # Controllers
    "AuthController",
    "BulkController",
    "CollectionController",
    "DocumentController",
    "IndexController",
    "MemoryStorageController",
    "RealtimeController",
    "SecurityController",
    "ServerController",
]
