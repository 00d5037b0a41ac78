"""Kuzzle API controllers, one per server controller family."""
from __future__ import annotations

from kuzzle_sdk.controllers.auth import AuthController
from kuzzle_sdk.controllers.base import BaseController
from kuzzle_sdk.controllers.collection import CollectionController
from kuzzle_sdk.controllers.index import IndexController
from kuzzle_sdk.controllers.server import ServerController
from kuzzle_sdk.controllers.views import (
    BulkController,
    DocumentController,
    MemoryStorageController,
    RealtimeController,
    SecurityController,
)

__all__ = [
    "AuthController",
    "BaseController",
    "BulkController",
    "CollectionController",
    "DocumentController",
    "IndexController",
    "MemoryStorageController",
    "RealtimeController",
    "SecurityController",
    "ServerController",
]
