"""Controllers that expose no operation yet.

They are reachable from the client so that code can already address them;
their API calls are added as the corresponding routes are declared.
"""
from __future__ import annotations

from kuzzle_sdk.controllers.base import BaseController


class BulkController(BaseController):
    name = "bulk"


class DocumentController(BaseController):
    name = "document"


class MemoryStorageController(BaseController):
    name = "ms"


class RealtimeController(BaseController):
    name = "realtime"


class SecurityController(BaseController):
    name = "security"
