"""Collection controller -- manage the collections of an index."""
from __future__ import annotations

from typing import Any

from kuzzle_sdk.controllers.base import BaseController
from kuzzle_sdk.core.errors import SdkError


class CollectionController(BaseController):
    name = "collection"

    def create(self, index: str, collection: str) -> None:
        """Create *collection* in *index*."""
        self._require("create", "index", index)
        self._require("create", "collection", collection)
        self._query(self._request("create").set_index(index).set_collection(collection))

    def exists(self, index: str, collection: str) -> bool:
        self._require("exists", "index", index)
        self._require("exists", "collection", collection)
        response = self._query(
            self._request("exists").set_index(index).set_collection(collection)
        )
        return self._as_bool("exists", response.result)

    def list(self, index: str) -> list[dict[str, Any]]:
        """Return the collections of *index* as ``{"name": ..., "type": ...}`` objects."""
        self._require("list", "index", index)
        response = self._query(self._request("list").set_index(index))
        collections = self._result_field("list", response, "collections")
        if not isinstance(collections, list) or not all(
            isinstance(item, dict) for item in collections
        ):
            raise SdkError(self._cause("list"), "unexpected response: collections is not a list")
        return collections
