"""Index controller -- create, inspect and delete data indexes."""
from __future__ import annotations

from kuzzle_sdk.controllers.base import BaseController
from kuzzle_sdk.core.errors import SdkError


class IndexController(BaseController):
    """Manage data indexes.

    Every method taking an index name raises :class:`SdkError` without
    contacting the server when the name is empty.
    """

    name = "index"

    def create(self, index: str) -> None:
        """Create a new index."""
        self._require("create", "index", index)
        self._query(self._request("create").set_index(index))

    def delete(self, index: str) -> None:
        """Delete an entire data index."""
        self._require("delete", "index", index)
        self._query(self._request("delete").set_index(index))

    def exists(self, index: str) -> bool:
        self._require("exists", "index", index)
        response = self._query(self._request("exists").set_index(index))
        return self._as_bool("exists", response.result)

    def get_auto_refresh(self, index: str) -> bool:
        """Return the autoRefresh flag of *index*.

        When set, every write request triggers a refresh so that changes
        are immediately visible to searches.
        """
        self._require("get_auto_refresh", "index", index)
        response = self._query(self._request("getAutoRefresh").set_index(index))
        return self._as_bool("get_auto_refresh", response.result)

    def list(self) -> list[str]:
        """Return the index names, in the order the server sent them."""
        response = self._query(self._request("list"))
        return self._as_str_list("list", self._result_field("list", response, "indexes"))

    def mdelete(self, indexes: list[str]) -> list[str]:
        """Delete several indexes at once and return the ones deleted."""
        if not indexes:
            raise SdkError(self._cause("mdelete"), "indexes argument must not be empty.")
        response = self._query(self._request("mDelete").add_to_body("indexes", list(indexes)))
        return self._as_str_list("mdelete", self._result_field("mdelete", response, "deleted"))

    def refresh(self, index: str) -> None:
        """Force an immediate reindexation of *index*.

        Changes are otherwise indexed within about one second.  Forced
        refreshes are costly; use them only when strictly needed.
        """
        self._require("refresh", "index", index)
        self._query(self._request("refresh").set_index(index))

    def refresh_internal(self) -> None:
        """Force an immediate reindexation of the internal storage (users, roles...)."""
        self._query(self._request("refreshInternal"))

    def set_auto_refresh(self, index: str, auto_refresh: bool) -> None:
        self._require("set_auto_refresh", "index", index)
        self._query(
            self._request("setAutoRefresh")
            .set_index(index)
            .add_to_body("autoRefresh", auto_refresh)
        )
