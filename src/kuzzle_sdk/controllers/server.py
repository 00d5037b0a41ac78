"""Server controller -- server information and statistics."""
from __future__ import annotations

from typing import Any

from kuzzle_sdk.controllers.base import BaseController
from kuzzle_sdk.core.errors import SdkError

EPOCH_MILLIS_DIGITS: int = 13
"""Decimal digits of an Epoch-millis timestamp between 2001 and 2286."""


class ServerController(BaseController):
    """Query server information and usage statistics."""

    name = "server"

    def admin_exists(self) -> bool:
        """Return ``True`` if an administrator account exists."""
        response = self._query(self._request("adminExists"))
        return self._as_bool(
            "admin_exists", self._result_field("admin_exists", response, "exists")
        )

    def get_all_stats(self) -> dict[str, Any]:
        """Return every stored statistics snapshot."""
        return self._result_object("get_all_stats", self._query(self._request("getAllStats")))

    def get_config(self) -> dict[str, Any]:
        return self._result_object("get_config", self._query(self._request("getConfig")))

    def get_last_stats(self) -> dict[str, Any]:
        """Return the most recent statistics snapshot."""
        return self._result_object("get_last_stats", self._query(self._request("getLastStats")))

    def get_stats(self, start_time: int, stop_time: int) -> dict[str, Any]:
        """Return the statistics snapshots taken between two Epoch-millis timestamps.

        Raises
        ------
        SdkError
            If either timestamp does not have exactly 13 decimal digits.
        """
        for value in (start_time, stop_time):
            if (
                not isinstance(value, int)
                or isinstance(value, bool)
                or len(str(abs(value))) != EPOCH_MILLIS_DIGITS
            ):
                raise SdkError(
                    self._cause("get_stats"),
                    "`start_time` and `stop_time` arguments need to be millis "
                    "Epoch timestamps (13 digits).",
                )

        request = (
            self._request("getStats")
            .add_to_query_strings("startTime", start_time)
            .add_to_query_strings("stopTime", stop_time)
        )
        return self._result_object("get_stats", self._query(request))

    def info(self) -> dict[str, Any]:
        """Return the server description: API, plugins, services, nodes."""
        return self._result_object("info", self._query(self._request("info")))

    def now(self) -> int:
        """Return the server time in Epoch-millis."""
        response = self._query(self._request("now"))
        value = self._result_field("now", response, "now")
        if not isinstance(value, int) or isinstance(value, bool):
            raise SdkError(self._cause("now"), f"unexpected response: now is {value!r}")
        return value
