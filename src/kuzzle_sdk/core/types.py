"""Kuzzle SDK shared request/response types.

Key design decisions:

* :class:`Request` is a *frozen* Pydantic model.  Its builder methods
  return a new, re-validated instance (copy-on-set) so no two builder
  steps ever share mutable state, and a wrongly typed value fails at
  build time with a ``ValidationError``.
* :class:`Response` mirrors the Kuzzle response format.  Wire names
  (``requestId``, ``room``) are mapped through aliases; unknown keys sent
  by newer servers are ignored.
* ``result`` is deliberately typed ``Any``: its shape depends on the
  controller/action and is interpreted by controllers, not here.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from kuzzle_sdk.core.errors import KuzzleError, error_from_status

# ---------------------------------------------------------------------------
# Request
# ---------------------------------------------------------------------------


class Request(BaseModel):
    """A logical API call addressed by ``(controller, action)``.

    Example::

        request = (
            Request(controller="index", action="setAutoRefresh")
            .set_index("nyc-open-data")
            .add_to_body("autoRefresh", True)
        )
    """

    model_config = ConfigDict(frozen=True)

    controller: str
    action: str
    index: str | None = None
    collection: str | None = None
    body: dict[str, Any] = Field(default_factory=dict)
    query_strings: dict[str, Any] = Field(default_factory=dict)
    jwt: str | None = None

    def _with(self, **changes: Any) -> Request:
        # model_dump copies the containers; model_validate type-checks the change.
        return type(self).model_validate({**self.model_dump(), **changes})

    def set_index(self, index: str) -> Request:
        return self._with(index=index)

    def set_collection(self, collection: str) -> Request:
        return self._with(collection=collection)

    def set_jwt(self, jwt: str) -> Request:
        return self._with(jwt=jwt)

    def set_body(self, body: Mapping[str, Any]) -> Request:
        """Replace the whole body."""
        return self._with(body=dict(body))

    def set_query_strings(self, query_strings: Mapping[str, Any]) -> Request:
        """Replace the whole query-string mapping."""
        return self._with(query_strings=dict(query_strings))

    def add_to_body(self, key: str, value: Any) -> Request:
        """Return a copy with ``body[key] = value``."""
        return self._with(body={**self.model_dump()["body"], key: value})

    def add_to_query_strings(self, key: str, value: Any) -> Request:
        """Return a copy with ``query_strings[key] = value``."""
        return self._with(query_strings={**self.model_dump()["query_strings"], key: value})


# ---------------------------------------------------------------------------
# Response
# ---------------------------------------------------------------------------


class ErrorPayload(BaseModel):
    """The ``error`` object of a failed Kuzzle response."""

    model_config = ConfigDict(frozen=True)

    status: int | None = None
    message: str
    stack: str | None = None

    def to_exception(self) -> KuzzleError:
        """Build the :class:`KuzzleError` subclass matching ``status``."""
        return error_from_status(self.status, self.message, self.stack)

    def __str__(self) -> str:
        return self.to_exception().describe()


class Response(BaseModel):
    """A standardised Kuzzle response, shared by every API route.

    ``error`` is set if and only if the call failed on the server;
    ``result`` is only meaningful when ``error`` is ``None``.  ``room_id``
    and ``channel`` are only sent over real-time transports.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    request_id: str = Field(default="", alias="requestId")
    status: int
    error: ErrorPayload | None = None
    controller: str | None = None
    action: str | None = None
    collection: str | None = None
    index: str | None = None
    volatile: dict[str, Any] | None = None
    result: Any = None
    room_id: str | None = Field(default=None, alias="room")
    channel: str | None = None

    @property
    def failed(self) -> bool:
        """``True`` if the server reported an error."""
        return self.error is not None
