"""Kuzzle wire-format helpers.

This module provides:

* **parse_response** -- strict decoding of a raw reply into a
  :class:`~kuzzle_sdk.core.types.Response`.
* **serialize_response** -- the inverse, using wire field names.
* **encode_query_strings** -- rendering of request query parameters into
  values an HTTP query string can carry.

All helpers are synchronous and side-effect-free.
"""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from kuzzle_sdk.core.errors import MalformedResponse
from kuzzle_sdk.core.types import Response

JSON_CONTENT_TYPE: str = "application/json"


def parse_response(raw: str | bytes) -> Response:
    """Parse a raw reply body into a :class:`Response`.

    Raises
    ------
    MalformedResponse
        If *raw* is not JSON, is not a JSON object, or does not carry the
        fields of a Kuzzle response.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedResponse(message=f"Response is not UTF-8: {exc}") from exc

    raw = raw.strip()
    if not raw:
        raise MalformedResponse(message="Empty response body")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(message=f"Invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedResponse(message="Response must be a JSON object")

    try:
        return Response.model_validate(data)
    except ValidationError as exc:
        raise MalformedResponse(message=f"Response validation failed: {exc}") from exc


def serialize_response(response: Response) -> str:
    """Serialise *response* to compact JSON using wire field names."""
    return response.model_dump_json(by_alias=True)


def encode_query_strings(query_strings: Mapping[str, Any]) -> dict[str, Any]:
    """Render query parameters for an HTTP query string.

    Strings and numbers pass through, booleans become ``true``/``false``,
    ``None`` becomes an empty value, and lists or objects are JSON-encoded.
    """
    encoded: dict[str, Any] = {}
    for key, value in query_strings.items():
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif value is None:
            encoded[key] = ""
        elif isinstance(value, (str, int, float)):
            encoded[key] = value
        else:
            encoded[key] = json.dumps(value, separators=(",", ":"))
    return encoded
