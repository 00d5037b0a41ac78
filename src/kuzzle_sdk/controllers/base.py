"""Shared plumbing for Kuzzle API controllers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from kuzzle_sdk.core.errors import SdkError
from kuzzle_sdk.core.types import Request

if TYPE_CHECKING:
    from kuzzle_sdk.core.types import Response
    from kuzzle_sdk.kuzzle import Kuzzle


class BaseController:
    """A lightweight view over a :class:`~kuzzle_sdk.kuzzle.Kuzzle` client.

    Controllers validate their arguments, build a
    :class:`~kuzzle_sdk.core.types.Request`, and turn the response into a
    typed value.  A server-reported error is raised as the matching
    :class:`~kuzzle_sdk.core.errors.KuzzleError` subclass.
    """

    name: str = ""

    def __init__(self, kuzzle: Kuzzle) -> None:
        self._kuzzle = kuzzle

    @property
    def kuzzle(self) -> Kuzzle:
        return self._kuzzle

    def _request(self, action: str) -> Request:
        return Request(controller=self.name, action=action)

    def _cause(self, method: str) -> str:
        return f"{type(self).__name__}.{method}"

    def _require(self, method: str, argument: str, value: Any) -> None:
        """Reject an empty required argument before any wire call."""
        if not value:
            raise SdkError(self._cause(method), f"{argument} argument must not be empty.")

    def _query(self, request: Request) -> Response:
        response = self._kuzzle.query(request)
        if response.error is not None:
            raise response.error.to_exception()
        return response

    def _result_field(self, method: str, response: Response, key: str) -> Any:
        """Return ``response.result[key]``, or raise :class:`SdkError`."""
        result = response.result
        if not isinstance(result, dict) or key not in result:
            raise SdkError(
                self._cause(method), f"unexpected response: result has no {key!r} field"
            )
        return result[key]

    def _result_object(self, method: str, response: Response) -> dict[str, Any]:
        if not isinstance(response.result, dict):
            raise SdkError(self._cause(method), "unexpected response: result is not an object")
        return response.result

    def _as_bool(self, method: str, value: Any) -> bool:
        if not isinstance(value, bool):
            raise SdkError(
                self._cause(method), f"unexpected response: expected a boolean, got {value!r}"
            )
        return value

    def _as_str_list(self, method: str, value: Any) -> list[str]:
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise SdkError(
                self._cause(method), f"unexpected response: expected a list of strings, got {value!r}"
            )
        return list(value)
