"""Auth controller -- login, session token checks and logout."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kuzzle_sdk.controllers.base import BaseController
from kuzzle_sdk.core.errors import SdkError


class AuthController(BaseController):
    name = "auth"

    def login(
        self,
        strategy: str,
        credentials: Mapping[str, Any],
        expires_in: str | None = None,
    ) -> str:
        """Authenticate with *strategy* and keep the returned session token.

        *credentials* are sent as the body and depend on the strategy,
        e.g. ``{"username": ..., "password": ...}`` for ``"local"``.
        *expires_in* is a token lifetime such as ``"1h"``.

        Returns the new token, which the client also sends with every
        later request.
        """
        self._require("login", "strategy", strategy)
        request = (
            self._request("login")
            .add_to_query_strings("strategy", strategy)
            .set_body(credentials)
        )
        if expires_in is not None:
            request = request.add_to_query_strings("expiresIn", expires_in)

        jwt = self._result_field("login", self._query(request), "jwt")
        if not isinstance(jwt, str) or not jwt:
            raise SdkError(self._cause("login"), "unexpected response: jwt is not a token")
        self._kuzzle.jwt = jwt
        return jwt

    def check_token(self, token: str) -> dict[str, Any]:
        """Return the validity report of *token* (``valid``, ``state``, ``expiresAt``)."""
        self._require("check_token", "token", token)
        response = self._query(self._request("checkToken").add_to_body("token", token))
        return self._result_object("check_token", response)

    def get_current_user(self) -> dict[str, Any]:
        """Return the user owning the client's session token."""
        return self._result_object("get_current_user", self._query(self._request("getCurrentUser")))

    def logout(self) -> None:
        """Revoke the session token on the server and forget it locally."""
        self._query(self._request("logout"))
        self._kuzzle.jwt = None
