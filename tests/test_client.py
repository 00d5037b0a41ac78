"""Tests for the Kuzzle client facade and its controllers.

Covers:

1. **Kuzzle** -- delegation to the transport, session token handling,
   controller accessors, lifecycle.
2. **Controllers** -- request construction, argument validation before
   any wire call, result extraction, backend error raising.
"""
from __future__ import annotations

from typing import Any

import pytest

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
from kuzzle_sdk.core.config import QueryOptions
from kuzzle_sdk.core.errors import (
    BadRequestError,
    NotFoundError,
    SdkError,
    UnauthorizedError,
    UnsupportedOperation,
)
from kuzzle_sdk.core.types import Request, Response
from kuzzle_sdk.kuzzle import Kuzzle
from kuzzle_sdk.protocols.protocol import Protocol, ProtocolState
from kuzzle_sdk.protocols.routes import CONTROLLER_ROUTES
from kuzzle_sdk.protocols.websocket import Websocket

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class RecordingProtocol(Protocol):
    """In-memory transport that records requests and replays canned results."""

    def __init__(self, *replies: dict[str, Any]) -> None:
        self.replies = list(replies)
        self.sent: list[tuple[Request, QueryOptions | None]] = []
        self.connected = False
        self.closed = False

    def send(self, request: Request, options: QueryOptions | None = None) -> Response:
        self.sent.append((request, options))
        reply = self.replies.pop(0) if self.replies else {"status": 200, "result": None}
        return Response.model_validate({"requestId": f"req-{len(self.sent)}", **reply})

    def connect(self) -> None:
        self.connected = True

    def close(self) -> None:
        self.closed = True

    def state(self) -> ProtocolState:
        return ProtocolState.OFFLINE if self.closed else ProtocolState.READY

    @property
    def last(self) -> Request:
        return self.sent[-1][0]


def _ok(result: Any) -> dict[str, Any]:
    return {"status": 200, "error": None, "result": result}


def _failed(status: int, message: str) -> dict[str, Any]:
    return {"status": status, "error": {"status": status, "message": message}, "result": None}


def _client(*replies: dict[str, Any]) -> tuple[Kuzzle, RecordingProtocol]:
    protocol = RecordingProtocol(*replies)
    return Kuzzle(protocol), protocol


# =========================================================================
# Kuzzle facade
# =========================================================================


class TestKuzzle:
    """Tests for the Kuzzle client facade."""

    def test_query_returns_transport_response_unchanged(self) -> None:
        kuzzle, protocol = _client(_failed(400, "bad"))
        request = Request(controller="index", action="create").set_index("i")

        response = kuzzle.query(request)

        assert response.error is not None
        assert response.error.status == 400
        assert protocol.last == request

    def test_query_passes_options(self) -> None:
        kuzzle, protocol = _client()
        options = QueryOptions(queuable=False)

        kuzzle.query(Request(controller="server", action="now"), options)

        assert protocol.sent[0][1] is options

    def test_jwt_default_and_setter(self) -> None:
        kuzzle, _ = _client()

        assert kuzzle.jwt is None
        kuzzle.jwt = "token"
        assert kuzzle.jwt == "token"

    def test_jwt_attached_to_requests(self) -> None:
        kuzzle, protocol = _client()
        kuzzle.jwt = "session-token"
        request = Request(controller="server", action="now")

        kuzzle.query(request)

        assert protocol.last.jwt == "session-token"
        assert request.jwt is None

    def test_request_jwt_wins(self) -> None:
        kuzzle, protocol = _client()
        kuzzle.jwt = "session-token"

        kuzzle.query(Request(controller="server", action="now").set_jwt("explicit"))

        assert protocol.last.jwt == "explicit"

    def test_controller_accessors(self) -> None:
        kuzzle, _ = _client()

        accessors = {
            "auth": AuthController,
            "bulk": BulkController,
            "collection": CollectionController,
            "document": DocumentController,
            "index": IndexController,
            "ms": MemoryStorageController,
            "realtime": RealtimeController,
            "security": SecurityController,
            "server": ServerController,
        }
        for attribute, cls in accessors.items():
            controller = getattr(kuzzle, attribute)
            assert isinstance(controller, cls)
            assert controller.kuzzle is kuzzle
            assert controller.name == attribute

    def test_context_manager_connects_and_closes(self) -> None:
        kuzzle, protocol = _client()

        with kuzzle as entered:
            assert entered is kuzzle
            assert protocol.connected is True
        assert protocol.closed is True

    def test_protocol_errors_propagate(self) -> None:
        """The facade neither retries nor hides transport failures."""
        kuzzle = Kuzzle(Websocket())

        with pytest.raises(UnsupportedOperation):
            kuzzle.query(Request(controller="server", action="now"))


# =========================================================================
# IndexController
# =========================================================================


class TestIndexController:
    """Tests for IndexController."""

    def test_create(self) -> None:
        kuzzle, protocol = _client(_ok({"acknowledged": True}))

        assert kuzzle.index.create("ferris_index") is None
        assert (protocol.last.controller, protocol.last.action) == ("index", "create")
        assert protocol.last.index == "ferris_index"

    def test_create_already_exists(self) -> None:
        kuzzle, _ = _client(_failed(400, "index [ferris_index] already exists"))

        with pytest.raises(BadRequestError) as excinfo:
            kuzzle.index.create("ferris_index")
        assert excinfo.value.status == 400

    @pytest.mark.parametrize(
        ("method", "args"),
        [
            ("create", ("",)),
            ("delete", ("",)),
            ("exists", ("",)),
            ("get_auto_refresh", ("",)),
            ("refresh", ("",)),
            ("set_auto_refresh", ("", True)),
            ("mdelete", ([],)),
        ],
    )
    def test_empty_arguments_rejected_locally(self, method: str, args: tuple) -> None:
        """Validation fails before anything reaches the transport."""
        kuzzle, protocol = _client()

        with pytest.raises(SdkError) as excinfo:
            getattr(kuzzle.index, method)(*args)
        assert excinfo.value.cause == f"IndexController.{method}"
        assert "must not be empty" in excinfo.value.message
        assert protocol.sent == []

    def test_delete_not_found(self) -> None:
        kuzzle, protocol = _client(_failed(404, 'Index "ferris_index" does not exist'))

        with pytest.raises(NotFoundError):
            kuzzle.index.delete("ferris_index")
        assert protocol.last.action == "delete"

    @pytest.mark.parametrize("flag", [True, False])
    def test_exists(self, flag: bool) -> None:
        kuzzle, protocol = _client(_ok(flag))

        assert kuzzle.index.exists("ferris_index") is flag
        assert protocol.last.action == "exists"

    def test_get_auto_refresh(self) -> None:
        kuzzle, protocol = _client(_ok(False))

        assert kuzzle.index.get_auto_refresh("ferris_index") is False
        assert protocol.last.action == "getAutoRefresh"

    def test_exists_unexpected_result(self) -> None:
        kuzzle, _ = _client(_ok({"exists": True}))

        with pytest.raises(SdkError, match="expected a boolean"):
            kuzzle.index.exists("ferris_index")

    def test_list_keeps_server_order(self) -> None:
        kuzzle, _ = _client(_ok({"indexes": ["zeta", "alpha"]}))

        assert kuzzle.index.list() == ["zeta", "alpha"]

    def test_list_empty(self) -> None:
        kuzzle, _ = _client(_ok({"indexes": []}))
        assert kuzzle.index.list() == []

    def test_list_missing_field(self) -> None:
        kuzzle, _ = _client(_ok({}))

        with pytest.raises(SdkError) as excinfo:
            kuzzle.index.list()
        assert excinfo.value.cause == "IndexController.list"

    def test_mdelete(self) -> None:
        kuzzle, protocol = _client(_ok({"deleted": ["a", "b"]}))

        assert kuzzle.index.mdelete(["a", "b", "c"]) == ["a", "b"]
        assert protocol.last.action == "mDelete"
        assert protocol.last.body == {"indexes": ["a", "b", "c"]}

    def test_refresh_and_refresh_internal(self) -> None:
        kuzzle, protocol = _client(_ok({"_shards": {}}), _ok({"acknowledged": True}))

        kuzzle.index.refresh("ferris_index")
        kuzzle.index.refresh_internal()

        actions = [request.action for request, _ in protocol.sent]
        assert actions == ["refresh", "refreshInternal"]
        assert protocol.sent[1][0].index is None

    def test_set_auto_refresh(self) -> None:
        kuzzle, protocol = _client(_ok({"response": True}))

        kuzzle.index.set_auto_refresh("ferris_index", True)

        assert protocol.last.action == "setAutoRefresh"
        assert protocol.last.index == "ferris_index"
        assert protocol.last.body == {"autoRefresh": True}


# =========================================================================
# ServerController
# =========================================================================


class TestServerController:
    """Tests for ServerController."""

    def test_admin_exists(self) -> None:
        kuzzle, protocol = _client(_ok({"exists": True}))

        assert kuzzle.server.admin_exists() is True
        assert protocol.last.action == "adminExists"

    @pytest.mark.parametrize(
        ("method", "action"),
        [
            ("get_all_stats", "getAllStats"),
            ("get_config", "getConfig"),
            ("get_last_stats", "getLastStats"),
            ("info", "info"),
        ],
    )
    def test_object_results(self, method: str, action: str) -> None:
        result = {"total": 1, "hits": [{"completedRequests": {"http": 24}}]}
        kuzzle, protocol = _client(_ok(result))

        assert getattr(kuzzle.server, method)() == result
        assert (protocol.last.controller, protocol.last.action) == ("server", action)

    def test_object_result_null_rejected(self) -> None:
        kuzzle, _ = _client(_ok(None))

        with pytest.raises(SdkError, match="not an object"):
            kuzzle.server.info()

    def test_get_stats(self) -> None:
        kuzzle, protocol = _client(_ok({"total": 0, "hits": []}))

        assert kuzzle.server.get_stats(1550439618398, 1550436918273) == {"total": 0, "hits": []}
        assert protocol.last.query_strings == {
            "startTime": 1550439618398,
            "stopTime": 1550436918273,
        }

    @pytest.mark.parametrize(
        ("start", "stop"),
        [
            (155043961839, 1550436918273),
            (1550439618398, 15504369182730),
            (0, 1550436918273),
            (True, 1550436918273),
            ("1550439618398", 1550436918273),
        ],
    )
    def test_get_stats_rejects_non_millis(self, start: Any, stop: Any) -> None:
        kuzzle, protocol = _client()

        with pytest.raises(SdkError) as excinfo:
            kuzzle.server.get_stats(start, stop)
        assert excinfo.value.cause == "ServerController.get_stats"
        assert protocol.sent == []

    def test_now(self) -> None:
        kuzzle, _ = _client(_ok({"now": 1550439618398}))
        assert kuzzle.server.now() == 1550439618398

    def test_now_wrong_type(self) -> None:
        kuzzle, _ = _client(_ok({"now": "soon"}))

        with pytest.raises(SdkError):
            kuzzle.server.now()

    def test_backend_error_raised(self) -> None:
        kuzzle, _ = _client(_failed(401, "login required"))

        with pytest.raises(UnauthorizedError):
            kuzzle.server.get_config()


# =========================================================================
# CollectionController / AuthController
# =========================================================================


class TestCollectionController:
    def test_create_scopes_request(self) -> None:
        kuzzle, protocol = _client(_ok({"acknowledged": True}))

        kuzzle.collection.create("nyc-open-data", "yellow-taxi")

        assert protocol.last.index == "nyc-open-data"
        assert protocol.last.collection == "yellow-taxi"

    def test_exists(self) -> None:
        kuzzle, _ = _client(_ok(True))
        assert kuzzle.collection.exists("nyc-open-data", "yellow-taxi") is True

    def test_list(self) -> None:
        collections = [{"name": "yellow-taxi", "type": "stored"}]
        kuzzle, protocol = _client(_ok({"type": "all", "collections": collections}))

        assert kuzzle.collection.list("nyc-open-data") == collections
        assert protocol.last.index == "nyc-open-data"

    @pytest.mark.parametrize(("index", "collection"), [("", "c"), ("i", "")])
    def test_empty_identifiers_rejected(self, index: str, collection: str) -> None:
        kuzzle, protocol = _client()

        with pytest.raises(SdkError):
            kuzzle.collection.create(index, collection)
        assert protocol.sent == []


class TestAuthController:
    def test_login_keeps_token(self) -> None:
        """A successful login stores the token on the client."""
        kuzzle, protocol = _client(_ok({"_id": "admin", "jwt": "fresh-jwt", "expiresAt": 1}))

        assert kuzzle.auth.login("local", {"username": "admin", "password": "s"}, "1h") == "fresh-jwt"
        assert kuzzle.jwt == "fresh-jwt"
        assert protocol.last.query_strings == {"strategy": "local", "expiresIn": "1h"}
        assert protocol.last.body == {"username": "admin", "password": "s"}

    def test_login_empty_strategy(self) -> None:
        kuzzle, protocol = _client()

        with pytest.raises(SdkError):
            kuzzle.auth.login("", {})
        assert protocol.sent == []

    def test_failed_login_keeps_previous_token(self) -> None:
        kuzzle, _ = _client(_failed(401, "wrong credentials"))
        kuzzle.jwt = "old"

        with pytest.raises(UnauthorizedError):
            kuzzle.auth.login("local", {"username": "admin", "password": "bad"})
        assert kuzzle.jwt == "old"

    def test_login_without_token_in_result(self) -> None:
        kuzzle, _ = _client(_ok({"_id": "admin"}))

        with pytest.raises(SdkError):
            kuzzle.auth.login("local", {})
        assert kuzzle.jwt is None

    def test_check_token(self) -> None:
        report = {"valid": True, "state": "Token is valid", "expiresAt": 1550439618398}
        kuzzle, protocol = _client(_ok(report))

        assert kuzzle.auth.check_token("jwt") == report
        assert protocol.last.body == {"token": "jwt"}

    def test_check_token_empty(self) -> None:
        kuzzle, protocol = _client()

        with pytest.raises(SdkError):
            kuzzle.auth.check_token("")
        assert protocol.sent == []

    def test_get_current_user(self) -> None:
        kuzzle, protocol = _client(_ok({"_id": "admin", "_source": {"profileIds": ["admin"]}}))
        kuzzle.jwt = "jwt"

        assert kuzzle.auth.get_current_user()["_id"] == "admin"
        assert protocol.last.jwt == "jwt"

    def test_logout_clears_jwt(self) -> None:
        kuzzle, _ = _client(_ok({}))
        kuzzle.jwt = "jwt"

        kuzzle.auth.logout()

        assert kuzzle.jwt is None

    def test_failed_logout_keeps_jwt(self) -> None:
        kuzzle, _ = _client(_failed(401, "invalid token"))
        kuzzle.jwt = "jwt"

        with pytest.raises(UnauthorizedError):
            kuzzle.auth.logout()
        assert kuzzle.jwt == "jwt"


class TestControllerRouting:
    def test_every_controller_call_is_routed(self) -> None:
        """All pairs the controllers send are declared in the bundled routes."""
        kuzzle, protocol = _client(
            *[_ok(value) for value in (
                {"acknowledged": True}, None, True, False, {"indexes": []},
                {"deleted": []}, None, None, None,
                {"exists": False}, {}, {}, {}, {}, {}, {"now": 1550439618398},
                None, True, {"collections": []},
                {}, {}, {"jwt": "t"}, None,
            )]
        )

        kuzzle.index.create("i")
        kuzzle.index.delete("i")
        kuzzle.index.exists("i")
        kuzzle.index.get_auto_refresh("i")
        kuzzle.index.list()
        kuzzle.index.mdelete(["i"])
        kuzzle.index.refresh("i")
        kuzzle.index.refresh_internal()
        kuzzle.index.set_auto_refresh("i", False)
        kuzzle.server.admin_exists()
        kuzzle.server.get_all_stats()
        kuzzle.server.get_config()
        kuzzle.server.get_last_stats()
        kuzzle.server.get_stats(1550439618398, 1550436918273)
        kuzzle.server.info()
        kuzzle.server.now()
        kuzzle.collection.create("i", "c")
        kuzzle.collection.exists("i", "c")
        kuzzle.collection.list("i")
        kuzzle.auth.check_token("t")
        kuzzle.auth.get_current_user()
        kuzzle.auth.login("local", {})
        kuzzle.auth.logout()

        sent = {(request.controller, request.action) for request, _ in protocol.sent}
        assert sent == set(CONTROLLER_ROUTES)
