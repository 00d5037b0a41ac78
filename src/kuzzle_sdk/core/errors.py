"""Kuzzle SDK error hierarchy.

Two disjoint families share one base class so that callers can catch every
SDK failure uniformly while still telling them apart:

* **Backend errors** (:class:`KuzzleError`) -- reported by the server inside
  an otherwise well-formed reply.  They only ever materialise from a parsed
  :class:`~kuzzle_sdk.core.types.Response`.
* **Local errors** (:class:`SdkError`) -- detected by the client before, or
  instead of, a wire call.  They carry a ``cause`` and never a status code.

Hierarchy
---------
::

    KuzzleSdkError
    +-- KuzzleError
    |   +-- PartialError             (206)
    |   +-- BadRequestError          (400)
    |   +-- UnauthorizedError        (401)
    |   +-- ForbiddenError           (403)
    |   +-- NotFoundError            (404)
    |   +-- PreconditionError        (412)
    |   +-- SizeLimitError           (413)
    |   +-- InternalError            (500)
    |   +-- ServiceUnavailableError  (503)
    |   +-- GatewayTimeoutError      (504)
    |   +-- CustomError              (any other status)
    |   +-- UnidentifiedError        (no status)
    +-- SdkError
        +-- RoutingConfigError
        +-- RouteNotFound
        +-- InvalidVerb
        +-- UnsupportedOperation
        +-- TransportError
        +-- MalformedResponse

Usage
-----
Catch by family::

    try:
        kuzzle.index.create("nyc-open-data")
    except KuzzleError as exc:
        # the server refused: exc.status, exc.message, exc.stack
        ...
    except SdkError as exc:
        # bad argument, bad routing config, network failure
        ...
"""
from __future__ import annotations

from typing import Any

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class KuzzleSdkError(Exception):
    """Base exception for every failure surfaced by the SDK.

    Attributes
    ----------
    message : str
        Human-readable description.
    """

    message: str = "Unknown Kuzzle SDK error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def describe(self) -> str:
        """Return the display form of the error."""
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialise the error to a plain mapping."""
        return {"error": {"kind": type(self).__name__, "message": self.message}}

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


# ===================================================================
# Backend errors
# ===================================================================


class KuzzleError(KuzzleSdkError):
    """An error reported by the Kuzzle server.

    Attributes
    ----------
    status : int | None
        Status code sent by the server, ``None`` when it sent none.
        Subclasses bound to a status default to their ``http_status``.
    stack : str | None
        Server-side stack trace, when the server exposes it.
    name : str
        Canonical error name of the class.  Display uses the canonical
        name of ``status`` instead, so ``KuzzleError("gone", status=404)``
        reads as a ``NotFoundError``.
    """

    name: str = "KuzzleError"
    http_status: int | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        status: int | None = None,
        stack: str | None = None,
    ) -> None:
        self.status = self.http_status if status is None else status
        self.stack = stack
        super().__init__(message)

    def describe(self) -> str:
        """Render ``[status] stack`` or ``[status] Name : message``.

        The message is dropped when a stack is present since the stack
        already starts with it.
        """
        status = "-" if self.status is None else str(self.status)
        if self.stack is not None:
            return f"[{status}] {self.stack}"
        return f"[{status}] {error_class_for_status(self.status).name} : {self.message}"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"status": self.status, "message": self.message}
        if self.stack is not None:
            payload["stack"] = self.stack
        return {"error": payload}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, KuzzleError):
            return (
                type(self) is type(other)
                and self.status == other.status
                and self.message == other.message
                and self.stack == other.stack
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), self.status, self.message, self.stack))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status={self.status!r}, message={self.message!r})"


class PartialError(KuzzleError):
    """206 -- the request was only partially executed."""

    name = "PartialError"
    http_status = 206


class BadRequestError(KuzzleError):
    """400 -- the request is malformed or refers to a conflicting state."""

    name = "BadRequestError"
    http_status = 400


class UnauthorizedError(KuzzleError):
    """401 -- authentication is required or has failed."""

    name = "UnauthorizedError"
    http_status = 401


class ForbiddenError(KuzzleError):
    """403 -- the authenticated user may not perform this request."""

    name = "ForbiddenError"
    http_status = 403


class NotFoundError(KuzzleError):
    """404 -- the targeted index, collection or document does not exist."""

    name = "NotFoundError"
    http_status = 404


class PreconditionError(KuzzleError):
    """412 -- a precondition of the request failed."""

    name = "PreconditionError"
    http_status = 412


class SizeLimitError(KuzzleError):
    """413 -- the request exceeds a configured size limit."""

    name = "SizeLimitError"
    http_status = 413


class InternalError(KuzzleError):
    """500 -- the server failed while processing the request."""

    name = "InternalError"
    http_status = 500


class ServiceUnavailableError(KuzzleError):
    """503 -- the server, or one of its services, is unavailable."""

    name = "ServiceUnavailableError"
    http_status = 503


class GatewayTimeoutError(KuzzleError):
    """504 -- a backing service took too long to answer."""

    name = "GatewayTimeoutError"
    http_status = 504


class CustomError(KuzzleError):
    """A status code with no canonical name (plugins, proxies...)."""

    name = "CustomError"


class UnidentifiedError(KuzzleError):
    """The server reported an error without a status code."""

    name = "UnidentifiedError"


# ===================================================================
# Local (SDK) errors
# ===================================================================


class SdkError(KuzzleSdkError):
    """A usage or client-side failure raised before, or instead of, a wire call.

    Attributes
    ----------
    cause : str
        The operation that rejected the input, e.g.
        ``"IndexController.create"``.
    """

    cause: str = "sdk"

    def __init__(self, cause: str | None = None, message: str | None = None) -> None:
        if cause is not None:
            self.cause = cause
        super().__init__(message)

    def describe(self) -> str:
        return f"[{self.cause}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {"error": {"cause": self.cause, "message": self.message}}

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SdkError):
            return (
                type(self) is type(other)
                and self.cause == other.cause
                and self.message == other.message
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), self.cause, self.message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cause={self.cause!r}, message={self.message!r})"


class RoutingConfigError(SdkError):
    """The routing document is missing, unreadable, malformed or incomplete."""

    cause = "RouteTable"
    message = "Invalid routing document"


class RouteNotFound(SdkError):
    """No route is declared for a ``(controller, action)`` pair."""

    cause = "RouteTable.get"
    message = "No route for this controller/action"

    def __init__(self, controller: str, action: str) -> None:
        self.controller = controller
        self.action = action
        super().__init__(
            message=f"no route declared for controller {controller!r}, action {action!r}",
        )


class InvalidVerb(SdkError):
    """A route declares a verb that is not a valid HTTP method token."""

    cause = "parse_verb"
    message = "Invalid HTTP verb"


class UnsupportedOperation(SdkError):
    """The active transport does not implement the requested operation."""

    message = "Operation not supported by this transport"


class TransportError(SdkError):
    """The wire call itself failed (connection refused, timeout, protocol error)."""

    cause = "Protocol.send"
    message = "Transport failure"


class MalformedResponse(SdkError):
    """The reply body is not a valid Kuzzle response document."""

    cause = "parse_response"
    message = "Malformed response"


# ---------------------------------------------------------------------------
# Lookup helper
# ---------------------------------------------------------------------------

_STATUS_MAP: dict[int, type[KuzzleError]] = {
    cls.http_status: cls
    for cls in [
        PartialError,
        BadRequestError,
        UnauthorizedError,
        ForbiddenError,
        NotFoundError,
        PreconditionError,
        SizeLimitError,
        InternalError,
        ServiceUnavailableError,
        GatewayTimeoutError,
    ]
}


def error_class_for_status(status: int | None) -> type[KuzzleError]:
    """Return the :class:`KuzzleError` subclass for *status*.

    ``None`` maps to :class:`UnidentifiedError`; any status with no
    canonical name maps to :class:`CustomError`.
    """
    if status is None:
        return UnidentifiedError
    return _STATUS_MAP.get(status, CustomError)


def error_from_status(
    status: int | None,
    message: str,
    stack: str | None = None,
) -> KuzzleError:
    """Instantiate the correct backend error for a server-reported failure."""
    cls = error_class_for_status(status)
    return cls(message, status=status, stack=stack)
