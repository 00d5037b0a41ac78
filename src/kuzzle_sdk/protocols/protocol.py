"""The transport capability shared by every Kuzzle protocol.

:class:`Protocol` declares the full surface a transport may offer so that
the :class:`~kuzzle_sdk.kuzzle.Kuzzle` client never branches on the
concrete transport type:

* :meth:`Protocol.send` -- the one required operation.
* Lifecycle, queue and listener operations -- meaningful for
  connection-oriented transports only.  Their default implementations
  raise :class:`~kuzzle_sdk.core.errors.UnsupportedOperation`, so a caller
  relying on, say, offline queuing learns immediately that the active
  transport cannot provide it.
"""
from __future__ import annotations

import abc
import enum
from collections.abc import Callable
from types import TracebackType
from typing import Any

from kuzzle_sdk.core.config import QueryOptions
from kuzzle_sdk.core.errors import UnsupportedOperation
from kuzzle_sdk.core.types import Request, Response

Listener = Callable[..., Any]


class ProtocolState(enum.StrEnum):
    """Connection state reported by :meth:`Protocol.state`."""

    OFFLINE = "offline"
    CONNECTING = "connecting"
    ONLINE = "online"
    READY = "ready"


class Protocol(abc.ABC):
    """Base class for Kuzzle transports."""

    @abc.abstractmethod
    def send(self, request: Request, options: QueryOptions | None = None) -> Response:
        """Send *request* and return the parsed response.

        Backend failures come back as data in ``Response.error``.  Only
        local failures (routing, network, undecodable reply) raise.
        """

    def _unsupported(self, operation: str) -> UnsupportedOperation:
        name = type(self).__name__
        return UnsupportedOperation(
            cause=f"{name}.{operation}",
            message=f"{operation} is not supported by the {name} transport",
        )

    # -- lifecycle ----------------------------------------------------------

    def connect(self) -> None:
        raise self._unsupported("connect")

    def close(self) -> None:
        raise self._unsupported("close")

    def state(self) -> ProtocolState:
        raise self._unsupported("state")

    # -- offline queue ------------------------------------------------------

    def start_queuing(self) -> None:
        raise self._unsupported("start_queuing")

    def stop_queuing(self) -> None:
        raise self._unsupported("stop_queuing")

    def clear_queue(self) -> None:
        raise self._unsupported("clear_queue")

    def request_history(self) -> list[Request]:
        raise self._unsupported("request_history")

    # -- listeners ----------------------------------------------------------

    def add_listener(self, event: str, listener: Listener) -> None:
        raise self._unsupported("add_listener")

    def once(self, event: str, listener: Listener) -> None:
        raise self._unsupported("once")

    def listener_count(self, event: str) -> int:
        raise self._unsupported("listener_count")

    def __enter__(self) -> Protocol:
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
