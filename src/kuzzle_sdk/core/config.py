"""Kuzzle SDK client configuration.

:class:`KuzzleOptions` configures a transport; :class:`QueryOptions`
tunes a single query.  Both are validated Pydantic models; use
``model_copy(update=...)`` to derive a modified configuration.
"""
from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class OfflineMode(enum.StrEnum):
    """How a queueing transport behaves when the connection drops."""

    MANUAL = "manual"
    AUTO = "auto"


class KuzzleOptions(BaseModel):
    """Configuration for a Kuzzle transport.

    Only ``host`` and ``port`` matter for most deployments.  The queue and
    reconnection settings are read by connection-oriented transports; the
    HTTP transport is stateless and ignores them.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    host: str = Field(
        default="localhost",
        description="Kuzzle server host name or address.",
    )
    port: int = Field(
        default=7512,
        ge=1,
        le=65535,
        description="Kuzzle server port.",
    )
    ssl_connection: bool = Field(
        default=False,
        description="Use https/wss instead of http/ws.",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description=(
            "Per-request timeout in seconds.  ``None`` waits until the "
            "server answers or the connection fails."
        ),
    )
    routes_path: str | None = Field(
        default=None,
        description=(
            "Path to the HTTP routing document.  ``None`` uses the routes "
            "bundled with the SDK."
        ),
    )
    validate_routes: bool = Field(
        default=True,
        description=(
            "Check at transport construction that every route used by the "
            "bundled controllers is declared."
        ),
    )
    auto_queue: bool = Field(
        default=False,
        description="Queue requests automatically while offline.",
    )
    auto_reconnect: bool = Field(
        default=True,
        description="Reconnect automatically after a connection loss.",
    )
    auto_replay: bool = Field(
        default=False,
        description="Replay queued requests automatically once reconnected.",
    )
    auto_resubscribe: bool = Field(
        default=True,
        description="Renew real-time subscriptions after a reconnection.",
    )
    offline_mode: OfflineMode = Field(
        default=OfflineMode.MANUAL,
        description="Offline behaviour preset.",
    )
    queue_max_size: int = Field(
        default=500,
        ge=0,
        description="Maximum number of queued requests.",
    )
    queue_ttl_ms: int = Field(
        default=120_000,
        ge=0,
        description="Time in milliseconds a queued request is kept.",
    )
    reconnection_delay_ms: int = Field(
        default=1_000,
        ge=0,
        description="Delay in milliseconds between reconnection attempts.",
    )
    replay_interval_ms: int = Field(
        default=10,
        ge=0,
        description="Delay in milliseconds between two replayed requests.",
    )

    @property
    def base_url(self) -> str:
        """HTTP endpoint root, e.g. ``http://localhost:7512``."""
        scheme = "https" if self.ssl_connection else "http"
        return f"{scheme}://{self.host}:{self.port}"


class QueryOptions(BaseModel):
    """Per-query options.

    ``queuable`` tells a queueing transport whether the request may be
    queued while offline.  Stateless transports ignore it.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    queuable: bool = True
