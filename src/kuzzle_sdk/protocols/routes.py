"""HTTP routing for Kuzzle API calls.

Kuzzle addresses every API call by a ``(controller, action)`` pair.  Over
HTTP, each pair is bound to a URL template and a verb by a routing
document of the form::

    {
        "index": {
            "create": {"url": "/:index/_create", "verb": "POST"},
            "list":   {"url": "/_list",          "verb": "GET"}
        }
    }

The ``:index`` and ``:collection`` tokens are substituted with the
request's values (or the empty string) at resolution time.  Any other
``:name`` token is a route argument, taken from the request's query
strings (e.g. ``POST /_login/:strategy``); a consumed argument is not
sent again in the query string.  No other encoding is applied; callers
pass URL-safe identifiers.

The table is loaded once, at transport construction, and is read-only
afterwards so concurrent calls can share it.
"""
from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kuzzle_sdk.core.errors import InvalidVerb, RouteNotFound, RoutingConfigError
from kuzzle_sdk.core.types import Request

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DEFAULT_ROUTES_RESOURCE: str = "http_routes.json"
"""Routing document shipped with the package."""

INDEX_PLACEHOLDER: str = ":index"
COLLECTION_PLACEHOLDER: str = ":collection"

CONTROLLER_ROUTES: frozenset[tuple[str, str]] = frozenset(
    {
        ("auth", "checkToken"),
        ("auth", "getCurrentUser"),
        ("auth", "login"),
        ("auth", "logout"),
        ("collection", "create"),
        ("collection", "exists"),
        ("collection", "list"),
        ("index", "create"),
        ("index", "delete"),
        ("index", "exists"),
        ("index", "getAutoRefresh"),
        ("index", "list"),
        ("index", "mDelete"),
        ("index", "refresh"),
        ("index", "refreshInternal"),
        ("index", "setAutoRefresh"),
        ("server", "adminExists"),
        ("server", "getAllStats"),
        ("server", "getConfig"),
        ("server", "getLastStats"),
        ("server", "getStats"),
        ("server", "info"),
        ("server", "now"),
    }
)
"""``(controller, action)`` pairs called by the bundled controllers."""

_PLACEHOLDER_PATTERN = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")

# RFC 9110 "token": the characters a method name may be made of.
_VERB_PATTERN = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class Route(BaseModel):
    """URL template and HTTP verb bound to one controller/action."""

    model_config = ConfigDict(strict=True, frozen=True)

    url: str
    verb: str


class ResolvedRoute(BaseModel):
    """A route whose placeholders have been substituted.

    ``query_strings`` holds the request's query strings minus the route
    arguments consumed by the path.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    verb: str
    query_strings: dict[str, Any] = Field(default_factory=dict)


def parse_verb(verb: str) -> str:
    """Validate *verb* as an HTTP method token and return it unchanged.

    Method tokens are case-sensitive, so ``"post"`` is sent as declared.

    Raises
    ------
    InvalidVerb
        If *verb* is empty or contains characters not allowed in a
        method token.
    """
    if not _VERB_PATTERN.fullmatch(verb):
        raise InvalidVerb(message=f"{verb!r} is not a valid HTTP method")
    return verb


# ---------------------------------------------------------------------------
# RouteTable
# ---------------------------------------------------------------------------


class RouteTable:
    """Read-only ``controller -> action -> Route`` mapping.

    Parameters
    ----------
    routes:
        Nested mapping of routes.  Values may be :class:`Route` instances
        or ``{"url": ..., "verb": ...}`` mappings.

    Raises
    ------
    RoutingConfigError
        If *routes* does not have the expected shape.
    """

    def __init__(self, routes: Mapping[str, Mapping[str, Any]]) -> None:
        if not isinstance(routes, Mapping):
            raise RoutingConfigError(
                message="routing document must be an object of controllers",
            )

        table: dict[str, dict[str, Route]] = {}
        for controller, actions in routes.items():
            if not isinstance(actions, Mapping):
                raise RoutingConfigError(
                    message=f"controller {controller!r} must map actions to routes",
                )
            table[controller] = {}
            for action, route in actions.items():
                try:
                    table[controller][action] = (
                        route if isinstance(route, Route) else Route.model_validate(route)
                    )
                except ValidationError as exc:
                    raise RoutingConfigError(
                        message=f"invalid route for {controller}/{action}: {exc}",
                    ) from exc
        self._routes = table

    @classmethod
    def from_file(cls, path: str | Path) -> RouteTable:
        """Load a routing document from *path*.

        Raises
        ------
        RoutingConfigError
            If the file cannot be read or is not valid JSON.
        """
        try:
            contents = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise RoutingConfigError(
                message=f"cannot read routing document {str(path)!r}: {exc}",
            ) from exc
        return cls.from_json(contents, source=str(path))

    @classmethod
    def from_json(cls, contents: str, *, source: str = "<string>") -> RouteTable:
        """Build a table from the JSON text of a routing document."""
        try:
            data = json.loads(contents)
        except json.JSONDecodeError as exc:
            raise RoutingConfigError(
                message=f"routing document {source!r} is not valid JSON: {exc}",
            ) from exc
        table = cls(data)
        logger.debug("Loaded %d routes from %s", len(table), source)
        return table

    def get(self, controller: str, action: str) -> Route:
        """Return the route of ``(controller, action)``.

        Raises
        ------
        RouteNotFound
            If the pair is not declared.
        """
        try:
            return self._routes[controller][action]
        except KeyError:
            raise RouteNotFound(controller, action) from None

    def resolve(self, request: Request) -> ResolvedRoute:
        """Substitute the request's index, collection and route arguments.

        Substitution is a single pass over the template, so a value that
        itself contains ``:`` is never substituted again.
        """
        route = self.get(request.controller, request.action)
        query_strings = dict(request.query_strings)

        def substitute(match: re.Match[str]) -> str:
            token = match.group(0)
            if token == INDEX_PLACEHOLDER:
                return request.index or ""
            if token == COLLECTION_PLACEHOLDER:
                return request.collection or ""
            value = query_strings.pop(match.group(1), None)
            return "" if value is None else str(value)

        path = _PLACEHOLDER_PATTERN.sub(substitute, route.url)
        return ResolvedRoute(path=path, verb=route.verb, query_strings=query_strings)

    def validate(self, required: Iterable[tuple[str, str]]) -> None:
        """Check that every ``(controller, action)`` in *required* is routed.

        Raises
        ------
        RoutingConfigError
            Listing every missing pair.
        """
        missing = [pair for pair in required if pair not in self]
        if missing:
            listed = ", ".join(f"{controller}/{action}" for controller, action in missing)
            raise RoutingConfigError(message=f"routing document lacks: {listed}")

    def __contains__(self, pair: object) -> bool:
        if not isinstance(pair, tuple) or len(pair) != 2:
            return False
        controller, action = pair
        return action in self._routes.get(controller, {})

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for controller, actions in self._routes.items():
            for action in actions:
                yield controller, action

    def __len__(self) -> int:
        return sum(len(actions) for actions in self._routes.values())


def load_routes(path: str | Path | None = None) -> RouteTable:
    """Load the routing document at *path*, or the bundled one.

    Raises
    ------
    RoutingConfigError
        If the document is missing or invalid.
    """
    if path is not None:
        return RouteTable.from_file(path)
    contents = (
        resources.files("kuzzle_sdk.protocols")
        .joinpath(DEFAULT_ROUTES_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return RouteTable.from_json(contents, source=DEFAULT_ROUTES_RESOURCE)
