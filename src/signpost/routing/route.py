"""Route, RouteGroup and Match."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from signpost.routing.template import Template


@dataclass(frozen=True, slots=True)
class Route:
    """One binding of a path template and method set to a payload.

    ``methods`` is empty when every method is accepted.  Created by
    ``Router.add()`` and never modified afterwards.
    """

    name: str | None
    path: str
    template: Template
    methods: tuple[str, ...]
    payload: Mapping[str, Any]

    def accepts(self, method: str) -> bool:
        return not self.methods or method.upper() in self.methods


@dataclass(slots=True)
class RouteGroup:
    """All routes sharing one literal path, in registration order.

    The first route's template defines the group's structure; later
    routes only differ by method set and payload.
    """

    path: str
    template: Template
    routes: list[Route] = field(default_factory=list)

    @property
    def methods(self) -> tuple[str, ...]:
        """Union of the member routes' methods, or ``()`` if any accepts all."""
        if any(not route.methods for route in self.routes):
            return ()
        return tuple(sorted({m for route in self.routes for m in route.methods}))

    def select(self, method: str | None) -> Route | None:
        """First route accepting *method*; the first route when *method* is empty or ``None``."""
        if not method:
            return self.routes[0]
        for route in self.routes:
            if route.accepts(method):
                return route
        return None


class Match(Mapping[str, Any]):
    """Immutable result of a successful match.

    Behaves as the route payload overlaid with the placeholder captures,
    so ``match["controller"]`` and ``dict(match)`` work directly.  The
    selected route and the raw captures stay available as attributes.
    """

    __slots__ = ("_data", "params", "route")

    def __init__(self, route: Route, params: Mapping[str, str]) -> None:
        self.route = route
        self.params: Mapping[str, str] = MappingProxyType(dict(params))
        self._data: dict[str, Any] = {**route.payload, **params}

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Match({self._data!r}, route={self.route.name!r})"
