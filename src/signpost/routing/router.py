"""Route registry with a lazily compiled matcher.

Routes are registered in order and grouped by literal path.  The first
``match()`` after any ``add()`` folds every group into one regex
(see ``signpost.routing.matcher``); later matches reuse it until the
next ``add()``.
"""

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from signpost.config import RouterConfig
from signpost.errors import (
    HTTP_METHOD_NOT_ALLOWED,
    HTTP_NOT_FOUND,
    DuplicateRouteName,
    MethodNotAllowed,
    MissingPayload,
    NotFound,
    UnknownRouteName,
)
from signpost.render import render_routes
from signpost.routing.definition import (
    MethodsArg,
    coerce_payload,
    normalize_methods,
    split_route_spec,
)
from signpost.routing.matcher import CompiledMatcher
from signpost.routing.route import Match, Route, RouteGroup
from signpost.routing.submapper import Submapper
from signpost.routing.template import Literal, Template, parse_template
from signpost.routing.urls import build_url

logger = logging.getLogger("signpost.routing")


class Router:
    """Maps request paths (and optionally methods) to route payloads.

    Usage::

        router = Router()
        router.add("home", "/", {"controller": "Home", "action": "show"})
        router.add("blog", "GET /blog/{year}/{month}", "Blog#monthly")

        router.match("/blog/1916/08")
        # {'controller': 'Blog', 'action': 'monthly', 'year': '1916', 'month': '08'}

        router.url("blog", year="1916", month="08")
        # '/blog/1916/08'

    ``match()`` returns ``None`` on failure and records the reason on
    ``error`` (``HTTP_NOT_FOUND`` or ``HTTP_METHOD_NOT_ALLOWED``);
    ``resolve()`` raises ``NotFound`` / ``MethodNotAllowed`` instead.

    Registration and matcher compilation share one lock.  The compiled
    matcher is published with a single assignment, so concurrent
    ``match()`` calls never see a half-built one.  ``error`` and the
    last-matched group are per-router diagnostics for a single caller.
    """

    __slots__ = (
        "_config",
        "_group_by_path",
        "_groups",
        "_last_group",
        "_lock",
        "_matcher",
        "_names",
        "_routes",
        "error",
    )

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config = config or RouterConfig()
        self._routes: list[Route] = []
        self._groups: list[RouteGroup] = []
        self._group_by_path: dict[str, RouteGroup] = {}
        self._names: dict[str, Route] = {}
        self._lock = threading.Lock()
        # Derived state, rebuilt on the first match() after an add()
        self._matcher: CompiledMatcher | None = None
        self._last_group: RouteGroup | None = None
        self.error: int | None = None

    @property
    def config(self) -> RouterConfig:
        return self._config

    # -- Registration ------------------------------------------------------

    def add(
        self,
        name: str | None,
        spec: str,
        payload: Mapping[str, Any] | str | None = None,
        *,
        methods: MethodsArg = None,
    ) -> "Router":
        """Register a route and return the router for chaining.

        Args:
            name: Unique route name, or ``None`` for an anonymous route.
                Anonymous routes match but cannot be used with ``url()``.
            spec: ``[METHODS ]PATH``, e.g. ``"GET|POST /users/{id}"``.
            payload: Mapping returned on match, or ``"Controller#action"``.
            methods: Extra allowed methods, merged with those in *spec*.
                ``"*"`` accepts any method.

        Raises:
            MissingPayload: No payload given.
            DuplicateRouteName: *name* is already registered.
            MissingRoutePath, InvalidRouteSpec: *spec* is malformed.
            InvalidPlaceholderName, InvalidPlaceholderPattern, DuplicatePlaceholder:
                the path template is invalid.
        """
        name = name or None
        data = coerce_payload(payload)
        if data is None:
            msg = f"No payload defined for route {name or spec!r}"
            raise MissingPayload(msg)
        if name is not None and name in self._names:
            msg = f"Route {name!r} already defined"
            raise DuplicateRouteName(msg)

        spec_methods, path = split_route_spec(spec)
        allowed = normalize_methods(methods, spec_methods)

        with self._lock:
            group = self._group_by_path.get(path)
            template = group.template if group is not None else parse_template(path, self._config)
            route = Route(
                name=name,
                path=path,
                template=template,
                methods=allowed,
                payload=MappingProxyType(data),
            )

            if name is not None and name in self._names:
                msg = f"Route {name!r} already defined"
                raise DuplicateRouteName(msg)
            if group is None:
                group = RouteGroup(path=path, template=template)
                self._groups.append(group)
                self._group_by_path[path] = group
            group.routes.append(route)
            self._routes.append(route)
            if name is not None:
                self._names[name] = route
            self._matcher = None

        logger.debug("Added route %s: %s %s", name or "<anonymous>", ",".join(allowed) or "*", path)
        return self

    def scope(
        self,
        name: str | None = None,
        path: str = "",
        payload: Mapping[str, Any] | str | None = None,
        *,
        methods: MethodsArg = None,
        call: Callable[[Submapper], Any] | None = None,
    ) -> Submapper:
        """Open a nested definition scope (see ``Submapper``)."""
        return Submapper(self, name, path, payload, methods=methods, call=call)

    def resource(
        self,
        member: str,
        payload: Mapping[str, Any] | str | None = None,
        *,
        collection: str | None = None,
    ) -> "Router":
        """Register the eleven CRUD routes for *member* (see ``Submapper.resource``)."""
        Submapper(self).resource(member, payload, collection=collection)
        return self

    # -- Introspection -----------------------------------------------------

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes in registration order."""
        return tuple(self._routes)

    def get_route(self, name: str) -> Route | None:
        return self._names.get(name)

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    # -- Matching ----------------------------------------------------------

    def _compiled(self) -> CompiledMatcher:
        """Return the matcher, compiling it first if routes changed.

        Double-checked: the unlocked read is the fast path once compiled.
        """
        matcher = self._matcher
        if matcher is not None:
            return matcher
        with self._lock:
            if self._matcher is None:
                self._matcher = CompiledMatcher(tuple(self._groups))
                logger.debug("Compiled matcher for %d route groups", len(self._matcher))
            return self._matcher

    def _lookup(self, path: str, method: str | None) -> tuple[RouteGroup | None, Match | None]:
        found = self._compiled().match(path)
        if found is None:
            return None, None
        index, params = found
        group = self._groups[index]
        route = group.select(method)
        if route is None:
            return group, None
        return group, Match(route, params)

    def match(self, path: str, method: str | None = None) -> Match | None:
        """Match *path* (and *method*, if given) against the registered routes.

        Returns the route payload overlaid with the placeholder captures,
        or ``None`` with ``error`` set to 404 (no path matched) or 405
        (the path matched but no route in its group accepts *method*).
        Without *method* the group's first route is used.
        """
        group, result = self._lookup(path, method)
        self._last_group = group
        if group is None:
            self.error = HTTP_NOT_FOUND
            logger.debug("No route matches %r", path)
        elif result is None:
            self.error = HTTP_METHOD_NOT_ALLOWED
            logger.debug("Method %s not allowed for %r", method, path)
        else:
            self.error = None
        return result

    def resolve(self, path: str, method: str | None = None) -> Match:
        """Like ``match()``, but raises on failure.

        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches but the method doesn't.
        """
        group, result = self._lookup(path, method)
        if group is None:
            raise NotFound(path, method)
        if result is None:
            raise MethodNotAllowed(path, method, group.methods)
        return result

    def allowed_methods(self, name_or_path: str | None = None) -> list[str] | None:
        """Methods accepted by a route name, a literal path, or the last match.

        An empty list means every method is accepted.  With no argument,
        returns ``None`` if the last ``match()`` found no path.
        """
        if name_or_path is None:
            group = self._last_group
            return None if group is None else list(group.methods)
        route = self._names.get(name_or_path)
        if route is not None:
            return list(route.methods)
        group = self._group_by_path.get(name_or_path)
        if group is not None:
            return list(group.methods)
        msg = f"No route named or at {name_or_path!r}"
        raise UnknownRouteName(msg)

    # -- URL building --------------------------------------------------------

    def url(self, name: str, /, **params: Any) -> str:
        """Build a URL from a route name or a literal template.

        Example::

            router.url("entry", year="1916", month="08", day="14")
            # '/entries/1916/08/14'
            router.url("/entries/{year}", year="1916", q="abc")
            # '/entries/1916?q=abc'
        """
        return self.url_for(name, params)

    def url_for(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """``url()`` taking parameters as a mapping.

        Raises ``UnknownRouteName`` when *name* is neither a registered
        route nor a path starting with ``/``.
        """
        route = self._names.get(name)
        if route is not None:
            template = route.template
        elif name.startswith("/"):
            if "{" in name:
                template = parse_template(name, self._config)
            else:
                template = Template(path=name, tokens=(Literal(name),))
        else:
            msg = f"URL name {name!r} not found"
            raise UnknownRouteName(msg)
        return build_url(template, params or {}, label=name)

    # -- Reporting ---------------------------------------------------------

    def render(self, *, headers: bool = False) -> str:
        """Routes as an aligned table of name, methods, path and payload."""
        return render_routes(self._routes, table_format=self._config.table_format, headers=headers)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"<Router routes={len(self._routes)} groups={len(self._groups)}>"
