"""Route definition inputs: spec strings, method lists and payloads.

A route spec is ``[METHODS ]PATH``::

    "/users"                -> (None, "/users")
    "GET|POST /users"       -> ("GET|POST", "/users")
    "get, head /users/{id}" -> ("get, head", "/users/{id}")

Payloads are mappings, or the ``"Controller#action"`` shorthand.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from signpost.errors import InvalidRouteSpec, MissingRoutePath

_ROUTE_SPEC = re.compile(r"\s*(?:(?P<methods>[^/{]+?)\s+)?(?P<path>[/{].*)", re.DOTALL)
_METHOD_TOKENS = r"[A-Za-z*]+(?:\s*[|,]\s*[A-Za-z*]+)*"
_SCOPED_SPEC = re.compile(rf"\s*(?:(?P<methods>{_METHOD_TOKENS})\s+)?(?P<path>[/{{.].*)", re.DOTALL)
# Scoped specs may omit the path entirely ("GET"), the scope supplies it.
_BARE_METHODS = re.compile(rf"\s*(?P<methods>{_METHOD_TOKENS})?\s*")
_HTTP_METHODS = frozenset(
    {"CONNECT", "DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT", "TRACE", "*"}
)
_METHOD_SPLIT = re.compile(r"[|,]")

MethodsArg = str | Iterable[str] | None


def split_route_spec(spec: str | None, *, scoped: bool = False) -> tuple[str | None, str]:
    """Split a route spec into its method list (or ``None``) and path.

    With ``scoped=True`` the path may be empty or start with ``.``, since
    a ``Submapper`` prepends its own path prefix before validation.  A
    path-less scoped spec must then consist of HTTP methods only, so
    ``"GET|PUT"`` is accepted and ``"users"`` is not.
    """
    if spec is None or (not scoped and not spec.strip()):
        msg = "No route path supplied"
        raise MissingRoutePath(msg)

    if scoped and (bare := _BARE_METHODS.fullmatch(spec)) is not None:
        methods = bare.group("methods")
        if methods is None:
            return None, ""
        if all(m.strip().upper() in _HTTP_METHODS for m in _METHOD_SPLIT.split(methods)):
            return methods, ""
        msg = f"Invalid route path specification {spec!r}"
        raise InvalidRouteSpec(msg)

    found = (_SCOPED_SPEC if scoped else _ROUTE_SPEC).fullmatch(spec)
    if found is None:
        msg = f"Invalid route path specification {spec!r}"
        raise InvalidRouteSpec(msg)
    return found.group("methods"), found.group("path") or ""


def normalize_methods(*sources: MethodsArg) -> tuple[str, ...]:
    """Merge method lists into a sorted, deduplicated, upper-case tuple.

    Each source is ``None``, a ``"GET|POST"`` / ``"GET, POST"`` string, or
    an iterable of such strings.  A ``*`` anywhere means "any method" and
    yields the empty tuple.
    """
    methods: set[str] = set()
    for source in sources:
        if source is None:
            continue
        items = [source] if isinstance(source, str) else source
        for item in items:
            for method in _METHOD_SPLIT.split(item):
                method = method.strip().upper()
                if method:
                    methods.add(method)
    if "*" in methods:
        return ()
    return tuple(sorted(methods))


def coerce_payload(payload: Mapping[str, Any] | str | None) -> dict[str, Any] | None:
    """Turn a payload argument into a fresh dict.

    ``"Blog#show"`` becomes ``{"controller": "Blog", "action": "show"}``,
    ``"Blog"`` only sets the controller and ``"#show"`` only the action.
    """
    if payload is None:
        return None
    if isinstance(payload, str):
        controller, sep, action = payload.partition("#")
        result: dict[str, Any] = {}
        if controller:
            result["controller"] = controller
        if sep and action:
            result["action"] = action
        return result
    if isinstance(payload, Mapping):
        return dict(payload)
    msg = f"Payload must be a mapping or a 'Controller#action' string, got {type(payload).__name__}"
    raise TypeError(msg)


def merge_payload(
    inherited: Mapping[str, Any] | None,
    own: Mapping[str, Any] | None,
    *,
    marker: str = ".",
) -> dict[str, Any] | None:
    """Overlay *own* on *inherited*.

    Keys in *own* win, except a ``controller`` that starts with *marker*,
    which is appended to the inherited controller instead (and kept as
    given when nothing is inherited)::

        merge_payload({"controller": "shop.admin"}, {"controller": ".users"})
        -> {"controller": "shop.admin.users"}
    """
    if inherited is None and own is None:
        return None
    merged = dict(inherited or {})
    for key, value in (own or {}).items():
        if key == "controller" and isinstance(value, str) and marker and value.startswith(marker):
            base = merged.get("controller")
            if isinstance(base, str):
                value = f"{base}{value}"
        merged[key] = value
    return merged
