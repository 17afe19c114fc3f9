"""Signpost: framework-agnostic URL routing.

Maps a request path (and optionally a method) to the payload of a
registered route, and builds URLs back from route names.

Basic usage::

    from signpost import Router

    router = Router()
    router.add("entry", "GET /entries/{year}/{month}/{day}", "Blog#entry")

    router.match("/entries/1916/08/14")
    # {'controller': 'Blog', 'action': 'entry', 'year': '1916', 'month': '08', 'day': '14'}

    router.url("entry", year="1916", month="08", day="14")
    # '/entries/1916/08/14'

Nested scopes and resources::

    with router.scope("admin", "/admin", "shop.admin") as admin:
        admin.add("status", "GET /status")
        admin.resource("user", ".users")
"""

__version__ = "0.1.0"
__all__ = [
    "HTTP_METHOD_NOT_ALLOWED",
    "HTTP_NOT_FOUND",
    "DuplicatePlaceholder",
    "DuplicateRouteName",
    "HTTPError",
    "InvalidPlaceholderName",
    "InvalidPlaceholderPattern",
    "InvalidPlaceholderValue",
    "InvalidRouteSpec",
    "Match",
    "MethodNotAllowed",
    "MissingPayload",
    "MissingRequiredParam",
    "MissingRoutePath",
    "NotFound",
    "RouteDefinitionError",
    "Router",
    "RouterConfig",
    "SignpostError",
    "Submapper",
    "UnknownRouteName",
    "current_scope",
]

_ERRORS = frozenset(
    {
        "HTTP_METHOD_NOT_ALLOWED",
        "HTTP_NOT_FOUND",
        "DuplicatePlaceholder",
        "DuplicateRouteName",
        "HTTPError",
        "InvalidPlaceholderName",
        "InvalidPlaceholderPattern",
        "InvalidPlaceholderValue",
        "InvalidRouteSpec",
        "MethodNotAllowed",
        "MissingPayload",
        "MissingRequiredParam",
        "MissingRoutePath",
        "NotFound",
        "RouteDefinitionError",
        "SignpostError",
        "UnknownRouteName",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import signpost`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from signpost.routing.router import Router

        return Router

    if name == "RouterConfig":
        from signpost.config import RouterConfig

        return RouterConfig

    if name == "Match":
        from signpost.routing.route import Match

        return Match

    if name in ("Submapper", "current_scope"):
        from signpost.routing import submapper as _submapper

        return getattr(_submapper, name)

    if name in _ERRORS:
        from signpost import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
