"""Signpost exception hierarchy.

Shared across the template parser, Router, Submapper and URL builder so
every module raises and catches the same types.

Definition-time problems (bad templates, duplicate names, missing
payloads) raise immediately and leave the router untouched.  Match-time
misses are not exceptions: ``Router.match()`` returns ``None`` and
records one of the status constants below on ``Router.error``.
``Router.resolve()`` is the raising variant and uses the ``HTTPError``
subclasses.
"""

from collections.abc import Iterable
from typing import ClassVar

HTTP_NOT_FOUND = 404
HTTP_METHOD_NOT_ALLOWED = 405


class SignpostError(Exception):
    """Base for all signpost-specific errors."""


class RouteDefinitionError(SignpostError):
    """Raised when a route, template or URL request is malformed.

    The registry is never modified when one of these is raised.
    """


class InvalidRouteSpec(RouteDefinitionError):  # noqa: N818
    """The route spec is not ``[METHODS ]PATH`` with PATH starting at ``/`` or ``{``."""


class MissingRoutePath(RouteDefinitionError):  # noqa: N818
    """No route path was supplied."""


class InvalidPlaceholderName(RouteDefinitionError):  # noqa: N818
    """A placeholder name is empty or contains ``/``."""


class InvalidPlaceholderPattern(RouteDefinitionError):  # noqa: N818
    """A placeholder constraint is not a valid regular expression, or names its own groups."""


class DuplicatePlaceholder(RouteDefinitionError):  # noqa: N818
    """The same placeholder name appears twice in one template."""


class DuplicateRouteName(RouteDefinitionError):  # noqa: N818
    """A route with this name is already registered."""


class MissingPayload(RouteDefinitionError):  # noqa: N818
    """``add()`` was called without a payload."""


class UnknownRouteName(RouteDefinitionError):  # noqa: N818
    """Neither a registered route name nor a literal path starting with ``/``."""


class MissingRequiredParam(RouteDefinitionError):  # noqa: N818
    """``url()`` was not given a value for a required placeholder."""


class InvalidPlaceholderValue(RouteDefinitionError):  # noqa: N818
    """A ``url()`` value does not satisfy its placeholder's constraint."""


class HTTPError(SignpostError):
    """A ``Router.resolve()`` failure that maps onto an HTTP status.

    Keeps the request that failed, so a web layer can answer with
    ``status`` and ``headers`` without asking the router again.
    """

    status: ClassVar[int]

    def __init__(self, path: str, method: str | None = None) -> None:
        self.path = path
        self.method = method.upper() if method else None
        super().__init__(f"{self.status}: {self.detail}")

    @property
    def detail(self) -> str:
        return f"{self.method or '*'} {self.path!r}"

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return ()


class NotFound(HTTPError):  # noqa: N818
    """404: no route template matched the path."""

    status = HTTP_NOT_FOUND

    @property
    def detail(self) -> str:
        return f"No route matches {super().detail}"


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405: the path matched, but no route in its group accepts the method."""

    status = HTTP_METHOD_NOT_ALLOWED

    def __init__(self, path: str, method: str | None, allowed: Iterable[str]) -> None:
        self.allowed = tuple(sorted(allowed))
        super().__init__(path, method)

    @property
    def detail(self) -> str:
        return f"{self.method or '*'} not allowed for {self.path!r}, allowed: {', '.join(self.allowed)}"

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return (("Allow", ", ".join(self.allowed)),)
