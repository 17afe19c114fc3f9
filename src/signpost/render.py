"""Plain-text route table.

One row per route in registration order::

    entry    GET       /entries/{year}/{month}/{day}  {'controller': 'Blog'}
    upload   POST,PUT  /upload                        {'controller': 'Upload'}
             *         /ping                          {'controller': 'Health'}

Column alignment is left to ``tabulate``.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from tabulate import tabulate

if TYPE_CHECKING:
    from signpost.routing.route import Route

HEADERS = ("NAME", "METHODS", "PATH", "PAYLOAD")


def route_rows(routes: "Iterable[Route]") -> list[tuple[str, str, str, str]]:
    """(name, methods, path, payload) cells; ``*`` marks routes open to any method."""
    return [
        (route.name or "", ",".join(route.methods) or "*", route.path, repr(dict(route.payload)))
        for route in routes
    ]


def render_routes(routes: "Iterable[Route]", *, table_format: str = "plain", headers: bool = False) -> str:
    """Render *routes* as an aligned table, one line per route.

    Returns an empty string when there are no routes.
    """
    rows = route_rows(routes)
    if not rows:
        return ""
    table = tabulate(
        rows,
        headers=HEADERS if headers else (),
        tablefmt=table_format,
        disable_numparse=True,
    )
    return table + "\n"
