"""Routing: template parsing, compiled matching, URL building and scoping.

Routes are registered in order, grouped by literal path, and compiled
into one regex on the first match after a change.
"""

from signpost.routing.route import Match, Route, RouteGroup
from signpost.routing.router import Router
from signpost.routing.submapper import RESOURCE_ROUTES, Submapper, current_scope

__all__ = [
    "RESOURCE_ROUTES",
    "Match",
    "Route",
    "RouteGroup",
    "Router",
    "Submapper",
    "current_scope",
]
