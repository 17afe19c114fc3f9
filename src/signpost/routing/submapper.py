"""Nested route definition scopes and resource scaffolding.

A ``Submapper`` accumulates a name prefix, a path prefix, payload
defaults and default methods, and hands every ``add()`` to its parent
with those applied.  Scopes nest; the chain always ends at a ``Router``.

Three equivalent styles::

    admin = router.scope("admin", "/admin", "shop.admin")
    admin.add("users", "/users", ".users#index")

    with router.scope("admin", "/admin", "shop.admin") as admin:
        admin.add("users", "/users", ".users#index")

    def admin_routes(scope):
        current_scope().add("users", "/users", ".users#index")

    router.scope("admin", "/admin", "shop.admin", call=admin_routes)

Each registers ``admin_users`` at ``/admin/users`` with payload
``{"controller": "shop.admin.users", "action": "index"}``.
"""

from collections.abc import Callable, Mapping
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union

from signpost.config import RouterConfig
from signpost.routing.definition import (
    MethodsArg,
    coerce_payload,
    merge_payload,
    normalize_methods,
    split_route_spec,
)

if TYPE_CHECKING:
    from signpost.routing.router import Router

scope_var: ContextVar["Submapper"] = ContextVar("signpost_scope")
"""The scope whose ``call`` callback or ``with`` block is running."""


def current_scope() -> "Submapper":
    """Return the scope currently being defined.

    Raises ``LookupError`` outside a ``call`` callback or ``with`` block.
    """
    return scope_var.get()


@dataclass(frozen=True, slots=True)
class ResourceRoute:
    """One row of the resource scaffolding table.

    ``name`` is formatted with ``member`` and ``collection``; ``path`` is
    relative to ``/{collection}``.
    """

    name: str
    method: str
    path: str
    action: str


# Member ids exclude "." so "/messages/5.json" falls through to the formatted route.
RESOURCE_ROUTES: tuple[ResourceRoute, ...] = (
    ResourceRoute("{collection}", "GET", "", "index"),
    ResourceRoute("create_{member}", "POST", "", "create"),
    ResourceRoute("formatted_{collection}", "GET", "{.format}", "index"),
    ResourceRoute("new_{member}", "GET", "/new", "new"),
    ResourceRoute("formatted_new_{member}", "GET", "/new{.format}", "new"),
    ResourceRoute("{member}", "GET", "/{id:[^/.]+}", "show"),
    ResourceRoute("update_{member}", "PUT", "/{id:[^/.]+}", "update"),
    ResourceRoute("delete_{member}", "DELETE", "/{id:[^/.]+}", "delete"),
    ResourceRoute("formatted_{member}", "GET", "/{id:[^/.]+}{.format}", "show"),
    ResourceRoute("edit_{member}", "GET", "/{id:[^/.]+}/edit", "edit"),
    ResourceRoute("formatted_edit_{member}", "GET", "/{id:[^/.]+}/edit{.format}", "edit"),
)


class Submapper:
    """A transient scope for nested route definitions.

    Args:
        parent: The ``Router`` or enclosing ``Submapper``.
        name: Joined onto nested route names with ``RouterConfig.name_separator``.
        path: Prepended verbatim to nested paths.  May carry a method
            prefix (``"GET /admin"``) that becomes a default.
        payload: Defaults merged under each nested payload.  A nested
            controller starting with ``RouterConfig.controller_marker``
            is appended to this scope's controller.
        methods: Default methods, merged with each nested route's own.
        call: Invoked once with the new scope before the constructor
            returns; ``current_scope()`` also yields it meanwhile.
    """

    __slots__ = ("_parent", "_tokens", "methods", "name", "path", "payload")

    def __init__(
        self,
        parent: Union["Router", "Submapper"],
        name: str | None = None,
        path: str = "",
        payload: Mapping[str, Any] | str | None = None,
        *,
        methods: MethodsArg = None,
        call: Callable[["Submapper"], Any] | None = None,
    ) -> None:
        spec_methods, path = split_route_spec(path or "", scoped=True)
        self._parent = parent
        self._tokens: list[Token[Submapper]] = []
        self.name = name or None
        self.path = path
        self.payload = coerce_payload(payload)
        self.methods = normalize_methods(methods, spec_methods)

        if call is not None:
            with self:
                call(self)

    @property
    def config(self) -> RouterConfig:
        return self._parent.config

    @property
    def parent(self) -> Union["Router", "Submapper"]:
        return self._parent

    def __enter__(self) -> "Submapper":
        self._tokens.append(scope_var.set(self))
        return self

    def __exit__(self, *exc_info: object) -> None:
        scope_var.reset(self._tokens.pop())

    def _join_name(self, name: str | None) -> str | None:
        parts = [part for part in (self.name, name) if part]
        return self.config.name_separator.join(parts) or None

    def add(
        self,
        name: str | None,
        spec: str = "",
        payload: Mapping[str, Any] | str | None = None,
        *,
        methods: MethodsArg = None,
    ) -> "Submapper":
        """Add a route inside this scope and return the scope for chaining.

        *spec* is relative to the scope's path and may be empty or a bare
        method list (``"GET"``) when the scope path is the full path.
        """
        spec_methods, path = split_route_spec(spec, scoped=True)
        merged = merge_payload(self.payload, coerce_payload(payload), marker=self.config.controller_marker)
        self._parent.add(
            self._join_name(name),
            self.path + path,
            merged,
            methods=normalize_methods(self.methods, methods, spec_methods),
        )
        return self

    def scope(
        self,
        name: str | None = None,
        path: str = "",
        payload: Mapping[str, Any] | str | None = None,
        *,
        methods: MethodsArg = None,
        call: Callable[["Submapper"], Any] | None = None,
    ) -> "Submapper":
        """Open a scope nested in this one."""
        return Submapper(self, name, path, payload, methods=methods, call=call)

    def resource(
        self,
        member: str,
        payload: Mapping[str, Any] | str | None = None,
        *,
        collection: str | None = None,
    ) -> "Submapper":
        """Register the eleven CRUD routes for *member* under ``/{collection}``.

        *collection* defaults to ``RouterConfig.pluralize(member)``.  For
        ``resource("message", "Message")``:

        ========================  ======  =============================  ======
        name                      method  path                           action
        ========================  ======  =============================  ======
        messages                  GET     /messages                      index
        create_message            POST    /messages                      create
        formatted_messages        GET     /messages{.format}             index
        new_message               GET     /messages/new                  new
        formatted_new_message     GET     /messages/new{.format}         new
        message                   GET     /messages/{id}                 show
        update_message            PUT     /messages/{id}                 update
        delete_message            DELETE  /messages/{id}                 delete
        formatted_message         GET     /messages/{id}{.format}        show
        edit_message              GET     /messages/{id}/edit            edit
        formatted_edit_message    GET     /messages/{id}/edit{.format}   edit
        ========================  ======  =============================  ======

        Names, paths and payload are further scoped by this submapper.
        """
        collection = collection or self.config.pluralize(member)
        scope = Submapper(self, None, f"/{collection}", payload)
        for row in RESOURCE_ROUTES:
            scope.add(
                row.name.format(member=member, collection=collection),
                f"{row.method} {row.path}",
                {"action": row.action},
            )
        return self

    def __repr__(self) -> str:
        return f"<Submapper name={self.name!r} path={self.path!r}>"
