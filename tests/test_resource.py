"""Tests for resource scaffolding: Router.resource() / Submapper.resource()."""

import pytest

from signpost.config import RouterConfig
from signpost.routing.router import Router
from signpost.routing.submapper import RESOURCE_ROUTES

MESSAGE_ROUTES = [
    ("messages", ("GET",), "/messages", "index"),
    ("create_message", ("POST",), "/messages", "create"),
    ("formatted_messages", ("GET",), "/messages{.format}", "index"),
    ("new_message", ("GET",), "/messages/new", "new"),
    ("formatted_new_message", ("GET",), "/messages/new{.format}", "new"),
    ("message", ("GET",), "/messages/{id:[^/.]+}", "show"),
    ("update_message", ("PUT",), "/messages/{id:[^/.]+}", "update"),
    ("delete_message", ("DELETE",), "/messages/{id:[^/.]+}", "delete"),
    ("formatted_message", ("GET",), "/messages/{id:[^/.]+}{.format}", "show"),
    ("edit_message", ("GET",), "/messages/{id:[^/.]+}/edit", "edit"),
    ("formatted_edit_message", ("GET",), "/messages/{id:[^/.]+}/edit{.format}", "edit"),
]


def _messages() -> Router:
    return Router().resource("message", "Message")


class TestResourceTable:
    def test_eleven_rows(self) -> None:
        assert len(RESOURCE_ROUTES) == 11

    def test_routes(self) -> None:
        r = _messages()
        assert len(r) == 11
        assert [
            (route.name, route.methods, route.path, route.payload["action"]) for route in r.routes
        ] == MESSAGE_ROUTES
        assert {route.payload["controller"] for route in r.routes} == {"Message"}

    def test_collection_override(self) -> None:
        r = Router().resource("person", {"controller": "People"}, collection="folks")
        assert r.routes[0].path == "/folks"
        assert r.routes[0].name == "folks"
        assert "new_person" in r

    def test_default_pluralizer(self) -> None:
        r = Router().resource("person", "People")
        assert r.routes[0].path == "/people"

    def test_configured_pluralizer(self) -> None:
        r = Router(RouterConfig(pluralize=lambda word: word + "z")).resource("cat", "Cat")
        assert r.routes[0].path == "/catz"
        assert "catz" in r

    def test_without_payload(self) -> None:
        r = Router().resource("message")
        assert r.match("/messages/new") == {"action": "new"}


class TestResourceMatching:
    @pytest.mark.parametrize(
        ("method", "path", "expected"),
        [
            ("GET", "/messages", {"action": "index"}),
            ("POST", "/messages", {"action": "create"}),
            ("GET", "/messages.json", {"action": "index", "format": "json"}),
            ("GET", "/messages/new", {"action": "new"}),
            ("GET", "/messages/new.xml", {"action": "new", "format": "xml"}),
            ("GET", "/messages/5", {"action": "show", "id": "5"}),
            ("PUT", "/messages/5", {"action": "update", "id": "5"}),
            ("DELETE", "/messages/5", {"action": "delete", "id": "5"}),
            ("GET", "/messages/5.json", {"action": "show", "id": "5", "format": "json"}),
            ("GET", "/messages/5/edit", {"action": "edit", "id": "5"}),
            ("GET", "/messages/5/edit.json", {"action": "edit", "id": "5", "format": "json"}),
        ],
    )
    def test_dispatch(self, method: str, path: str, expected: dict[str, str]) -> None:
        assert _messages().match(path, method) == {"controller": "Message", **expected}

    def test_formatted_show_route(self) -> None:
        result = _messages().match("/messages/5.json", "GET")
        assert result is not None
        assert result.route.name == "formatted_message"

    def test_unsupported_method(self) -> None:
        r = _messages()
        assert r.match("/messages/5", "PATCH") is None
        assert r.error == 405
        assert r.allowed_methods() == ["DELETE", "GET", "PUT"]

    def test_new_is_not_an_id(self) -> None:
        r = _messages()
        assert r.match("/messages/new", "PUT") is None
        assert r.error == 405


class TestResourceUrls:
    def test_member_urls(self) -> None:
        r = _messages()
        assert r.url("message", id=5) == "/messages/5"
        assert r.url("edit_message", id=5) == "/messages/5/edit"
        assert r.url("formatted_message", id=5, format="xml") == "/messages/5.xml"
        assert r.url("messages", page=2) == "/messages?page=2"


class TestNestedResource:
    def test_scoped_names_paths_and_controller(self) -> None:
        r = Router()
        r.scope("admin", "/admin", "shop.admin").resource("user", ".users")
        assert len(r) == 11
        route = r.get_route("admin_users")
        assert route is not None
        assert route.path == "/admin/users"
        assert r.match("/admin/users/7/edit") == {
            "controller": "shop.admin.users",
            "action": "edit",
            "id": "7",
        }
        assert r.url("admin_edit_user", id=7) == "/admin/users/7/edit"

    def test_returns_scope_for_chaining(self) -> None:
        r = Router()
        admin = r.scope("admin", "/admin", "Admin")
        assert admin.resource("user").resource("group") is admin
        assert len(r) == 22
