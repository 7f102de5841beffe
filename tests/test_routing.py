"""Test route definitions."""

import pytest

from route_composer.exceptions import InvalidConfiguration
from route_composer.routing import Route


def test_route_defaults():
    """Should start unconstrained and empty."""
    route = Route("/here")
    assert route.path == "/here"
    assert route.handler is None
    assert route.methods == ["*"]
    assert route.defaults == {}
    assert route.params == {}
    assert route.before_tags == []
    assert route.after_tags == []
    assert route.namespace == ""
    assert route.name == ""


def test_fluent_setters_chain(funct):
    """Setters mutate the route and return it."""
    route = Route.from_path("/this-path")
    same = (
        route.to(funct)
        .before("SomeClass", "AnotherClass")
        .after("OneMore")
        .in_namespace("app.controllers")
        .named("this.path")
        .set_path("/that-path")
    )
    assert same is route
    assert route.path == "/that-path"
    assert route.handler is funct
    assert route.before_tags == ["SomeClass", "AnotherClass"]
    assert route.after_tags == ["OneMore"]
    assert route.namespace == "app.controllers"
    assert route.name == "this.path"


def test_static_constructors():
    """Method constructors set a single method."""
    assert Route.get("/p").methods == ["GET"]
    assert Route.post("/p").methods == ["POST"]
    assert Route.put("/p").methods == ["PUT"]
    assert Route.patch("/p").methods == ["PATCH"]
    assert Route.delete("/p").methods == ["DELETE"]
    assert Route.from_path("/p").methods == ["*"]


def test_allow_uppercases_and_replaces():
    """Methods are uppercased, collapsed and replace earlier ones."""
    route = Route("/p").allow("get", "POST", "Get", "other")
    assert route.methods == ["GET", "POST", "OTHER"]

    route.allow("delete")
    assert route.methods == ["DELETE"]


def test_tags_replace_and_dedup():
    """Tag setters replace the previous list and drop duplicates."""
    route = Route("/p").before("a", "b", "a").after("x")
    assert route.before_tags == ["a", "b"]

    route.before("c")
    route.after("y", "y", "z")
    assert route.before_tags == ["c"]
    assert route.after_tags == ["y", "z"]


def test_defaults_bulk_and_single():
    """Bulk defaults replace the map, single defaults upsert."""
    route = Route("/p").default("id", 123).default("page")
    assert route.defaults == {"id": 123, "page": None}

    route.set_defaults({"lang": "en"})
    assert route.defaults == {"lang": "en"}

    route.default("lang", "fr")
    assert route.defaults == {"lang": "fr"}


def test_from_dict():
    """Create routes from declarative descriptions."""
    route = Route.from_dict(
        {
            "path": "/",
            "to": "test_controller",
            "before": ["SomeClass", "AnotherClass"],
            "after": ["OneMore"],
            "defaults": {"input": "output"},
        }
    )
    assert route.path == "/"
    assert route.handler == "test_controller"
    assert route.methods == ["*"]
    assert route.before_tags == ["SomeClass", "AnotherClass"]
    assert route.after_tags == ["OneMore"]
    assert route.defaults == {"input": "output"}

    route = Route.from_dict(
        {
            "from": "/",
            "handler": "test_controller",
            "methods": ["post", "PUT"],
            "name": "route.name",
        }
    )
    assert route.path == "/"
    assert route.methods == ["POST", "PUT"]
    assert route.name == "route.name"

    route = Route.from_dict(
        {"path": "/", "to": "test_controller", "methods": "post PUT", "namespace": "ns"}
    )
    assert route.methods == ["POST", "PUT"]
    assert route.namespace == "ns"


def test_from_dict_methods_string_punctuation():
    """Method strings split on any non-word characters."""
    route = Route.from_dict({"path": "/", "methods": " get, post|put "})
    assert route.methods == ["GET", "POST", "PUT"]


def test_from_dict_handler_precedence():
    """``handler`` is used before ``to``."""
    route = Route.from_dict({"path": "/", "handler": "first", "to": "second"})
    assert route.handler == "first"


def test_from_dict_missing_path():
    """A description without path or from is rejected."""
    with pytest.raises(InvalidConfiguration):
        Route.from_dict({"to": "test_controller"})

    with pytest.raises(ValueError):
        Route.from_dict({})


def test_get_param_order():
    """Bound params win over fallback, fallback over defaults."""
    route = Route("/this-path[/{id}]").to("some_controller").default("id", 123)

    assert route.get_param("id") == 123
    assert route.get_param("id", 234) == 234
    assert route.get_param("nothing") is None

    route.set_params({"id": "7"})
    assert route.get_param("id", 234) == "7"


def test_get_params_merged():
    """Bound params are merged over defaults."""
    route = Route("/this-path[/{id}]").default("id", 123).default("a", 0)
    route.set_params({"a": 1, "b": 2})

    assert route.has_param("a")
    assert route.has_param("id")
    assert not route.has_param("c")
    assert route.get_params() == {"id": 123, "a": 1, "b": 2}


def test_rest_param_split():
    """The rest param is split on slashes, but not in the merged view."""
    route = Route("/s/{rest:.*}")
    route.set_params({"rest": "a/b/c"})

    assert route.get_param("rest") == ["a", "b", "c"]
    assert route.get_params()["rest"] == "a/b/c"

    route = Route("/s[/{rest:.*}]").default("rest", "x/y")
    assert route.get_param("rest") == ["x", "y"]
    assert route.get_param("rest", "only") == ["only"]
    assert Route("/s").get_param("rest") is None


def test_copy_is_independent():
    """Copies share no containers with the original."""
    route = Route("/p").allow("GET").before("a").default("id", 1).named("p")
    clone = route.copy()
    assert clone == route
    assert clone is not route

    clone.methods.append("POST")
    clone.before_tags.append("b")
    clone.defaults["id"] = 2
    assert route.methods == ["GET"]
    assert route.before_tags == ["a"]
    assert route.defaults == {"id": 1}
    assert clone != route
