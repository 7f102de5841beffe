"""Route definitions and their fluent builder."""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from route_composer.exceptions import InvalidConfiguration
from route_composer.patterns import methods_delimiter
from route_composer.types import NodeKind

ANY_METHOD = "*"


def _unique(items: Iterable[Any]) -> List[Any]:
    """Drop repeated items, keeping the first occurrence order."""
    seen: List[Any] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


def _normalize_methods(methods: Iterable[str]) -> List[str]:
    return _unique(method.upper() for method in methods)


def _methods_from_value(value: Any) -> List[str]:
    if isinstance(value, str):
        methods = [m for m in methods_delimiter.split(value.upper()) if m]
    else:
        methods = [str(m).upper() for m in value]
    return methods or [ANY_METHOD]


class Route:
    """A routable endpoint.

    Setters mutate the route in place and return it, so definitions read
    as a chain::

        Route.get("/users/{id}").to("users.view").named("user.view")
    """

    kind = NodeKind.ROUTE

    def __init__(self, path: str = "") -> None:
        """Initialize route object."""
        self.path: str = path
        self.handler: Any = None
        self.methods: List[str] = [ANY_METHOD]
        self.defaults: Dict[str, Any] = {}
        self.params: Dict[str, Any] = {}
        self.before_tags: List[str] = []
        self.after_tags: List[str] = []
        self.namespace: str = ""
        self.name: str = ""

    def __repr__(self) -> str:
        return f"<Route {self.path} {' '.join(self.methods)} {self.name or '-'}>"

    def __eq__(self, other) -> bool:
        """Check for equality."""
        if not isinstance(other, Route):
            return NotImplemented
        return self.__dict__ == other.__dict__

    @classmethod
    def from_path(cls, path: str) -> "Route":
        return cls(path)

    @classmethod
    def get(cls, path: str) -> "Route":
        return cls(path).allow("GET")

    @classmethod
    def post(cls, path: str) -> "Route":
        return cls(path).allow("POST")

    @classmethod
    def put(cls, path: str) -> "Route":
        return cls(path).allow("PUT")

    @classmethod
    def patch(cls, path: str) -> "Route":
        return cls(path).allow("PATCH")

    @classmethod
    def delete(cls, path: str) -> "Route":
        return cls(path).allow("DELETE")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Route":
        """Create a route from a declarative description.

        Recognized keys are ``path`` (or ``from``), ``handler`` (or ``to``),
        ``methods``, ``defaults``, ``before``, ``after``, ``namespace`` and
        ``name``. Only the path is required.

        ``methods`` may be a single string such as ``"get, post"`` or a list.
        """
        if not isinstance(data, Mapping):
            raise InvalidConfiguration(
                f"Route description must be a mapping: {data!r}"
            )

        path = data.get("path")
        if path is None:
            path = data.get("from")
        if path is None:
            raise InvalidConfiguration(
                f"Route description needs a `path` or `from` key: {dict(data)!r}"
            )

        route = cls(path)
        if data.get("methods") is not None:
            route.methods = _unique(_methods_from_value(data["methods"]))

        handler = data.get("handler")
        if handler is None:
            handler = data.get("to")
        if handler is not None:
            route.to(handler)

        if data.get("defaults") is not None:
            route.set_defaults(data["defaults"])
        if data.get("before") is not None:
            route.before(*data["before"])
        if data.get("after") is not None:
            route.after(*data["after"])
        if data.get("namespace") is not None:
            route.in_namespace(data["namespace"])
        if data.get("name") is not None:
            route.named(data["name"])

        return route

    def set_path(self, path: str) -> "Route":
        self.path = path
        return self

    def set_handler(self, handler: Any) -> "Route":
        self.handler = handler
        return self

    def to(self, handler: Any) -> "Route":
        """Set the route handler, either a string template or a callable."""
        return self.set_handler(handler)

    def allow(self, *methods: str) -> "Route":
        """Replace the accepted HTTP methods."""
        self.methods = _normalize_methods(methods)
        return self

    def set_defaults(self, defaults: Mapping[str, Any]) -> "Route":
        self.defaults = dict(defaults)
        return self

    def default(self, key: str, value: Any = None) -> "Route":
        """Set the default value of a single placeholder."""
        self.defaults[key] = value
        return self

    def before(self, *tags: str) -> "Route":
        """Replace the 'before' tag list."""
        self.before_tags = _unique(tags)
        return self

    def after(self, *tags: str) -> "Route":
        """Replace the 'after' tag list."""
        self.after_tags = _unique(tags)
        return self

    def in_namespace(self, namespace: str) -> "Route":
        self.namespace = namespace
        return self

    def named(self, name: str) -> "Route":
        self.name = name
        return self

    def set_params(self, params: Mapping[str, Any]) -> "Route":
        self.params = dict(params)
        return self

    def get_param(self, key: str, fallback: Any = None) -> Any:
        """Get the value of a route parameter.

        Bound parameters win over ``fallback``, which wins over the route
        defaults. The ``rest`` parameter is returned split on ``/``.
        """
        value: Optional[Any] = self.params.get(key)
        if value is None:
            value = fallback
        if value is None:
            value = self.defaults.get(key)

        if key == "rest" and value is not None:
            return str(value).split("/")
        return value

    def get_params(self) -> Dict[str, Any]:
        """Return the defaults merged with the bound parameters."""
        return {**self.defaults, **self.params}

    def has_param(self, key: str) -> bool:
        return self.params.get(key) is not None or self.defaults.get(key) is not None

    def copy(self) -> "Route":
        """Return a snapshot that shares no containers with this route."""
        clone = Route(self.path)
        clone.handler = self.handler
        clone.methods = list(self.methods)
        clone.defaults = dict(self.defaults)
        clone.params = dict(self.params)
        clone.before_tags = list(self.before_tags)
        clone.after_tags = list(self.after_tags)
        clone.namespace = self.namespace
        clone.name = self.name
        return clone
