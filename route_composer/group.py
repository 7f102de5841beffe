"""Route groups and tree flattening."""

import json
import os
import runpy
from typing import Any, Callable, Iterable, List, Optional, Union

from route_composer.exceptions import InvalidConfiguration, InvalidRouteType
from route_composer.patterns import collapse_slashes
from route_composer.routing import ANY_METHOD, Route, _normalize_methods, _unique
from route_composer.types import NodeKind

Node = Union[Route, "Group"]


def _check_node(node: Any) -> None:
    if getattr(node, "kind", None) not in (NodeKind.ROUTE, NodeKind.GROUP):
        raise InvalidRouteType(
            f"Routes must be instances of `Route` or `Group`, got {type(node).__name__}"
        )


class Group:
    """A set of routes and sub-groups sharing a prefix, tags, handler and methods."""

    kind = NodeKind.GROUP

    def __init__(self) -> None:
        """Initialize group object."""
        self.path_prefix: str = ""
        self.before_tags: List[str] = []
        self.after_tags: List[str] = []
        self.default_handler: Any = None
        self.default_methods: List[str] = [ANY_METHOD]
        self.children: List[Node] = []

    def prefix(self, prefix: str) -> "Group":
        self.path_prefix = prefix
        return self

    def before(self, *tags: str) -> "Group":
        """Add 'before' tags shared by every route in the group."""
        self.before_tags = _unique([*self.before_tags, *tags])
        return self

    def after(self, *tags: str) -> "Group":
        """Add 'after' tags shared by every route in the group."""
        self.after_tags = _unique([*self.after_tags, *tags])
        return self

    def handler(self, handler: Any) -> "Group":
        """Set a handler for routes without one."""
        self.default_handler = handler
        return self

    def allow(self, *methods: str) -> "Group":
        """Set the methods of routes that do not declare their own."""
        self.default_methods = _normalize_methods(methods)
        return self

    def add_route(self, route: Node) -> "Group":
        _check_node(route)
        self.children.append(route)
        return self

    def add_routes(self, routes: Iterable[Node]) -> "Group":
        for route in routes:
            self.add_route(route)
        return self

    def group(
        self,
        prefix_or_callback: Union[str, Callable[["Group"], Any], None] = None,
        callback: Optional[Callable[["Group"], Any]] = None,
    ) -> "Group":
        """Add a sub-group and return it.

        The first argument is either the sub-group prefix or a callback. The
        callback receives the new group right away so it can add routes::

            router.group("/admin", lambda admin: admin.get("/dashboard"))
        """
        sub = Group()
        if callable(prefix_or_callback):
            callback = prefix_or_callback
        elif prefix_or_callback is not None:
            sub.prefix(prefix_or_callback)

        self.children.append(sub)

        if callback is not None:
            callback(sub)
        return sub

    def mount(self, prefix: str, group: "Group") -> "Group":
        """Add the routes of another group or router under ``prefix``."""
        if getattr(group, "kind", None) is not NodeKind.GROUP:
            raise InvalidRouteType(
                f"Only groups can be mounted, got {type(group).__name__}"
            )
        group.prefix(prefix)
        self.children.append(group)
        return self

    def route(self, path: str, *methods: str) -> Route:
        """Add a route, accepting GET and POST unless methods are given."""
        route = Route(path).allow(*(methods or ("GET", "POST")))
        self.add_route(route)
        return route

    def get(self, path: str) -> Route:
        return self.route(path, "GET")

    def post(self, path: str) -> Route:
        return self.route(path, "POST")

    def put(self, path: str) -> Route:
        return self.route(path, "PUT")

    def patch(self, path: str) -> Route:
        return self.route(path, "PATCH")

    def delete(self, path: str) -> Route:
        return self.route(path, "DELETE")

    def options(self, path: str) -> Route:
        return self.route(path, "OPTIONS")

    def head(self, path: str) -> Route:
        return self.route(path, "HEAD")

    def load_file(self, filename: str, alias: str = "router") -> "Group":
        """Read routes from a file.

        A ``.json`` file holds a list of route descriptions (see
        ``Route.from_dict``). Any other file is run as Python with this
        group available as the global ``alias``.
        """
        if not (os.path.isfile(filename) and os.access(filename, os.R_OK)):
            raise InvalidConfiguration(f"Invalid route definition file: `{filename}`")

        if filename.endswith(".json"):
            with open(filename, "r") as f:
                try:
                    descriptions = json.loads(f.read())
                except json.JSONDecodeError as err:
                    raise InvalidConfiguration(
                        f"Invalid route definition file: `{filename}`: {err}"
                    ) from err
            if not isinstance(descriptions, list):
                raise InvalidConfiguration(
                    f"Route definition file must hold a list: `{filename}`"
                )
            self.add_routes(Route.from_dict(d) for d in descriptions)
        else:
            runpy.run_path(filename, init_globals={alias: self})

        return self

    def flatten(self) -> List[Route]:
        """Return merged snapshots of every route in the tree, depth first."""
        routes: List[Route] = []
        for child in self.children:
            if child.kind is NodeKind.GROUP:
                merged = child.flatten()
            else:
                merged = [child]

            for route in merged:
                routes.append(self._merge_route(route))

        return routes

    def _merge_route(self, route: Route) -> Route:
        route = route.copy()
        route.path = collapse_slashes(self.path_prefix + route.path)
        route.before_tags = _unique([*self.before_tags, *route.before_tags])
        route.after_tags = _unique([*self.after_tags, *route.after_tags])

        if self.default_handler is not None and route.handler is None:
            route.handler = self.default_handler

        if route.methods == [ANY_METHOD] and self.default_methods:
            route.methods = list(self.default_methods)

        return route
