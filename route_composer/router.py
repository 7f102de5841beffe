"""Resolve requests against a route tree and build URLs from route names."""

import logging
import sys
from typing import Any, Optional, Sequence

from route_composer.dispatcher import Dispatcher, DispatcherFactory, RegexDispatcher
from route_composer.exceptions import InvalidHttpMethod, RouteNotFound, RouterError
from route_composer.group import Group
from route_composer.patterns import (
    PatternExpander,
    StdPatternParser,
    handler_token_expr,
)
from route_composer.reverse import ReverseIndex
from route_composer.routing import Route
from route_composer.types import DispatchStatus


def _substitute(template: str, params: dict) -> str:
    """Replace ``{name}`` tokens with parameter values, leaving unknown ones."""
    replacements = {
        key: "" if value is None else str(value) for key, value in params.items()
    }

    def _replace(match) -> str:
        return replacements.get(match.group(1), match.group(0))

    return handler_token_expr.sub(_replace, template)


class Router(Group):
    """Route tree root able to resolve requests and create URLs."""

    FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"

    def __init__(
        self,
        name: str = "route_composer",
        debug: bool = False,
        configure_logs: bool = True,
        dispatcher_factory: Optional[DispatcherFactory] = None,
        expander: Optional[PatternExpander] = None,
    ) -> None:
        """Initialize Router object."""
        super().__init__()
        self.name: str = name
        self.debug: bool = debug
        self.expander: PatternExpander = expander or StdPatternParser()
        self.dispatcher_factory: DispatcherFactory = dispatcher_factory or (
            lambda entries: RegexDispatcher(entries, self.expander)
        )
        self.url_index: Optional[ReverseIndex] = None
        self.log = logging.getLogger(self.name)
        if configure_logs:
            self._configure_logging()

    def _configure_logging(self) -> None:
        if self._already_configured(self.log):
            return

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(self.FORMAT_STRING)
        handler.setFormatter(formatter)
        self.log.propagate = False
        if self.debug:
            level = logging.DEBUG
        else:
            level = logging.ERROR
        self.log.setLevel(level)
        self.log.addHandler(handler)

    def _already_configured(self, log) -> bool:
        if not log.handlers:
            return False

        for handler in log.handlers:
            if isinstance(handler, logging.StreamHandler):
                if handler.stream == sys.stdout:
                    return True

        return False

    def get_dispatcher(self) -> Dispatcher:
        """Build a dispatcher over the current route tree."""
        routes = self.flatten()
        return self.dispatcher_factory(
            [(route.methods, route.path, route) for route in routes]
        )

    def resolve(self, path: str, method: str) -> Route:
        """Get a copy of the route matching the request, with bound params.

        Raises ``RouteNotFound`` when no route matches the path and
        ``InvalidHttpMethod`` when routes match the path but not the method.
        """
        method = method.upper()
        result = self.get_dispatcher().dispatch(method, path)
        self.log.debug(f"{method} {path} -> {result.status.name}")

        if result.status == DispatchStatus.NOT_FOUND:
            raise RouteNotFound("Route not found")

        if result.status == DispatchStatus.METHOD_NOT_ALLOWED:
            raise InvalidHttpMethod("Method not allowed", result.allowed_methods)

        route: Route = result.target.copy()
        route.set_params(result.params)

        # If the handler is a string, replace placeholders with path params
        if isinstance(route.handler, str):
            route.set_handler(_substitute(route.handler, route.get_params()))

        return route

    def is_route(self, name: str, path: str, method: str) -> bool:
        """Check if a request resolves to the route named ``name``."""
        try:
            route = self.resolve(path, method)
        except RouterError as err:
            self.log.debug(f"{method.upper()} {path} is not `{name}`: {err}")
            return False

        return route.name == name

    def build_index(self) -> ReverseIndex:
        """Snapshot the current route tree for URL creation."""
        self.url_index = ReverseIndex(self.flatten(), self.expander)
        self.log.debug(f"Reverse index built with {len(self.url_index.routes)} routes")
        return self.url_index

    def reset_index(self) -> None:
        """Drop the URL index so the next ``create_url`` sees tree edits."""
        self.url_index = None

    def create_url(self, name: str, params: Sequence[Any] = ()) -> str:
        """Create a URL path from a route name and positional parameters.

        For example, ``router.create_url("user.view", [user_id])``.
        The route tree is indexed on first use; call ``reset_index`` after
        changing it.
        """
        index = self.url_index or self.build_index()
        return index.create_url(name, params)
