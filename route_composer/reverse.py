"""Reverse URL generation from named routes."""

from typing import Any, List, Optional, Sequence

from route_composer.exceptions import (
    NamedRouteNotFound,
    NotEnoughParameters,
    TooManyParameters,
)
from route_composer.patterns import PatternExpander, StdPatternParser
from route_composer.routing import Route
from route_composer.types import Literal


class ReverseIndex:
    """Snapshot of flattened routes used to build URLs by route name.

    The index never looks at the route tree again once created; rebuild it
    after editing the tree.
    """

    def __init__(
        self, routes: Sequence[Route], expander: Optional[PatternExpander] = None
    ) -> None:
        self.routes: List[Route] = list(routes)
        self.expander = expander or StdPatternParser()

    def find(self, name: str) -> Route:
        for route in self.routes:
            if route.name == name:
                return route
        raise NamedRouteNotFound(f"Named route not found: `{name}`")

    def create_url(self, name: str, params: Sequence[Any] = ()) -> str:
        """Create a URL path from a route name and positional parameters.

        Variants of the route pattern are tried shortest first and the first
        one consuming exactly every parameter wins. Running out of parameters
        stops the search at once since later variants only need more.
        """
        route = self.find(name)
        params = list(params)

        for variant in self.expander.expand(route.path):
            url = ""
            consumed = 0
            for segment in variant:
                if isinstance(segment, Literal):
                    url += segment.text
                    continue

                if consumed == len(params):
                    raise NotEnoughParameters("Not enough parameters given")

                value = params[consumed]
                url += "" if value is None else str(value)
                consumed += 1

            if consumed == len(params):
                return url

        raise TooManyParameters("Too many parameters given")
