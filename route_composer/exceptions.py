"""route-composer exception hierarchy.

Shared by the route builders, the router and the URL generator so callers
can catch everything from this package with ``RouterError``.
"""

from typing import FrozenSet, Optional


class RouterError(Exception):
    """Base for all route-composer errors."""


class InvalidRouteType(RouterError, TypeError):
    """A group child is neither a Route nor a Group."""


class InvalidConfiguration(RouterError, ValueError):
    """A declarative route description or route file is unusable."""


class BadRoutePattern(RouterError, ValueError):
    """A route path pattern cannot be parsed."""


class RouteNotFound(RouterError, LookupError):
    """No route matches the request path."""


class InvalidHttpMethod(RouterError):
    """A route matches the path but not the request method."""

    def __init__(
        self,
        message: str = "Method not allowed",
        allowed: Optional[FrozenSet[str]] = None,
    ) -> None:
        super().__init__(message)
        self.allowed = allowed or frozenset()


class UrlGenerationError(RouterError):
    """Base for reverse URL generation failures."""


class NamedRouteNotFound(UrlGenerationError, LookupError):
    """No route carries the requested name."""


class NotEnoughParameters(UrlGenerationError):
    """Fewer positional parameters than the route placeholders need."""


class TooManyParameters(UrlGenerationError):
    """More positional parameters than any route variant can consume."""
