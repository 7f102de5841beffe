"""route-composer: compose route groups, resolve requests and build URLs."""

from route_composer.exceptions import (
    BadRoutePattern,
    InvalidConfiguration,
    InvalidHttpMethod,
    InvalidRouteType,
    NamedRouteNotFound,
    NotEnoughParameters,
    RouteNotFound,
    RouterError,
    TooManyParameters,
    UrlGenerationError,
)
from route_composer.group import Group
from route_composer.router import Router
from route_composer.routing import Route

__version__ = "1.0.0"

__all__ = [
    "BadRoutePattern",
    "Group",
    "InvalidConfiguration",
    "InvalidHttpMethod",
    "InvalidRouteType",
    "NamedRouteNotFound",
    "NotEnoughParameters",
    "Route",
    "RouteNotFound",
    "Router",
    "RouterError",
    "TooManyParameters",
    "UrlGenerationError",
]
