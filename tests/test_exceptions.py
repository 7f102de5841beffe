"""Test the exception hierarchy."""

import pytest

from route_composer import exceptions


@pytest.mark.parametrize(
    "error,bases",
    [
        (exceptions.InvalidRouteType, (TypeError,)),
        (exceptions.InvalidConfiguration, (ValueError,)),
        (exceptions.BadRoutePattern, (ValueError,)),
        (exceptions.RouteNotFound, (LookupError,)),
        (exceptions.InvalidHttpMethod, ()),
        (exceptions.NamedRouteNotFound, (exceptions.UrlGenerationError, LookupError)),
        (exceptions.NotEnoughParameters, (exceptions.UrlGenerationError,)),
        (exceptions.TooManyParameters, (exceptions.UrlGenerationError,)),
    ],
)
def test_hierarchy(error, bases):
    """Every error is a RouterError and its builtin counterpart."""
    assert issubclass(error, exceptions.RouterError)
    for base in bases:
        assert issubclass(error, base)


def test_invalid_http_method_allowed():
    """Allowed methods default to an empty set."""
    err = exceptions.InvalidHttpMethod()
    assert str(err) == "Method not allowed"
    assert err.allowed == frozenset()

    err = exceptions.InvalidHttpMethod("nope", frozenset({"GET"}))
    assert err.allowed == frozenset({"GET"})
