import os
from unittest.mock import Mock

import pytest

from route_composer import Router

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


@pytest.fixture
def fixture_path():
    """Return the path of a file in the fixtures directory."""

    def _path(name: str) -> str:
        return os.path.join(FIXTURES, name)

    return _path


@pytest.fixture
def router(fixture_path):
    """Router loaded from the Python route fixture."""
    r = Router(name="test", configure_logs=False)
    r.load_file(fixture_path("routes.py"), "r")
    return r


@pytest.fixture
def funct():
    """Mock function for testing purposes."""
    return Mock(__name__="Mock")
