"""
Shared fixtures for pyquake3 tests
"""

import pytest

from pyquake3.testing import MockQuake3Server
from pyquake3.utils import reset_logging


@pytest.fixture
def mock_server():
    """Mock server on an ephemeral loopback port"""
    server = MockQuake3Server("127.0.0.1", 0)
    server.start()
    yield server
    server.stop()


@pytest.fixture(autouse=True)
def clean_logging():
    """Drop handlers configure_logging may have attached"""
    yield
    reset_logging()
