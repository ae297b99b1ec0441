"""
Shared fixtures for streamctl tests.
"""

import pytest

from streamctl.config import TestingConfig
from streamctl.fixtures import Sources, TestEnvironment
from streamctl.services import StreamClient
from streamctl.testing import AdminStubServer, create_admin_app


@pytest.fixture
def environment():
    """Fully configured test environment."""
    return TestEnvironment.from_config(TestingConfig)


@pytest.fixture
def sources(environment):
    return Sources(environment)


@pytest.fixture
def admin_server():
    """Stub admin server on an ephemeral port."""
    server = AdminStubServer(create_admin_app(TestingConfig))
    server.start()
    yield server
    server.stop()


@pytest.fixture
def client(admin_server):
    with StreamClient(admin_server.url, timeout=5, read_retry_attempts=1) as stream_client:
        yield stream_client
