import os

import pytest

from dropbox_client.config import DropboxClientConfig
from dropbox_client.tests.utils.mock_transport import MockTransport


def pytest_collection_modifyitems(config: pytest.Config, items: list) -> None:
    if os.getenv("DROPBOX_TEST_TOKEN"):
        return
    mark_expr = getattr(config.option, "markexpr", "")
    if "integration" in mark_expr:
        return
    skip = pytest.mark.skip(reason="DROPBOX_TEST_TOKEN not set")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture
def config() -> DropboxClientConfig:
    """Create test config."""
    return DropboxClientConfig()


@pytest.fixture
def mock_transport() -> MockTransport:
    """Create mock transport."""
    return MockTransport()


@pytest.fixture(scope="session")
def dropbox_token() -> str:
    token = os.getenv("DROPBOX_TEST_TOKEN")
    if not token:
        pytest.fail("DROPBOX_TEST_TOKEN must be set to run integration tests.")
    return token
