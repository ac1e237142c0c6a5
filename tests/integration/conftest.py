import pytest


def pytest_collection_modifyitems(items):
    """Mark collected tests in this directory as integration tests."""
    for item in items:
        if "tests/integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def integration_db_url():
    """Connection string of a disposable PostgreSQL database."""
    import os

    url = os.getenv("INTEGRATION_DB_URL")
    if not url:
        pytest.skip("INTEGRATION_DB_URL is not set")
    return url
