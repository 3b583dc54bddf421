import pytest

from kitchenconv.settings import Settings


@pytest.fixture
def test_settings():
    """Settings isolated from the developer's environment and .env file."""
    return Settings(_env_file=None, log_level="WARNING", result_digits=6, suggestion_limit=None)
