import pytest

from tests.settings import get_test_settings


@pytest.fixture
def test_settings():
    return get_test_settings()
