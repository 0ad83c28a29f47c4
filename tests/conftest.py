# tests/conftest.py
import pytest

from shoprest.client import ShopifyApiClient
from shoprest.config import ShopSettings

SHOP_DOMAIN = "test-shop"
ACCESS_TOKEN = "shpat_test_token"
BASE_URL = "https://test-shop.myshopify.com/admin/api/2024-10"


@pytest.fixture
def settings() -> ShopSettings:
    """Settings isolated from the environment and any local .env file."""
    return ShopSettings(
        shop_domain=SHOP_DOMAIN,
        access_token=ACCESS_TOKEN,
        api_version="2024-10",
        _env_file=None,
    )


@pytest.fixture
def api_client(settings: ShopSettings) -> ShopifyApiClient:
    """A client whose transport is intercepted by pytest-httpx."""
    return ShopifyApiClient(settings=settings)


@pytest.fixture
def base_url() -> str:
    return BASE_URL
