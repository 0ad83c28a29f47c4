"""Constants used throughout the shoprest library.

This module defines the Shopify host suffix, URL templates, default client
settings, and the names of the resources this library exposes.
"""

from enum import Enum

SHOPREST_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"shoprest/{SHOPREST_VERSION}"

# Shop URLs
MYSHOPIFY_DOMAIN: str = "myshopify.com"
ADMIN_API_PATH_TEMPLATE: str = "/admin/api/{version}/"
DEFAULT_API_VERSION: str = "2024-10"

ACCESS_TOKEN_HEADER: str = "X-Shopify-Access-Token"
CLIENT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
}

COUNT_ROOT_ELEMENT: str = "count"


class ResourceName(Enum):
    """Collection names of the resources exposed by this library."""

    METAFIELDS = "metafields"
    REDIRECTS = "redirects"
