"""shoprest: a typed asynchronous client for the Shopify Admin REST API.

Resource clients hang off :class:`ShopifyApiClient`; each operation builds a
request, sends it, and returns validated pydantic models.
"""

__version__ = "0.1.0"

from .client import ShopifyApiClient
from .config import ShopSettings, get_settings
from .exceptions import (
    ApiError,
    ConfigurationError,
    InvalidArgumentError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    ShopRestError,
    ShopRestRequestError,
    TimeoutError,
)
from .filters import CountFilter, ListFilter, MetaFieldFilter, RedirectFilter
from .log_config import configure_logging
from .models import MetaField, Redirect, ShopifyObject
from .policies import DefaultExecutionPolicy, ExecutionPolicy, RetryExecutionPolicy

__all__ = [
    "__version__",
    # Client
    "ShopifyApiClient",
    "ShopSettings",
    "get_settings",
    "configure_logging",
    # Policies
    "DefaultExecutionPolicy",
    "ExecutionPolicy",
    "RetryExecutionPolicy",
    # Exceptions
    "ApiError",
    "ConfigurationError",
    "InvalidArgumentError",
    "MalformedResponseError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "ShopRestError",
    "ShopRestRequestError",
    "TimeoutError",
    # Models and filters
    "CountFilter",
    "ListFilter",
    "MetaField",
    "MetaFieldFilter",
    "Redirect",
    "RedirectFilter",
    "ShopifyObject",
]
