"""Resource clients for the Shopify Admin REST API."""

from .base import (
    BaseResourceClient,
    CountableMixin,
    CreatableMixin,
    DeletableMixin,
    GettableMixin,
    ListableMixin,
    UpdatableMixin,
)
from .metafields import MetaFieldsClient
from .redirects import RedirectsClient

__all__ = [
    "BaseResourceClient",
    "CountableMixin",
    "CreatableMixin",
    "DeletableMixin",
    "GettableMixin",
    "ListableMixin",
    "MetaFieldsClient",
    "RedirectsClient",
    "UpdatableMixin",
]
