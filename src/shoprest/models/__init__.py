"""Pydantic models for Shopify REST entities."""

from .base import ShopifyObject
from .metafield import MetaField
from .redirect import Redirect

__all__ = [
    "MetaField",
    "Redirect",
    "ShopifyObject",
]
