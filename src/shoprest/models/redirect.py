"""Pydantic model for Shopify URL redirects."""

from .base import ShopifyObject


class Redirect(ShopifyObject):
    """A redirect sending visitors of an old ``path`` to a new ``target``.

    Attributes:
        path: The old path to be redirected, e.g. ``/ipod``.
        target: The path or full URL to redirect to, e.g. ``/pages/itunes``.
    """

    path: str | None = None
    target: str | None = None
