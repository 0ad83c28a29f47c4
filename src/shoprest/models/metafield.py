# shoprest/models/metafield.py
"""Pydantic model for Shopify metafields.

A metafield attaches extra namespaced data to the shop itself or to an owner
resource such as a product, variant, order or customer.
Reference: https://shopify.dev/docs/api/admin-rest/latest/resources/metafield
"""

from datetime import datetime

from .base import ShopifyObject


class MetaField(ShopifyObject):
    """Represents a single Shopify metafield.

    Attributes:
        namespace: Container grouping related metafields (3-255 characters).
        key: Name of the metafield within its namespace.
        value: The stored information. Older API versions return integers
            for ``value_type="integer"``.
        value_type: Legacy value type (``string``, ``integer``, ``json_string``).
        type: Newer, typed definition of the value (e.g. ``single_line_text_field``).
        description: Optional description of the stored information.
        owner_id: Id of the resource the metafield is attached to.
        owner_resource: Type of the owning resource (e.g. ``product``).
        created_at: When the metafield was created.
        updated_at: When the metafield was last updated.
    """

    namespace: str | None = None
    key: str | None = None
    value: str | int | float | None = None
    value_type: str | None = None
    type: str | None = None
    description: str | None = None
    owner_id: int | None = None
    owner_resource: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
