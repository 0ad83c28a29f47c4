"""Base Pydantic model for Shopify REST entities.

Every entity returned by the Admin REST API carries a numeric ``id`` once it
exists on the shop. Entities built locally for a create call leave it unset.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ShopifyObject(BaseModel):
    """A base Pydantic model for Shopify entities (e.g., metafield, redirect).

    Unknown fields sent by the API are ignored so that additions to the remote
    schema do not break validation. Missing optional fields map to ``None``.

    Attributes:
        id: The numeric identifier assigned by Shopify, or ``None`` when the
            entity has not been created yet.
    """

    id: int | None = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @property
    def is_new(self) -> bool:
        """True while no identifier has been assigned."""
        return self.id is None

    def to_payload(self) -> dict[str, Any]:
        """Serializes the entity for a request body, dropping unset (None) fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
