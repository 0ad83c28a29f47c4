# shoprest/resources/metafields.py
"""Client for the Shopify metafields endpoints.

Metafields live either on the shop itself (``metafields.json``) or on an owner
resource (``products/123/metafields.json``). Count, list and create accept an
optional ``resource_type``/``resource_id`` pair to address the latter.
"""

from typing import TYPE_CHECKING

from ..constants import ResourceName
from ..filters import MetaFieldFilter
from ..log_config import logger
from ..models import MetaField
from .base import (
    BaseResourceClient,
    CountableMixin,
    CreatableMixin,
    DeletableMixin,
    FilterArg,
    GettableMixin,
    ListableMixin,
    UpdatableMixin,
)

if TYPE_CHECKING:
    from ..client import ShopifyApiClient


class MetaFieldsClient(
    CountableMixin,
    ListableMixin,
    GettableMixin,
    CreatableMixin,
    UpdatableMixin,
    DeletableMixin,
    BaseResourceClient,
):
    """Client for shop-level and resource-scoped metafields.

    Attributes:
        _entity_path (str): ``metafields``.
        _singular_name (str): ``metafield``.
        _entity_model (type[MetaField]): Pydantic model for a single metafield.
        _filter_model (type[MetaFieldFilter]): Filters for count and list.
    """

    _entity_path: str = ResourceName.METAFIELDS.value
    _singular_name: str = "metafield"
    _entity_model: type[MetaField] = MetaField
    _filter_model: type[MetaFieldFilter] = MetaFieldFilter

    def __init__(self, api_client: "ShopifyApiClient"):
        super().__init__(api_client)
        logger.debug(f"MetaFieldsClient initialized for path: {self._entity_path}")

    async def count(
        self,
        filters: FilterArg = None,
        *,
        resource_type: str | None = None,
        resource_id: int | None = None,
    ) -> int:
        """Count metafields on the shop, or on one resource when scoped.

        Args:
            filters: A MetaFieldFilter or mapping of filter fields.
            resource_type: Owner type, e.g. ``products``, ``variants``,
                ``orders``, ``customers`` or ``custom_collections``.
            resource_id: Id of the owning resource.
        """
        path = self._collection_path(
            "count", resource_type=resource_type, resource_id=resource_id
        )
        return await self._count(path, filters)

    async def create(
        self,
        entity: MetaField,
        *,
        resource_type: str | None = None,
        resource_id: int | None = None,
    ) -> MetaField:
        """Create a metafield on the shop, or on one resource when scoped.

        Args:
            entity: The new metafield. Its id must not be set.
            resource_type: Owner type the metafield is attached to.
            resource_id: Id of the owning resource.

        Raises:
            InvalidArgumentError: If ``entity.id`` is set.
        """
        path = self._collection_path(resource_type=resource_type, resource_id=resource_id)
        return await self._create(path, entity)

    async def list(
        self,
        filters: FilterArg = None,
        *,
        resource_type: str | None = None,
        resource_id: int | None = None,
    ) -> list[MetaField]:
        """List metafields on the shop, or on one resource when scoped.

        Args:
            filters: A MetaFieldFilter or mapping of filter fields.
            resource_type: Owner type, e.g. ``products``.
            resource_id: Id of the owning resource.
        """
        path = self._collection_path(resource_type=resource_type, resource_id=resource_id)
        return await self._list(path, filters)
