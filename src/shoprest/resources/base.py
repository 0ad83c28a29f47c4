"""Generic resource mixins for Shopify REST resources.

Every Shopify REST resource follows the same shape: ``{name}.json`` for the
collection, ``{name}/count.json`` for its size and ``{name}/{id}.json`` for a
single entity, with payloads wrapped under the plural or singular resource
name. The mixins here implement each operation once against that shape; a
concrete resource client combines the ones it supports and declares its names
and models as class attributes.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import ValidationError as PydanticValidationError

from ..constants import COUNT_ROOT_ELEMENT
from ..exceptions import InvalidArgumentError, ShopRestError
from ..filters import Parameterizable, format_parameter
from ..log_config import logger
from ..models import ShopifyObject

if TYPE_CHECKING:
    from ..client import ShopifyApiClient


FilterArg = Parameterizable | Mapping[str, Any] | None


class ResourceClientProtocol(Protocol):
    """Protocol that defines the interface expected by resource mixins."""

    _api_client: "ShopifyApiClient"
    _entity_path: str  # Plural resource name, e.g. "metafields"
    _singular_name: str  # Root element for single entities, e.g. "metafield"
    _entity_model: type[ShopifyObject]
    _filter_model: type[Parameterizable]

    def _collection_path(
        self,
        suffix: str | None = None,
        *,
        resource_type: str | None = None,
        resource_id: int | None = None,
    ) -> str: ...

    def _entity_url(self, entity_id: int) -> str: ...

    def _resolve_filters(self, filters: FilterArg) -> Parameterizable | None: ...

    def _check_entity(self, entity: Any) -> ShopifyObject: ...


class BaseResourceClient:
    """Base class for all resource clients.

    Attributes:
        _api_client: The `ShopifyApiClient` used to build and send requests.
        _entity_path: Plural resource name; also the collection path and the
            root element of list responses. Defined by concrete subclasses.
        _singular_name: Root element of single-entity responses and request
            bodies. Defined by concrete subclasses.
        _entity_model: Pydantic model for a single entity.
        _filter_model: Filter model accepted by list and count operations.
    """

    _entity_path: str = ""
    _singular_name: str = ""
    _entity_model: type[ShopifyObject] = ShopifyObject
    _filter_model: type[Parameterizable] = Parameterizable

    def __init__(self, api_client: "ShopifyApiClient"):
        if not self._entity_path or not self._singular_name:
            raise ShopRestError(
                f"{self.__class__.__name__} must define _entity_path and _singular_name"
            )
        self._api_client = api_client
        logger.debug(f"{self.__class__.__name__} initialized for {self._entity_path}")

    def _collection_path(
        self,
        suffix: str | None = None,
        *,
        resource_type: str | None = None,
        resource_id: int | None = None,
    ) -> str:
        """Build ``[{type}/{id}/]{entity_path}[/{suffix}].json``.

        Raises:
            InvalidArgumentError: If only one of resource_type and resource_id
                is given, or resource_type is blank.
        """
        path = self._entity_path if suffix is None else f"{self._entity_path}/{suffix}"
        if resource_type is None and resource_id is None:
            return f"{path}.json"
        if resource_type is None or resource_id is None:
            raise InvalidArgumentError(
                "resource_type and resource_id must be provided together."
            )
        parent = resource_type.strip().strip("/")
        if not parent:
            raise InvalidArgumentError("resource_type must not be blank.")
        return f"{parent}/{resource_id}/{path}.json"

    def _entity_url(self, entity_id: int) -> str:
        if entity_id is None:
            raise InvalidArgumentError(
                f"An id is required to address a {self._singular_name}."
            )
        return f"{self._entity_path}/{entity_id}.json"

    def _resolve_filters(self, filters: FilterArg) -> Parameterizable | None:
        """Accept a filter model or a plain mapping of filter fields."""
        if filters is None:
            return None
        if isinstance(filters, self._filter_model):
            return filters
        if isinstance(filters, Mapping):
            try:
                return self._filter_model.model_validate(dict(filters))
            except PydanticValidationError as e:
                raise InvalidArgumentError(
                    f"Invalid filters for {self._entity_path}: {e}"
                ) from e
        raise InvalidArgumentError(
            f"filters must be a {self._filter_model.__name__} or a mapping, "
            f"got {type(filters).__name__}"
        )

    def _check_entity(self, entity: Any) -> ShopifyObject:
        if not isinstance(entity, self._entity_model):
            raise InvalidArgumentError(
                f"Expected a {self._entity_model.__name__}, got {type(entity).__name__}"
            )
        return entity


class CountableMixin:
    """Mixin that provides ``count()`` via ``GET {entity_path}/count.json``."""

    async def _count(self: ResourceClientProtocol, path: str, filters: FilterArg) -> int:
        request = self._api_client.prepare_request(path)
        resolved = self._resolve_filters(filters)
        if resolved is not None:
            request.add_params(resolved.to_parameters())
        logger.info(f"Counting {path} with params {request.params}")
        return await self._api_client.execute(
            request, "GET", root_element=COUNT_ROOT_ELEMENT, response_type=int
        )

    async def count(self: ResourceClientProtocol, filters: FilterArg = None) -> int:
        """Count the entities matching ``filters``.

        Args:
            filters: A filter model or mapping of filter fields.

        Returns:
            int: The number of matching entities.
        """
        return await self._count(self._collection_path("count"), filters)  # type: ignore[attr-defined]


class ListableMixin:
    """Mixin that provides ``list()`` via ``GET {entity_path}.json``."""

    async def _list(
        self: ResourceClientProtocol, path: str, filters: FilterArg
    ) -> list[Any]:
        request = self._api_client.prepare_request(path)
        resolved = self._resolve_filters(filters)
        if resolved is not None:
            request.add_params(resolved.to_parameters())
        logger.info(f"Listing {path} with params {request.params}")
        return await self._api_client.execute(
            request,
            "GET",
            root_element=self._entity_path,
            response_type=list[self._entity_model],  # type: ignore[name-defined]
        )

    async def list(self: ResourceClientProtocol, filters: FilterArg = None) -> list[Any]:
        """List entities matching ``filters``, in the order the API returns them.

        Returns:
            list: The matching entities; an empty list for an empty collection.
        """
        return await self._list(self._collection_path(), filters)  # type: ignore[attr-defined]


class GettableMixin:
    """Mixin that provides ``get()`` via ``GET {entity_path}/{id}.json``."""

    async def get(
        self: ResourceClientProtocol,
        entity_id: int,
        fields: str | Sequence[str] | None = None,
    ) -> Any:
        """Retrieve a single entity by its id.

        Args:
            entity_id: The id of the entity.
            fields: Optional allowlist of fields to return, either a
                comma-separated string or a sequence of names.

        Raises:
            NotFoundError: If no entity has this id.
        """
        request = self._api_client.prepare_request(self._entity_url(entity_id))
        if fields:
            request.add_param("fields", format_parameter(fields))
        logger.info(f"Fetching {self._singular_name} with ID: {entity_id}")
        return await self._api_client.execute(
            request,
            "GET",
            root_element=self._singular_name,
            response_type=self._entity_model,
        )


class CreatableMixin:
    """Mixin that provides ``create()`` via ``POST {entity_path}.json``.

    Entities that already carry an id are rejected before any request is sent;
    creating always lets the API assign the identifier.
    """

    async def _create(self: ResourceClientProtocol, path: str, entity: Any) -> Any:
        entity = self._check_entity(entity)
        if entity.id is not None:
            raise InvalidArgumentError(
                f"Cannot create a {self._singular_name} that already has id {entity.id}; "
                "use update() instead."
            )
        request = self._api_client.prepare_request(path)
        logger.info(f"Creating {self._singular_name} at {path}")
        return await self._api_client.execute(
            request,
            "POST",
            json_data={self._singular_name: entity.to_payload()},
            root_element=self._singular_name,
            response_type=self._entity_model,
        )

    async def create(self: ResourceClientProtocol, entity: Any) -> Any:
        """Create a new entity and return the API's representation of it.

        Raises:
            InvalidArgumentError: If ``entity.id`` is already set.
        """
        return await self._create(self._collection_path(), entity)  # type: ignore[attr-defined]


class UpdatableMixin:
    """Mixin that provides ``update()`` via ``PUT {entity_path}/{id}.json``."""

    async def update(self: ResourceClientProtocol, entity: Any) -> Any:
        """Update an existing entity and return the API's representation of it.

        Raises:
            InvalidArgumentError: If ``entity.id`` is not set.
        """
        entity = self._check_entity(entity)
        if entity.id is None:
            raise InvalidArgumentError(
                f"Cannot update a {self._singular_name} without an id."
            )
        request = self._api_client.prepare_request(self._entity_url(entity.id))
        logger.info(f"Updating {self._singular_name} with ID: {entity.id}")
        return await self._api_client.execute(
            request,
            "PUT",
            json_data={self._singular_name: entity.to_payload()},
            root_element=self._singular_name,
            response_type=self._entity_model,
        )


class DeletableMixin:
    """Mixin that provides ``delete()`` via ``DELETE {entity_path}/{id}.json``."""

    async def delete(self: ResourceClientProtocol, entity_id: int) -> None:
        """Delete the entity with the given id.

        Deleting twice is not idempotent: the second call raises NotFoundError.
        """
        request = self._api_client.prepare_request(self._entity_url(entity_id))
        logger.info(f"Deleting {self._singular_name} with ID: {entity_id}")
        await self._api_client.execute(request, "DELETE")
