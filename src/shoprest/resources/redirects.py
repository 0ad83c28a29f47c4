"""Client for the Shopify redirects endpoints."""

from ..constants import ResourceName
from ..filters import RedirectFilter
from ..models import Redirect
from .base import (
    BaseResourceClient,
    CountableMixin,
    CreatableMixin,
    DeletableMixin,
    GettableMixin,
    ListableMixin,
    UpdatableMixin,
)


class RedirectsClient(
    CountableMixin,
    ListableMixin,
    GettableMixin,
    CreatableMixin,
    UpdatableMixin,
    DeletableMixin,
    BaseResourceClient,
):
    """Client for URL redirects (``redirects.json``).

    All operations are provided by the mixins; the class only names the
    resource and its models.
    """

    _entity_path: str = ResourceName.REDIRECTS.value
    _singular_name: str = "redirect"
    _entity_model: type[Redirect] = Redirect
    _filter_model: type[RedirectFilter] = RedirectFilter
