# tests/test_resources.py
from unittest.mock import AsyncMock, MagicMock

import pytest

from shoprest.client import ShopifyApiClient
from shoprest.exceptions import InvalidArgumentError, ShopRestError
from shoprest.filters import ListFilter, RedirectFilter
from shoprest.models import ShopifyObject
from shoprest.resources import (
    BaseResourceClient,
    CountableMixin,
    CreatableMixin,
    DeletableMixin,
    GettableMixin,
    ListableMixin,
    UpdatableMixin,
)
from shoprest.types import RequestData

# --- Mocks and Fixtures ---


class Widget(ShopifyObject):
    name: str | None = None


class WidgetFilter(ListFilter):
    color: str | None = None


class WidgetsClient(
    CountableMixin,
    ListableMixin,
    GettableMixin,
    CreatableMixin,
    UpdatableMixin,
    DeletableMixin,
    BaseResourceClient,
):
    _entity_path = "widgets"
    _singular_name = "widget"
    _entity_model = Widget
    _filter_model = WidgetFilter


@pytest.fixture
def mock_api_client():
    client = MagicMock(spec=ShopifyApiClient)
    client.prepare_request.side_effect = lambda path: RequestData(
        url=f"https://test-shop.myshopify.com/admin/api/2024-10/{path}"
    )
    client.execute = AsyncMock()
    return client


@pytest.fixture
def widgets(mock_api_client) -> WidgetsClient:
    return WidgetsClient(mock_api_client)


# --- BaseResourceClient Tests ---


def test_resource_client_requires_names(mock_api_client):
    class Nameless(BaseResourceClient):
        pass

    with pytest.raises(ShopRestError, match="must define _entity_path"):
        Nameless(mock_api_client)


@pytest.mark.parametrize(
    ("suffix", "scope", "expected"),
    [
        (None, {}, "widgets.json"),
        ("count", {}, "widgets/count.json"),
        (None, {"resource_type": "products", "resource_id": 7}, "products/7/widgets.json"),
        (
            "count",
            {"resource_type": "/products/", "resource_id": 7},
            "products/7/widgets/count.json",
        ),
    ],
)
def test_collection_path(widgets, suffix, scope, expected):
    assert widgets._collection_path(suffix, **scope) == expected


@pytest.mark.parametrize(
    "scope",
    [
        {"resource_type": "products"},
        {"resource_id": 7},
        {"resource_type": " ", "resource_id": 7},
    ],
)
def test_collection_path_rejects_partial_scope(widgets, scope):
    with pytest.raises(InvalidArgumentError):
        widgets._collection_path(**scope)


def test_resolve_filters_rejects_other_types(widgets):
    with pytest.raises(InvalidArgumentError, match="must be a WidgetFilter"):
        widgets._resolve_filters(["color", "red"])


def test_resolve_filters_rejects_other_filter_models(widgets):
    with pytest.raises(InvalidArgumentError, match="must be a WidgetFilter"):
        widgets._resolve_filters(RedirectFilter(path="/ipod"))


def test_resolve_filters_validates_mappings(widgets):
    resolved = widgets._resolve_filters({"color": "red", "limit": "5"})

    assert isinstance(resolved, WidgetFilter)
    assert resolved.to_parameters() == [("limit", "5"), ("color", "red")]


# --- Mixin Tests ---


@pytest.mark.asyncio
async def test_count_mixin(widgets, mock_api_client):
    mock_api_client.execute.return_value = 12

    assert await widgets.count(WidgetFilter(color="red")) == 12

    request, method = mock_api_client.execute.await_args.args
    assert method == "GET"
    assert request.url.endswith("/widgets/count.json")
    assert request.params == [("color", "red")]
    assert mock_api_client.execute.await_args.kwargs == {
        "root_element": "count",
        "response_type": int,
    }


@pytest.mark.asyncio
async def test_list_mixin_uses_plural_root(widgets, mock_api_client):
    mock_api_client.execute.return_value = []

    assert await widgets.list() == []

    kwargs = mock_api_client.execute.await_args.kwargs
    assert kwargs["root_element"] == "widgets"
    assert kwargs["response_type"] == list[Widget]


@pytest.mark.asyncio
async def test_get_mixin_uses_singular_root(widgets, mock_api_client):
    mock_api_client.execute.return_value = Widget(id=3)

    result = await widgets.get(3, fields="id,name")

    request, method = mock_api_client.execute.await_args.args
    assert request.url.endswith("/widgets/3.json")
    assert request.params == [("fields", "id,name")]
    assert mock_api_client.execute.await_args.kwargs["root_element"] == "widget"
    assert result == Widget(id=3)


@pytest.mark.asyncio
async def test_get_mixin_requires_id(widgets, mock_api_client):
    with pytest.raises(InvalidArgumentError):
        await widgets.get(None)
    mock_api_client.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_mixin_wraps_body(widgets, mock_api_client):
    mock_api_client.execute.return_value = Widget(id=1, name="bolt")

    await widgets.create(Widget(name="bolt"))

    request, method = mock_api_client.execute.await_args.args
    assert method == "POST"
    assert request.url.endswith("/widgets.json")
    assert mock_api_client.execute.await_args.kwargs["json_data"] == {
        "widget": {"name": "bolt"}
    }


@pytest.mark.asyncio
async def test_update_mixin_puts_to_entity_url(widgets, mock_api_client):
    mock_api_client.execute.return_value = Widget(id=1, name="nut")

    await widgets.update(Widget(id=1, name="nut"))

    request, method = mock_api_client.execute.await_args.args
    assert method == "PUT"
    assert request.url.endswith("/widgets/1.json")
    assert mock_api_client.execute.await_args.kwargs["json_data"] == {
        "widget": {"id": 1, "name": "nut"}
    }


@pytest.mark.asyncio
async def test_delete_mixin_expects_no_payload(widgets, mock_api_client):
    mock_api_client.execute.return_value = None

    assert await widgets.delete(1) is None

    request, method = mock_api_client.execute.await_args.args
    assert method == "DELETE"
    assert mock_api_client.execute.await_args.kwargs == {}
