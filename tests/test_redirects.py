import json

import pytest

from shoprest.exceptions import InvalidArgumentError, NotFoundError
from shoprest.filters import RedirectFilter
from shoprest.models import Redirect

REDIRECT_JSON = {"id": 668809255, "path": "/ipod", "target": "/pages/itunes"}


@pytest.mark.asyncio
async def test_count_redirects_with_filter(api_client, base_url, httpx_mock):
    httpx_mock.add_response(
        url=f"{base_url}/redirects/count.json?target=%2Fpages%2Fitunes",
        json={"count": 4},
    )

    assert await api_client.redirects.count(RedirectFilter(target="/pages/itunes")) == 4


@pytest.mark.asyncio
async def test_list_redirects_by_path(api_client, base_url, httpx_mock):
    httpx_mock.add_response(
        url=f"{base_url}/redirects.json?path=%2Fipod",
        json={"redirects": [REDIRECT_JSON]},
    )

    redirects = await api_client.redirects.list(RedirectFilter(path="/ipod"))

    assert redirects == [Redirect(**REDIRECT_JSON)]


@pytest.mark.asyncio
async def test_list_redirects_without_filter_sends_no_params(api_client, httpx_mock):
    httpx_mock.add_response(json={"redirects": []})

    assert await api_client.redirects.list() == []
    assert httpx_mock.get_request().url.query == b""


@pytest.mark.asyncio
async def test_redirects_are_not_scoped(api_client):
    with pytest.raises(TypeError):
        await api_client.redirects.list(resource_type="products", resource_id=1)


@pytest.mark.asyncio
async def test_get_redirect(api_client, base_url, httpx_mock):
    httpx_mock.add_response(
        url=f"{base_url}/redirects/668809255.json", json={"redirect": REDIRECT_JSON}
    )

    redirect = await api_client.redirects.get(668809255)

    assert redirect.path == "/ipod"
    assert redirect.target == "/pages/itunes"


@pytest.mark.asyncio
async def test_create_redirect(api_client, base_url, httpx_mock):
    httpx_mock.add_response(
        method="POST",
        url=f"{base_url}/redirects.json",
        status_code=201,
        json={"redirect": REDIRECT_JSON},
    )

    created = await api_client.redirects.create(
        Redirect(path="/ipod", target="/pages/itunes")
    )

    assert created.id == 668809255
    assert json.loads(httpx_mock.get_request().read()) == {
        "redirect": {"path": "/ipod", "target": "/pages/itunes"}
    }


@pytest.mark.asyncio
async def test_update_redirect(api_client, base_url, httpx_mock):
    httpx_mock.add_response(
        method="PUT",
        url=f"{base_url}/redirects/668809255.json",
        json={"redirect": {**REDIRECT_JSON, "target": "/pages/music"}},
    )

    updated = await api_client.redirects.update(
        Redirect(id=668809255, target="/pages/music")
    )

    assert updated.target == "/pages/music"
    assert json.loads(httpx_mock.get_request().read()) == {
        "redirect": {"id": 668809255, "target": "/pages/music"}
    }


@pytest.mark.asyncio
async def test_update_redirect_requires_id(api_client):
    with pytest.raises(InvalidArgumentError):
        await api_client.redirects.update(Redirect(path="/ipod"))


@pytest.mark.asyncio
async def test_delete_missing_redirect(api_client, base_url, httpx_mock):
    httpx_mock.add_response(
        method="DELETE",
        url=f"{base_url}/redirects/1.json",
        status_code=404,
        json={"errors": "Not Found"},
    )

    with pytest.raises(NotFoundError) as exc:
        await api_client.redirects.delete(1)
    assert exc.value.status_code == 404
