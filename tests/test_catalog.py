# tests/test_catalog.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from pokedex.catalog import CatalogClient
from pokedex.errors import UpstreamError
from pokedex.main import create_app

CATALOG_URL = "https://catalog.test/api/v2/pokemon/"
PAGE = {"count": 1302, "next": None, "previous": None, "results": [{"name": "bulbasaur", "url": "x"}]}


def make_client(handler):
    catalog = CatalogClient(CATALOG_URL, transport=httpx.MockTransport(handler))
    return TestClient(create_app(catalog=catalog))


def test_list_forwards_offset_and_limit():
    seen = []

    def handler(request: httpx.Request):
        seen.append(request)
        return httpx.Response(200, json=PAGE)

    client = make_client(handler)
    r = client.get("/pokemons", params={"offset": 5, "limit": 5})
    assert r.status_code == 200
    assert r.json() == PAGE
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert dict(seen[0].url.params) == {"offset": "5", "limit": "5"}
    assert str(seen[0].url).startswith(CATALOG_URL)


def test_list_defaults_when_absent_or_unparsable():
    seen = []

    def handler(request: httpx.Request):
        seen.append(dict(request.url.params))
        return httpx.Response(200, json=PAGE)

    client = make_client(handler)
    client.get("/pokemons")
    client.get("/pokemons", params={"offset": "abc", "limit": "xyz"})
    assert seen == [{"offset": "0", "limit": "20"}, {"offset": "0", "limit": "20"}]


def test_list_does_not_validate_bounds():
    seen = []

    def handler(request: httpx.Request):
        seen.append(dict(request.url.params))
        return httpx.Response(200, json=PAGE)

    client = make_client(handler)
    client.get("/pokemons", params={"offset": "-10", "limit": "100000"})
    assert seen == [{"offset": "-10", "limit": "100000"}]


def _assert_generic_failure(handler):
    client = make_client(handler)
    r = client.get("/pokemons", params={"offset": 5, "limit": 5})
    assert r.status_code == 500
    assert r.json() == {"message": "Unable to retrieve Pokémon data."}


def test_upstream_error_status_is_suppressed():
    _assert_generic_failure(lambda request: httpx.Response(404, json={"detail": "Not found"}))
    _assert_generic_failure(lambda request: httpx.Response(503, text="down"))


def test_upstream_network_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    _assert_generic_failure(handler)


def test_upstream_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    _assert_generic_failure(handler)


def test_upstream_invalid_json():
    _assert_generic_failure(lambda request: httpx.Response(200, text="<html>oops</html>"))


def test_list_does_not_touch_store():
    client = make_client(lambda request: httpx.Response(200, json=PAGE))
    client.get("/pokemons")
    assert len(client.app.state.store) == 0


def test_fetch_page_directly():
    catalog = CatalogClient(CATALOG_URL, transport=httpx.MockTransport(
        lambda request: httpx.Response(200, json=PAGE)))
    assert asyncio.run(catalog.fetch_page(offset=0, limit=1)) == PAGE

    failing = CatalogClient(CATALOG_URL, transport=httpx.MockTransport(
        lambda request: httpx.Response(500)))
    with pytest.raises(UpstreamError):
        asyncio.run(failing.fetch_page(offset=0, limit=1))
