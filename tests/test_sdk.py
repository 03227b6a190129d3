# tests/test_sdk.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from pokedex.catalog import CatalogClient
from pokedex.main import create_app
from pokedex_sdk.client import PokedexClient

PAGE = {"count": 1, "results": [{"name": "mew", "url": "x"}]}


def make_app(seen=None):
    def handler(request):
        if seen is not None:
            seen.append(dict(request.url.params))
        return httpx.Response(200, json=PAGE)

    catalog = CatalogClient("https://catalog.test/", transport=httpx.MockTransport(handler))
    return create_app(catalog=catalog)


def make_sdk():
    return PokedexClient(base_url="http://testserver", session=TestClient(make_app()))


def test_sdk_round_trip():
    c = make_sdk()
    assert c.list_pokemons(offset=0, limit=1) == PAGE

    created = c.add_pokemon("Pikachu", "Electric")
    assert created == {"id": 1, "name": "Pikachu", "category": "Electric"}

    updated = c.update_pokemon(1, category="Mouse")
    assert updated == {"id": 1, "name": "Pikachu", "category": "Mouse"}

    assert c.delete_pokemon(1) is None


def test_sdk_raises_on_errors():
    c = make_sdk()
    with pytest.raises(httpx.HTTPStatusError):
        c.add_pokemon("", "Electric")
    with pytest.raises(httpx.HTTPStatusError):
        c.delete_pokemon(42)


def test_sdk_list_async():
    seen = []
    c = PokedexClient(base_url="http://testserver",
                      async_transport=httpx.ASGITransport(app=make_app(seen)))
    page = asyncio.run(c.list_pokemons_async(offset=10, limit=3))
    assert page == PAGE
    assert seen == [{"offset": "10", "limit": "3"}]
