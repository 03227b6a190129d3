# pokedex_sdk/client.py
from typing import Any, Dict, Optional

import httpx
import requests


class PokedexClient:
    def __init__(self, base_url: str = "http://localhost:3000", timeout: int = 10, session: Any = None,
                 async_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.async_transport = async_transport

    # Catalog (pass-through to the upstream service)
    def list_pokemons(self, offset: int = 0, limit: int = 20):
        r = self.session.get(f"{self.base_url}/pokemons", params={"offset": offset, "limit": limit},
                             timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    async def list_pokemons_async(self, offset: int = 0, limit: int = 20):
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.async_transport) as client:
            r = await client.get(f"{self.base_url}/pokemons", params={"offset": offset, "limit": limit})
            r.raise_for_status()
            return r.json()

    # Own collection
    def add_pokemon(self, name: str, category: str):
        r = self.session.post(f"{self.base_url}/pokemons", json={"name": name, "category": category},
                              timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_pokemon(self, pokemon_id: int, name: Optional[str] = None, category: Optional[str] = None):
        payload: Dict[str, str] = {}
        if name:
            payload["name"] = name
        if category:
            payload["category"] = category
        r = self.session.patch(f"{self.base_url}/pokemons/{pokemon_id}", json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_pokemon(self, pokemon_id: int) -> None:
        r = self.session.delete(f"{self.base_url}/pokemons/{pokemon_id}", timeout=self.timeout)
        # 204, no body
        r.raise_for_status()
