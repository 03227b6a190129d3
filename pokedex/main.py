# pokedex/main.py
import logging
from typing import Any, Optional

import uvicorn
from fastapi import Body, Depends, FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from .catalog import CatalogClient
from .config import Settings, get_settings
from .core import DEFAULT_LIMIT, DEFAULT_OFFSET, PokemonIn, PokemonPatch, parse_id, parse_page_param, read_body
from .database import PokemonStore
from .errors import register_error_handlers
from .logging_config import setup_logging
from .models import Pokemon

logger = logging.getLogger(__name__)

# all interfaces
HOST = "0.0.0.0"

ENDPOINTS = [
    ("GET", "/pokemons", "Fetch a list of Pokémon (query params: offset, limit)"),
    ("POST", "/pokemons", "Add a new Pokémon (body: { name, category })"),
    ("PATCH", "/pokemons/{id}", "Update a Pokémon by ID (body: { name, category })"),
    ("DELETE", "/pokemons/{id}", "Delete a Pokémon by ID"),
]


# ---------------------------
# Dependencies
# ---------------------------
def get_store(request: Request) -> PokemonStore:
    return request.app.state.store


def get_catalog(request: Request) -> CatalogClient:
    return request.app.state.catalog


# ---------------------------
# Pokemon endpoints
# ---------------------------
async def list_pokemons(offset: Optional[str] = None, limit: Optional[str] = None,
                        catalog: CatalogClient = Depends(get_catalog)):
    data = await catalog.fetch_page(
        offset=parse_page_param(offset, DEFAULT_OFFSET),
        limit=parse_page_param(limit, DEFAULT_LIMIT),
    )
    return data


async def create_pokemon(body: Any = Body(None), store: PokemonStore = Depends(get_store)) -> Pokemon:
    payload = read_body(body, PokemonIn)
    return store.create(payload.name, payload.category)


async def update_pokemon(pokemon_id: str, body: Any = Body(None),
                         store: PokemonStore = Depends(get_store)) -> Pokemon:
    payload = read_body(body, PokemonPatch)
    return store.update(parse_id(pokemon_id), name=payload.name, category=payload.category)


async def delete_pokemon(pokemon_id: str, store: PokemonStore = Depends(get_store)):
    store.delete(parse_id(pokemon_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# ---------------------------
# App factory
# ---------------------------
def create_app(store: Optional[PokemonStore] = None, catalog: Optional[CatalogClient] = None) -> FastAPI:
    """Build the application; serve with ``uvicorn pokedex.main:create_app --factory``."""
    app = FastAPI(title="pokedex (in-memory demo)")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = store if store is not None else PokemonStore()
    app.state.catalog = catalog or CatalogClient()

    app.add_api_route("/pokemons", list_pokemons, methods=["GET"])
    app.add_api_route("/pokemons", create_pokemon, methods=["POST"],
                      status_code=status.HTTP_201_CREATED, response_model=Pokemon)
    app.add_api_route("/pokemons/{pokemon_id}", update_pokemon, methods=["PATCH"], response_model=Pokemon)
    app.add_api_route("/pokemons/{pokemon_id}", delete_pokemon, methods=["DELETE"],
                      status_code=status.HTTP_204_NO_CONTENT, response_class=Response)

    register_error_handlers(app)
    return app


def startup_banner(settings: Settings) -> str:
    lines = [f"Server is running at {settings.base_url}", "", "Available Endpoints:"]
    for i, (method, path, description) in enumerate(ENDPOINTS, start=1):
        lines.append(f"{i}. {method:<6} {settings.base_url}{path} - {description}")
    return "\n".join(lines)


def serve() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(startup_banner(settings))
    uvicorn.run(create_app(), host=HOST, port=settings.port, log_config=None)


if __name__ == "__main__":
    serve()
