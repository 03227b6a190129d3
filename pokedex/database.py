# pokedex/database.py
import logging
from typing import Any, List, Optional

from .core import is_present
from .errors import NotFoundError, ValidationError
from .models import Pokemon

logger = logging.getLogger(__name__)


class PokemonStore:
    """Ordered in-memory collection of user-created pokemons.

    Ids are ``len(store) + 1`` at creation time, not ``max(id) + 1``, so an
    id can be handed out again after a delete.  None of the mutating
    methods await, which keeps them atomic on the event loop.
    """

    def __init__(self):
        self._items: List[Pokemon] = []

    def __len__(self) -> int:
        return len(self._items)

    def all(self) -> List[Pokemon]:
        return list(self._items)

    def find(self, pokemon_id: Optional[int]) -> Optional[Pokemon]:
        for p in self._items:
            if p.id == pokemon_id:
                return p
        return None

    def create(self, name: Any, category: Any) -> Pokemon:
        if not is_present(name) or not is_present(category):
            raise ValidationError()
        pokemon = Pokemon(id=len(self._items) + 1, name=name, category=category)
        self._items.append(pokemon)
        logger.info("Created pokemon %s (%s)", pokemon.id, pokemon.name)
        return pokemon

    def update(self, pokemon_id: Optional[int], name: Any = None,
               category: Any = None) -> Pokemon:
        pokemon = self.find(pokemon_id)
        if pokemon is None:
            raise NotFoundError()
        # partial update, in place
        if is_present(name):
            pokemon.name = name
        if is_present(category):
            pokemon.category = category
        logger.info("Updated pokemon %s", pokemon.id)
        return pokemon

    def delete(self, pokemon_id: Optional[int]) -> None:
        index = next((i for i, p in enumerate(self._items) if p.id == pokemon_id), None)
        if index is None:
            raise NotFoundError()
        del self._items[index]
        logger.info("Deleted pokemon %s", pokemon_id)
