# pokedex/models.py
from typing import Any

from pydantic import BaseModel


class Pokemon(BaseModel):
    id: int
    # stored as sent, once it passed the presence check
    name: Any
    category: Any
