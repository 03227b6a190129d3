# pokedex/core.py
import re
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel

DEFAULT_OFFSET = 0
DEFAULT_LIMIT = 20

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

BodyT = TypeVar("BodyT", bound=BaseModel)


# Field values are not type-checked; presence is the only rule.
class PokemonIn(BaseModel):
    name: Optional[Any] = None
    category: Optional[Any] = None


class PokemonPatch(BaseModel):
    name: Optional[Any] = None
    category: Optional[Any] = None


# ---------------------------
# Helpers
# ---------------------------
def read_body(raw: Any, model: Type[BodyT]) -> BodyT:
    """Build ``model`` from a decoded JSON body; anything but an object reads as ``{}``."""
    return model.model_validate(raw if isinstance(raw, dict) else {})


def is_present(value: Any) -> bool:
    """A field is absent when it is missing, null, false, 0 or an empty string.

    Any other JSON value, including ``[]`` and ``{}``, counts as present.
    """
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and value == 0:
        return False
    return True


def parse_id(raw: str) -> Optional[int]:
    """Parse a path id as a base-10 integer prefix ("7", "7abc" -> 7; "abc" -> None)."""
    m = _LEADING_INT.match(raw or "")
    if not m:
        return None
    return int(m.group(1))


def parse_page_param(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    value = parse_id(raw)
    return default if value is None else value
