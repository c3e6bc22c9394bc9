import re
from typing import Optional, Tuple

from nem_recipes.app.core.errors import RecipeNotFoundError
from nem_recipes.app.schemas.recipe import RecipeRecord

# Position i holds the recipe with id i + 1.
RECIPES: Tuple[RecipeRecord, ...] = (
    RecipeRecord(id=1, ag1_speed=80, mix_time=300, temp_sp=45.0),
    RecipeRecord(id=2, ag1_speed=73, mix_time=290, temp_sp=45.5),
    RecipeRecord(id=3, ag1_speed=69, mix_time=330, temp_sp=44.8),
    RecipeRecord(id=4, ag1_speed=76, mix_time=295, temp_sp=44.5),
    RecipeRecord(id=5, ag1_speed=70, mix_time=280, temp_sp=45.5),
    RecipeRecord(id=6, ag1_speed=80, mix_time=310, temp_sp=46.0),
    RecipeRecord(id=7, ag1_speed=83, mix_time=220, temp_sp=45.9),
)

_RECIPE_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_recipe_id(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    value = raw.strip()
    if not _RECIPE_ID_RE.fullmatch(value):
        return None
    try:
        return int(value)
    except ValueError:
        # past the interpreter digit limit for str -> int
        return None


def get_recipe(recipe_id: Optional[int]) -> RecipeRecord:
    """Return the recipe for a 1-indexed id, or raise RecipeNotFoundError.

    Zero and negative ids are rejected by the range check, not by truthiness.
    """
    if recipe_id is None or recipe_id < 1 or recipe_id > len(RECIPES):
        raise RecipeNotFoundError()
    return RECIPES[recipe_id - 1]


def resolve_recipe(raw: Optional[str]) -> RecipeRecord:
    return get_recipe(parse_recipe_id(raw))
