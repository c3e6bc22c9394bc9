import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from nem_recipes.app.api.deps import require_client
from nem_recipes.app.schemas.auth import AuthenticatedClient
from nem_recipes.app.schemas.recipe import RecipeRecord
from nem_recipes.app.services import recipe_catalog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])


@router.get("", response_model=RecipeRecord)
def get_recipe_from_query(
    recipe_id: Optional[str] = Query(default=None, alias="recipeId"),
    client: AuthenticatedClient = Depends(require_client),
):
    return _lookup(recipe_id, client)


@router.get("/{recipe_id}", response_model=RecipeRecord)
def get_recipe(
    recipe_id: str,
    client: AuthenticatedClient = Depends(require_client),
):
    return _lookup(recipe_id, client)


def _lookup(raw_id: Optional[str], client: AuthenticatedClient) -> RecipeRecord:
    # Identifiers stay strings until after authentication so a bad token never turns into a 404
    recipe = recipe_catalog.resolve_recipe(raw_id)
    logger.debug("Served recipe %s to client_id=%r", recipe.id, client.client_id)
    return recipe
