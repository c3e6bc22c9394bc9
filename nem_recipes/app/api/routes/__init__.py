from fastapi import APIRouter

from nem_recipes.app.api.routes import recipes, token

api_router = APIRouter()
api_router.include_router(token.router)
api_router.include_router(recipes.router)
