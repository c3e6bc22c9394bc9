import logging

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError

from nem_recipes.app.api.routes import api_router
from nem_recipes.app.core.config import get_settings
from nem_recipes.app.core.errors import ApiError, BadRequestError

logger = logging.getLogger(__name__)


async def api_error_handler(request: Request, exc: ApiError) -> Response:
    return Response(content=exc.message, status_code=exc.status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    return await api_error_handler(request, BadRequestError())


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="NEM Recipes", version="0.1.0")
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(api_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    logger.info("Recipe server configured with %s tokens", settings.token_mode)
    return app


app = create_app()
