import logging

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError

from nem_recipes.app.api.deps import get_credential_validator, get_token_provider
from nem_recipes.app.core.errors import BadRequestError, UnauthorizedError
from nem_recipes.app.schemas.auth import TokenRequest
from nem_recipes.app.services.credentials_service import CredentialValidator
from nem_recipes.app.services.token_service import TokenProvider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/token", response_class=Response)
async def issue_token(
    request: Request,
    credentials: CredentialValidator = Depends(get_credential_validator),
    tokens: TokenProvider = Depends(get_token_provider),
) -> Response:
    # Parsed by hand so malformed bodies answer 400 "Bad Request" rather than 422 JSON
    body = await request.body()
    try:
        payload = TokenRequest.model_validate_json(body)
    except ValidationError:
        raise BadRequestError()

    if not credentials.validate(payload.client_id, payload.client_secret):
        logger.warning("Rejected credentials for client_id=%r", payload.client_id)
        raise UnauthorizedError()

    logger.info("Issued token to client_id=%r", payload.client_id)
    # Raw token, no Content-Type header
    return Response(content=tokens.issue(payload.client_id))
