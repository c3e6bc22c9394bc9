from typing import Optional

from fastapi import Depends, Header

from nem_recipes.app.core.config import Settings, get_settings
from nem_recipes.app.core.errors import UnauthorizedError
from nem_recipes.app.schemas.auth import AuthenticatedClient
from nem_recipes.app.services.credentials_service import CredentialValidator, StaticCredentialValidator
from nem_recipes.app.services.token_service import JwtTokenProvider, StaticTokenProvider, TokenProvider


def get_credential_validator(settings: Settings = Depends(get_settings)) -> CredentialValidator:
    return StaticCredentialValidator(settings.client_id, settings.client_secret)


def get_token_provider(settings: Settings = Depends(get_settings)) -> TokenProvider:
    if settings.token_mode == "jwt":
        return JwtTokenProvider(
            settings.auth_secret_key,
            algorithm=settings.auth_algorithm,
            ttl_seconds=settings.token_ttl_seconds,
        )
    return StaticTokenProvider(settings.static_bearer_token, settings.client_id)


def require_client(
    authorization: Optional[str] = Header(default=None, alias="AUTHORIZATION"),
    tokens: TokenProvider = Depends(get_token_provider),
) -> AuthenticatedClient:
    client = tokens.authenticate(authorization)
    if client is None:
        raise UnauthorizedError()
    return client
