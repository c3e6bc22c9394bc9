import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    client_id: str = Field("nem_2024", alias="CLIENT_ID")
    client_secret: str = Field("super_secret_client_secret", alias="CLIENT_SECRET")
    static_bearer_token: str = Field(
        "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9__NEM2024",
        alias="STATIC_BEARER_TOKEN",
    )
    # "static" hands out the opaque token above, "jwt" signs one per request
    token_mode: Literal["static", "jwt"] = Field("static", alias="TOKEN_MODE")
    auth_secret_key: str = Field("change-me", alias="AUTH_SECRET_KEY")
    auth_algorithm: str = Field("HS256", alias="AUTH_ALGORITHM")
    token_ttl_seconds: int = Field(3600, alias="TOKEN_TTL_SECONDS", gt=0)
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


logger = logging.getLogger(__name__)


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()
    except PermissionError:
        logger.warning("Unable to read .env; continuing with environment variables only")
        settings = Settings(_env_file=None)
    return settings
