from pydantic import BaseModel, ConfigDict, Field, StrictStr


class TokenRequest(BaseModel):
    client_id: StrictStr = Field(min_length=1)
    client_secret: StrictStr = Field(min_length=1)


class AuthenticatedClient(BaseModel):
    client_id: str

    model_config = ConfigDict(frozen=True)
