import hmac
from typing import Protocol


class CredentialValidator(Protocol):
    def validate(self, client_id: str, client_secret: str) -> bool:
        ...


class StaticCredentialValidator:
    """Accepts exactly one configured client id/secret pair."""

    def __init__(self, client_id: str, client_secret: str):
        self._client_id = client_id
        self._client_secret = client_secret

    def validate(self, client_id: str, client_secret: str) -> bool:
        id_ok = hmac.compare_digest(client_id.encode("utf-8"), self._client_id.encode("utf-8"))
        secret_ok = hmac.compare_digest(client_secret.encode("utf-8"), self._client_secret.encode("utf-8"))
        return id_ok and secret_ok
