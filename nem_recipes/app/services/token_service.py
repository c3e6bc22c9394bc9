"""Bearer token issuance and verification.

Two providers share one interface:

* ``StaticTokenProvider`` hands every client the same opaque string and
  accepts only ``"Bearer " + token``. The token is never decoded even though
  it looks like a JWT header.
* ``JwtTokenProvider`` signs a short-lived token per issuance and verifies
  signature, expiry and subject on every request.
"""

import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

from jose import JWTError, jwt

from nem_recipes.app.schemas.auth import AuthenticatedClient

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


class TokenProvider(Protocol):
    def issue(self, client_id: str) -> str:
        ...

    def authenticate(self, authorization: Optional[str]) -> Optional[AuthenticatedClient]:
        ...


class StaticTokenProvider:
    def __init__(self, token: str, client_id: str):
        self._token = token
        self._client_id = client_id
        self._expected_header = f"{BEARER_PREFIX}{token}"

    def issue(self, client_id: str) -> str:
        return self._token

    def authenticate(self, authorization: Optional[str]) -> Optional[AuthenticatedClient]:
        if not authorization:
            return None
        if not hmac.compare_digest(authorization.encode("utf-8"), self._expected_header.encode("utf-8")):
            return None
        return AuthenticatedClient(client_id=self._client_id)


class JwtTokenProvider:
    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl_seconds: int = 3600):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds)

    def issue(self, client_id: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {"sub": client_id, "iat": now, "exp": now + self._ttl}
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def authenticate(self, authorization: Optional[str]) -> Optional[AuthenticatedClient]:
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            return None
        token = authorization[len(BEARER_PREFIX):]
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.debug("Rejected bearer token: %s", exc)
            return None
        sub = payload.get("sub")
        if not sub:
            return None
        return AuthenticatedClient(client_id=str(sub))
