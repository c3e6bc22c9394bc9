from datetime import datetime, timedelta, timezone

from jose import jwt

from nem_recipes.app.services.credentials_service import StaticCredentialValidator
from nem_recipes.app.services.token_service import JwtTokenProvider, StaticTokenProvider


def test_static_credential_validator():
    validator = StaticCredentialValidator("nem_2024", "super_secret_client_secret")
    assert validator.validate("nem_2024", "super_secret_client_secret")
    assert not validator.validate("nem_2024", "super_secret")
    assert not validator.validate("nem", "super_secret_client_secret")


def test_static_provider_issues_same_token_for_everyone(static_token):
    provider = StaticTokenProvider(static_token, "nem_2024")
    assert provider.issue("nem_2024") == static_token
    assert provider.issue("anyone") == static_token


def test_static_provider_requires_exact_header(static_token):
    provider = StaticTokenProvider(static_token, "nem_2024")
    client = provider.authenticate(f"Bearer {static_token}")
    assert client is not None
    assert client.client_id == "nem_2024"
    assert provider.authenticate(None) is None
    assert provider.authenticate("") is None
    assert provider.authenticate(static_token) is None
    assert provider.authenticate(f"Bearer {static_token}x") is None


def test_jwt_provider_round_trip():
    provider = JwtTokenProvider("secret", ttl_seconds=60)
    token = provider.issue("nem_2024")
    client = provider.authenticate(f"Bearer {token}")
    assert client is not None
    assert client.client_id == "nem_2024"


def test_jwt_provider_rejects_expired_token():
    provider = JwtTokenProvider("secret")
    past = datetime.now(timezone.utc) - timedelta(minutes=5)
    token = jwt.encode({"sub": "nem_2024", "iat": past, "exp": past + timedelta(seconds=1)}, "secret", algorithm="HS256")
    assert provider.authenticate(f"Bearer {token}") is None


def test_jwt_provider_rejects_foreign_signature():
    provider = JwtTokenProvider("secret")
    other = JwtTokenProvider("another-secret")
    assert provider.authenticate(f"Bearer {other.issue('nem_2024')}") is None


def test_jwt_provider_rejects_missing_subject():
    provider = JwtTokenProvider("secret")
    exp = datetime.now(timezone.utc) + timedelta(minutes=5)
    token = jwt.encode({"exp": exp}, "secret", algorithm="HS256")
    assert provider.authenticate(f"Bearer {token}") is None
    assert provider.authenticate("Bearer not.a.jwt") is None
    assert provider.authenticate(token) is None
