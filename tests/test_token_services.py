import time

import jwt
import pytest

from messenger.infrastructure.security import (
    DemoTokenService,
    JwtTokenService,
    create_token_service,
)


def test_demo_token_shape(token_service):
    token = token_service.issue("dave")
    prefix, _, padding = token.rpartition("_")
    assert prefix == "jwt_dave"
    assert len(padding) == 32
    int(padding, 16)


def test_demo_token_round_trip_with_underscored_username(token_service):
    token = token_service.issue("dave_the_third")
    assert token_service.verify(token)
    assert token_service.extract_username(token) == "dave_the_third"


@pytest.mark.parametrize("token", ["", "Bearer x", "abc_def"])
def test_demo_verify_rejects_wrong_prefix(token_service, token):
    assert token_service.verify(token) is False
    assert token_service.extract_username(token) == ""


def test_demo_extract_username_without_delimiter(token_service):
    assert token_service.verify("jwt_alice") is True
    assert token_service.extract_username("jwt_alice") == ""


def test_jwt_round_trip():
    service = JwtTokenService(secret="s3cret", issuer="messenger-auth")
    token = service.issue("alice")
    assert service.verify(token)
    assert service.extract_username(token) == "alice"


def test_jwt_rejects_wrong_secret_and_issuer():
    token = JwtTokenService(secret="s3cret", issuer="messenger-auth").issue("alice")
    assert not JwtTokenService(secret="other", issuer="messenger-auth").verify(token)
    assert not JwtTokenService(secret="s3cret", issuer="someone-else").verify(token)


def test_jwt_rejects_expired_token():
    now = int(time.time())
    token = jwt.encode(
        {"sub": "alice", "iat": now - 100, "exp": now - 10, "iss": "messenger-auth"},
        "s3cret",
        algorithm="HS256",
    )
    service = JwtTokenService(secret="s3cret", issuer="messenger-auth")
    assert service.verify(token) is False
    assert service.extract_username(token) == ""


def test_jwt_requires_secret():
    with pytest.raises(ValueError):
        JwtTokenService(secret="", issuer="messenger-auth")


def test_create_token_service_backends():
    assert isinstance(create_token_service("demo"), DemoTokenService)
    assert isinstance(create_token_service("jwt"), JwtTokenService)
    with pytest.raises(ValueError):
        create_token_service("plaintext")
