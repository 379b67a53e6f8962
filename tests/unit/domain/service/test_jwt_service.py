"""Unit tests for JWTService."""

import pytest

from market.config import AuthSettings
from market.domain.service import JWTService
from market.util.jwt import JWTError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(auth_settings=AuthSettings(jwt_secret="test-secret"))


def test_token_round_trip_identifies_viewer(jwt_service):
    token = jwt_service.create_token(42, "maker")

    viewer = jwt_service.get_viewer(token)

    assert viewer is not None
    assert viewer.user_id == 42
    assert viewer.handle == "maker"


@pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
def test_missing_or_garbage_token_is_anonymous(jwt_service, token):
    assert jwt_service.get_viewer(token) is None


def test_token_signed_with_other_secret_is_rejected(jwt_service):
    foreign = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret"))
    token = foreign.create_token(42, "maker")

    with pytest.raises(JWTError):
        jwt_service.verify_token(token)


def test_expired_token_is_rejected():
    expired = JWTService(auth_settings=AuthSettings(jwt_secret="test-secret", jwt_expiry_days=-1))
    token = expired.create_token(42, "maker")

    with pytest.raises(JWTError, match="expired"):
        expired.verify_token(token)


@pytest.mark.parametrize("handle", ["", "h" * 256])
def test_token_with_unusable_handle_is_rejected(jwt_service, handle):
    """Signed tokens still need a handle of 1-255 characters."""
    token = jwt_service.create_token(42, handle)

    with pytest.raises(JWTError):
        jwt_service.verify_token(token)
    assert jwt_service.get_viewer(token) is None
