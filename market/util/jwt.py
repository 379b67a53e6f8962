"""JWT helpers for the ``auth_token`` cookie.

Tokens are minted by the identity service; both sides share the HS256
secret. The viewer's numeric id travels in the standard ``sub`` claim and
the display handle in a private ``handle`` claim.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from market.config import AuthSettings

REQUIRED_CLAIMS = ["sub", "handle", "exp"]


class TokenPayload(BaseModel):
    """Viewer identity carried by a verified token."""

    user_id: int
    handle: str = Field(min_length=1, max_length=255)
    exp: datetime


class JWTError(Exception):
    """Token missing claims, badly signed or expired."""

    pass


def create_token(user_id: int, handle: str, settings: AuthSettings) -> str:
    """Sign a token for a viewer (tests and local tooling)."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "handle": handle,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Decode a token and check its signature, expiry and claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")

    try:
        return TokenPayload(
            user_id=claims["sub"], handle=claims["handle"], exp=claims["exp"]
        )
    except PydanticValidationError as e:
        raise JWTError(f"Malformed token claims: {e.error_count()} error(s)")
