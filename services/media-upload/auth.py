"""Bearer token extraction and JWT verification."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from exceptions import UnauthorizedError

TOKEN_ISSUER = "tubely-access"
_ALGORITHM = "HS256"


def get_bearer_token(authorization: str | None) -> str:
    """
    Extracts the token from an ``Authorization: Bearer <token>`` header value.

    Raises:
        UnauthorizedError: If the header is missing or not a bearer credential.
    """
    if not authorization:
        raise UnauthorizedError("Authorization header is missing")

    scheme, _, token = authorization.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise UnauthorizedError("Malformed authorization header")
    return token


def validate_jwt(token: str, secret: str) -> UUID:
    """
    Verifies a signed access token and returns the user id it was issued to.

    Raises:
        UnauthorizedError: If the signature, expiry, issuer or subject is invalid.
    """
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[_ALGORITHM],
            issuer=TOKEN_ISSUER,
            options={"require": ["exp", "sub"]},
        )
    except jwt.InvalidTokenError as e:
        raise UnauthorizedError("Invalid token", cause=e) from e

    try:
        return UUID(claims["sub"])
    except (TypeError, ValueError) as e:
        raise UnauthorizedError("Invalid token subject", cause=e) from e


def make_jwt(user_id: UUID, secret: str, expires_in: timedelta) -> str:
    """Issues an access token for ``user_id`` valid for ``expires_in``."""
    now = datetime.now(timezone.utc)
    claims = {
        "iss": TOKEN_ISSUER,
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(claims, secret, algorithm=_ALGORITHM)
