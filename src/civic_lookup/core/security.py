"""JWT token handling and password hashing.

Tokens carry the user's UUID as ``sub`` so that per-user district rows can
be addressed without a username lookup.  Passwords are hashed with bcrypt
through passlib.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def hash_password(password: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against a bcrypt hash."""
    return pwd_context.verify(plain_password, hashed_password)


def _encode(claims: dict[str, Any], secret_key: str, algorithm: str, lifetime: timedelta) -> str:
    payload = {**claims, "exp": datetime.now(UTC) + lifetime}
    return jwt.encode(payload, secret_key, algorithm=algorithm)


def create_access_token(
    user_id: str,
    role: str,
    secret_key: str,
    algorithm: str = "HS256",
    expires_minutes: int = 30,
) -> str:
    """Create a short-lived access token.

    Args:
        user_id: The user's UUID as a string.
        role: The user's role.
        secret_key: Secret key for signing.
        algorithm: JWT signing algorithm.
        expires_minutes: Token lifetime in minutes.

    Returns:
        The encoded JWT string.
    """
    return _encode(
        {"sub": user_id, "role": role, "type": ACCESS_TOKEN_TYPE},
        secret_key,
        algorithm,
        timedelta(minutes=expires_minutes),
    )


def create_refresh_token(
    user_id: str,
    secret_key: str,
    algorithm: str = "HS256",
    expires_days: int = 7,
) -> str:
    """Create a long-lived refresh token for ``user_id``."""
    return _encode(
        {"sub": user_id, "type": REFRESH_TOKEN_TYPE},
        secret_key,
        algorithm,
        timedelta(days=expires_days),
    )


def decode_token(
    token: str,
    secret_key: str,
    algorithm: str = "HS256",
) -> dict:
    """Decode and validate a JWT token.

    Raises:
        jwt.ExpiredSignatureError: If the token has expired.
        jwt.InvalidTokenError: If the token is invalid.
    """
    return jwt.decode(token, secret_key, algorithms=[algorithm])
