"""
Password hashing and access tokens for admins.

This module provides:
- bcrypt hashing for the admins table
- Signed JWT access tokens used by DefaultAuth
"""

import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
from jose import JWTError, jwt

from decoy.api.schemas.auth import TokenPayload


# ======================
# Configuration
# ======================

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY environment variable must be set")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

ACCESS_TOKEN_TYPE = "access"


# ======================
# Passwords
# ======================


def hash_password(password: str) -> str:
    """
    Hash an admin password.

    Args:
        password: Plain text password.

    Returns:
        bcrypt hash, suitable for Admin.password_hash.
    """
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored hash; malformed hashes never match."""
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


# ======================
# Access tokens
# ======================


def create_access_token(
    admin_id: str,
    email: Optional[str] = None,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed access token for an admin.

    Args:
        admin_id: Admin ID, stored as the subject.
        email: Optional email claim.
        expires_delta: Lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES.

    Returns:
        Encoded JWT.
    """
    issued_at = datetime.now(timezone.utc)
    lifetime = expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    claims: Dict[str, Any] = {
        "sub": str(admin_id),
        "iat": issued_at,
        "exp": issued_at + lifetime,
        "type": ACCESS_TOKEN_TYPE,
    }
    if email:
        claims["email"] = email

    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def _timestamp(value: Optional[int]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromtimestamp(value, tz=timezone.utc)


def decode_token(token: str) -> TokenPayload:
    """
    Decode and validate a token.

    Raises:
        JWTError: If the token is malformed, tampered with or expired.
    """
    try:
        claims = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as e:
        raise JWTError(f"Invalid token: {str(e)}")

    return TokenPayload(
        sub=claims.get("sub"),
        email=claims.get("email"),
        exp=_timestamp(claims.get("exp")),
        iat=_timestamp(claims.get("iat")),
        type=claims.get("type", ACCESS_TOKEN_TYPE),
    )


def verify_token_type(token_payload: TokenPayload, expected_type: str = ACCESS_TOKEN_TYPE) -> bool:
    """Verify token type matches expected."""
    return token_payload.type == expected_type
