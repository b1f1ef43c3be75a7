"""
security helpers:
- Argon2 password hashing via argon2-cffi
- JWT access token creation/verification via PyJWT (HS256)
- Opaque refresh token generation
- Authorization header parsing (Bearer / ApiKey)
"""
from __future__ import annotations

import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Mapping

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import Argon2Error, InvalidHashError

from utils.exceptions import (
    InvalidSignature,
    MalformedToken,
    MissingCredential,
    TokenExpired,
)

ACCESS_TOKEN_TTL = timedelta(hours=1)
ACCESS_TOKEN_ISSUER = "chirpy-access"
JWT_ALGORITHM = "HS256"
REFRESH_TOKEN_BYTES = 32

BEARER_PREFIX = "Bearer "
API_KEY_PREFIX = "ApiKey "

ph = PasswordHasher()


def configure_password_hasher(time_cost: int, memory_cost: int) -> None:
    """Rebuild the module hasher with the work factor from the app config."""
    global ph
    ph = PasswordHasher(time_cost=time_cost, memory_cost=memory_cost)


def hash_password(password: str) -> str:
    """Hash a plaintext password using Argon2
    """
    return ph.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a plaintext password against an Argon2 hash.

    Mismatches, malformed hashes and library errors all come back as False.
    """
    try:
        return ph.verify(password_hash, password)
    except (Argon2Error, InvalidHashError):
        return False


def _now() -> datetime:
    return datetime.now(timezone.utc)


def create_access_token(user_id: str, secret: str, expires_in: timedelta = ACCESS_TOKEN_TTL) -> str:
    """Sign a JWT whose subject is ``user_id`` and which expires after ``expires_in``."""
    now = _now()
    payload = {
        "iss": ACCESS_TOKEN_ISSUER,
        "sub": str(user_id),
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str, secret: str) -> str:
    """
    Verify an access token and return its subject as a canonical UUID string.
    Raises InvalidSignature, TokenExpired or MalformedToken.
    """
    try:
        decoded = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            issuer=ACCESS_TOKEN_ISSUER,
            options={"require": ["exp", "sub", "iss"]},
        )
    except jwt.InvalidSignatureError:
        raise InvalidSignature()
    except jwt.ExpiredSignatureError:
        raise TokenExpired()
    except jwt.InvalidTokenError:
        raise MalformedToken()

    try:
        return str(uuid.UUID(decoded["sub"]))
    except (TypeError, ValueError):
        raise MalformedToken()


def make_refresh_token() -> str:
    """32 random bytes, hex encoded (64 chars)."""
    return secrets.token_hex(REFRESH_TOKEN_BYTES)


def get_bearer_token(headers: Mapping[str, str]) -> str:
    auth = headers.get("Authorization", "") or ""
    if not auth.startswith(BEARER_PREFIX):
        raise MissingCredential()
    token = auth[len(BEARER_PREFIX):].strip()
    if not token:
        raise MissingCredential()
    return token


def get_api_key(headers: Mapping[str, str]) -> str:
    # an absent key is "" rather than an error; callers compare it
    auth = headers.get("Authorization", "") or ""
    if not auth.startswith(API_KEY_PREFIX):
        return ""
    return auth[len(API_KEY_PREFIX):].strip()
