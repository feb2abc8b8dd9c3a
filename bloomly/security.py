# bloomly/security.py
from datetime import datetime, timedelta, timezone
from uuid import UUID

import bcrypt
import jwt
from fastapi import Depends, HTTPException, Request

from bloomly.config import Settings, get_settings
from bloomly.schemas.auth import AuthClaims

BCRYPT_ROUNDS = 10
JWT_ALG = "HS256"
TOKEN_TTL = timedelta(days=7)


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # malformed hash in the row
        return False


def sign_token(family_id: UUID, email: str, secret: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "fid": str(family_id),
        "email": email,
        "iat": now,
        "exp": now + TOKEN_TTL,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALG)


def decode_token(token: str, secret: str) -> AuthClaims:
    """Verify signature and expiry. Raises jwt.InvalidTokenError on any failure."""
    data = jwt.decode(token, secret, algorithms=[JWT_ALG], options={"require": ["exp", "fid"]})
    try:
        return AuthClaims(family_id=UUID(data["fid"]), email=data.get("email", ""))
    except (TypeError, ValueError) as e:
        raise jwt.InvalidTokenError("malformed claims") from e


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("Authorization", "")
    if header.startswith("Bearer "):
        return header[7:].strip() or None
    return None


def require_auth(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> AuthClaims:
    """Gate a route behind a valid bearer token; hands the claims to the handler."""
    token = _bearer_token(request)
    if token is None:
        raise HTTPException(status_code=401, detail="missing token")
    try:
        claims = decode_token(token, settings.JWT_SECRET)
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=401, detail="invalid token")
    request.state.user = claims
    return claims
