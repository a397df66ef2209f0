# qa_forum/utils/tokenJWT.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from pydantic import ValidationError

from qa_forum.config import settings
from qa_forum.errors import UnauthenticatedError
from qa_forum.schemas.user import TokenData

# auto_error=False: a missing header, a non-Bearer scheme and an empty token
# all arrive here as None and fail with the same message
bearer_scheme = HTTPBearer(auto_error=False)


# Generate a new JWT access token
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


# Verify signature and expiry, return the identity claims
def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM],
            options={"require_exp": True},
        )
        return TokenData(**payload)
    except (JWTError, ValidationError):
        raise UnauthenticatedError("Invalid or expired token")


# Authentication gate: no database access, only the token's claims
def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenData:
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("Access token required")

    user = decode_access_token(credentials.credentials)
    request.state.user = user
    return user
