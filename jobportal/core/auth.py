"""
Authentication Utility - caller identity from JWT bearer tokens.

Provides:
- JWT token creation/verification
- FastAPI dependency that opens the per-request IdentityContext

The token's `sub` claim is the caller identity. Tokens are minted by a
trusted issuer sharing jwt_secret_key (create_access_token is that issuer's
half, and what the tests use).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from jobportal.core.config import get_settings
from jobportal.core.context import IdentityContext

# Bearer token extractor (auto_error off so a missing header is a 401, not a 403)
bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(identity: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token for an identity."""
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode = {"sub": identity, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_identity_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> IdentityContext:
    """
    FastAPI dependency - open the IdentityContext for this request.

    Usage:
        @router.post("/jobs")
        async def route(ctx: IdentityContext = Depends(get_identity_context)):
            ...
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    payload = decode_token(credentials.credentials)
    if not payload:
        raise credentials_exception

    identity = payload.get("sub")
    if not identity:
        raise credentials_exception

    return IdentityContext.open(identity)


ANONYMOUS_IDENTITY = "anonymous"


async def get_optional_identity_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> IdentityContext:
    """Like get_identity_context, but public routes fall back to an anonymous caller."""
    if credentials is None:
        return IdentityContext.open(ANONYMOUS_IDENTITY)
    return await get_identity_context(credentials)
