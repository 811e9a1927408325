"""
Authentication Utility - bearer token verification.

Accounts, passwords and token issuance live with the external auth
provider. This module only verifies the JWT it issued and exposes the
caller's identity to routes:
- sub  -> user_id
- role -> "student" or "government"
"""

from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import Settings, get_settings
from app.schemas.schemas import UserRole

# Bearer token extractor
bearer_scheme = HTTPBearer()


def decode_token(token: str, settings: Settings) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.auth_secret_key, algorithms=[settings.auth_algorithm])
    except JWTError:
        return None


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings)
) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @app.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_token(credentials.credentials, settings)
    if not payload:
        raise credentials_exception

    user_id = payload.get("sub")
    if not user_id:
        raise credentials_exception

    role = payload.get("role", UserRole.student.value)
    if role not in {r.value for r in UserRole}:
        raise credentials_exception

    return {"user_id": str(user_id), "role": role}


async def get_current_student(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require student role."""
    if user["role"] != UserRole.student.value:
        raise HTTPException(status_code=403, detail="Students only")
    return user


async def get_current_government(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require government role (listing owners)."""
    if user["role"] != UserRole.government.value:
        raise HTTPException(status_code=403, detail="Government accounts only")
    return user
