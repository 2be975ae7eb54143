from typing import Optional
from fastapi import Header, HTTPException
from src.infrastructure.supabase_client import get_supabase
from src.logging_config import get_logger

logger = get_logger(__name__)


def _resolve_user(authorization: Optional[str]):
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization header")

    token = authorization.split(" ", 1)[1]

    try:
        # Verify the token with Supabase
        # Note: res is a UserResponse object in recent versions
        res = get_supabase().auth.get_user(token)
    except Exception as e:
        logger.warning("Auth error exception: %s: %s", type(e).__name__, e)
        raise HTTPException(status_code=401, detail=f"Unauthenticated: {str(e)}")

    if not res or not res.user:
        logger.warning("Auth error: No user returned from Supabase")
        raise HTTPException(status_code=401, detail="Invalid or expired token")
    return res.user


async def get_current_user(authorization: Optional[str] = Header(None)):
    """
    Validates the Supabase JWT token and returns the user object.
    Expected format: Bearer <token>
    """
    return _resolve_user(authorization)


async def get_optional_user(authorization: Optional[str] = Header(None)):
    """
    Same as get_current_user, but anonymous requests resolve to None.
    """
    if not authorization:
        return None
    return _resolve_user(authorization)
