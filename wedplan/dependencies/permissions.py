from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from supabase import Client
from typing import NamedTuple
import logging

from ..database import get_db, get_supabase
from ..models.user import User
from ..models.website import Website
from ..repositories.user_repository import UserRepository
from ..repositories.website_repository import WebsiteRepository

security = HTTPBearer()
logger = logging.getLogger(__name__)


class Couple(NamedTuple):
    """An onboarded user together with their wedding website"""

    user: User
    website: Website


def _unauthorized(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db),
    supabase: Client = Depends(get_supabase),
) -> User:
    """Resolve the Supabase bearer token to the local user row.

    The row is created on the first request after sign-up, the couple's
    names and website url are filled in later during onboarding.
    """
    try:
        auth_response = supabase.auth.get_user(credentials.credentials)
    except Exception as e:
        logger.error(f"Authentication error: {e}")
        raise _unauthorized()

    supabase_user = getattr(auth_response, "user", None)
    if not supabase_user:
        raise _unauthorized()

    user = UserRepository(db).find_by_id(supabase_user.id)
    if user is None:
        logger.info(f"First sign-in for user {supabase_user.id}")
        return User.create_from_supabase(supabase_user, db)
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="This account is disabled"
        )
    return user


async def require_website(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
) -> Couple:
    """Routes that only make sense after onboarding"""
    website = WebsiteRepository(db).find_by_user_id(current_user.id)
    if not website:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Create your wedding website first",
        )
    return Couple(current_user, website)
