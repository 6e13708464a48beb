from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.user_service import UserService
from ..schemas.user import UserProfileUpdate, UserResponse
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..models.user import User

router = APIRouter(tags=["users"])


@router.get("/me", response_model=Dict[str, Any])
@handle_service_errors
async def get_me(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    user = UserService(db).get_current_user(current_user.id)
    return RouterResponse.success(data=UserResponse.model_validate(user).model_dump())


@router.get("/{user_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_user(
    user_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    user = UserService(db).get_user(user_id, current_user.id)
    return RouterResponse.success(data=UserResponse.model_validate(user).model_dump())


@router.put("/{user_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_profile(
    user_id: str,
    profile: UserProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    user = UserService(db).update_profile(user_id, current_user.id, profile)
    return RouterResponse.updated(
        data=UserResponse.model_validate(user).model_dump(), message="Profile updated"
    )
