from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.guest_tag_service import GuestTagService
from ..schemas.guest_tag import GuestTagCreate, GuestTagUpdate, GuestTagResponse
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..models.user import User

router = APIRouter(tags=["guest-tags"])


def _tag(tag) -> dict:
    return GuestTagResponse.model_validate(tag).model_dump(exclude_none=True)


@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_tag(
    body: GuestTagCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    tag = GuestTagService(db).create_tag(current_user.id, body)
    return RouterResponse.created(data=_tag(tag), message="Tag created")


@router.get("/", response_model=Dict[str, Any])
@handle_service_errors
async def get_tags(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    tags = GuestTagService(db).get_tags(current_user.id)
    return RouterResponse.success(data=[_tag(t) for t in tags])


@router.post("/seed", response_model=Dict[str, Any])
@handle_service_errors
async def seed_tags(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Add the default tags that are missing"""
    created = GuestTagService(db).seed_initial_tags(current_user.id)
    return RouterResponse.success(data=[_tag(t) for t in created])


@router.get("/{tag_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_tag(
    tag_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    tag = GuestTagService(db).get_tag_with_count(tag_id, current_user.id)
    return RouterResponse.success(data=tag)


@router.put("/{tag_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_tag(
    tag_id: str,
    body: GuestTagUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    tag = GuestTagService(db).update_tag(tag_id, current_user.id, body)
    return RouterResponse.updated(data=_tag(tag))


@router.delete("/{tag_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_tag(
    tag_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    deleted_id = GuestTagService(db).delete_tag(tag_id, current_user.id)
    return RouterResponse.deleted(message="Tag deleted", data={"id": deleted_id})
