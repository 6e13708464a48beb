from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.guest_service import GuestService
from ..schemas.guest import (
    GuestCreate,
    GuestUpdate,
    GuestResponse,
    GuestTagsUpdate,
    GuestDeleteMany,
)
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..models.user import User

router = APIRouter(tags=["guests"])


def _guest(guest) -> dict:
    data = GuestResponse.model_validate(guest).model_dump()
    data["tag_ids"] = [a.guest_tag_id for a in guest.tag_assignments]
    return data


@router.get("/", response_model=Dict[str, Any])
@handle_service_errors
async def get_guests(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guests = GuestService(db).get_guests(current_user.id)
    return RouterResponse.success(data=[_guest(g) for g in guests])


@router.get("/household/{household_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_household_guests(
    household_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guests = GuestService(db).get_household_guests(household_id, current_user.id)
    return RouterResponse.success(data=[_guest(g) for g in guests])


@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_guest(
    guest_data: GuestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guest = GuestService(db).create_guest(current_user.id, guest_data)
    return RouterResponse.created(data=_guest(guest), message="Guest added")


@router.post("/delete-many", response_model=Dict[str, Any])
@handle_service_errors
async def delete_guests(
    body: GuestDeleteMany,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    deleted = GuestService(db).delete_guests(body.guest_ids, current_user.id)
    return RouterResponse.deleted(
        message=f"Deleted {deleted} guests", data={"deleted": deleted}
    )


@router.get("/{guest_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guest = GuestService(db).get_guest(guest_id, current_user.id)
    return RouterResponse.success(data=_guest(guest))


@router.put("/{guest_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_guest(
    guest_id: int,
    guest_updates: GuestUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    guest = GuestService(db).update_guest(guest_id, current_user.id, guest_updates)
    return RouterResponse.updated(data=_guest(guest))


@router.put("/{guest_id}/tags", response_model=Dict[str, Any])
@handle_service_errors
async def update_guest_tags(
    guest_id: int,
    body: GuestTagsUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Replace the guest's tags"""
    guest = GuestService(db).update_tags(guest_id, current_user.id, body.tag_ids)
    return RouterResponse.updated(data=_guest(guest), message="Guest tags updated")


@router.delete("/{guest_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_guest(
    guest_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    deleted_id = GuestService(db).delete_guest(guest_id, current_user.id)
    return RouterResponse.deleted(message="Guest deleted", data={"id": deleted_id})
