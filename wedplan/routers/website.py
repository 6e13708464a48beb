from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.website_service import WebsiteService, serialize_website
from ..schemas.website import (
    WebsiteCreate,
    WebsiteUpdate,
    RsvpEnabledUpdate,
    CoverPhotoUpdate,
    WebsitePasswordCheck,
)
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..models.user import User

router = APIRouter(tags=["website"])


@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_website(
    body: WebsiteCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Onboarding: create the wedding website and its defaults"""
    website = WebsiteService(db).create_website(current_user, body)
    return RouterResponse.created(
        data=serialize_website(website), message="Wedding website created"
    )


@router.get("/", response_model=Dict[str, Any])
@handle_service_errors
async def get_website(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    website = WebsiteService(db).get_website(current_user.id)
    return RouterResponse.success(data=serialize_website(website) if website else None)


@router.put("/", response_model=Dict[str, Any])
@handle_service_errors
async def update_website(
    body: WebsiteUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    website = WebsiteService(db).update_website(current_user.id, body)
    return RouterResponse.updated(data=serialize_website(website))


@router.patch("/rsvp-enabled", response_model=Dict[str, Any])
@handle_service_errors
async def update_rsvp_enabled(
    body: RsvpEnabledUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    website = WebsiteService(db).update_rsvp_enabled(
        current_user.id, body.is_rsvp_enabled
    )
    return RouterResponse.updated(data=serialize_website(website))


@router.patch("/cover-photo", response_model=Dict[str, Any])
@handle_service_errors
async def update_cover_photo(
    body: CoverPhotoUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Store the URL of an already uploaded cover photo"""
    website = WebsiteService(db).update_cover_photo(
        current_user.id, body.cover_photo_url
    )
    return RouterResponse.updated(data=serialize_website(website))


# Public routes


@router.get("/{sub_url}/wedding", response_model=Dict[str, Any])
@handle_service_errors
async def fetch_wedding_data(sub_url: str, db: Session = Depends(get_db)):
    data = WebsiteService(db).fetch_wedding_data(sub_url)
    return RouterResponse.success(data=data)


@router.post("/{sub_url}/verify-password", response_model=Dict[str, Any])
@handle_service_errors
async def verify_website_password(
    sub_url: str, body: WebsitePasswordCheck, db: Session = Depends(get_db)
):
    valid = WebsiteService(db).verify_website_password(sub_url, body.password)
    return RouterResponse.success(data={"valid": valid})
