from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.gift_service import GiftService
from ..schemas.gift import GiftUpdate, GiftUpsert, GiftResponse
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..models.user import User

router = APIRouter(tags=["gifts"])


def _gift(gift) -> dict:
    return GiftResponse.model_validate(gift).model_dump()


@router.post("/", response_model=Dict[str, Any])
@handle_service_errors
async def upsert_gift(
    body: GiftUpsert,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    gift = GiftService(db).upsert_gift(
        body.household_id,
        body.event_id,
        current_user.id,
        {"description": body.description, "thankyou": body.thankyou},
    )
    return RouterResponse.success(data=_gift(gift), message="Gift saved")


@router.get("/household/{household_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_household_gifts(
    household_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    gifts = GiftService(db).get_household_gifts(household_id, current_user.id)
    return RouterResponse.success(data=[_gift(g) for g in gifts])


@router.get("/event/{event_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_event_gifts(
    event_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    gifts = GiftService(db).get_event_gifts(event_id, current_user.id)
    return RouterResponse.success(data=[_gift(g) for g in gifts])


@router.put("/{household_id}/{event_id}", response_model=Dict[str, Any])
@handle_service_errors
async def update_gift(
    household_id: str,
    event_id: str,
    body: GiftUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    gift = GiftService(db).update_gift(
        household_id, event_id, current_user.id, body.model_dump(exclude_unset=True)
    )
    return RouterResponse.updated(data=_gift(gift))


@router.post("/{household_id}/{event_id}/thank-you", response_model=Dict[str, Any])
@handle_service_errors
async def mark_thank_you_sent(
    household_id: str,
    event_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    gift = GiftService(db).mark_thank_you_sent(household_id, event_id, current_user.id)
    return RouterResponse.updated(data=_gift(gift), message="Thank-you marked as sent")
