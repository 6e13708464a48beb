from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Dict, Any, List, Optional

from ..database import get_db
from ..services.rsvp_submission_service import RsvpSubmissionService
from ..services.household_service import HouseholdService, serialize_household
from ..services.website_service import WebsiteService, WebsiteNotFoundError
from ..services.rsvp_form_flow import RsvpFormFlow
from ..schemas.rsvp import RsvpSubmission
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..utils.constants import AppConstants, ResponseMessages

# Guest-facing, no authentication
router = APIRouter(tags=["rsvp"])


def _website_owner(db: Session, sub_url: str) -> str:
    website = WebsiteService(db).get_by_sub_url(sub_url)
    if not website:
        raise WebsiteNotFoundError("This website does not exist.")
    return website.user_id


@router.post("/submit", response_model=Dict[str, Any])
@handle_service_errors
async def submit_rsvp(body: RsvpSubmission, db: Session = Depends(get_db)):
    """Save RSVP statuses and answers, all or nothing"""
    result = RsvpSubmissionService(db).submit_rsvp(body)
    return RouterResponse.success(data=result, message=ResponseMessages.RSVP_SUBMITTED)


@router.get("/{sub_url}/households/search", response_model=Dict[str, Any])
@handle_service_errors
async def find_invitation(
    sub_url: str,
    q: str = Query(..., min_length=AppConstants.MIN_SEARCH_LENGTH),
    db: Session = Depends(get_db),
):
    """First wizard step: find your household by name"""
    user_id = _website_owner(db, sub_url)
    households = HouseholdService(db).search_households(q, user_id=user_id)
    return RouterResponse.success(data=[serialize_household(h) for h in households])


@router.get("/{sub_url}/households/{household_id}/steps", response_model=Dict[str, Any])
@handle_service_errors
async def get_form_steps(
    sub_url: str,
    household_id: str,
    attending: Optional[List[str]] = Query(None),
    db: Session = Depends(get_db),
):
    """Wizard steps for a household, optionally only for events they attend"""
    user_id = _website_owner(db, sub_url)
    household = HouseholdService(db).get_household(household_id, user_id)
    wedding_data = WebsiteService(db).fetch_wedding_data(sub_url)
    flow = RsvpFormFlow(wedding_data, serialize_household(household))
    return RouterResponse.success(data=flow.build_steps(attending))
