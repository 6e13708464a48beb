from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.household_service import HouseholdService, serialize_household
from ..services.household_management_service import HouseholdManagementService
from ..schemas.household import HouseholdCreate, HouseholdUpdate
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..utils.constants import AppConstants
from ..models.user import User

router = APIRouter(tags=["households"])


@router.post("/", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
@handle_service_errors
async def create_household(
    household_data: HouseholdCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a household together with its guests, invitations and gifts"""
    household = HouseholdManagementService(db).create_household_with_guests(
        current_user.id, household_data
    )
    return RouterResponse.created(data=household, message="Household created")


@router.put("/", response_model=Dict[str, Any])
@handle_service_errors
async def update_household(
    household_data: HouseholdUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    household = HouseholdManagementService(db).update_household_with_guests(
        current_user.id, household_data
    )
    return RouterResponse.updated(data=household, message="Household updated")


@router.get("/", response_model=Dict[str, Any])
@handle_service_errors
async def get_households(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    households = HouseholdService(db).get_households(current_user.id)
    return RouterResponse.success(data=[serialize_household(h) for h in households])


@router.get("/search", response_model=Dict[str, Any])
@handle_service_errors
async def search_households(
    q: str = Query(..., min_length=AppConstants.MIN_SEARCH_LENGTH),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Search your households by guest first or last name"""
    households = HouseholdService(db).search_households(q, user_id=current_user.id)
    return RouterResponse.success(data=[serialize_household(h) for h in households])


@router.get("/{household_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_household(
    household_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    household = HouseholdService(db).get_household(household_id, current_user.id)
    return RouterResponse.success(data=serialize_household(household))


@router.delete("/{household_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_household(
    household_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    deleted_id = HouseholdManagementService(db).delete_household(
        current_user.id, household_id
    )
    return RouterResponse.deleted(message="Household deleted", data={"id": deleted_id})
