from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.dashboard_service import DashboardService
from ..dependencies.permissions import get_current_user
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..utils.constants import ResponseMessages
from ..models.user import User

router = APIRouter(tags=["dashboard"])


@router.get("/", response_model=Dict[str, Any])
@handle_service_errors
async def get_dashboard(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Dashboard overview. data is null until the website is created."""
    overview = DashboardService(db).get_overview(current_user.id)
    if overview is None:
        return RouterResponse.empty(ResponseMessages.NOT_ONBOARDED)
    return RouterResponse.success(data=overview)
