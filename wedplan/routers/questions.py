from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Dict, Any

from ..database import get_db
from ..services.question_service import QuestionService, serialize_question
from ..schemas.question import QuestionUpsert
from ..dependencies.permissions import get_current_user, require_website, Couple
from ..utils.router_helpers import handle_service_errors, RouterResponse
from ..models.user import User

router = APIRouter(tags=["questions"])


@router.post("/", response_model=Dict[str, Any])
@handle_service_errors
async def upsert_question(
    body: QuestionUpsert,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create or update a question and its options"""
    question = QuestionService(db).upsert_question(current_user.id, body)
    return RouterResponse.success(data=serialize_question(question), message="Question saved")


@router.get("/website", response_model=Dict[str, Any])
@handle_service_errors
async def get_website_questions(
    db: Session = Depends(get_db),
    couple: Couple = Depends(require_website),
):
    """General questions shown on the wedding website"""
    questions = QuestionService(db).get_website_questions(
        couple.website.id, couple.user.id
    )
    return RouterResponse.success(data=[serialize_question(q) for q in questions])


@router.get("/event/{event_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_event_questions(
    event_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    questions = QuestionService(db).get_event_questions(event_id, current_user.id)
    return RouterResponse.success(data=[serialize_question(q) for q in questions])


@router.get("/{question_id}", response_model=Dict[str, Any])
@handle_service_errors
async def get_question(
    question_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    question = QuestionService(db).get_question(question_id, current_user.id)
    return RouterResponse.success(data=serialize_question(question))


@router.delete("/{question_id}", response_model=Dict[str, Any])
@handle_service_errors
async def delete_question(
    question_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    deleted_id = QuestionService(db).delete_question(question_id, current_user.id)
    return RouterResponse.deleted(message="Question deleted", data={"id": deleted_id})
