from sqlalchemy.orm import Session, selectinload
from typing import List, Optional, Dict, Any
from ..models.question import Question, Option, Answer, OptionResponse


class QuestionRepository:
    """Questions plus their options, text answers and option responses"""

    def __init__(self, db: Session):
        self.db = db

    # Questions
    def find_by_id(self, question_id: str) -> Optional[Question]:
        return (
            self.db.query(Question)
            .options(selectinload(Question.options))
            .filter(Question.id == question_id)
            .first()
        )

    def find_by_event_id(self, event_id: str) -> List[Question]:
        return (
            self.db.query(Question)
            .options(selectinload(Question.options))
            .filter(Question.event_id == event_id)
            .order_by(Question.created_at.asc())
            .all()
        )

    def find_by_website_id(self, website_id: str) -> List[Question]:
        return (
            self.db.query(Question)
            .options(selectinload(Question.options))
            .filter(Question.website_id == website_id)
            .order_by(Question.created_at.asc())
            .all()
        )

    def create(self, data: Dict[str, Any]) -> Question:
        question = Question(**data)
        self.db.add(question)
        self.db.flush()
        return question

    def update(self, question: Question, data: Dict[str, Any]) -> Question:
        for field, value in data.items():
            setattr(question, field, value)
        self.db.flush()
        return question

    def delete(self, question: Question) -> None:
        self.db.delete(question)
        self.db.flush()

    # Options
    def find_option(self, option_id: str) -> Optional[Option]:
        return self.db.query(Option).filter(Option.id == option_id).first()

    def upsert_option(self, question: Question, data: Dict[str, Any]) -> Option:
        option_id = data.get("id")
        option = next((o for o in question.options if o.id == option_id), None)
        if option is None:
            option = Option(
                text=data["text"],
                description=data.get("description"),
                response_count=0,
            )
            question.options.append(option)
        else:
            option.text = data["text"]
            option.description = data.get("description")
        self.db.flush()
        return option

    def delete_options(self, question: Question, option_ids: List[str]) -> int:
        doomed = [o for o in question.options if o.id in set(option_ids)]
        for option in doomed:
            question.options.remove(option)
        self.db.flush()
        return len(doomed)

    def increment_option_count(self, option_id: str, amount: int = 1) -> None:
        self.db.query(Option).filter(Option.id == option_id).update(
            {Option.response_count: Option.response_count + amount},
            synchronize_session="fetch",
        )

    # Answers
    def find_answer(
        self, question_id: str, guest_id: int, household_id: str
    ) -> Optional[Answer]:
        return self.db.get(Answer, (question_id, guest_id, household_id))

    def find_recent_answer(self, question_id: str) -> Optional[Answer]:
        return (
            self.db.query(Answer)
            .filter(Answer.question_id == question_id)
            .order_by(Answer.created_at.desc())
            .first()
        )

    def count_answers(self, question_id: str) -> int:
        return self.db.query(Answer).filter(Answer.question_id == question_id).count()

    def upsert_answer(
        self, question_id: str, guest_id: int, household_id: str, data: Dict[str, Any]
    ) -> Answer:
        answer = self.find_answer(question_id, guest_id, household_id)
        if answer is None:
            answer = Answer(
                question_id=question_id,
                guest_id=guest_id,
                household_id=household_id,
                **data,
            )
            self.db.add(answer)
        else:
            for field, value in data.items():
                setattr(answer, field, value)
        self.db.flush()
        return answer

    # Option responses
    def find_option_response(
        self, question_id: str, guest_id: int, household_id: str
    ) -> Optional[OptionResponse]:
        return self.db.get(OptionResponse, (question_id, guest_id, household_id))

    def create_option_response(self, **fields) -> OptionResponse:
        response = OptionResponse(**fields)
        self.db.add(response)
        self.db.flush()
        return response

    def update_option_response(
        self, response: OptionResponse, data: Dict[str, Any]
    ) -> OptionResponse:
        for field, value in data.items():
            setattr(response, field, value)
        self.db.flush()
        return response
