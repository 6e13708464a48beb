import pytest

from wedplan.models import Option
from wedplan.models.enums import QuestionType
from wedplan.schemas.question import QuestionUpsert, OptionInput
from wedplan.services.exceptions import (
    BusinessRuleViolationError,
    NotFoundError,
    PermissionDeniedError,
)
from wedplan.services.question_service import QuestionService


def _option_question(event_id, options, **extra):
    return QuestionUpsert(
        event_id=event_id,
        text="Meal?",
        type=QuestionType.OPTION,
        options=[OptionInput(**o) for o in options],
        **extra,
    )


def test_question_needs_exactly_one_parent(db, user, website, make_event):
    event = make_event(user)
    service = QuestionService(db)

    with pytest.raises(BusinessRuleViolationError):
        service.upsert_question(user.id, QuestionUpsert(text="Orphan?"))
    with pytest.raises(BusinessRuleViolationError):
        service.upsert_question(
            user.id,
            QuestionUpsert(text="Both?", event_id=event.id, website_id=website.id),
        )


def test_option_question_needs_two_options(db, user, make_event):
    event = make_event(user)
    service = QuestionService(db)

    with pytest.raises(BusinessRuleViolationError):
        service.upsert_question(user.id, _option_question(event.id, [{"text": "Fish"}]))
    with pytest.raises(BusinessRuleViolationError):
        service.upsert_question(
            user.id, _option_question(event.id, [{"text": "Fish"}, {"text": "  "}])
        )


def test_upsert_creates_then_updates_options(db, user, make_event):
    event = make_event(user)
    service = QuestionService(db)
    question = service.upsert_question(
        user.id, _option_question(event.id, [{"text": "Fish"}, {"text": "Pasta"}])
    )
    by_text = {o.text: o.id for o in question.options}
    assert all(o.response_count == 0 for o in question.options)

    updated = service.upsert_question(
        user.id,
        _option_question(
            event.id,
            [
                {"id": by_text["Fish"], "text": "Salmon"},
                {"text": "Risotto"},
            ],
            question_id=question.id,
            deleted_options=[by_text["Pasta"]],
        ),
    )

    assert updated.id == question.id
    assert {o.text for o in updated.options} == {"Salmon", "Risotto"}
    assert db.get(Option, by_text["Pasta"]) is None
    assert db.get(Option, by_text["Fish"]).text == "Salmon"


def test_question_belongs_to_owner(db, user, other_user, make_event):
    event = make_event(user)
    service = QuestionService(db)
    question = service.upsert_question(
        user.id, QuestionUpsert(event_id=event.id, text="Song request?")
    )

    with pytest.raises(PermissionDeniedError):
        service.get_question(question.id, other_user.id)
    with pytest.raises(PermissionDeniedError):
        service.upsert_question(
            other_user.id, QuestionUpsert(event_id=event.id, text="Mine now?")
        )


def test_list_and_delete(db, user, website, make_event):
    event = make_event(user)
    service = QuestionService(db)
    question = service.upsert_question(
        user.id, QuestionUpsert(event_id=event.id, text="Song request?")
    )

    assert [q.id for q in service.get_event_questions(event.id, user.id)] == [question.id]
    assert len(service.get_website_questions(website.id, user.id)) == 2

    assert service.delete_question(question.id, user.id) == question.id
    with pytest.raises(NotFoundError):
        service.get_question(question.id, user.id)
