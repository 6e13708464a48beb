from wedplan.models import Answer, Event
from wedplan.schemas.question import QuestionUpsert
from wedplan.schemas.rsvp import RsvpSubmission
from wedplan.services.dashboard_service import DashboardService
from wedplan.services.question_service import QuestionService
from wedplan.services.rsvp_submission_service import RsvpSubmissionService


def test_overview_is_none_without_user(db):
    assert DashboardService(db).get_overview("nobody") is None


def test_overview_is_none_before_onboarding(db, user, make_event):
    make_event(user)
    assert DashboardService(db).get_overview(user.id) is None


def test_overview_for_onboarded_user(db, user, website, make_household):
    make_household(user, [("Ann", "Lee"), ("Bob", "Lee")])
    make_household(user, [("Cy", "Kim")])

    overview = DashboardService(db).get_overview(user.id)

    assert overview["total_guests"] == 3
    assert overview["total_events"] == 1
    assert len(overview["households"]) == 2
    wedding = overview["wedding_data"]
    assert wedding["groom_first_name"] == "John"
    assert wedding["bride_last_name"] == "Doe"
    assert wedding["website"]["sub_url"] == "johnsmithandjanedoe"
    assert len(wedding["website"]["general_questions"]) == 2
    # Wedding Day has no date yet
    assert wedding["days_remaining"] == -1
    assert wedding["date"] == {"standard_format": None, "number_format": None}

    wedding_day = overview["events"][0]
    assert wedding_day["name"] == "Wedding Day"
    assert wedding_day["guest_responses"] == {
        "attending": 0,
        "declined": 0,
        "invited": 0,
        "not_invited": 3,
    }


def test_overview_uses_wedding_day_date(db, user, website, future_date):
    event = db.query(Event).filter(Event.user_id == user.id).one()
    event.date = future_date
    db.commit()

    wedding = DashboardService(db).get_overview(user.id)["wedding_data"]

    assert wedding["date"]["number_format"] == future_date.strftime("%m.%d.%Y")
    assert wedding["date"]["standard_format"].endswith(str(future_date.year))
    assert wedding["days_remaining"] in (200, 201)


def test_overview_merges_invitations_into_guests(db, user, website, make_event, make_household):
    event = make_event(user)
    household = make_household(user, [("Ann", "Lee")], [event])

    overview = DashboardService(db).get_overview(user.id)

    guest = overview["households"][0]["guests"][0]
    assert guest["id"] == household["guests"][0]["id"]
    rsvps = {inv["event_id"]: inv["rsvp"] for inv in guest["invitations"]}
    assert rsvps[event.id] == "Invited"
    assert len(rsvps) == 2


def test_rsvp_round_trip_shows_on_dashboard(db, user, website, make_event, make_household):
    event = make_event(user, name="Reception", collect_rsvp=True)
    question = QuestionService(db).upsert_question(
        user.id, QuestionUpsert(event_id=event.id, text="Any allergies?")
    )
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee")], [event])
    guest_a, guest_b = household["guests"]

    RsvpSubmissionService(db).submit_rsvp(
        RsvpSubmission(
            rsvp_responses=[
                {"event_id": event.id, "guest_id": guest_a["id"], "rsvp": "Attending"},
                {"event_id": event.id, "guest_id": guest_b["id"], "rsvp": "Declined"},
            ],
            answers_to_questions=[
                {
                    "question_id": question.id,
                    "question_type": "Text",
                    "response": "no allergies",
                    "guest_id": guest_a["id"],
                    "household_id": household["id"],
                    "guest_first_name": "Ann",
                    "guest_last_name": "Lee",
                }
            ],
        )
    )

    overview = DashboardService(db).get_overview(user.id)
    reception = next(e for e in overview["events"] if e["id"] == event.id)

    assert reception["guest_responses"] == {
        "attending": 1,
        "declined": 1,
        "invited": 0,
        "not_invited": 0,
    }
    answer = db.get(Answer, (question.id, guest_a["id"], household["id"]))
    assert answer.response == "no allergies"
    recent = reception["questions"][0]["recent_answer"]
    assert recent["response"] == "no allergies"
    assert recent["guest_first_name"] == "Ann"
