from wedplan.services.rsvp_form_flow import RsvpFormFlow, StepType


def question(qid, text="Q?"):
    return {"id": qid, "text": text, "type": "Text", "is_required": False, "options": []}


def wedding_data():
    return {
        "website": {"general_questions": [question("g1", "Anything else?")]},
        "events": [
            {"id": "e1", "name": "Wedding Day", "collect_rsvp": True, "questions": [question("q1")]},
            {"id": "e2", "name": "Brunch", "collect_rsvp": True, "questions": [question("q2")]},
            {"id": "e3", "name": "Party", "collect_rsvp": False, "questions": [question("q3")]},
            {"id": "e4", "name": "Rehearsal", "collect_rsvp": True, "questions": []},
        ],
    }


def household():
    return {
        "id": "h1",
        "guests": [
            {
                "id": 1,
                "invitations": [
                    {"event_id": "e1", "rsvp": "Invited"},
                    {"event_id": "e2", "rsvp": "Attending"},
                    {"event_id": "e3", "rsvp": "Invited"},
                    {"event_id": "e4", "rsvp": "Not Invited"},
                ],
            },
            {"id": 2, "invitations": [{"event_id": "e1", "rsvp": "Declined"}]},
        ],
    }


def test_steps_follow_invited_rsvp_events():
    steps = RsvpFormFlow(wedding_data(), household()).build_steps()

    assert [s["type"] for s in steps] == [
        StepType.FIND_INVITATION.value,
        StepType.CONFIRM_HOUSEHOLD.value,
        StepType.EVENT_RSVP.value,
        StepType.EVENT_RSVP.value,
        StepType.QUESTION.value,
        StepType.QUESTION.value,
        StepType.QUESTION.value,
        StepType.SUBMIT.value,
        StepType.CONFIRMATION.value,
    ]
    assert [s["index"] for s in steps] == list(range(len(steps)))
    assert steps[2]["guest_ids"] == [1, 2]
    assert steps[3]["guest_ids"] == [1]
    assert [s["question_id"] for s in steps[4:7]] == ["q1", "q2", "g1"]
    assert steps[6]["event_id"] is None


def test_questions_skip_events_not_attended():
    steps = RsvpFormFlow(wedding_data(), household()).build_steps(["e2"])

    questions = [s["question_id"] for s in steps if s["type"] == StepType.QUESTION.value]
    assert questions == ["q2", "g1"]
