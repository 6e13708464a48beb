from wedplan.models import Event, Invitation


def test_root_and_health(client):
    assert client.get("/").json()["status"] == "running"
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_dashboard_before_onboarding(client):
    response = client.get("/api/dashboard/")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] is None


def test_dashboard_after_onboarding(client, website):
    body = client.get("/api/dashboard/").json()

    assert body["data"]["total_events"] == 1
    assert body["data"]["total_guests"] == 0
    assert body["data"]["wedding_data"]["website"]["sub_url"] == website.sub_url


def test_event_errors_map_to_status_codes(client, other_user, make_event):
    foreign = make_event(other_user)

    assert client.get("/api/event/missing").status_code == 404
    assert client.get(f"/api/event/{foreign.id}").status_code == 403
    assert client.post("/api/event/", json={"name": ""}).status_code == 422


def test_create_and_delete_event(client):
    created = client.post("/api/event/", json={"name": "Brunch", "collect_rsvp": True})
    assert created.status_code == 201
    event_id = created.json()["data"]["id"]

    deleted = client.delete(f"/api/event/{event_id}")
    assert deleted.status_code == 200
    assert deleted.json()["data"] == {"id": event_id}
    assert client.get(f"/api/event/{event_id}").status_code == 404


def test_duplicate_tag_is_conflict(client):
    assert client.post("/api/guest-tags/", json={"name": "Cousins"}).status_code == 201
    assert client.post("/api/guest-tags/", json={"name": "Cousins"}).status_code == 409


def test_create_household(client, user, make_event):
    event = make_event(user)
    response = client.post(
        "/api/households/",
        json={
            "city": "Austin",
            "guest_party": [
                {"first_name": "Ann", "last_name": "Lee", "invites": {event.id: "Invited"}},
                {"first_name": "Bob", "last_name": "Lee", "invites": {event.id: "Invited"}},
            ],
        },
    )

    assert response.status_code == 201
    guests = response.json()["data"]["guests"]
    assert [g["is_primary_contact"] for g in guests] == [True, False]
    assert client.post("/api/households/", json={"guest_party": []}).status_code == 422


def test_public_rsvp_submit(client, db, user, make_event, make_household):
    event = make_event(user)
    household = make_household(user, [("Ann", "Lee")], [event])
    guest_id = household["guests"][0]["id"]

    response = client.post(
        "/api/rsvp/submit",
        json={"rsvp_responses": [{"event_id": event.id, "guest_id": guest_id, "rsvp": "Attending"}]},
    )

    assert response.status_code == 200
    db.expire_all()
    assert db.get(Invitation, (guest_id, event.id)).rsvp == "Attending"

    missing = client.post(
        "/api/rsvp/submit",
        json={"rsvp_responses": [{"event_id": "nope", "guest_id": guest_id, "rsvp": "Declined"}]},
    )
    assert missing.status_code == 404


def test_public_wedding_and_form_steps(client, db, user, website, make_household):
    wedding_day = db.query(Event).filter(Event.user_id == user.id).one()
    household = make_household(user, [("Ann", "Lee")], [wedding_day])

    wedding = client.get(f"/api/website/{website.sub_url}/wedding")
    assert wedding.status_code == 200
    assert wedding.json()["data"]["groom_first_name"] == "John"
    assert client.get("/api/website/nobody/wedding").status_code == 404

    found = client.get(f"/api/rsvp/{website.sub_url}/households/search", params={"q": "lee"})
    assert [h["id"] for h in found.json()["data"]] == [household["id"]]
    assert client.get(
        f"/api/rsvp/{website.sub_url}/households/search", params={"q": "l"}
    ).status_code == 422

    steps = client.get(
        f"/api/rsvp/{website.sub_url}/households/{household['id']}/steps"
    ).json()["data"]
    assert [s["type"] for s in steps] == [
        "find_invitation",
        "confirm_household",
        "event_rsvp",
        "question",
        "question",
        "submit",
        "confirmation",
    ]


def test_website_questions_need_onboarding(client, db, user):
    assert client.get("/api/questions/website").status_code == 400


def test_website_questions_after_onboarding(client, website):
    body = client.get("/api/questions/website").json()

    assert len(body["data"]) == 2
    assert {q["type"] for q in body["data"]} == {"Text"}
