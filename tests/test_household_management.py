import pytest

from wedplan.models import Guest, Invitation, Gift
from wedplan.models.enums import RsvpStatus
from wedplan.schemas.household import HouseholdUpdate, PartyMember, GiftInput
from wedplan.services.exceptions import (
    BusinessRuleViolationError,
    NotFoundError,
    PermissionDeniedError,
)
from wedplan.services.household_management_service import HouseholdManagementService


def _primary_ids(db, household_id):
    return [
        g.id
        for g in db.query(Guest).filter(
            Guest.household_id == household_id, Guest.is_primary_contact == True
        )
    ]


def _member(guest, **changes):
    data = {
        "guest_id": guest["id"],
        "first_name": guest["first_name"],
        "last_name": guest["last_name"],
    }
    data.update(changes)
    return PartyMember(**data)


def test_create_makes_first_guest_primary_by_default(db, user, make_event, make_household):
    event = make_event(user)
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee")], [event])

    guests = household["guests"]
    assert len(guests) == 2
    assert [g["is_primary_contact"] for g in guests] == [True, False]
    assert _primary_ids(db, household["id"]) == [guests[0]["id"]]


def test_create_honours_flagged_primary(db, user, make_household):
    household = make_household(
        user, [("Ann", "Lee"), ("Bob", "Lee"), ("Cy", "Lee")], primary_index=2
    )
    assert _primary_ids(db, household["id"]) == [household["guests"][2]["id"]]


def test_create_invites_and_gifts(db, user, make_event, make_household):
    event = make_event(user)
    other_event = make_event(user, name="Brunch", collect_rsvp=False)
    household = make_household(user, [("Ann", "Lee")], [event])

    guest_id = household["guests"][0]["id"]
    assert db.get(Invitation, (guest_id, event.id)).rsvp == RsvpStatus.INVITED.value
    # Events missing from the invites map still get an invitation row
    assert (
        db.get(Invitation, (guest_id, other_event.id)).rsvp
        == RsvpStatus.NOT_INVITED.value
    )
    gifts = db.query(Gift).filter(Gift.household_id == household["id"]).all()
    assert [(g.event_id, g.thankyou) for g in gifts] == [(event.id, False)]


def test_create_rejects_foreign_event(db, user, other_user, make_event, make_household):
    foreign_event = make_event(other_user)
    with pytest.raises(PermissionDeniedError):
        make_household(user, [("Ann", "Lee")], [foreign_event])


@pytest.mark.parametrize(
    "flags, expected_index",
    [
        ((False, False, False), 0),
        ((False, True, False), 1),
        ((False, False, True), 2),
        ((True, True, False), 0),
        ((False, True, True), 1),
    ],
)
def test_update_leaves_exactly_one_primary(db, user, make_household, flags, expected_index):
    household = make_household(
        user, [("Ann", "Lee"), ("Bob", "Lee"), ("Cy", "Lee")], primary_index=0
    )
    party = [
        _member(guest, is_primary_contact=flag)
        for guest, flag in zip(household["guests"], flags)
    ]

    updated = HouseholdManagementService(db).update_household_with_guests(
        user.id, HouseholdUpdate(household_id=household["id"], guest_party=party)
    )

    assert _primary_ids(db, household["id"]) == [
        household["guests"][expected_index]["id"]
    ]
    assert sum(g["is_primary_contact"] for g in updated["guests"]) == 1


def test_update_removes_deleted_guests_only(db, user, make_event, make_household):
    event = make_event(user)
    household = make_household(
        user, [("Ann", "Lee"), ("Bob", "Lee"), ("Cy", "Lee")], [event]
    )
    ann, bob, cy = household["guests"]

    updated = HouseholdManagementService(db).update_household_with_guests(
        user.id,
        HouseholdUpdate(
            household_id=household["id"],
            guest_party=[_member(ann), _member(cy)],
            deleted_guests=[bob["id"]],
        ),
    )

    assert db.get(Guest, bob["id"]) is None
    assert db.query(Invitation).filter(Invitation.guest_id == bob["id"]).count() == 0
    assert {g["id"] for g in updated["guests"]} == {ann["id"], cy["id"]}
    for guest in (ann, cy):
        assert db.get(Invitation, (guest["id"], event.id)).rsvp == "Invited"


def test_update_moves_primary_off_deleted_guest(db, user, make_household):
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee")], primary_index=0)
    ann, bob = household["guests"]

    HouseholdManagementService(db).update_household_with_guests(
        user.id,
        HouseholdUpdate(
            household_id=household["id"],
            guest_party=[_member(bob)],
            deleted_guests=[ann["id"]],
        ),
    )

    assert _primary_ids(db, household["id"]) == [bob["id"]]


def test_update_adds_guest_changes_rsvp_and_upserts_gifts(
    db, user, make_event, make_household
):
    event = make_event(user)
    household = make_household(user, [("Ann", "Lee")], [event])
    ann = household["guests"][0]

    updated = HouseholdManagementService(db).update_household_with_guests(
        user.id,
        HouseholdUpdate(
            household_id=household["id"],
            city="Denver",
            guest_party=[
                _member(ann, invites={event.id: RsvpStatus.ATTENDING}),
                PartyMember(
                    first_name="Dee", last_name="Lee", invites={event.id: "Invited"}
                ),
            ],
            gifts=[GiftInput(event_id=event.id, description="Toaster", thankyou=True)],
        ),
    )

    assert updated["city"] == "Denver"
    assert len(updated["guests"]) == 2
    assert db.get(Invitation, (ann["id"], event.id)).rsvp == "Attending"
    gift = db.get(Gift, (household["id"], event.id))
    assert (gift.description, gift.thankyou) == ("Toaster", True)


def test_update_rejects_guest_from_other_household(db, user, make_household):
    first = make_household(user, [("Ann", "Lee")])
    second = make_household(user, [("Bob", "Kim")])

    with pytest.raises(BusinessRuleViolationError):
        HouseholdManagementService(db).update_household_with_guests(
            user.id,
            HouseholdUpdate(
                household_id=first["id"],
                guest_party=[_member(first["guests"][0])],
                deleted_guests=[second["guests"][0]["id"]],
            ),
        )
    assert db.get(Guest, second["guests"][0]["id"]) is not None


def test_update_checks_ownership(db, user, other_user, make_household):
    household = make_household(user, [("Ann", "Lee")])

    with pytest.raises(PermissionDeniedError):
        HouseholdManagementService(db).update_household_with_guests(
            other_user.id,
            HouseholdUpdate(
                household_id=household["id"],
                guest_party=[_member(household["guests"][0])],
            ),
        )


def test_delete_household_cascades(db, user, make_event, make_household):
    event = make_event(user)
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee")], [event])
    service = HouseholdManagementService(db)

    assert service.delete_household(user.id, household["id"]) == household["id"]
    assert db.query(Guest).count() == 0
    assert db.query(Invitation).count() == 0
    assert db.query(Gift).count() == 0

    with pytest.raises(NotFoundError):
        service.delete_household(user.id, household["id"])
