import pytest

from wedplan.models import Guest, Invitation
from wedplan.models.enums import RsvpStatus
from wedplan.schemas.guest import GuestCreate, GuestUpdate
from wedplan.schemas.guest_tag import GuestTagCreate
from wedplan.services.exceptions import (
    BusinessRuleViolationError,
    PermissionDeniedError,
    ServiceError,
)
from wedplan.services.guest_service import GuestService
from wedplan.services.guest_tag_service import GuestTagService
from wedplan.services.household_service import HouseholdService
from wedplan.services.invitation_service import InvitationService, tally_rsvps


def test_create_guest_joins_household_uninvited(db, user, make_event, make_household):
    event = make_event(user)
    household = make_household(user, [("Ann", "Lee")], [event])

    guest = GuestService(db).create_guest(
        user.id,
        GuestCreate(household_id=household["id"], first_name="Kid", last_name="Lee", age_group="CHILD"),
    )

    assert guest.age_group == "CHILD"
    assert guest.is_primary_contact is False
    assert db.get(Invitation, (guest.id, event.id)).rsvp == "Not Invited"


def test_making_guest_primary_clears_others(db, user, make_household):
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee")])
    ann, bob = household["guests"]

    GuestService(db).update_guest(bob["id"], user.id, GuestUpdate(is_primary_contact=True))

    assert db.get(Guest, ann["id"]).is_primary_contact is False
    assert db.get(Guest, bob["id"]).is_primary_contact is True


def test_household_guests_need_ownership(db, user, other_user, make_household):
    household = make_household(user, [("Ann", "Lee")])
    service = GuestService(db)

    assert len(service.get_household_guests(household["id"], user.id)) == 1
    with pytest.raises(PermissionDeniedError):
        service.get_household_guests(household["id"], other_user.id)


def test_delete_many_guests(db, user, make_event, make_household):
    event = make_event(user)
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee"), ("Cy", "Lee")], [event])
    ids = [g["id"] for g in household["guests"]]

    assert GuestService(db).delete_guests(ids[:2], user.id) == 2
    assert [g.id for g in db.query(Guest).order_by(Guest.id)] == ids[2:]
    assert db.query(Invitation).filter(Invitation.guest_id.in_(ids[:2])).count() == 0


def test_update_tags_replaces_and_limits(db, user, other_user, make_household):
    tags = GuestTagService(db)
    first = tags.create_tag(user.id, GuestTagCreate(name="College"))
    second = tags.create_tag(user.id, GuestTagCreate(name="Band"))
    foreign = tags.create_tag(other_user.id, GuestTagCreate(name="Work"))
    guest_id = make_household(user, [("Ann", "Lee")])["guests"][0]["id"]
    service = GuestService(db)

    service.update_tags(guest_id, user.id, [first.id])
    guest = service.update_tags(guest_id, user.id, [second.id])
    assert [a.guest_tag_id for a in guest.tag_assignments] == [second.id]

    with pytest.raises(PermissionDeniedError):
        service.update_tags(guest_id, user.id, [foreign.id])
    with pytest.raises(BusinessRuleViolationError):
        service.update_tags(guest_id, user.id, [f"tag-{n}" for n in range(11)])


def test_search_requires_real_invitation(db, user, make_event, make_household):
    event = make_event(user)
    invited = make_household(user, [("Annabel", "Lee")], [event])
    make_household(user, [("Anna", "Park")], [event], rsvp=RsvpStatus.NOT_INVITED)
    service = HouseholdService(db)

    found = service.search_households("ANN", user_id=user.id)
    assert [h.id for h in found] == [invited["id"]]
    assert [h.id for h in service.search_households("lee", user_id=user.id)] == [invited["id"]]
    with pytest.raises(BusinessRuleViolationError):
        service.search_households("a", user_id=user.id)


def test_invitation_update_and_stats(db, user, other_user, make_event, make_household):
    event = make_event(user)
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee"), ("Cy", "Lee")], [event])
    ann, bob, _ = household["guests"]
    service = InvitationService(db)

    service.update_invitation(ann["id"], event.id, user.id, RsvpStatus.ATTENDING)
    service.update_invitation(bob["id"], event.id, user.id, RsvpStatus.DECLINED)

    assert service.get_event_stats(event.id, user.id) == {
        "attending": 1,
        "declined": 1,
        "invited": 1,
        "not_invited": 0,
        "total": 3,
    }
    with pytest.raises(PermissionDeniedError):
        service.update_invitation(ann["id"], event.id, other_user.id, RsvpStatus.DECLINED)


def test_bulk_create_skips_existing(db, user, make_event, make_household):
    household = make_household(user, [("Ann", "Lee")])
    event = make_event(user)
    guest_id = household["guests"][0]["id"]
    service = InvitationService(db)

    # make_event already created the pair
    assert service.create_for_guests_and_events(user.id, [guest_id], [event.id]) == 0
    with pytest.raises(ServiceError):
        service.create_invitation(user.id, guest_id, event.id)


def test_tally_counts_unknown_status_as_not_invited():
    class Row:
        def __init__(self, event_id, rsvp):
            self.event_id = event_id
            self.rsvp = rsvp

    rows = [Row("e1", "Attending"), Row("e1", "Pending"), Row("e2", "Declined")]
    assert tally_rsvps(rows, "e1") == {
        "attending": 1,
        "declined": 0,
        "invited": 0,
        "not_invited": 1,
    }


def _primary_ids(db, household_id):
    db.expire_all()
    return [
        g.id
        for g in db.query(Guest)
        .filter(Guest.household_id == household_id, Guest.is_primary_contact.is_(True))
        .order_by(Guest.id)
    ]


def test_unflagging_primary_keeps_one_primary(db, user, make_household):
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee")], primary_index=1)
    ann, bob = household["guests"]

    GuestService(db).update_guest(bob["id"], user.id, GuestUpdate(is_primary_contact=False))

    assert _primary_ids(db, household["id"]) == [ann["id"]]


def test_deleting_primary_promotes_next_guest(db, user, make_household):
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee"), ("Cy", "Lee")])
    ann, bob, _ = household["guests"]

    GuestService(db).delete_guest(ann["id"], user.id)

    assert _primary_ids(db, household["id"]) == [bob["id"]]


def test_deleting_several_guests_keeps_a_primary(db, user, make_household):
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee"), ("Cy", "Lee")])
    ann, bob, cy = household["guests"]

    GuestService(db).delete_guests([ann["id"], bob["id"]], user.id)

    assert _primary_ids(db, household["id"]) == [cy["id"]]
