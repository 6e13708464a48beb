import pytest
from pydantic import ValidationError

from wedplan.schemas.guest_tag import GuestTagCreate, GuestTagUpdate
from wedplan.services.exceptions import ConflictError, PermissionDeniedError
from wedplan.services.guest_service import GuestService
from wedplan.services.guest_tag_service import GuestTagService


def test_name_is_trimmed_and_validated():
    assert GuestTagCreate(name="  College  ").name == "College"
    with pytest.raises(ValidationError):
        GuestTagCreate(name="   ")
    with pytest.raises(ValidationError):
        GuestTagCreate(name="x" * 21)


def test_color_must_be_hex():
    assert GuestTagCreate(name="Band", color="#A1b2C3").color == "#A1b2C3"
    with pytest.raises(ValidationError):
        GuestTagCreate(name="Band", color="blue")
    with pytest.raises(ValidationError):
        GuestTagUpdate(color="#12345")


def test_names_are_unique_per_user(db, user, other_user):
    service = GuestTagService(db)
    service.create_tag(user.id, GuestTagCreate(name="College"))

    with pytest.raises(ConflictError):
        service.create_tag(user.id, GuestTagCreate(name="College"))
    # Another couple can use the same name
    service.create_tag(other_user.id, GuestTagCreate(name="College"))


def test_rename_conflict(db, user):
    service = GuestTagService(db)
    service.create_tag(user.id, GuestTagCreate(name="College"))
    band = service.create_tag(user.id, GuestTagCreate(name="Band"))

    with pytest.raises(ConflictError):
        service.update_tag(band.id, user.id, GuestTagUpdate(name="College"))
    assert service.update_tag(band.id, user.id, GuestTagUpdate(color="#000000")).color == "#000000"


def test_seed_skips_existing(db, user):
    service = GuestTagService(db)
    service.create_tag(user.id, GuestTagCreate(name="Family", color="#ffffff"))

    created = service.seed_initial_tags(user.id)

    assert {t.name for t in created} == {"MutualFriends", "Coworkers", "Plus One"}
    assert [t.name for t in service.get_tags(user.id)] == sorted(
        ["Family", "MutualFriends", "Coworkers", "Plus One"]
    )


def test_guest_count_and_ownership(db, user, other_user, make_household):
    service = GuestTagService(db)
    tag = service.create_tag(user.id, GuestTagCreate(name="College"))
    household = make_household(user, [("Ann", "Lee"), ("Bob", "Lee")])
    for guest in household["guests"]:
        GuestService(db).update_tags(guest["id"], user.id, [tag.id])

    assert service.get_tag_with_count(tag.id, user.id)["guest_count"] == 2
    with pytest.raises(PermissionDeniedError):
        service.get_tag(tag.id, other_user.id)

    service.delete_tag(tag.id, user.id)
    assert service.get_tags(user.id) == []
