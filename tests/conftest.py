"""Test configuration and fixtures."""

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wedplan import models  # noqa: F401
from wedplan.database import Base, get_db
from wedplan.dependencies.permissions import get_current_user
from wedplan.main import app as fastapi_app
from wedplan.models import User
from wedplan.models.enums import RsvpStatus
from wedplan.schemas.event import EventCreate
from wedplan.schemas.household import HouseholdCreate, PartyMember
from wedplan.schemas.website import WebsiteCreate
from wedplan.services.event_service import EventService
from wedplan.services.household_management_service import HouseholdManagementService
from wedplan.services.website_service import WebsiteService


@pytest.fixture
def engine():
    """In-memory database shared by every connection of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Database session."""
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def user(db):
    user = User(id="user-1", email="couple@test.com", name="Test Couple")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def other_user(db):
    user = User(id="user-2", email="other@test.com", name="Other Couple")
    db.add(user)
    db.commit()
    return user


@pytest.fixture
def website(db, user):
    """Onboarded wedding website for ``user``."""
    return WebsiteService(db).create_website(
        user,
        WebsiteCreate(
            first_name="John",
            last_name="Smith",
            partner_first_name="Jane",
            partner_last_name="Doe",
            base_path="https://wedplan.test",
        ),
    )


@pytest.fixture
def future_date():
    return datetime.now().replace(microsecond=0) + timedelta(days=200)


@pytest.fixture
def make_event(db, future_date):
    def _make(owner, name="Reception", collect_rsvp=True):
        return EventService(db).create_event(
            owner.id,
            EventCreate(name=name, date=future_date, collect_rsvp=collect_rsvp),
        )

    return _make


@pytest.fixture
def make_household(db):
    """Create a household from (first, last) names, every guest invited to ``events``."""

    def _make(owner, names, events=(), rsvp=RsvpStatus.INVITED, primary_index=None):
        party = [
            PartyMember(
                first_name=first,
                last_name=last,
                is_primary_contact=index == primary_index,
                invites={event.id: rsvp for event in events},
            )
            for index, (first, last) in enumerate(names)
        ]
        return HouseholdManagementService(db).create_household_with_guests(
            owner.id, HouseholdCreate(city="Austin", guest_party=party)
        )

    return _make


@pytest.fixture
def client(db, user):
    """Test client signed in as ``user``."""

    def override_get_db():
        yield db

    fastapi_app.dependency_overrides[get_db] = override_get_db
    fastapi_app.dependency_overrides[get_current_user] = lambda: user
    yield TestClient(fastapi_app)
    fastapi_app.dependency_overrides.clear()
