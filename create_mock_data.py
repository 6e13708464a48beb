"""
Mock Data Generator for Wedplan
Run this script to populate your development database with a demo wedding.

Usage:
    python create_mock_data.py
"""

import random
from datetime import datetime
from dateutil.relativedelta import relativedelta
from faker import Faker
from sqlalchemy.orm import Session

from wedplan.database import SessionLocal, init_db
from wedplan.models import User, Event
from wedplan.models.enums import AgeGroup, RsvpStatus, QuestionType
from wedplan.schemas.event import EventCreate
from wedplan.schemas.household import HouseholdCreate, PartyMember
from wedplan.schemas.question import QuestionUpsert, OptionInput
from wedplan.schemas.website import WebsiteCreate
from wedplan.services.event_service import EventService
from wedplan.services.household_management_service import (
    HouseholdManagementService,
)
from wedplan.services.question_service import QuestionService
from wedplan.services.website_service import WebsiteService
from wedplan.services.guest_tag_service import GuestTagService

fake = Faker()

DEMO_USER_ID = "demo-couple"
DEMO_EMAIL = "couple@test.com"


class MockDataGenerator:
    def __init__(self, db: Session):
        self.db = db
        self.events = []
        self.households = []

    def clear_existing_data(self):
        """Remove the demo couple and everything they own"""
        print("🗑️  Clearing existing demo data...")
        user = self.db.query(User).filter(User.id == DEMO_USER_ID).first()
        if user:
            self.db.delete(user)
            self.db.commit()
        print("✅ Existing demo data cleared")

    def create_couple(self) -> User:
        print("💍 Creating demo couple and website...")
        user = User(id=DEMO_USER_ID, email=DEMO_EMAIL, name=fake.name())
        self.db.add(user)
        self.db.commit()

        WebsiteService(self.db).create_website(
            user,
            WebsiteCreate(
                first_name=fake.first_name_male(),
                last_name=fake.last_name(),
                partner_first_name=fake.first_name_female(),
                partner_last_name=fake.last_name(),
            ),
        )

        # Wedding Day exists after onboarding, give it a date
        wedding_day = self.db.query(Event).filter(Event.user_id == user.id).first()
        wedding_day.date = datetime.now().replace(
            hour=16, minute=0, second=0, microsecond=0
        ) + relativedelta(months=8)
        wedding_day.venue = fake.company()
        self.db.commit()
        self.events.append(wedding_day)
        return user

    def create_events(self, user: User):
        print("📅 Creating events...")
        wedding_date = self.events[0].date
        extra = [
            ("Welcome Dinner", relativedelta(days=-1), False),
            ("Rehearsal", relativedelta(days=-1, hours=-3), True),
            ("Farewell Brunch", relativedelta(days=1), False),
        ]
        service = EventService(self.db)
        for name, offset, collect_rsvp in extra:
            event = service.create_event(
                user.id,
                EventCreate(
                    name=name,
                    date=wedding_date + offset,
                    venue=fake.company(),
                    attire=random.choice(["Casual", "Cocktail", "Black Tie"]),
                    description=fake.sentence(),
                    collect_rsvp=collect_rsvp,
                ),
            )
            self.events.append(event)

        QuestionService(self.db).upsert_question(
            user.id,
            QuestionUpsert(
                event_id=self.events[0].id,
                text="Meal choice?",
                type=QuestionType.OPTION,
                options=[
                    OptionInput(text="Chicken"),
                    OptionInput(text="Fish"),
                    OptionInput(text="Vegetarian"),
                ],
            ),
        )

    def create_households(self, user: User, count=15):
        print(f"🏠 Creating {count} households...")
        tags = GuestTagService(self.db).get_tags(user.id)
        service = HouseholdManagementService(self.db)

        for _ in range(count):
            last_name = fake.last_name()
            party = []
            for index in range(random.randint(1, 4)):
                invites = {
                    event.id: random.choice(
                        [
                            RsvpStatus.INVITED,
                            RsvpStatus.ATTENDING,
                            RsvpStatus.DECLINED,
                            RsvpStatus.NOT_INVITED,
                        ]
                    )
                    for event in self.events
                }
                party.append(
                    PartyMember(
                        first_name=fake.first_name(),
                        last_name=last_name,
                        email=fake.email() if index == 0 else None,
                        age_group=AgeGroup.ADULT if index < 2 else AgeGroup.CHILD,
                        is_primary_contact=index == 0,
                        invites=invites,
                        tag_ids=[random.choice(tags).id] if tags else None,
                    )
                )

            household = service.create_household_with_guests(
                user.id,
                HouseholdCreate(
                    address1=fake.street_address(),
                    city=fake.city(),
                    state=fake.state_abbr(),
                    zip_code=fake.postcode(),
                    country="USA",
                    guest_party=party,
                ),
            )
            self.households.append(household)

    def generate_all_data(self, clear_existing=False):
        if clear_existing:
            self.clear_existing_data()

        user = self.create_couple()
        self.create_events(user)
        self.create_households(user)

        print("🎉 Mock data generation completed!")
        print(f"📊 Summary:")
        print(f"   - Events: {len(self.events)}")
        print(f"   - Households: {len(self.households)}")
        print(
            f"   - Guests: {sum(len(h['guests']) for h in self.households)}"
        )


def main():
    """Main function to run the mock data generator"""
    print("💒 Wedplan Mock Data Generator")
    print("=" * 40)

    init_db()
    db = SessionLocal()

    try:
        generator = MockDataGenerator(db)
        clear_existing = input("Clear existing data? (y/N): ").lower().startswith("y")
        generator.generate_all_data(clear_existing=clear_existing)

        print("\n✅ Mock data generation successful!")

    except Exception as e:
        print(f"\n❌ Error generating mock data: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main()
