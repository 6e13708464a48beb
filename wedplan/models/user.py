from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class User(Base):
    __tablename__ = "users"

    # Same id as the auth provider's user
    id = Column(String, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String)
    website_url = Column(String)
    groom_first_name = Column(String)
    groom_last_name = Column(String)
    bride_first_name = Column(String)
    bride_last_name = Column(String)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    events = relationship(
        "Event", back_populates="user", cascade="all, delete-orphan"
    )
    households = relationship(
        "Household", back_populates="user", cascade="all, delete-orphan"
    )
    website = relationship(
        "Website", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    guest_tags = relationship(
        "GuestTag", back_populates="user", cascade="all, delete-orphan"
    )

    @classmethod
    def create_from_supabase(cls, supabase_user, db):
        """Create a local user row for a freshly authenticated Supabase user"""
        metadata = getattr(supabase_user, "user_metadata", None) or {}
        user = cls(
            id=supabase_user.id,
            email=supabase_user.email,
            name=metadata.get("full_name") or metadata.get("name"),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
