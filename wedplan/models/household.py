import uuid
from sqlalchemy import Column, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base


class Household(Base):
    __tablename__ = "households"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    address1 = Column(String)
    address2 = Column(String)
    city = Column(String)
    state = Column(String)
    zip_code = Column(String)
    country = Column(String)
    phone = Column(String)
    email = Column(String)
    notes = Column(Text)

    user_id = Column(
        String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("User", back_populates="households")
    guests = relationship(
        "Guest",
        back_populates="household",
        cascade="all, delete-orphan",
        order_by="Guest.id",
    )
    gifts = relationship(
        "Gift", back_populates="household", cascade="all, delete-orphan"
    )

    def has_guest(self, guest_id: int) -> bool:
        return any(g.id == guest_id for g in self.guests)
