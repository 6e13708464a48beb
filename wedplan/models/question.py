import uuid
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Boolean,
    Text,
    ForeignKey,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database import Base
from .enums import QuestionType, NO_GUEST_ID, NO_HOUSEHOLD_ID


class Question(Base):
    __tablename__ = "questions"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    text = Column(Text, nullable=False)
    type = Column(String, default=QuestionType.TEXT.value, nullable=False)
    is_required = Column(Boolean, default=False, nullable=False)

    # Belongs to exactly one of event or website
    event_id = Column(
        String, ForeignKey("events.id", ondelete="CASCADE"), nullable=True
    )
    website_id = Column(
        String, ForeignKey("websites.id", ondelete="CASCADE"), nullable=True
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    event = relationship("Event", back_populates="questions")
    website = relationship("Website", back_populates="general_questions")
    options = relationship(
        "Option",
        back_populates="question",
        cascade="all, delete-orphan",
        order_by="Option.created_at",
    )
    answers = relationship(
        "Answer", back_populates="question", cascade="all, delete-orphan"
    )
    option_responses = relationship(
        "OptionResponse", back_populates="question", cascade="all, delete-orphan"
    )


class Option(Base):
    __tablename__ = "options"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    text = Column(String, nullable=False)
    description = Column(Text)
    # Kept equal to the number of OptionResponse rows pointing here
    response_count = Column(Integer, default=0, nullable=False)

    question_id = Column(
        String, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    question = relationship("Question", back_populates="options")
    responses = relationship(
        "OptionResponse", back_populates="option", cascade="all, delete-orphan"
    )


class Answer(Base):
    __tablename__ = "answers"

    question_id = Column(
        String, ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True
    )
    guest_id = Column(Integer, primary_key=True, default=NO_GUEST_ID)
    household_id = Column(String, primary_key=True, default=NO_HOUSEHOLD_ID)
    response = Column(Text, nullable=False)
    guest_first_name = Column(String)
    guest_last_name = Column(String)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    question = relationship("Question", back_populates="answers")


class OptionResponse(Base):
    __tablename__ = "option_responses"

    question_id = Column(
        String, ForeignKey("questions.id", ondelete="CASCADE"), primary_key=True
    )
    guest_id = Column(Integer, primary_key=True, default=NO_GUEST_ID)
    household_id = Column(String, primary_key=True, default=NO_HOUSEHOLD_ID)
    option_id = Column(
        String, ForeignKey("options.id", ondelete="CASCADE"), nullable=False
    )
    guest_first_name = Column(String)
    guest_last_name = Column(String)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    question = relationship("Question", back_populates="option_responses")
    option = relationship("Option", back_populates="responses")
