"""Submission model."""

from sqlalchemy import Boolean, Column, DateTime, Enum as SQLEnum, Integer, String, Text
from sqlalchemy.sql import func

from ..database import Base
from .enums import MediaCategory


class Submission(Base):
    """A student's record of one piece of media consumed."""
    __tablename__ = "submissions"

    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    student_email = Column(String(255), index=True, nullable=False)
    media_type = Column(SQLEnum(MediaCategory), nullable=False)
    media_title = Column(String(500), default="")
    bonus_points = Column(Boolean, default=False, nullable=False)
    reflection = Column(Text, default="")
    points = Column(Integer, default=0, nullable=False)
    verified = Column(Boolean, default=False, nullable=False)
    verified_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<Submission(id={self.id}, student_email='{self.student_email}')>"

    @property
    def is_pending(self):
        """Check if submission still awaits teacher verification."""
        return not self.verified

    @property
    def category_label(self):
        """Get the display label of the media category."""
        return self.media_type.value if self.media_type else ""
