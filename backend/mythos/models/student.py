"""Student roster model."""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from ..database import Base


class Student(Base):
    """Roster profile for a student, keyed by email.

    Points and title are never stored here; they are derived from the
    student's submissions every time the roster is read.
    """
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    name = Column(String(255), default="")
    class_period = Column(String(100), default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Student(id={self.id}, email='{self.email}')>"

    @property
    def display_name(self):
        """Name if set, otherwise the local part of the email."""
        if self.name:
            return self.name
        return self.email.split("@")[0] if self.email else ""
