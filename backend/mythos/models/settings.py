"""Journey settings models: the title table and system settings."""

from sqlalchemy import Column, Integer, String, Text

from ..database import Base

VERIFICATION_SETTING = "Enable Teacher Verification"
MAIN_LOGO_SETTING = "Main Logo"


class JourneyTitle(Base):
    """One achievement title unlocked at a point threshold."""
    __tablename__ = "journey_titles"

    id = Column(Integer, primary_key=True, index=True)
    points = Column(Integer, unique=True, nullable=False)
    title = Column(String(255), nullable=False)
    message = Column(Text, default="")
    image_url = Column(String(500), default="")

    def __repr__(self):
        return f"<JourneyTitle(points={self.points}, title='{self.title}')>"


class SystemSetting(Base):
    """Key/value system setting, e.g. the verification toggle."""
    __tablename__ = "system_settings"

    key = Column(String(100), primary_key=True)
    value = Column(String(500), default="")

    def __repr__(self):
        return f"<SystemSetting(key='{self.key}', value='{self.value}')>"

    @property
    def is_enabled(self) -> bool:
        return (self.value or "").strip().upper() == "TRUE"
