"""Pydantic models for journey request/response schemas."""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class OperationResult(BaseModel):
    status: str
    message: str

    @classmethod
    def success(cls, message: str) -> "OperationResult":
        return cls(status="success", message=message)

    @classmethod
    def error(cls, message: str) -> "OperationResult":
        return cls(status="error", message=message)


class SubmissionCreate(BaseModel):
    student_email: EmailStr
    media_type: str
    media_title: str = ""
    bonus_points: bool = False
    reflection: str = ""

    @field_validator('student_email', mode='before')
    @classmethod
    def strip_email(cls, v):
        return v.strip() if isinstance(v, str) else v


class SubmissionResponse(BaseModel):
    id: int
    created_at: Optional[datetime] = None
    student_email: str
    media_type: str
    media_title: Optional[str] = ""
    bonus_points: bool
    reflection: Optional[str] = ""
    points: int
    verified: bool

    model_config = ConfigDict(from_attributes=True)

    @field_validator('media_type', mode='before')
    @classmethod
    def category_label(cls, v):
        return getattr(v, 'value', v)


class BatchVerifyRequest(BaseModel):
    submission_ids: list[int] = Field(default_factory=list)


class BatchVerifyResult(BaseModel):
    # Echoes the reference as given, even when it is not a valid id
    id: Any = None
    status: str
    message: str


class LeaderboardEntryResponse(BaseModel):
    rank: int
    name: str
    email: str
    class_period: str
    points: int
    title: str

    model_config = ConfigDict(from_attributes=True)


class RosterEntryResponse(BaseModel):
    name: str
    email: str
    class_period: str
    total_points: int
    title: str


class StudentUpdate(BaseModel):
    name: Optional[str] = None
    class_period: Optional[str] = None


class StudentResponse(BaseModel):
    id: int
    email: str
    name: Optional[str] = ""
    class_period: Optional[str] = ""

    model_config = ConfigDict(from_attributes=True)


class TierResponse(BaseModel):
    points: int
    title: str
    message: str
    image_url: str

    model_config = ConfigDict(from_attributes=True)


class TierImageReport(BaseModel):
    title: str
    raw_url: str
    url: str
    valid: bool
    placeholder: bool


class LogoResponse(BaseModel):
    url: str


class SetupRequest(BaseModel):
    verification_enabled: Optional[bool] = None
