from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List
from datetime import datetime
from uuid import UUID
from app.utils.dates import as_utc


class TripBase(BaseModel):
    destination: str = Field(min_length=3, max_length=90)
    starts_at: datetime
    ends_at: datetime


class TripCreate(TripBase):
    owner_name: str
    owner_email: EmailStr
    emails_to_invite: List[EmailStr]


class TripUpdate(TripBase):
    pass


class TripCreatedResponse(BaseModel):
    trip_id: UUID
    message: str


class MessageResponse(BaseModel):
    message: str


class TripOut(BaseModel):
    id: UUID
    destination: str
    starts_at: datetime
    ends_at: datetime
    is_confirmed: bool

    model_config = {"from_attributes": True}

    @field_validator("starts_at", "ends_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class TripDetailsResponse(BaseModel):
    trip: TripOut
