from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import List
from uuid import UUID
from app.utils.dates import as_utc


class ActivityCreate(BaseModel):
    title: str = Field(min_length=3)
    occurs_at: datetime


class ActivityCreatedResponse(BaseModel):
    activity_id: UUID
    message: str


class ActivityOut(BaseModel):
    id: UUID
    title: str
    occurs_at: datetime

    model_config = {"from_attributes": True}

    @field_validator("occurs_at")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class DayActivities(BaseModel):
    date: datetime
    activities: List[ActivityOut]


class ActivitiesResponse(BaseModel):
    activities: List[DayActivities]
