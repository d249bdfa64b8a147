from pydantic import BaseModel, EmailStr
from typing import List, Optional
from uuid import UUID


class InviteCreate(BaseModel):
    email: EmailStr


class InviteResponse(BaseModel):
    participant_id: UUID
    message: str


class ParticipantOut(BaseModel):
    id: UUID
    name: Optional[str] = None
    email: str
    is_owner: bool
    is_confirmed: bool

    model_config = {"from_attributes": True}


class ParticipantsResponse(BaseModel):
    participants: List[ParticipantOut]


class ParticipantDetailsResponse(BaseModel):
    participant: ParticipantOut
