from uuid import UUID
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.dependencies.services import get_participant_service
from app.schemas.trip.participant import (
    InviteCreate, InviteResponse, ParticipantDetailsResponse, ParticipantsResponse
)
from app.services.trips.participant_service import ParticipantService

router = APIRouter(tags=["Participants"])


@router.get(
    "/participants/{participant_id}/confirm",
    response_class=RedirectResponse,
    status_code=status.HTTP_302_FOUND,
)
async def confirm_participant_route(
    participant_id: UUID,
    db: AsyncSession = Depends(get_db),
    participant_service: ParticipantService = Depends(get_participant_service)
):
    redirect_url = await participant_service.confirm_participant(db, participant_id)
    return RedirectResponse(redirect_url, status_code=status.HTTP_302_FOUND)


@router.get("/participants/{participant_id}", response_model=ParticipantDetailsResponse)
async def get_participant_route(
    participant_id: UUID,
    db: AsyncSession = Depends(get_db),
    participant_service: ParticipantService = Depends(get_participant_service)
):
    return await participant_service.get_participant_details(db, participant_id)


@router.get("/trips/{trip_id}/participants", response_model=ParticipantsResponse)
async def get_participants_route(
    trip_id: UUID,
    db: AsyncSession = Depends(get_db),
    participant_service: ParticipantService = Depends(get_participant_service)
):
    return await participant_service.list_participants(db, trip_id)


@router.post("/trips/{trip_id}/invites", response_model=InviteResponse)
async def invite_participant_route(
    trip_id: UUID,
    invite: InviteCreate,
    db: AsyncSession = Depends(get_db),
    participant_service: ParticipantService = Depends(get_participant_service)
):
    return await participant_service.invite_participant(db, trip_id, invite)
