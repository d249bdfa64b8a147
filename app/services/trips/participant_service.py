from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.errors import NotFoundError
from app.core.logger import logger
from app.models.trips.participant import Participant
from app.repositories import participants as participant_repo
from app.repositories import trips as trip_repo
from app.schemas.trip.participant import (
    InviteCreate, InviteResponse, ParticipantDetailsResponse, ParticipantOut, ParticipantsResponse
)
from app.services.email_service import Mailer
from app.services.trips.email_invite import (
    build_participant_invite_email,
    generate_participant_confirmation_link,
)


class ParticipantService:
    def __init__(self, settings: Settings, mailer: Mailer):
        self.settings = settings
        self.mailer = mailer

    async def get_participant_or_404(self, db: AsyncSession, participant_id: UUID) -> Participant:
        participant = await participant_repo.get_participant(db, participant_id)
        if not participant:
            logger.warning(f"Participant not found: ID {participant_id}")
            raise NotFoundError("Participant not found.")
        return participant

    async def confirm_participant(self, db: AsyncSession, participant_id: UUID) -> str:
        participant = await self.get_participant_or_404(db, participant_id)
        redirect_url = f"{self.settings.WEB_BASE_URL}/trips/{participant.trip_id}"

        if participant.is_confirmed:
            return redirect_url

        if await participant_repo.mark_participant_confirmed(db, participant_id):
            logger.info(f"Participant {participant_id} confirmed for trip {participant.trip_id}")
        return redirect_url

    async def list_participants(self, db: AsyncSession, trip_id: UUID) -> ParticipantsResponse:
        if not await trip_repo.get_trip(db, trip_id):
            logger.warning(f"Trip not found: ID {trip_id}")
            raise NotFoundError("Trip not found.")

        participants = await participant_repo.list_participants(db, trip_id)
        return ParticipantsResponse(
            participants=[ParticipantOut.model_validate(p) for p in participants]
        )

    async def invite_participant(self, db: AsyncSession, trip_id: UUID, invite: InviteCreate) -> InviteResponse:
        trip = await trip_repo.get_trip(db, trip_id)
        if not trip:
            logger.warning(f"Invite for unknown trip {trip_id}")
            raise NotFoundError("Trip not found.")

        participant = await participant_repo.create_participant(db, trip_id, invite.email)
        logger.info(f"Participant {participant.id} invited to trip {trip_id}")

        await self.mailer.send(build_participant_invite_email(
            participant_email=participant.email,
            participant_name=participant.name,
            destination=trip.destination,
            starts_at=trip.starts_at,
            ends_at=trip.ends_at,
            confirmation_link=generate_participant_confirmation_link(self.settings.API_BASE_URL, participant.id),
            tz=self.settings.tz,
        ))

        return InviteResponse(participant_id=participant.id, message="Participant invited successfully!")

    async def get_participant_details(self, db: AsyncSession, participant_id: UUID) -> ParticipantDetailsResponse:
        participant = await self.get_participant_or_404(db, participant_id)
        return ParticipantDetailsResponse(participant=ParticipantOut.model_validate(participant))
