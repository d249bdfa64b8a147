from datetime import datetime
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.errors import InvalidRangeError, NotFoundError
from app.core.logger import logger
from app.models.trips.trip_model import Trip
from app.repositories import participants as participant_repo
from app.repositories import trips as trip_repo
from app.schemas.trip.trip_schema import (
    MessageResponse, TripCreate, TripCreatedResponse, TripDetailsResponse, TripOut, TripUpdate
)
from app.services.email_service import Mailer
from app.services.trips.email_invite import (
    build_participant_invite_email,
    build_trip_confirmation_email,
    generate_participant_confirmation_link,
    generate_trip_confirmation_link,
)
from app.utils.dates import as_utc, is_before, now_utc


def validate_trip_dates(starts_at: datetime, ends_at: datetime) -> None:
    """A trip may not start in the past, and may not end before it starts."""
    if is_before(starts_at, now_utc()):
        raise InvalidRangeError("Invalid trip start date.")
    if is_before(ends_at, starts_at):
        raise InvalidRangeError("Invalid trip end date.")


class TripService:
    def __init__(self, settings: Settings, mailer: Mailer):
        self.settings = settings
        self.mailer = mailer

    def trip_page_url(self, trip_id: UUID) -> str:
        return f"{self.settings.WEB_BASE_URL}/trips/{trip_id}"

    async def get_trip_or_404(self, db: AsyncSession, trip_id: UUID) -> Trip:
        trip = await trip_repo.get_trip(db, trip_id)
        if not trip:
            logger.warning(f"Trip not found: ID {trip_id}")
            raise NotFoundError("Trip not found.")
        return trip

    async def create_trip(self, db: AsyncSession, trip_data: TripCreate) -> TripCreatedResponse:
        validate_trip_dates(trip_data.starts_at, trip_data.ends_at)

        trip = await trip_repo.create_trip_with_participants(
            db,
            destination=trip_data.destination,
            starts_at=as_utc(trip_data.starts_at),
            ends_at=as_utc(trip_data.ends_at),
            owner_name=trip_data.owner_name,
            owner_email=trip_data.owner_email,
            emails_to_invite=list(trip_data.emails_to_invite),
        )
        logger.info(
            f"Trip {trip.id} to {trip.destination} created by {trip_data.owner_email} "
            f"with {len(trip_data.emails_to_invite)} invitee(s)"
        )

        await self.mailer.send(build_trip_confirmation_email(
            owner_email=trip_data.owner_email,
            owner_name=trip_data.owner_name,
            destination=trip.destination,
            starts_at=trip.starts_at,
            ends_at=trip.ends_at,
            confirmation_link=generate_trip_confirmation_link(self.settings.API_BASE_URL, trip.id),
            tz=self.settings.tz,
        ))

        return TripCreatedResponse(trip_id=trip.id, message="Trip created successfully!")

    async def confirm_trip(self, db: AsyncSession, trip_id: UUID) -> str:
        """Confirm the trip and invite every guest; returns the front-end URL to redirect to."""
        trip = await self.get_trip_or_404(db, trip_id)
        redirect_url = self.trip_page_url(trip_id)

        if trip.is_confirmed:
            return redirect_url

        if not await trip_repo.mark_trip_confirmed(db, trip_id):
            # another request confirmed it first and owns the fan-out
            logger.info(f"Trip {trip_id} was confirmed concurrently, skipping invitations")
            return redirect_url

        guests = await participant_repo.list_guests(db, trip_id)
        logger.info(f"Trip {trip_id} confirmed, inviting {len(guests)} participant(s)")

        await self.mailer.send_many(
            build_participant_invite_email(
                participant_email=guest.email,
                participant_name=guest.name,
                destination=trip.destination,
                starts_at=trip.starts_at,
                ends_at=trip.ends_at,
                confirmation_link=generate_participant_confirmation_link(self.settings.API_BASE_URL, guest.id),
                tz=self.settings.tz,
            )
            for guest in guests
        )
        return redirect_url

    async def update_trip(self, db: AsyncSession, trip_id: UUID, trip_data: TripUpdate) -> MessageResponse:
        trip = await self.get_trip_or_404(db, trip_id)
        validate_trip_dates(trip_data.starts_at, trip_data.ends_at)

        await trip_repo.update_trip(
            db,
            trip,
            destination=trip_data.destination,
            starts_at=as_utc(trip_data.starts_at),
            ends_at=as_utc(trip_data.ends_at),
        )
        logger.info(f"Trip {trip_id} updated")
        return MessageResponse(message="Trip updated successfully!")

    async def get_trip_details(self, db: AsyncSession, trip_id: UUID) -> TripDetailsResponse:
        trip = await self.get_trip_or_404(db, trip_id)
        return TripDetailsResponse(trip=TripOut.model_validate(trip.to_dict()))
