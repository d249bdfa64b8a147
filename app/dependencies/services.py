from fastapi import Depends, Request
from app.core.config import Settings
from app.services.email_service import Mailer
from app.services.trips.trip_service import TripService
from app.services.trips.participant_service import ParticipantService
from app.services.activities.activity_service import ActivityService
from app.services.links.link_service import LinkService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer


async def get_trip_service(
    settings: Settings = Depends(get_settings),
    mailer: Mailer = Depends(get_mailer),
) -> TripService:
    return TripService(settings, mailer)


async def get_participant_service(
    settings: Settings = Depends(get_settings),
    mailer: Mailer = Depends(get_mailer),
) -> ParticipantService:
    return ParticipantService(settings, mailer)


async def get_activity_service(settings: Settings = Depends(get_settings)) -> ActivityService:
    return ActivityService(settings)


async def get_link_service() -> LinkService:
    return LinkService()
