from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import Settings
from app.core.errors import InvalidRangeError, NotFoundError
from app.core.logger import logger
from app.repositories import activities as activity_repo
from app.repositories import trips as trip_repo
from app.schemas.activities.activity import (
    ActivitiesResponse, ActivityCreate, ActivityCreatedResponse, ActivityOut, DayActivities
)
from app.utils.dates import as_utc, day_range, is_after_day, is_before_day, is_same_day


class ActivityService:
    def __init__(self, settings: Settings):
        self.settings = settings

    async def create_activity(self, db: AsyncSession, trip_id: UUID, data: ActivityCreate) -> ActivityCreatedResponse:
        trip = await trip_repo.get_trip(db, trip_id)
        if not trip:
            logger.warning(f"Trip not found: ID {trip_id}")
            raise NotFoundError("Trip not found.")

        tz = self.settings.tz
        if is_before_day(data.occurs_at, trip.starts_at, tz) or is_after_day(data.occurs_at, trip.ends_at, tz):
            logger.warning(f"Activity date {data.occurs_at} outside trip {trip_id}")
            raise InvalidRangeError("Invalid activity date.")

        activity = await activity_repo.create_activity(db, trip_id, data.title, as_utc(data.occurs_at))
        logger.info(f"Activity {activity.id} created for trip {trip_id}")
        return ActivityCreatedResponse(activity_id=activity.id, message="Activity created successfully!")

    async def get_activities_by_day(self, db: AsyncSession, trip_id: UUID) -> ActivitiesResponse:
        """One bucket per calendar day of the trip, including days without activities."""
        trip = await trip_repo.get_trip(db, trip_id)
        if not trip:
            logger.warning(f"Trip not found: ID {trip_id}")
            raise NotFoundError("Trip not found.")

        tz = self.settings.tz
        activities = await activity_repo.list_activities(db, trip_id)

        return ActivitiesResponse(activities=[
            DayActivities(
                date=day,
                activities=[
                    ActivityOut.model_validate(activity)
                    for activity in activities
                    if is_same_day(activity.occurs_at, day, tz)
                ],
            )
            for day in day_range(trip.starts_at, trip.ends_at, tz)
        ])
