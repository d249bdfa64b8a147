from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.dependencies.services import get_activity_service
from app.schemas.activities.activity import ActivitiesResponse, ActivityCreate, ActivityCreatedResponse
from app.services.activities.activity_service import ActivityService

router = APIRouter(prefix="/trips/{trip_id}/activities", tags=["Activities"])


@router.post("", response_model=ActivityCreatedResponse)
async def create_activity_route(
    trip_id: UUID,
    activity: ActivityCreate,
    db: AsyncSession = Depends(get_db),
    activity_service: ActivityService = Depends(get_activity_service)
):
    return await activity_service.create_activity(db, trip_id, activity)


# 🔹 Activities grouped by day of the trip
@router.get("", response_model=ActivitiesResponse)
async def get_activities_route(
    trip_id: UUID,
    db: AsyncSession = Depends(get_db),
    activity_service: ActivityService = Depends(get_activity_service)
):
    return await activity_service.get_activities_by_day(db, trip_id)
