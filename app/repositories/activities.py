from datetime import datetime
from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.models.activity.activity import Activity


async def create_activity(db: AsyncSession, trip_id: UUID, title: str, occurs_at: datetime) -> Activity:
    activity = Activity(trip_id=trip_id, title=title, occurs_at=occurs_at)
    db.add(activity)
    await db.commit()
    await db.refresh(activity)
    return activity


async def list_activities(db: AsyncSession, trip_id: UUID) -> List[Activity]:
    result = await db.execute(
        select(Activity)
        .where(Activity.trip_id == trip_id)
        .order_by(Activity.occurs_at.asc())
    )
    return list(result.scalars().all())
