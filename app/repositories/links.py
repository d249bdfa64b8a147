from typing import List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.models.link.link import Link


async def create_link(db: AsyncSession, trip_id: UUID, title: str, url: str) -> Link:
    link = Link(trip_id=trip_id, title=title, url=url)
    db.add(link)
    await db.commit()
    await db.refresh(link)
    return link


async def list_links(db: AsyncSession, trip_id: UUID) -> List[Link]:
    result = await db.execute(
        select(Link)
        .where(Link.trip_id == trip_id)
        .order_by(Link.created_at)
    )
    return list(result.scalars().all())
