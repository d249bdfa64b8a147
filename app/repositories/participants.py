from typing import List, Optional
from uuid import UUID
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.models.trips.participant import Participant


async def get_participant(db: AsyncSession, participant_id: UUID) -> Optional[Participant]:
    result = await db.execute(select(Participant).where(Participant.id == participant_id))
    return result.scalar_one_or_none()


async def list_participants(db: AsyncSession, trip_id: UUID) -> List[Participant]:
    result = await db.execute(
        select(Participant)
        .where(Participant.trip_id == trip_id)
        .order_by(Participant.is_owner.desc(), Participant.created_at)
    )
    return list(result.scalars().all())


async def list_guests(db: AsyncSession, trip_id: UUID) -> List[Participant]:
    """Every participant except the owner."""
    result = await db.execute(
        select(Participant)
        .where(Participant.trip_id == trip_id, Participant.is_owner.is_(False))
        .order_by(Participant.created_at)
    )
    return list(result.scalars().all())


async def create_participant(db: AsyncSession, trip_id: UUID, email: str, name: Optional[str] = None) -> Participant:
    participant = Participant(trip_id=trip_id, email=email, name=name)
    db.add(participant)
    await db.commit()
    await db.refresh(participant)
    return participant


async def mark_participant_confirmed(db: AsyncSession, participant_id: UUID) -> bool:
    result = await db.execute(
        update(Participant)
        .where(Participant.id == participant_id, Participant.is_confirmed.is_(False))
        .values(is_confirmed=True)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount == 1
