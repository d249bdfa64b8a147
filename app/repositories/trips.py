from datetime import datetime
from typing import List, Optional
from uuid import UUID
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from app.models.trips.trip_model import Trip
from app.models.trips.participant import Participant


async def get_trip(db: AsyncSession, trip_id: UUID) -> Optional[Trip]:
    result = await db.execute(select(Trip).where(Trip.id == trip_id))
    return result.scalar_one_or_none()


async def create_trip_with_participants(
    db: AsyncSession,
    *,
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
    owner_name: Optional[str],
    owner_email: str,
    emails_to_invite: List[str],
) -> Trip:
    """Persist the trip, its confirmed owner and one unconfirmed row per invitee in one commit."""
    trip = Trip(destination=destination, starts_at=starts_at, ends_at=ends_at)
    db.add(trip)
    await db.flush()

    db.add(Participant(
        trip_id=trip.id,
        name=owner_name,
        email=owner_email,
        is_owner=True,
        is_confirmed=True,
    ))
    db.add_all([Participant(trip_id=trip.id, email=email) for email in emails_to_invite])

    await db.commit()
    await db.refresh(trip)
    return trip


async def update_trip(
    db: AsyncSession,
    trip: Trip,
    *,
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
) -> Trip:
    trip.destination = destination
    trip.starts_at = starts_at
    trip.ends_at = ends_at
    await db.commit()
    await db.refresh(trip)
    return trip


async def mark_trip_confirmed(db: AsyncSession, trip_id: UUID) -> bool:
    """
    One-way Unconfirmed -> Confirmed transition done as a single conditional UPDATE.

    Returns True only for the call that actually flipped the flag, so concurrent
    confirmations cannot both proceed.
    """
    result = await db.execute(
        update(Trip)
        .where(Trip.id == trip_id, Trip.is_confirmed.is_(False))
        .values(is_confirmed=True)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    return result.rowcount == 1
