from uuid import UUID
from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.dependencies.services import get_trip_service
from app.schemas.trip.trip_schema import (
    MessageResponse, TripCreate, TripCreatedResponse, TripDetailsResponse, TripUpdate
)
from app.services.trips.trip_service import TripService

router = APIRouter(prefix="/trips", tags=["Trips"])


@router.post("", response_model=TripCreatedResponse)
async def create_trip_route(
    trip: TripCreate,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.create_trip(db, trip)


@router.get("/{trip_id}/confirm", response_class=RedirectResponse, status_code=status.HTTP_302_FOUND)
async def confirm_trip_route(
    trip_id: UUID,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    redirect_url = await trip_service.confirm_trip(db, trip_id)
    return RedirectResponse(redirect_url, status_code=status.HTTP_302_FOUND)


@router.put("/{trip_id}", response_model=MessageResponse)
async def update_trip_route(
    trip_id: UUID,
    trip_update: TripUpdate,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.update_trip(db, trip_id, trip_update)


@router.get("/{trip_id}", response_model=TripDetailsResponse)
async def get_trip_route(
    trip_id: UUID,
    db: AsyncSession = Depends(get_db),
    trip_service: TripService = Depends(get_trip_service)
):
    return await trip_service.get_trip_details(db, trip_id)
