from uuid import UUID
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.database import get_db
from app.dependencies.services import get_link_service
from app.schemas.links.link import LinkCreate, LinkCreatedResponse, LinksResponse
from app.services.links.link_service import LinkService

router = APIRouter(prefix="/trips/{trip_id}/links", tags=["Links"])


@router.post("", response_model=LinkCreatedResponse)
async def create_link_route(
    trip_id: UUID,
    link: LinkCreate,
    db: AsyncSession = Depends(get_db),
    link_service: LinkService = Depends(get_link_service)
):
    return await link_service.create_link(db, trip_id, link)


@router.get("", response_model=LinksResponse)
async def get_links_route(
    trip_id: UUID,
    db: AsyncSession = Depends(get_db),
    link_service: LinkService = Depends(get_link_service)
):
    return await link_service.get_links(db, trip_id)
