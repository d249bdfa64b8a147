from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import NotFoundError
from app.core.logger import logger
from app.repositories import links as link_repo
from app.repositories import trips as trip_repo
from app.schemas.links.link import LinkCreate, LinkCreatedResponse, LinkOut, LinksResponse


class LinkService:
    async def _ensure_trip(self, db: AsyncSession, trip_id: UUID) -> None:
        if not await trip_repo.get_trip(db, trip_id):
            logger.warning(f"Trip not found: ID {trip_id}")
            raise NotFoundError("Trip not found.")

    async def create_link(self, db: AsyncSession, trip_id: UUID, data: LinkCreate) -> LinkCreatedResponse:
        await self._ensure_trip(db, trip_id)
        link = await link_repo.create_link(db, trip_id, data.title, str(data.url))
        logger.info(f"Link {link.id} created for trip {trip_id}")
        return LinkCreatedResponse(link_id=link.id, message="Link created successfully!")

    async def get_links(self, db: AsyncSession, trip_id: UUID) -> LinksResponse:
        await self._ensure_trip(db, trip_id)
        links = await link_repo.list_links(db, trip_id)
        return LinksResponse(links=[LinkOut.model_validate(link) for link in links])
