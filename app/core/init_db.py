from sqlalchemy.ext.asyncio import AsyncEngine
from app.core.database import Base
import app.models  # noqa: F401  registers every table on Base.metadata


async def init_db(engine: AsyncEngine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
