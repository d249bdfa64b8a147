from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def create_engine_from_url(db_url: str) -> AsyncEngine:
    return create_async_engine(db_url, echo=False)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        class_=AsyncSession
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        await db.close()
