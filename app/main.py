from contextlib import asynccontextmanager
from typing import Optional
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import Settings, load_settings
from app.core.database import create_engine_from_url, create_session_factory
from app.core.error_handler import register_exception_handlers
from app.core.init_db import init_db
from app.core.logger import configure_logging, logger
from app.routes import api_router
from app.services.email_service import Mailer


def create_app(settings: Optional[Settings] = None, mailer: Optional[Mailer] = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine_from_url(settings.DATABASE_URL)
        await init_db(engine)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        logger.info(f"{settings.PROJECT_NAME} ready, public API at {settings.API_BASE_URL}")
        try:
            yield
        finally:
            await engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description=settings.PROJECT_DESCRIPTION,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.mailer = mailer or Mailer(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include all API routes
    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {"message": "Welcome to the Trip Planner API"}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app


def run() -> None:
    settings = load_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
