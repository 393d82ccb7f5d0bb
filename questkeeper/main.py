"""Questkeeper - FastAPI app entry point."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from questkeeper.core.config import Settings, get_settings
from questkeeper.core.errors import register_error_handlers
from questkeeper.core.logging import configure_logging
from questkeeper.db.base import Base
from questkeeper.db.session import AsyncSessionLocal, engine
from questkeeper.routers import auth, content, progress
from questkeeper.services.seeding import seed_content

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    db_engine: AsyncEngine | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> FastAPI:
    """Build the app. Tests pass their own engine and session factory."""
    settings = settings or get_settings()
    db_engine = db_engine or engine
    session_factory = session_factory or AsyncSessionLocal

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)

        async with db_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ready")

        if settings.seed_content:
            async with session_factory() as db:
                await seed_content(db)

        yield
        await db_engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        description="Backend for a text adventure: players, chapters and save games",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.session_factory = session_factory
    register_error_handlers(app)

    app.include_router(auth.router)
    app.include_router(progress.router)
    app.include_router(content.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("questkeeper.main:app", host="0.0.0.0", port=8000, reload=get_settings().debug)
