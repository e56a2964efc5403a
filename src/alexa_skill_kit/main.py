"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from .config import settings
from .routes.health import create_health_router
from .routes.skill import create_skill_router
from .skill import Skill

logger = logging.getLogger(__name__)


def create_app(skill: Skill, path: str = "/alexa") -> FastAPI:
    """Create an app serving ``skill`` at ``path`` plus a /health route."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown events."""
        logger.info(f"Starting {settings.service_name} in {settings.environment} mode")
        if skill.skip_validation:
            logger.warning("Request validation is disabled")
        yield
        logger.info(f"Shutting down {settings.service_name}")

    app = FastAPI(
        title="Alexa Skill",
        description="Alexa custom skill endpoint",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    app.include_router(create_health_router(skill))
    app.include_router(create_skill_router(skill, path))

    return app
