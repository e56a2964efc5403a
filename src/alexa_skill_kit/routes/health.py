"""Health check endpoint."""

from fastapi import APIRouter

from ..config import settings
from ..skill import Skill


def create_health_router(skill: Skill) -> APIRouter:
    """Build a /health route reporting on ``skill``."""
    router = APIRouter(tags=["health"])

    @router.get("/health")
    async def health_check() -> dict[str, str | bool | list[str]]:
        """Return service health and the skill's validation mode."""
        return {
            "status": "healthy",
            "service": settings.service_name,
            "environment": settings.environment,
            "validation": not skill.skip_validation,
            "signature_verification": skill.verify_signature and not skill.skip_validation,
            "intents": sorted(skill.intents),
        }

    return router
