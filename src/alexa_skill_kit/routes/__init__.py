"""API route modules."""

from .health import create_health_router
from .skill import create_skill_router

__all__ = ["create_health_router", "create_skill_router"]
