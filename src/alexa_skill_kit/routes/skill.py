"""Alexa Skill webhook endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Request

from ..exceptions import SkillError
from ..services.pipeline import process_request
from ..skill import Skill

logger = logging.getLogger(__name__)


def create_skill_router(skill: Skill, path: str = "/alexa") -> APIRouter:
    """Build a router exposing ``skill`` as a single POST endpoint."""
    router = APIRouter(tags=["alexa"])

    @router.post(path)
    async def skill_webhook(request: Request) -> dict[str, Any]:
        """
        Handle Alexa Skill requests.

        The raw body is kept as received so the request signature can be
        verified against it. Errors map to:
        - 400: malformed envelope or stale timestamp
        - 403: wrong application id or bad signature
        - 500: response could not be serialized
        """
        body = await request.body()

        try:
            return await process_request(skill, body, headers=request.headers)
        except SkillError as e:
            logger.warning(f"Rejected Alexa request: {type(e).__name__}: {e}")
            raise HTTPException(status_code=e.status_code, detail=str(e))

    return router
